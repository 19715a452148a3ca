"""Hunk rendering with aligned line-number columns and colored line kinds"""

from dataclasses import dataclass
from typing import Callable

import typer

from tmpldiff.core.errors import EmptyHunksError
from tmpldiff.core.models import Added, Hunk, Removed, Unchanged


Style = Callable[[str], str]


def _plain(text: str) -> str:
    return text


@dataclass(frozen=True)
class Palette:
    """How each kind of line is styled. Unchanged content is never styled."""
    removed: Style
    added: Style
    dim: Style


PLAIN_PALETTE = Palette(removed=_plain, added=_plain, dim=_plain)

COLOR_PALETTE = Palette(
    removed=lambda s: typer.style(s, fg=typer.colors.RED),
    added=lambda s: typer.style(s, fg=typer.colors.GREEN),
    dim=lambda s: typer.style(s, fg=typer.colors.BRIGHT_BLACK),
)


def line_number_width(hunks: list[Hunk]) -> int:
    """Digit count of the largest line number the hunks can show (taken from the last hunk)."""
    if not hunks:
        raise EmptyHunksError("Cannot display an empty hunk sequence")
    return len(str(hunks[-1].max_line))


def format_hunk(hunk: Hunk, width: int, palette: Palette = PLAIN_PALETTE) -> list[str]:
    """Format one hunk as ' LEFT | RIGHT | content' rows."""
    left, right = hunk.start_left, hunk.start_right
    blank = " " * width
    rows = []

    for op in hunk.ops:
        match op:
            case Removed(text=text):
                left += 1
                rows.append(f" {palette.removed(f'{left:>{width}}')} | {blank} | {palette.removed(text)}")
            case Added(text=text):
                right += 1
                rows.append(f" {blank} | {palette.added(f'{right:>{width}}')} | {palette.added(text)}")
            case Unchanged(left=text):
                left += 1
                right += 1
                rows.append(f" {palette.dim(f'{left:>{width}}')} | {palette.dim(f'{right:>{width}}')} | {text}")

    return rows


def format_hunks(hunks: list[Hunk], palette: Palette = PLAIN_PALETTE, width: int | None = None) -> list[str]:
    """Format all hunks with a shared column width and a blank row between hunks."""
    if not hunks:
        raise EmptyHunksError("Cannot display an empty hunk sequence")
    width = width or line_number_width(hunks)
    rows: list[str] = []
    for i, hunk in enumerate(hunks):
        if i:
            rows.append("")
        rows.extend(format_hunk(hunk, width, palette))
    return rows


def print_hunks(hunks: list[Hunk], palette: Palette = COLOR_PALETTE, width: int | None = None) -> None:
    """Write formatted hunks to stdout."""
    for row in format_hunks(hunks, palette, width):
        typer.echo(row)
