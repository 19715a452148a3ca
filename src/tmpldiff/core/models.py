"""Line-diff values, hunks, and template descriptions"""

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from pydantic import BaseModel, field_validator, model_validator

from tmpldiff.core.actions import TextAction, apply_actions


@dataclass(frozen=True)
class Removed:
    """A line present only in the target (left) document."""
    text: str


@dataclass(frozen=True)
class Added:
    """A line present only in the rendered (right) document."""
    text: str


@dataclass(frozen=True)
class Unchanged:
    """A line common to both documents, as read from each side."""
    left: str
    right: str


LineOp = Union[Removed, Added, Unchanged]
Diff = list[LineOp]


def is_change(op: LineOp) -> bool:
    """True for Removed and Added ops."""
    return not isinstance(op, Unchanged)


@dataclass(frozen=True)
class Hunk:
    """A contiguous run of ops padded with unchanged context.

    start_left / start_right count the lines of each document that precede
    the first op, so the first line shown on a side is numbered start + 1.
    """
    start_left: int
    start_right: int
    ops: tuple[LineOp, ...]

    @property
    def end_left(self) -> int:
        return self.start_left + sum(1 for op in self.ops if not isinstance(op, Added))

    @property
    def end_right(self) -> int:
        return self.start_right + sum(1 for op in self.ops if not isinstance(op, Removed))

    @property
    def max_line(self) -> int:
        """Upper bound on any line number printed for this hunk."""
        return max(self.start_left, self.start_right) + len(self.ops)


class TemplateTarget(BaseModel):
    target: Path

    @field_validator("target")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()


class TemplateDescription(BaseModel):
    """A template source, where it deploys to, and the text actions applied before rendering."""
    source: Path
    target: TemplateTarget
    actions: list[TextAction] = []

    @model_validator(mode="before")
    @classmethod
    def target_shorthand(cls, data):
        # `target: path` is shorthand for `target: {target: path}`
        if isinstance(data, dict) and isinstance(data.get("target"), (str, Path)):
            data = {**data, "target": {"target": data["target"]}}
        return data

    @field_validator("source")
    @classmethod
    def expand_user(cls, v: Path) -> Path:
        return v.expanduser()

    def apply_actions(self, content: str) -> str:
        return apply_actions(self.actions, content)
