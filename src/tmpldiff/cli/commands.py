"""CLI command implementations"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from tmpldiff.config import Settings, load_config
from tmpldiff.core.display import COLOR_PALETTE, PLAIN_PALETTE, print_hunks
from tmpldiff.core.errors import TmplDiffError
from tmpldiff.core.generate import render_source
from tmpldiff.core.models import TemplateDescription
from tmpldiff.core.pipeline import TemplateReport, TemplateStatus, run_compare
from tmpldiff.core.utils.logs import configure_logging


ConfigOption = Annotated[Optional[Path], typer.Option("--config", help="Config file (default: ./tmpldiff.yaml)")]


def _fail(msg: str, cause: object = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context, config: Optional[Path], overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling, then set up logging."""
    try:
        settings = load_config(overrides=overrides, path=config)
    except ValueError as e:
        _fail(str(e))
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging("DEBUG" if verbose else settings.log_level)
    return settings


def _select(templates: list[TemplateDescription], sources: list[Path]) -> list[TemplateDescription]:
    """Templates whose source matches one of sources (all templates when sources is empty)."""
    if not sources:
        return templates
    wanted = {p.expanduser().resolve() for p in sources}
    selected = [t for t in templates if t.source.resolve() in wanted]
    missing = wanted - {t.source.resolve() for t in selected}
    if missing:
        _fail("Not a configured template source: " + ", ".join(str(p) for p in sorted(missing)))
    return selected


def _echo_report(report: TemplateReport, color: bool) -> None:
    """Print the diff headers and hunks for a changed template."""
    header_from = f"--- {report.template.target.target}"
    header_to = f"+++ {report.template.source}"
    if color:
        header_from, header_to = typer.style(header_from, bold=True), typer.style(header_to, bold=True)
    typer.echo(header_from)
    typer.echo(header_to)
    print_hunks(report.hunks, COLOR_PALETTE if color else PLAIN_PALETTE)


def diff_cmd(
    ctx: typer.Context,
    sources: Annotated[Optional[list[Path]], typer.Argument(help="Only compare these template sources")] = None,
    context: Annotated[Optional[int], typer.Option("--context", "-c", help="Unchanged lines around each change")] = None,
    color: Annotated[Optional[bool], typer.Option("--color/--no-color", help="Color the diff output")] = None,
    fail_fast: Annotated[bool, typer.Option("--fail-fast", help="Stop at the first template that fails")] = False,
    exit_code: Annotated[bool, typer.Option("--exit-code", help="Exit 1 when any template differs")] = False,
    config: ConfigOption = None,
    ):
    """Show how rendered templates differ from their deployed targets."""
    settings = _settings(ctx, config, overrides={"context_lines": context, "color": color})
    templates = _select(settings.templates, sources or [])
    if not templates:
        typer.echo("No templates configured.")
        raise typer.Exit(0)

    try:
        reports = run_compare(templates, settings.variables, settings.context_lines, fail_fast=fail_fast)
    except TmplDiffError as e:
        _fail(e.message, e.details)

    first = True
    for report in reports:
        if report.status == TemplateStatus.changed:
            if not first:
                typer.echo()
            _echo_report(report, settings.color)
            first = False
        elif report.status == TemplateStatus.missing_target:
            typer.echo(f"Target missing (not deployed yet): {report.template.target.target}", err=True)
        elif report.status == TemplateStatus.error:
            typer.echo(f"Error: {report.error.message}", err=True)
            if report.error.details:
                typer.echo(f"  {report.error.details}", err=True)

    counts = {s: sum(1 for r in reports if r.status == s) for s in TemplateStatus}
    logger.info(
        "{} changed, {} identical, {} missing target, {} failed",
        counts[TemplateStatus.changed], counts[TemplateStatus.identical],
        counts[TemplateStatus.missing_target], counts[TemplateStatus.error],
    )
    if counts[TemplateStatus.error] or (exit_code and counts[TemplateStatus.changed]):
        raise typer.Exit(1)


def list_cmd(ctx: typer.Context, config: ConfigOption = None):
    """List configured templates with their comparison status. Exits 1 if any template fails."""
    settings = _settings(ctx, config)
    if not settings.templates:
        typer.echo("No templates configured.")
        raise typer.Exit(0)
    reports = run_compare(settings.templates, settings.variables, settings.context_lines)
    for report in reports:
        typer.echo(f"{report.status.value:<15} {report.template.source} -> {report.template.target.target}")
    failed = [r for r in reports if r.status == TemplateStatus.error]
    for report in failed:
        typer.echo(f"Error: {report.template.source}: {report.error.message}", err=True)
    if failed:
        raise typer.Exit(1)


def render_cmd(
    ctx: typer.Context,
    source: Annotated[Path, typer.Argument(help="Configured template source to render")],
    config: ConfigOption = None,
    ):
    """Print a template rendered with the configured variables."""
    settings = _settings(ctx, config)
    template = _select(settings.templates, [source])[0]
    try:
        rendered = render_source(template, settings.variables)
    except TmplDiffError as e:
        _fail(e.message, e.details)
    typer.echo(rendered, nl=False)
