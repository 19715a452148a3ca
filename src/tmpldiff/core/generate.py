"""Render a template and diff it against its deployed target"""

from pathlib import Path
from typing import Any, Callable, Mapping

from tmpldiff.core.errors import TemplateReadError
from tmpldiff.core.models import Diff, TemplateDescription, is_change
from tmpldiff.core.render import render_template
from tmpldiff.core.utils.lines import align


Renderer = Callable[[str, Mapping[str, Any]], str]


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateReadError(path, what, str(e)) from e


def render_source(
    template: TemplateDescription,
    variables: Mapping[str, Any],
    render: Renderer = render_template,
    ) -> str:
    """Read the template source, apply its actions, and render it."""
    contents = _read(template.source, "template source")
    contents = template.apply_actions(contents)
    return render(contents, variables)


def generate_diff(
    template: TemplateDescription,
    variables: Mapping[str, Any],
    render: Renderer = render_template,
    ) -> Diff:
    """Diff the deployed target (left) against the freshly rendered source (right).

    A missing target is a read error here; check for existence first if
    "not deployed yet" should be handled differently.
    """
    rendered = render_source(template, variables, render)
    target_contents = _read(template.target.target, "template target")
    return align(target_contents, rendered)


def diff_nonempty(diff: Diff) -> bool:
    """True if the diff contains at least one removed or added line."""
    return any(is_change(op) for op in diff)
