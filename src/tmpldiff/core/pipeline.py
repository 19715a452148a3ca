"""Compare many templates against their targets, collecting a report per template"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from loguru import logger

from tmpldiff.core.errors import TmplDiffError
from tmpldiff.core.generate import Renderer, diff_nonempty, generate_diff
from tmpldiff.core.hunks import extract_hunks
from tmpldiff.core.models import Hunk, TemplateDescription
from tmpldiff.core.render import render_template


class TemplateStatus(str, Enum):
    identical = "identical"
    changed = "changed"
    missing_target = "missing_target"
    error = "error"


@dataclass
class TemplateReport:
    template: TemplateDescription
    status: TemplateStatus
    hunks: list[Hunk] = field(default_factory=list)
    error: TmplDiffError | None = None


def compare_template(
    template: TemplateDescription,
    variables: Mapping[str, Any],
    context: int,
    render: Renderer = render_template,
    ) -> TemplateReport:
    """Diff one template against its target. Raises TmplDiffError on read/render failure."""
    target = template.target.target
    if not target.exists():
        logger.debug("Target {} does not exist yet", target)
        return TemplateReport(template, TemplateStatus.missing_target)

    logger.debug("Comparing {} -> {}", template.source, target)
    diff = generate_diff(template, variables, render)
    if not diff_nonempty(diff):
        return TemplateReport(template, TemplateStatus.identical)
    return TemplateReport(template, TemplateStatus.changed, extract_hunks(diff, context))


def run_compare(
    templates: list[TemplateDescription],
    variables: Mapping[str, Any],
    context: int,
    fail_fast: bool = False,
    render: Renderer = render_template,
    ) -> list[TemplateReport]:
    """Compare every template, in order.

    Failures are recorded as error reports and the run continues, unless
    fail_fast is set, in which case the first failure is re-raised.
    """
    reports = []
    for template in templates:
        try:
            reports.append(compare_template(template, variables, context, render))
        except TmplDiffError as e:
            if fail_fast:
                raise
            logger.warning("Skipping {}: {}", template.source, e.message)
            reports.append(TemplateReport(template, TemplateStatus.error, error=e))
    return reports
