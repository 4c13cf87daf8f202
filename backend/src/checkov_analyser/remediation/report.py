from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Sequence

from checkov_analyser.remediation.models import (
    ChangeProposal,
    NoRemediation,
    Report,
    ReportEntry,
    ResolvedRemediation,
    SkippedFinding,
)
from checkov_analyser.scanners.models import CategorizedFindings, EnrichedFinding

logger = logging.getLogger(__name__)

Resolver = Callable[[EnrichedFinding], Awaitable[ResolvedRemediation | NoRemediation]]


async def build_report(
    categorized: CategorizedFindings,
    resolver: Resolver,
    *,
    max_concurrency: int | None = None,
) -> Report:
    """Resolve remediations for every CRITICAL and HIGH finding.

    Resolutions may run concurrently; entries keep bucket order (CRITICAL
    first, then HIGH, each by check id). A finding whose resolver raises is
    logged and recorded in `skipped` instead of failing the report.
    """
    candidates = [*categorized.critical, *categorized.high]
    semaphore = asyncio.Semaphore(max_concurrency) if max_concurrency else None

    async def _run(finding: EnrichedFinding) -> ResolvedRemediation | NoRemediation:
        if semaphore is None:
            return await resolver(finding)
        async with semaphore:
            return await resolver(finding)

    outcomes = await asyncio.gather(*(_run(f) for f in candidates), return_exceptions=True)

    entries: list[ReportEntry] = []
    skipped: list[SkippedFinding] = []
    for finding, outcome in zip(candidates, outcomes):
        if isinstance(outcome, Exception):
            logger.warning(
                "Failed to get remediation for %s in %s: %s",
                finding.check_id,
                finding.file_path,
                outcome,
            )
            skipped.append(
                SkippedFinding(check_id=finding.check_id, file_path=finding.file_path, error=str(outcome))
            )
            continue
        if isinstance(outcome, BaseException):
            raise outcome
        entries.append(ReportEntry(finding=finding, remediation=outcome))

    return Report(
        counts=categorized.counts(),
        findings=categorized,
        remediations=entries,
        skipped=skipped,
    )


_TESTING_CHECKLIST = """\
### Testing
- [ ] Changes have been tested in development environment
- [ ] No breaking changes to existing infrastructure
- [ ] Applications have been updated for any required changes"""

_CLOSING = """\
### Security Impact
This PR improves our security posture by addressing critical infrastructure vulnerabilities."""


def render_change_proposal(remediations: Sequence[ResolvedRemediation]) -> ChangeProposal:
    """Render a pull-request style title and markdown body for a set of fixes."""
    count = len(remediations)
    summary = "\n".join(f"- **{r.check_id}**: {r.title}" for r in remediations)
    details = "\n".join(
        f"\n#### {r.check_id}: {r.title}\n"
        f"- **Impact**: {r.impact}\n"
        f"- **File**: `{r.file_path}`\n"
        f"- **Implementation Notes**: {r.implementation_notes}\n"
        for r in remediations
    )

    body = (
        "## Security Improvements\n\n"
        f"This PR addresses {count} security findings identified by Checkov.\n\n"
        "### Summary of Changes\n\n"
        f"{summary}\n\n"
        "### Detailed Changes\n\n"
        f"{details}\n\n"
        f"{_TESTING_CHECKLIST}\n\n"
        f"{_CLOSING}\n"
    )
    return ChangeProposal(title=f"Security: Fix {count} critical Checkov findings", body=body)
