from __future__ import annotations

import logging
from typing import Any

import httpx

from checkov_analyser.config import DEFAULT_CONFIG, AppConfig
from checkov_analyser.github.client import ScanRun, ScanSource
from checkov_analyser.remediation.catalog import DEFAULT_CATALOG, RemediationCatalog
from checkov_analyser.remediation.categorizer import categorize
from checkov_analyser.remediation.models import NoRemediation, Report, ResolvedRemediation
from checkov_analyser.remediation.report import build_report, render_change_proposal
from checkov_analyser.remediation.resolver import resolve
from checkov_analyser.scanners.checkov_results import normalize_file_path, summarize
from checkov_analyser.scanners.models import CategorizedFindings, EnrichedFinding

logger = logging.getLogger(__name__)

NO_SCAN_RESULTS = {
    "error": "No Checkov scan results found",
    "suggestion": "Push code to trigger the GitHub Actions workflow",
}


class Analyser:
    """Runs the categorize/resolve/report pipeline against a ScanSource.

    Every public method returns a JSON-serializable dict. Missing scans or
    files come back as a dict with an `error` key instead of raising.
    """

    def __init__(
        self,
        source: ScanSource,
        config: AppConfig = DEFAULT_CONFIG,
        catalog: RemediationCatalog = DEFAULT_CATALOG,
    ) -> None:
        self._source = source
        self._config = config
        self._catalog = catalog

    def source_path(self, file_path: str) -> str:
        """Map a Checkov file path (`/main.tf`) to a repository path."""
        path = normalize_file_path(file_path)
        source_dir = self._config.source_dir
        if source_dir and file_path.startswith("/") and not path.startswith(f"{source_dir}/"):
            return f"{source_dir}/{path}"
        return path

    def _analysis(self, run: ScanRun, findings: CategorizedFindings | None = None) -> dict[str, Any]:
        summary = summarize(run.results)
        if findings is None:
            findings = categorize(run.results)
        return {
            "summary": summary.model_dump(),
            "run_url": run.run_url,
            "run_status": run.status,
            "run_conclusion": run.conclusion,
            "timestamp": run.created_at,
            "findings": findings.model_dump(mode="json"),
            "total_issues": summary.failed,
        }

    async def analyze_latest_scan(self, owner: str, repo: str) -> dict[str, Any]:
        try:
            run = await self._source.fetch_scan_results(owner, repo)
        except httpx.HTTPError as exc:
            return {"error": f"Failed to analyze scan: {exc}"}
        if run is None:
            return dict(NO_SCAN_RESULTS)
        return self._analysis(run)

    async def _resolve_from_source(
        self, owner: str, repo: str, check_id: str, file_path: str
    ) -> ResolvedRemediation | NoRemediation:
        path = self.source_path(file_path)
        file_text = await self._source.fetch_file_content(owner, repo, path)
        if file_text is None:
            raise FileNotFoundError(f"File not found: {path}")
        return resolve(check_id, file_text, file_path, catalog=self._catalog)

    async def get_remediation(self, owner: str, repo: str, check_id: str, file_path: str) -> dict[str, Any]:
        try:
            result = await self._resolve_from_source(owner, repo, check_id, file_path)
        except (FileNotFoundError, httpx.HTTPError) as exc:
            return {
                "error": f"Failed to get remediation: {exc}",
                "attempted_path": self.source_path(file_path),
                "original_path": file_path,
            }
        return result.model_dump(mode="json")

    async def _report(self, owner: str, repo: str) -> tuple[ScanRun, Report] | dict[str, Any]:
        try:
            run = await self._source.fetch_scan_results(owner, repo)
        except httpx.HTTPError as exc:
            return {"error": f"Failed to generate report: {exc}"}
        if run is None:
            return dict(NO_SCAN_RESULTS)

        async def resolver(finding: EnrichedFinding) -> ResolvedRemediation | NoRemediation:
            return await self._resolve_from_source(owner, repo, finding.check_id, finding.file_path)

        report = await build_report(
            categorize(run.results),
            resolver,
            max_concurrency=self._config.max_concurrency,
        )
        return run, report

    async def generate_security_report(self, owner: str, repo: str) -> dict[str, Any]:
        outcome = await self._report(owner, repo)
        if isinstance(outcome, dict):
            return outcome
        run, report = outcome

        try:
            names = await self._source.list_directory(owner, repo, self._config.source_dir)
        except httpx.HTTPError as exc:
            logger.warning("Could not list Terraform files for %s/%s: %s", owner, repo, exc)
            names = []

        dumped = report.model_dump(mode="json")
        return {
            **self._analysis(run, report.findings),
            "counts": dumped["counts"],
            "remediations": dumped["remediations"],
            "skipped": dumped["skipped"],
            "terraform_files": sum(1 for name in names if name.endswith(".tf")),
        }

    async def propose_changes(self, owner: str, repo: str) -> dict[str, Any]:
        outcome = await self._report(owner, repo)
        if isinstance(outcome, dict):
            return outcome
        _, report = outcome

        resolved = report.resolved()
        proposal = render_change_proposal(resolved)
        return {
            **proposal.model_dump(),
            "remediation_count": len(resolved),
            "skipped": [s.model_dump() for s in report.skipped],
        }
