from __future__ import annotations

from typing import Any, Iterator

from checkov_analyser.scanners.models import RawFinding, ScanSummary


def _framework_results(payload: Any) -> list[dict]:
    # Checkov emits one report dict per framework, or a bare dict for a single one.
    results_list = payload if isinstance(payload, list) else [payload]
    return [r for r in results_list if isinstance(r, dict)]


def _int_or_zero(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return 0


def _line_range(value: Any) -> list[int]:
    if not isinstance(value, list):
        return []
    return [v for v in value if isinstance(v, int) and not isinstance(v, bool)]


def normalize_file_path(file_path: str) -> str:
    """Strip the leading `/` Checkov puts in front of repository paths."""
    return file_path.lstrip("/")


def iter_failed_checks(payload: Any) -> Iterator[RawFinding]:
    """Yield every failed check of a Checkov JSON report as a RawFinding.

    Malformed reports, framework entries, or check entries are skipped
    rather than raising.
    """
    for framework_result in _framework_results(payload):
        results = framework_result.get("results")
        if not isinstance(results, dict):
            continue
        failed_checks = results.get("failed_checks")
        if not isinstance(failed_checks, list):
            continue

        for check in failed_checks:
            if not isinstance(check, dict):
                continue
            yield RawFinding(
                check_id=str(check.get("check_id") or "unknown"),
                check_name=str(check.get("check_name") or check.get("check") or "Unknown check"),
                file_path=str(check.get("file_path") or ""),
                resource=str(check.get("resource") or ""),
                file_line_range=_line_range(check.get("file_line_range")),
                guideline=str(check.get("guideline") or ""),
            )


def summarize(payload: Any) -> ScanSummary:
    """Aggregate pass/fail counts across the frameworks of a Checkov report."""
    summaries = [
        r["summary"] for r in _framework_results(payload) if isinstance(r.get("summary"), dict)
    ]
    if not summaries:
        return ScanSummary()

    passed = sum(_int_or_zero(s.get("passed")) for s in summaries)
    failed = sum(_int_or_zero(s.get("failed")) for s in summaries)
    skipped = sum(_int_or_zero(s.get("skipped")) for s in summaries)
    total = passed + failed
    pass_rate = f"{passed / total * 100:.1f}%" if total > 0 else "0%"

    return ScanSummary(
        total_checks=total,
        passed=passed,
        failed=failed,
        skipped=skipped,
        pass_rate=pass_rate,
    )
