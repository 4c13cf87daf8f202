from checkov_analyser.scanners.checkov_results import iter_failed_checks, normalize_file_path, summarize
from checkov_analyser.scanners.models import ScanSummary

from conftest import checkov_report, failed_check


def test_missing_fields_get_defaults():
    findings = list(iter_failed_checks({"results": {"failed_checks": [{"check": "Legacy name"}]}}))

    assert len(findings) == 1
    assert findings[0].check_id == "unknown"
    assert findings[0].check_name == "Legacy name"
    assert findings[0].file_line_range == []


def test_non_integer_line_ranges_are_dropped():
    check = failed_check("CKV_AWS_53", file_line_range=["a", 3, None])
    finding = next(iter_failed_checks(checkov_report(check)))

    assert finding.file_line_range == [3]


def test_normalize_file_path():
    assert normalize_file_path("/modules/s3/main.tf") == "modules/s3/main.tf"
    assert normalize_file_path("main.tf") == "main.tf"


def test_summarize_pass_rate():
    summary = summarize(checkov_report(failed_check("CKV_AWS_1"), passed=3))

    assert summary == ScanSummary(total_checks=4, passed=3, failed=1, skipped=0, pass_rate="75.0%")


def test_summarize_adds_up_frameworks():
    payload = [checkov_report(failed_check("CKV_AWS_1"), passed=1), checkov_report(passed=2)]

    summary = summarize(payload)

    assert summary.total_checks == 4
    assert summary.passed == 3
    assert summary.pass_rate == "75.0%"


def test_summarize_without_summary():
    assert summarize({}) == ScanSummary()
    assert summarize(None).pass_rate == "0%"
    assert summarize({"summary": {"passed": 0, "failed": 0}}).pass_rate == "0%"
