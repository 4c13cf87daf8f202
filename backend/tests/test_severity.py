import pytest

from checkov_analyser.remediation.severity import SEVERITY_BY_CHECK, classify
from checkov_analyser.scanners.models import Severity


@pytest.mark.parametrize(
    "check_id,expected",
    [
        ("CKV_AWS_16", Severity.CRITICAL),
        ("CKV2_AWS_67", Severity.CRITICAL),
        ("CKV_AWS_21", Severity.HIGH),
        ("CKV_AWS_260", Severity.HIGH),
        ("CKV2_AWS_11", Severity.MEDIUM),
    ],
)
def test_curated_severity(check_id, expected):
    assert classify(check_id) is expected


def test_every_table_entry_is_returned_as_tabulated():
    for check_id, severity in SEVERITY_BY_CHECK.items():
        assert classify(check_id) is severity


@pytest.mark.parametrize("check_id", ["CKV_UNKNOWN_999", "", "ckv_aws_16"])
def test_unknown_check_defaults_to_medium(check_id):
    assert classify(check_id) is Severity.MEDIUM


def test_severity_total_order():
    assert Severity.LOW < Severity.MEDIUM < Severity.HIGH < Severity.CRITICAL
    assert [s.value for s in Severity] == [1, 2, 3, 4]


def test_severity_table_is_read_only():
    with pytest.raises(TypeError):
        SEVERITY_BY_CHECK["CKV_AWS_16"] = Severity.LOW
