import pytest

from checkov_analyser.remediation.catalog import DEFAULT_CATALOG, RemediationCatalog
from checkov_analyser.remediation.severity import SEVERITY_BY_CHECK


def test_lookup_known_check():
    template = DEFAULT_CATALOG.lookup("CKV_AWS_53")

    assert template.title == "Enable S3 Block Public ACLs"
    assert template.fix.code == "block_public_acls = true"
    assert template.fix.resource == "aws_s3_bucket_public_access_block"
    assert template.fix.attribute == "block_public_acls"


def test_lookup_unknown_check_is_none():
    assert DEFAULT_CATALOG.lookup("CKV_UNKNOWN_999") is None
    assert "CKV_UNKNOWN_999" not in DEFAULT_CATALOG


@pytest.mark.parametrize(
    "check_id",
    [
        "CKV_AWS_53", "CKV_AWS_54", "CKV_AWS_55", "CKV_AWS_56",  # S3 public access
        "CKV_AWS_16", "CKV2_AWS_67",  # encryption
        "CKV2_AWS_59", "CKV_AWS_133", "CKV_AWS_293",  # RDS
        "CKV_AWS_23", "CKV_AWS_260",  # security groups
        "CKV_AWS_63", "CKV_AWS_1",  # IAM
        "CKV_AWS_126", "CKV_AWS_79", "CKV_AWS_8",  # EC2
        "CKV2_AWS_11",  # VPC flow logs
    ],
)
def test_required_coverage(check_id):
    assert check_id in DEFAULT_CATALOG


def test_every_classified_check_has_a_template():
    assert set(SEVERITY_BY_CHECK) <= set(DEFAULT_CATALOG.check_ids())


def test_templates_are_frozen():
    template = DEFAULT_CATALOG.lookup("CKV_AWS_16")

    with pytest.raises(Exception):
        template.title = "changed"
    with pytest.raises(Exception):
        template.fix.code = "storage_encrypted = false"


def test_catalog_copies_its_source_mapping():
    source = dict(CKV_X=DEFAULT_CATALOG.lookup("CKV_AWS_16"))
    catalog = RemediationCatalog(source)
    source["CKV_Y"] = DEFAULT_CATALOG.lookup("CKV_AWS_53")

    assert len(catalog) == 1
    assert catalog.lookup("CKV_Y") is None
