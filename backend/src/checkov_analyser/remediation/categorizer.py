from __future__ import annotations

from types import MappingProxyType
from typing import Any

from checkov_analyser.remediation.severity import classify
from checkov_analyser.scanners.checkov_results import iter_failed_checks
from checkov_analyser.scanners.models import CategorizedFindings, EnrichedFinding, RawFinding

DESCRIPTIONS = MappingProxyType(
    {
        "CKV_AWS_16": "RDS instance storage should be encrypted to protect data at rest",
        "CKV_AWS_17": "Database passwords should not be hardcoded in Terraform files",
        "CKV_AWS_53": "S3 buckets should block public ACLs to prevent unauthorized access",
        "CKV_AWS_54": "S3 buckets should block public bucket policies",
        "CKV_AWS_55": "S3 buckets should ignore public ACLs",
        "CKV_AWS_56": "S3 buckets should restrict public bucket policies",
        "CKV_AWS_18": "S3 buckets should have access logging enabled for audit trails",
        "CKV_AWS_21": "S3 buckets should have versioning enabled for data recovery",
        "CKV2_AWS_67": "S3 buckets should have server-side encryption enabled",
        "CKV_AWS_23": "Security groups should not allow unrestricted ingress on all ports",
        "CKV_AWS_260": "Security groups should not allow ingress from 0.0.0.0/0 to all ports",
        "CKV2_AWS_59": "RDS instances should not be publicly accessible",
        "CKV_AWS_133": "RDS instances should have backup retention period greater than 0",
        "CKV_AWS_63": "IAM policies should not use wildcard actions",
        "CKV_AWS_1": "IAM policies should not use wildcard resources",
        "CKV_AWS_126": "EC2 instances should have detailed monitoring enabled",
        "CKV_AWS_88": "EC2 instances should not have public IP addresses in production",
        "CKV_AWS_8": "EC2 instances should use encrypted EBS volumes",
        "CKV_AWS_79": "EC2 instances should use IMDSv2 for enhanced security",
        "CKV_AWS_293": "RDS instances should have deletion protection enabled",
        "CKV2_AWS_11": "VPC should have flow logs enabled for network monitoring",
    }
)

DEFAULT_DESCRIPTION = "Security best practice violation detected"


def describe(check_id: str) -> str:
    return DESCRIPTIONS.get(check_id, DEFAULT_DESCRIPTION)


def enrich(finding: RawFinding) -> EnrichedFinding:
    return EnrichedFinding(
        **finding.model_dump(),
        severity=classify(finding.check_id),
        description=describe(finding.check_id),
    )


def categorize(results: Any) -> CategorizedFindings:
    """Group the failed checks of a Checkov report by severity.

    Each bucket is ordered by check id (plain string order) so reports built
    from identical scans diff cleanly. Malformed or empty input yields four
    empty buckets.
    """
    categorized = CategorizedFindings()

    for raw in iter_failed_checks(results):
        finding = enrich(raw)
        categorized.bucket(finding.severity).append(finding)

    for bucket in (categorized.critical, categorized.high, categorized.medium, categorized.low):
        bucket.sort(key=lambda f: f.check_id)

    return categorized
