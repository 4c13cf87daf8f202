from __future__ import annotations

from types import MappingProxyType

from checkov_analyser.scanners.models import Severity

# Checkov does not always report a severity, so it is derived from the check id.
SEVERITY_BY_CHECK = MappingProxyType(
    {
        # Data exposure, encryption, credentials
        "CKV_AWS_16": Severity.CRITICAL,  # RDS encryption
        "CKV_AWS_17": Severity.CRITICAL,  # Hardcoded passwords
        "CKV_AWS_53": Severity.CRITICAL,  # S3 block public ACLs
        "CKV_AWS_54": Severity.CRITICAL,  # S3 block public policy
        "CKV_AWS_55": Severity.CRITICAL,  # S3 ignore public ACLs
        "CKV_AWS_56": Severity.CRITICAL,  # S3 restrict public buckets
        "CKV_AWS_18": Severity.CRITICAL,  # S3 access logging
        "CKV2_AWS_67": Severity.CRITICAL,  # S3 encryption
        # Network security, access control
        "CKV_AWS_21": Severity.HIGH,  # S3 versioning
        "CKV_AWS_23": Severity.HIGH,  # Security group wide open
        "CKV_AWS_260": Severity.HIGH,  # Security group unrestricted ingress
        "CKV2_AWS_59": Severity.HIGH,  # RDS publicly accessible
        "CKV_AWS_133": Severity.HIGH,  # RDS backup retention
        "CKV_AWS_63": Severity.HIGH,  # IAM wildcard actions
        "CKV_AWS_1": Severity.HIGH,  # IAM wildcard resources
        # Monitoring, best practices
        "CKV_AWS_126": Severity.MEDIUM,  # EC2 detailed monitoring
        "CKV_AWS_88": Severity.MEDIUM,  # EC2 public IP
        "CKV_AWS_8": Severity.MEDIUM,  # EBS encryption
        "CKV_AWS_79": Severity.MEDIUM,  # EC2 IMDSv2
        "CKV_AWS_293": Severity.MEDIUM,  # RDS deletion protection
        "CKV2_AWS_11": Severity.MEDIUM,  # VPC flow logs
    }
)

DEFAULT_SEVERITY = Severity.MEDIUM


def classify(check_id: str) -> Severity:
    """Return the curated severity for a check id, MEDIUM when unknown."""
    return SEVERITY_BY_CHECK.get(check_id, DEFAULT_SEVERITY)
