from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from checkov_analyser.remediation.models import Fix, RemediationTemplate

_S3_PUBLIC_ACCESS_BLOCK = "aws_s3_bucket_public_access_block"


def _template(title: str, impact: str, **fix: str | None) -> RemediationTemplate:
    return RemediationTemplate(title=title, impact=impact, fix=Fix(**fix))


_TEMPLATES: dict[str, RemediationTemplate] = {
    # S3 bucket security
    "CKV_AWS_53": _template(
        "Enable S3 Block Public ACLs",
        "Prevents public access via ACLs",
        code="block_public_acls = true",
        resource=_S3_PUBLIC_ACCESS_BLOCK,
        attribute="block_public_acls",
    ),
    "CKV_AWS_54": _template(
        "Enable S3 Block Public Policy",
        "Prevents public bucket policies",
        code="block_public_policy = true",
        resource=_S3_PUBLIC_ACCESS_BLOCK,
        attribute="block_public_policy",
    ),
    "CKV_AWS_55": _template(
        "Enable S3 Ignore Public ACLs",
        "Ignores all public ACLs on the bucket",
        code="ignore_public_acls = true",
        resource=_S3_PUBLIC_ACCESS_BLOCK,
        attribute="ignore_public_acls",
    ),
    "CKV_AWS_56": _template(
        "Enable S3 Restrict Public Buckets",
        "Restricts public bucket policies",
        code="restrict_public_buckets = true",
        resource=_S3_PUBLIC_ACCESS_BLOCK,
        attribute="restrict_public_buckets",
    ),
    "CKV_AWS_18": _template(
        "Enable S3 Bucket Logging",
        "Provides audit trail for bucket access",
        code="""\
resource "aws_s3_bucket_logging" "data" {
  bucket = aws_s3_bucket.data.id

  target_bucket = aws_s3_bucket.logs.id
  target_prefix = "access-logs/"
}""",
        resource="aws_s3_bucket_logging",
        additional="You will need a separate S3 bucket for logs",
    ),
    "CKV_AWS_21": _template(
        "Enable S3 Versioning",
        "Enables version control and recovery",
        code="""\
resource "aws_s3_bucket_versioning" "data" {
  bucket = aws_s3_bucket.data.id

  versioning_configuration {
    status = "Enabled"
  }
}""",
        resource="aws_s3_bucket_versioning",
    ),
    "CKV2_AWS_67": _template(
        "Enable S3 Default Encryption",
        "Encrypts all objects at rest",
        code="""\
resource "aws_s3_bucket_server_side_encryption_configuration" "data" {
  bucket = aws_s3_bucket.data.id

  rule {
    apply_server_side_encryption_by_default {
      sse_algorithm = "AES256"
    }
  }
}""",
        resource="aws_s3_bucket_server_side_encryption_configuration",
    ),
    # RDS security
    "CKV_AWS_16": _template(
        "Enable RDS Encryption",
        "Encrypts database storage at rest",
        code="storage_encrypted = true",
        resource="aws_db_instance",
        attribute="storage_encrypted",
        additional="Note: Cannot be applied to existing unencrypted instances",
    ),
    "CKV_AWS_17": _template(
        "Remove Hardcoded Database Password",
        "Prevents credential exposure in code",
        code="""\
# Option 1: Use AWS Secrets Manager
password = random_password.db.result

resource "random_password" "db" {
  length  = 16
  special = true
}

resource "aws_secretsmanager_secret" "db_password" {
  name = "rds-password"
}

resource "aws_secretsmanager_secret_version" "db_password" {
  secret_id     = aws_secretsmanager_secret.db_password.id
  secret_string = random_password.db.result
}

# Option 2: Use variable
password = var.db_password  # Define in terraform.tfvars or environment""",
        resource="aws_db_instance",
        attribute="password",
    ),
    "CKV2_AWS_59": _template(
        "Disable RDS Public Access",
        "Prevents direct internet access to database",
        code="publicly_accessible = false",
        resource="aws_db_instance",
        attribute="publicly_accessible",
    ),
    "CKV_AWS_133": _template(
        "Enable RDS Backup Retention",
        "Enables point-in-time recovery",
        code="backup_retention_period = 7  # Minimum 7 days recommended",
        resource="aws_db_instance",
        attribute="backup_retention_period",
    ),
    "CKV_AWS_293": _template(
        "Enable RDS Deletion Protection",
        "Prevents accidental database deletion",
        code="deletion_protection = true",
        resource="aws_db_instance",
        attribute="deletion_protection",
    ),
    # Security groups
    "CKV_AWS_23": _template(
        "Restrict Security Group Ingress",
        "Implements least privilege network access",
        code="""\
ingress {
  description = "HTTPS from VPC"
  from_port   = 443
  to_port     = 443
  protocol    = "tcp"
  cidr_blocks = [aws_vpc.main.cidr_block]  # Restrict to VPC
}

ingress {
  description = "SSH from bastion"
  from_port   = 22
  to_port     = 22
  protocol    = "tcp"
  cidr_blocks = ["10.0.1.0/24"]  # Restrict to bastion subnet
}""",
        resource="aws_security_group",
        attribute="ingress",
        additional="Remove the wildcard (0.0.0.0/0) ingress rule",
    ),
    "CKV_AWS_260": _template(
        "Remove Unrestricted Security Group Ingress",
        "Prevents unauthorized access",
        code='# Remove any ingress rules with cidr_blocks = ["0.0.0.0/0"]',
        resource="aws_security_group",
        attribute="ingress",
    ),
    # IAM
    "CKV_AWS_63": _template(
        "Remove IAM Wildcard Actions",
        "Implements least privilege permissions",
        code="""\
Action = [
  "s3:GetObject",
  "s3:PutObject",
  "s3:DeleteObject",
  "s3:ListBucket"
]  # Specify only required actions""",
        resource="aws_iam_policy",
        attribute="policy.Statement.Action",
    ),
    "CKV_AWS_1": _template(
        "Remove IAM Wildcard Resources",
        "Restricts access to specific resources",
        code="""\
Resource = [
  "arn:aws:s3:::my-bucket",
  "arn:aws:s3:::my-bucket/*"
]  # Specify exact resources""",
        resource="aws_iam_policy",
        attribute="policy.Statement.Resource",
    ),
    # EC2
    "CKV_AWS_126": _template(
        "Enable EC2 Detailed Monitoring",
        "Provides 1-minute monitoring intervals",
        code="monitoring = true",
        resource="aws_instance",
        attribute="monitoring",
    ),
    "CKV_AWS_88": _template(
        "Disable EC2 Public IP",
        "Prevents direct internet exposure",
        code="associate_public_ip_address = false",
        resource="aws_instance",
        attribute="associate_public_ip_address",
        additional="Use a NAT gateway or bastion host for outbound access",
    ),
    "CKV_AWS_79": _template(
        "Enforce IMDSv2",
        "Prevents SSRF attacks on metadata service",
        code="""\
metadata_options {
  http_endpoint               = "enabled"
  http_tokens                 = "required"  # Enforce IMDSv2
  http_put_response_hop_limit = 1
}""",
        resource="aws_instance",
        attribute="metadata_options",
    ),
    "CKV_AWS_8": _template(
        "Enable EBS Encryption",
        "Encrypts data at rest on EBS volumes",
        code="""\
root_block_device {
  encrypted = true
}""",
        resource="aws_instance",
        attribute="root_block_device",
    ),
    # VPC
    "CKV2_AWS_11": _template(
        "Enable VPC Flow Logs",
        "Provides network traffic visibility",
        code="""\
resource "aws_flow_log" "main" {
  iam_role_arn    = aws_iam_role.flow_log.arn
  log_destination = aws_cloudwatch_log_group.flow_log.arn
  traffic_type    = "ALL"
  vpc_id          = aws_vpc.main.id
}

resource "aws_cloudwatch_log_group" "flow_log" {
  name = "vpc-flow-logs"
}""",
        resource="aws_flow_log",
    ),
}


class RemediationCatalog:
    """Read-only lookup of remediation templates keyed by Checkov check id."""

    def __init__(self, templates: Mapping[str, RemediationTemplate]) -> None:
        self._templates = MappingProxyType(dict(templates))

    def lookup(self, check_id: str) -> RemediationTemplate | None:
        return self._templates.get(check_id)

    def check_ids(self) -> list[str]:
        return sorted(self._templates)

    def __contains__(self, check_id: object) -> bool:
        return check_id in self._templates

    def __len__(self) -> int:
        return len(self._templates)


DEFAULT_CATALOG = RemediationCatalog(_TEMPLATES)
