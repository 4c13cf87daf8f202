"""
Shared fixtures: Checkov report payloads, Terraform sources and an
in-memory ScanSource.
"""

from __future__ import annotations

import pytest

from checkov_analyser.config import AppConfig
from checkov_analyser.github.client import ScanRun

MAIN_TF = """\
provider "aws" {
  region = "us-east-1"
}

resource "aws_s3_bucket" "data" {
  bucket = "checkov-demo-data"
}

resource "aws_s3_bucket_public_access_block" "data" {
  bucket = aws_s3_bucket.data.id

  block_public_acls   = false
  block_public_policy = false
}

resource "aws_db_instance" "main" {
  engine              = "postgres"
  instance_class      = "db.t3.micro"
  storage_encrypted   = false
  publicly_accessible = true
}
"""

PUBLIC_ACCESS_BLOCK = """\
resource "aws_s3_bucket_public_access_block" "data" {
  bucket = aws_s3_bucket.data.id

  block_public_acls   = false
  block_public_policy = false
}"""


def failed_check(check_id: str, file_path: str = "/main.tf", **extra) -> dict:
    check = {
        "check_id": check_id,
        "check_name": f"Check {check_id}",
        "file_path": file_path,
        "resource": "aws_s3_bucket.data",
        "file_line_range": [5, 7],
        "guideline": f"https://docs.prismacloud.io/{check_id}",
    }
    check.update(extra)
    return check


def checkov_report(*checks: dict, passed: int = 10) -> dict:
    return {
        "check_type": "terraform",
        "results": {"passed_checks": [], "failed_checks": list(checks), "skipped_checks": []},
        "summary": {"passed": passed, "failed": len(checks), "skipped": 0, "parsing_errors": 0},
    }


class FakeScanSource:
    """In-memory ScanSource; paths in `failing` raise like a broken fetch."""

    def __init__(
        self,
        run: ScanRun | None = None,
        files: dict[str, str] | None = None,
        failing: set[str] | None = None,
        directory: list[str] | None = None,
    ) -> None:
        self.run = run
        self.files = files or {}
        self.failing = failing or set()
        self.directory = directory or []
        self.fetched: list[str] = []

    async def fetch_scan_results(self, owner: str, repo: str) -> ScanRun | None:
        return self.run

    async def fetch_file_content(self, owner: str, repo: str, path: str) -> str | None:
        self.fetched.append(path)
        if path in self.failing:
            raise RuntimeError(f"boom fetching {path}")
        return self.files.get(path)

    async def list_directory(self, owner: str, repo: str, path: str) -> list[str]:
        return list(self.directory)


@pytest.fixture
def main_tf() -> str:
    return MAIN_TF


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(github_token="test-token", max_concurrency=2)


@pytest.fixture
def scan_run() -> ScanRun:
    return ScanRun(
        run_url="https://github.com/acme/infra/actions/runs/42",
        status="completed",
        conclusion="failure",
        created_at="2026-10-01T12:00:00Z",
        results=checkov_report(
            failed_check("CKV_AWS_53"),
            failed_check("CKV_AWS_16"),
            failed_check("CKV_AWS_126"),
        ),
    )
