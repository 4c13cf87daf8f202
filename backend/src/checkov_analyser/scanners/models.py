from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Severity(IntEnum):
    LOW = 1
    MEDIUM = 2
    HIGH = 3
    CRITICAL = 4

    @property
    def bucket(self) -> str:
        return self.name.lower()


class RawFinding(BaseModel):
    """A failed check as reported by Checkov."""

    model_config = ConfigDict(frozen=True)

    check_id: str
    check_name: str = ""
    file_path: str = ""
    resource: str = ""
    file_line_range: list[int] = Field(default_factory=list)
    guideline: str = ""


class EnrichedFinding(RawFinding):
    severity: Severity
    description: str

    @field_serializer("severity")
    def _severity_name(self, severity: Severity) -> str:
        return severity.name


class CategorizedFindings(BaseModel):
    critical: list[EnrichedFinding] = Field(default_factory=list)
    high: list[EnrichedFinding] = Field(default_factory=list)
    medium: list[EnrichedFinding] = Field(default_factory=list)
    low: list[EnrichedFinding] = Field(default_factory=list)

    def bucket(self, severity: Severity) -> list[EnrichedFinding]:
        return getattr(self, severity.bucket)

    def counts(self) -> dict[str, int]:
        return {s.bucket: len(self.bucket(s)) for s in sorted(Severity, reverse=True)}

    def total(self) -> int:
        return sum(self.counts().values())


class ScanSummary(BaseModel):
    total_checks: int = 0
    passed: int = 0
    failed: int = 0
    skipped: int = 0
    pass_rate: str = "0%"
