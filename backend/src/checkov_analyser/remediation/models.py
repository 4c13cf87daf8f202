from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from checkov_analyser.scanners.models import CategorizedFindings, EnrichedFinding


class Fix(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    resource: str
    attribute: str | None = None
    additional: str | None = None


class RemediationTemplate(BaseModel):
    """Catalog entry describing how to resolve one Checkov check."""

    model_config = ConfigDict(frozen=True)

    title: str
    impact: str
    fix: Fix


class RemediationExample(BaseModel):
    type: Literal["new_resource", "attribute_update"]
    description: str
    code: str


class ResolvedRemediation(BaseModel):
    check_id: str
    title: str
    impact: str
    fix: Fix
    file_path: str
    current_configuration: str | None = None
    implementation_notes: str
    example: RemediationExample


class NoRemediation(BaseModel):
    check_id: str
    status: Literal["no_remediation_available"] = "no_remediation_available"
    message: str = "No automated remediation available for this check"


class ReportEntry(BaseModel):
    finding: EnrichedFinding
    remediation: ResolvedRemediation | NoRemediation


class SkippedFinding(BaseModel):
    check_id: str
    file_path: str
    error: str


class ChangeProposal(BaseModel):
    title: str
    body: str


class Report(BaseModel):
    counts: dict[str, int]
    findings: CategorizedFindings
    remediations: list[ReportEntry] = Field(default_factory=list)
    skipped: list[SkippedFinding] = Field(default_factory=list)

    def resolved(self) -> list[ResolvedRemediation]:
        return [e.remediation for e in self.remediations if isinstance(e.remediation, ResolvedRemediation)]
