from __future__ import annotations

from types import MappingProxyType

from checkov_analyser.remediation.catalog import DEFAULT_CATALOG, RemediationCatalog
from checkov_analyser.remediation.context import extract_resource_context
from checkov_analyser.remediation.models import (
    NoRemediation,
    RemediationExample,
    RemediationTemplate,
    ResolvedRemediation,
)

IMPLEMENTATION_NOTES = MappingProxyType(
    {
        "CKV_AWS_16": (
            "Encryption cannot be enabled on existing RDS instances. "
            "You must create a snapshot and restore to a new encrypted instance."
        ),
        "CKV_AWS_17": (
            "After implementing, rotate the password immediately and update any "
            "applications using the database."
        ),
        "CKV_AWS_18": (
            "Requires a separate S3 bucket for storing logs. "
            "Consider lifecycle policies for log retention."
        ),
        "CKV_AWS_23": (
            "Review application requirements before restricting. "
            "May need multiple ingress rules for different services."
        ),
        "CKV2_AWS_11": (
            "Flow logs incur additional costs. "
            "Consider using S3 as destination for cost optimization."
        ),
        "CKV_AWS_79": (
            "Applications must be updated to use IMDSv2. "
            "Test thoroughly before applying to production."
        ),
    }
)

DEFAULT_IMPLEMENTATION_NOTE = "Test changes in a non-production environment first."


def implementation_notes(check_id: str) -> str:
    return IMPLEMENTATION_NOTES.get(check_id, DEFAULT_IMPLEMENTATION_NOTE)


def render_example(template: RemediationTemplate) -> RemediationExample:
    fix = template.fix
    # Fixes that declare whole resources are added as-is; the rest patch one attribute.
    if "resource" in fix.code:
        return RemediationExample(
            type="new_resource",
            description="Add this new resource to your Terraform configuration",
            code=fix.code,
        )
    return RemediationExample(
        type="attribute_update",
        description=f"Update the {fix.attribute} attribute in your {fix.resource} resource",
        code=fix.code,
    )


def resolve(
    check_id: str,
    file_text: str | None,
    file_path: str,
    catalog: RemediationCatalog = DEFAULT_CATALOG,
) -> ResolvedRemediation | NoRemediation:
    """Build the remediation for one finding from already-fetched file text."""
    template = catalog.lookup(check_id)
    if template is None:
        return NoRemediation(check_id=check_id)

    return ResolvedRemediation(
        check_id=check_id,
        title=template.title,
        impact=template.impact,
        fix=template.fix,
        file_path=file_path,
        current_configuration=extract_resource_context(file_text, template.fix.resource),
        implementation_notes=implementation_notes(check_id),
        example=render_example(template),
    )
