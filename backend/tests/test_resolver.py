from checkov_analyser.remediation.catalog import DEFAULT_CATALOG
from checkov_analyser.remediation.models import NoRemediation, ResolvedRemediation
from checkov_analyser.remediation.resolver import DEFAULT_IMPLEMENTATION_NOTE, resolve

from conftest import PUBLIC_ACCESS_BLOCK


def test_s3_public_acls_remediation(main_tf):
    result = resolve("CKV_AWS_53", main_tf, "main.tf")

    assert isinstance(result, ResolvedRemediation)
    assert result.current_configuration == PUBLIC_ACCESS_BLOCK
    assert result.fix.code == "block_public_acls = true"
    assert result.file_path == "main.tf"
    assert result.implementation_notes == DEFAULT_IMPLEMENTATION_NOTE


def test_unknown_check_has_no_remediation(main_tf):
    result = resolve("CKV_UNKNOWN_999", main_tf, "main.tf")

    assert isinstance(result, NoRemediation)
    assert result.model_dump() == {
        "check_id": "CKV_UNKNOWN_999",
        "status": "no_remediation_available",
        "message": "No automated remediation available for this check",
    }


def test_unknown_check_without_file_text():
    assert resolve("CKV_UNKNOWN_999", None, "").status == "no_remediation_available"


def test_attribute_update_example(main_tf):
    example = resolve("CKV_AWS_16", main_tf, "main.tf").example

    assert example.type == "attribute_update"
    assert example.description == "Update the storage_encrypted attribute in your aws_db_instance resource"
    assert example.code == "storage_encrypted = true"


def test_new_resource_example():
    example = resolve("CKV2_AWS_11", "", "vpc.tf").example

    assert example.type == "new_resource"
    assert example.description == "Add this new resource to your Terraform configuration"
    assert example.code.startswith('resource "aws_flow_log" "main"')


def test_example_type_follows_fix_code_for_every_template():
    for check_id in DEFAULT_CATALOG.check_ids():
        template = DEFAULT_CATALOG.lookup(check_id)
        example = resolve(check_id, "", "main.tf").example
        if "resource" in template.fix.code:
            assert example.type == "new_resource"
        else:
            assert example.type == "attribute_update"
            assert template.fix.attribute in example.description
            assert template.fix.resource in example.description


def test_missing_block_leaves_configuration_empty(main_tf):
    result = resolve("CKV_AWS_79", main_tf, "main.tf")

    assert result.current_configuration is None
    assert "IMDSv2" in result.implementation_notes


def test_check_specific_note(main_tf):
    result = resolve("CKV_AWS_16", main_tf, "main.tf")

    assert result.implementation_notes.startswith("Encryption cannot be enabled on existing RDS instances")
    assert result.current_configuration.startswith('resource "aws_db_instance" "main"')
