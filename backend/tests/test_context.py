from checkov_analyser.remediation.context import extract_resource_context

from conftest import PUBLIC_ACCESS_BLOCK


def test_extracts_first_matching_block(main_tf):
    assert extract_resource_context(main_tf, "aws_s3_bucket_public_access_block") == PUBLIC_ACCESS_BLOCK


def test_type_name_must_match_exactly(main_tf):
    block = extract_resource_context(main_tf, "aws_s3_bucket")

    assert block.startswith('resource "aws_s3_bucket" "data"')
    assert "checkov-demo-data" in block


def test_returns_none_without_match(main_tf):
    assert extract_resource_context(main_tf, "aws_flow_log") is None


def test_returns_none_for_empty_input(main_tf):
    assert extract_resource_context("", "aws_db_instance") is None
    assert extract_resource_context(None, "aws_db_instance") is None
    assert extract_resource_context(main_tf, "") is None


def test_regex_characters_in_type_are_literal():
    assert extract_resource_context('resource "aws_x" "a" { }', "aws_.") is None


def test_nested_blocks_are_cut_at_first_closing_brace():
    text = """\
resource "aws_security_group" "web" {
  name = "web"
  ingress {
    from_port = 80
  }
  egress {
    to_port = 0
  }
}
"""
    block = extract_resource_context(text, "aws_security_group")

    assert block.endswith("from_port = 80\n  }")
    assert "egress" not in block
