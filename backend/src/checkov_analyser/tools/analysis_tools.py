from __future__ import annotations

import json

from agents import FunctionTool, function_tool

from checkov_analyser.services.analyser import Analyser


def make_analysis_tools(analyser: Analyser) -> list[FunctionTool]:
    """Create the scan analysis tools bound to one Analyser."""

    @function_tool
    async def analyze_latest_scan(owner: str, repo: str) -> str:
        """Analyze the latest Checkov scan results from GitHub Actions.

        Args:
            owner: GitHub repository owner.
            repo: GitHub repository name.

        Returns:
            JSON with the scan summary and findings grouped by severity.
        """
        return json.dumps(await analyser.analyze_latest_scan(owner, repo), indent=2)

    @function_tool
    async def get_remediation(owner: str, repo: str, check_id: str, file_path: str) -> str:
        """Get specific remediation code for a Checkov finding.

        Args:
            owner: GitHub repository owner.
            repo: GitHub repository name.
            check_id: Checkov check ID (e.g. CKV_AWS_16).
            file_path: Path to the Terraform file, as reported by Checkov.
        """
        result = await analyser.get_remediation(owner, repo, check_id, file_path)
        return json.dumps(result, indent=2)

    @function_tool
    async def generate_security_report(owner: str, repo: str) -> str:
        """Generate a security report with remediations for critical and high findings.

        Args:
            owner: GitHub repository owner.
            repo: GitHub repository name.
        """
        return json.dumps(await analyser.generate_security_report(owner, repo), indent=2)

    @function_tool
    async def propose_changes(owner: str, repo: str) -> str:
        """Draft a pull request title and body covering the available remediations.

        Args:
            owner: GitHub repository owner.
            repo: GitHub repository name.
        """
        return json.dumps(await analyser.propose_changes(owner, repo), indent=2)

    return [analyze_latest_scan, get_remediation, generate_security_report, propose_changes]
