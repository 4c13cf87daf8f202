from __future__ import annotations

import asyncio
import sys

from agents import Agent, ModelSettings, Runner

from checkov_analyser.config import DEFAULT_CONFIG, AppConfig
from checkov_analyser.github.client import GitHubClient
from checkov_analyser.logging_setup import configure_logging
from checkov_analyser.services.analyser import Analyser
from checkov_analyser.tools.analysis_tools import make_analysis_tools

DEFAULT_INSTRUCTIONS = """\
You are Checkov Analyser, an assistant that explains infrastructure-as-code scan results.

## Tools Available
- **analyze_latest_scan**: Summarize the latest Checkov scan of a repository
- **get_remediation**: Get the fix template for one finding
- **generate_security_report**: Build a report with remediations for critical and high findings
- **propose_changes**: Draft a pull request title and body for the available fixes

## How to Help Users
1. Start with `analyze_latest_scan` and explain the findings by severity, critical first
2. For a finding the user cares about, call `get_remediation` and show the current
   configuration next to the suggested fix
3. Mention the implementation notes; some fixes cannot be applied in place
4. When asked for an overview, use `generate_security_report`
5. When asked to prepare a pull request, use `propose_changes` and present the draft

## Important Guidelines
- You cannot modify repositories; present fixes for the user to apply
- If a tool returns an `error`, relay it together with any suggestion it contains
- Findings without a remediation template still deserve a short explanation
"""


def build_agent(
    analyser: Analyser,
    config: AppConfig = DEFAULT_CONFIG,
    instructions: str = DEFAULT_INSTRUCTIONS,
) -> Agent:
    """Build the scan analysis agent with its tools bound to `analyser`."""
    return Agent(
        name="Checkov Analyser",
        instructions=instructions,
        model=config.model,
        model_settings=ModelSettings(reasoning={"effort": "medium", "summary": "auto"}),
        tools=make_analysis_tools(analyser),
    )


async def main() -> None:
    config = DEFAULT_CONFIG
    configure_logging(config.log_level)

    if len(sys.argv) < 3:
        print("usage: python -m checkov_analyser.agents.agent_service OWNER REPO [PROMPT]")
        return
    owner, repo = sys.argv[1], sys.argv[2]
    prompt = sys.argv[3] if len(sys.argv) > 3 else "Summarize the latest scan and how to fix the critical findings."

    async with GitHubClient(config) as client:
        agent = build_agent(Analyser(client, config), config)
        result = await Runner.run(agent, input=f"Repository: {owner}/{repo}\n\n{prompt}")
        print(result.final_output)


if __name__ == "__main__":
    asyncio.run(main())
