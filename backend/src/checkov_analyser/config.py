from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()  # Pull the GitHub token and overrides from a local .env into the process env.


@dataclass(frozen=True)
class AppConfig:
    github_token: str | None = None
    github_api_url: str = "https://api.github.com"
    workflow_file: str = "checkov-scan.yml"
    artifact_name: str = "checkov-results-json"
    results_file: str = "results_json.json"
    source_dir: str = ""
    request_timeout_s: float = 30.0
    max_concurrency: int = 4
    log_level: str = "INFO"
    model: str = "gpt-5.2"

    @staticmethod
    def from_env() -> "AppConfig":
        env = os.environ
        return AppConfig(
            github_token=env.get("GITHUB_TOKEN") or None,
            github_api_url=env.get("CHECKOV_ANALYSER_GITHUB_API_URL", "https://api.github.com"),
            workflow_file=env.get("CHECKOV_ANALYSER_WORKFLOW", "checkov-scan.yml"),
            artifact_name=env.get("CHECKOV_ANALYSER_ARTIFACT", "checkov-results-json"),
            results_file=env.get("CHECKOV_ANALYSER_RESULTS_FILE", "results_json.json"),
            source_dir=env.get("CHECKOV_ANALYSER_SOURCE_DIR", "").strip("/"),
            request_timeout_s=float(env.get("CHECKOV_ANALYSER_TIMEOUT", "30")),
            max_concurrency=int(env.get("CHECKOV_ANALYSER_MAX_CONCURRENCY", "4")),
            log_level=env.get("CHECKOV_ANALYSER_LOG_LEVEL", "INFO").upper(),
            model=env.get("CHECKOV_ANALYSER_MODEL", "gpt-5.2"),
        )


DEFAULT_CONFIG = AppConfig.from_env()
