from __future__ import annotations

import base64
import binascii
import io
import json
import logging
import zipfile
from typing import Any, Protocol

import httpx
from pydantic import BaseModel

from checkov_analyser.config import AppConfig

logger = logging.getLogger(__name__)


class ScanRun(BaseModel):
    """The latest completed scan workflow run and its parsed Checkov report."""

    run_url: str | None = None
    status: str | None = None
    conclusion: str | None = None
    created_at: str | None = None
    results: Any = None


class ScanSource(Protocol):
    async def fetch_scan_results(self, owner: str, repo: str) -> ScanRun | None: ...

    async def fetch_file_content(self, owner: str, repo: str, path: str) -> str | None: ...

    async def list_directory(self, owner: str, repo: str, path: str) -> list[str]: ...


def read_results_from_zip(archive: bytes, entry_name: str) -> Any | None:
    try:
        with zipfile.ZipFile(io.BytesIO(archive)) as zf:
            if entry_name not in zf.namelist():
                return None
            return json.loads(zf.read(entry_name).decode("utf-8"))
    except (zipfile.BadZipFile, json.JSONDecodeError, UnicodeDecodeError) as exc:
        logger.warning("Could not parse Checkov results from artifact: %s", exc)
        return None


class GitHubClient:
    """ScanSource backed by GitHub Actions artifacts and the contents API."""

    def __init__(self, config: AppConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        if not config.github_token:
            raise RuntimeError("Missing GITHUB_TOKEN")
        self._config = config
        self._client = httpx.AsyncClient(
            base_url=config.github_api_url.rstrip("/"),
            headers={
                "Authorization": f"Bearer {config.github_token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            },
            timeout=config.request_timeout_s,
            follow_redirects=True,
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get(self, path: str, params: dict | None = None) -> httpx.Response | None:
        resp = await self._client.get(path, params=params)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp

    async def latest_workflow_run(self, owner: str, repo: str) -> dict | None:
        resp = await self._get(
            f"/repos/{owner}/{repo}/actions/workflows/{self._config.workflow_file}/runs",
            params={"per_page": 1, "status": "completed"},
        )
        if resp is None:
            return None
        runs = resp.json().get("workflow_runs") or []
        return runs[0] if runs else None

    async def find_artifact(self, owner: str, repo: str, run_id: int) -> dict | None:
        resp = await self._get(f"/repos/{owner}/{repo}/actions/runs/{run_id}/artifacts")
        if resp is None:
            return None
        for artifact in resp.json().get("artifacts") or []:
            if artifact.get("name") == self._config.artifact_name:
                return artifact
        return None

    async def fetch_scan_results(self, owner: str, repo: str) -> ScanRun | None:
        run = await self.latest_workflow_run(owner, repo)
        if run is None:
            logger.info("No completed %s runs for %s/%s", self._config.workflow_file, owner, repo)
            return None

        run_id = run.get("id")
        if run_id is None:
            logger.warning("Latest %s run for %s/%s has no id", self._config.workflow_file, owner, repo)
            return None

        artifact = await self.find_artifact(owner, repo, run_id)
        if artifact is None or artifact.get("id") is None:
            logger.info("Run %s has no %s artifact", run.get("html_url"), self._config.artifact_name)
            return None

        resp = await self._get(f"/repos/{owner}/{repo}/actions/artifacts/{artifact['id']}/zip")
        if resp is None:
            return None

        results = read_results_from_zip(resp.content, self._config.results_file)
        if results is None:
            return None

        return ScanRun(
            run_url=run.get("html_url"),
            status=run.get("status"),
            conclusion=run.get("conclusion"),
            created_at=run.get("created_at"),
            results=results,
        )

    async def fetch_file_content(self, owner: str, repo: str, path: str) -> str | None:
        resp = await self._get(f"/repos/{owner}/{repo}/contents/{path}")
        if resp is None:
            return None
        data = resp.json()
        # Directories come back as a list of entries.
        if not isinstance(data, dict) or not data.get("content"):
            return None
        try:
            return base64.b64decode(data["content"]).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError) as exc:
            logger.warning("Could not decode %s in %s/%s as UTF-8 text: %s", path, owner, repo, exc)
            return None

    async def list_directory(self, owner: str, repo: str, path: str) -> list[str]:
        resp = await self._get(f"/repos/{owner}/{repo}/contents/{path}")
        if resp is None:
            return []
        data = resp.json()
        if not isinstance(data, list):
            return []
        return [entry["name"] for entry in data if isinstance(entry, dict) and "name" in entry]
