from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from checkov_analyser.config import DEFAULT_CONFIG
from checkov_analyser.github.client import GitHubClient, ScanSource
from checkov_analyser.logging_setup import configure_logging
from checkov_analyser.remediation.categorizer import categorize
from checkov_analyser.remediation.resolver import resolve
from checkov_analyser.services.analyser import Analyser


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    configure_logging(DEFAULT_CONFIG.log_level)
    yield


app = FastAPI(title="Checkov Analyser API", lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class RepoRequest(BaseModel):
    owner: str
    repo: str


class RemediationRequest(RepoRequest):
    check_id: str
    file_path: str


class CategorizeRequest(BaseModel):
    results: Any = None


class ResolveRequest(BaseModel):
    check_id: str
    file_text: str = ""
    file_path: str


async def get_scan_source() -> AsyncIterator[ScanSource]:
    try:
        client = GitHubClient(DEFAULT_CONFIG)
    except RuntimeError as exc:
        raise HTTPException(status_code=503, detail=str(exc)) from None
    async with client:
        yield client


def _analyser(source: ScanSource) -> Analyser:
    return Analyser(source, DEFAULT_CONFIG)


@app.post("/api/scan/analyze")
async def analyze_latest_scan(
    payload: RepoRequest, source: ScanSource = Depends(get_scan_source)
) -> dict[str, Any]:
    """Categorize the findings of the latest completed scan."""
    return await _analyser(source).analyze_latest_scan(payload.owner, payload.repo)


@app.post("/api/remediation")
async def get_remediation(
    payload: RemediationRequest, source: ScanSource = Depends(get_scan_source)
) -> dict[str, Any]:
    return await _analyser(source).get_remediation(
        payload.owner, payload.repo, payload.check_id, payload.file_path
    )


@app.post("/api/report")
async def generate_security_report(
    payload: RepoRequest, source: ScanSource = Depends(get_scan_source)
) -> dict[str, Any]:
    """Scan analysis plus remediations for every critical and high finding."""
    return await _analyser(source).generate_security_report(payload.owner, payload.repo)


@app.post("/api/proposal")
async def propose_changes(
    payload: RepoRequest, source: ScanSource = Depends(get_scan_source)
) -> dict[str, Any]:
    return await _analyser(source).propose_changes(payload.owner, payload.repo)


@app.post("/api/categorize")
async def categorize_results(payload: CategorizeRequest) -> dict[str, Any]:
    """Categorize an uploaded Checkov JSON report without touching GitHub."""
    return categorize(payload.results).model_dump(mode="json")


@app.post("/api/resolve")
async def resolve_remediation(payload: ResolveRequest) -> dict[str, Any]:
    return resolve(payload.check_id, payload.file_text, payload.file_path).model_dump(mode="json")
