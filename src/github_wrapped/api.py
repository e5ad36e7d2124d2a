"""HTTP interface serving wrapped profiles as JSON."""

import logging
from collections.abc import AsyncIterator
from typing import Any

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from github_wrapped.config import get_config
from github_wrapped.exceptions import (
    GitHubWrappedError,
    UpstreamGraphQLError,
    UpstreamHttpError,
    UpstreamTimeoutError,
    UserNotFoundError,
)
from github_wrapped.sdk import GitHubWrapped

logger = logging.getLogger(__name__)

app = FastAPI(title="GitHub Wrapped")


def error_status(exc: GitHubWrappedError) -> int:
    """Pick the HTTP status reported for a pipeline failure."""
    if isinstance(exc, UserNotFoundError):
        return 404
    if isinstance(exc, UpstreamTimeoutError):
        return 504
    if isinstance(exc, (UpstreamHttpError, UpstreamGraphQLError)):
        return 502
    # AuthenticationError and anything unexpected are server-side problems
    return 500


@app.exception_handler(GitHubWrappedError)
async def handle_wrapped_error(request: Request, exc: GitHubWrappedError) -> JSONResponse:
    status_code = error_status(exc)
    logger.warning("%s %s failed with %d: %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(
        status_code=status_code,
        content={"error": str(exc), "type": type(exc).__name__},
    )


@app.exception_handler(Exception)
async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "%s %s failed unexpectedly", request.method, request.url.path, exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content={"error": str(exc), "type": type(exc).__name__},
    )


async def get_client() -> AsyncIterator[GitHubWrapped]:
    async with GitHubWrapped.from_config(get_config()) as client:
        yield client


@app.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return "github wrapped API"


@app.get("/wrapped/{username}")
async def get_wrapped(
    username: str,
    year: int | None = None,
    client: GitHubWrapped = Depends(get_client),
) -> dict[str, Any]:
    if year is None:
        year = get_config().default_year

    profile = await client.get_wrapped(username, year=year)
    return profile.to_json_dict()
