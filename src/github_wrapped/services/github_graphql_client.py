"""GitHub GraphQL API client for the wrapped query."""

import logging
from typing import Any, Optional

import httpx

from github_wrapped._version import version
from github_wrapped.config import Config, get_config
from github_wrapped.exceptions import (
    AuthenticationError,
    UpstreamGraphQLError,
    UpstreamHttpError,
    UpstreamTimeoutError,
    UserNotFoundError,
)
from github_wrapped.services.queries import GraphQLRequest, build_wrapped_query

logger = logging.getLogger(__name__)


class GitHubGraphQLClient:
    """Async client for GitHub GraphQL API.

    Every call is a single attempt bounded by ``Config.request_timeout``.
    """

    def __init__(self, config: Optional[Config] = None):
        self.config = config or get_config()
        self._client: Optional[httpx.AsyncClient] = None

    def _get_headers(self) -> dict[str, str]:
        """Get headers for API requests."""
        if not self.config.github_token:
            raise AuthenticationError(
                "GitHub token is required for GraphQL API. "
                "Set GITHUB_TOKEN environment variable."
            )

        return {
            "Authorization": f"Bearer {self.config.github_token}",
            "Content-Type": "application/json",
            "User-Agent": f"github-wrapped/{version}",
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the HTTP client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                headers=self._get_headers(),
                timeout=self.config.request_timeout,
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "GitHubGraphQLClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def execute(self, request: GraphQLRequest) -> dict[str, Any]:
        """Execute a GraphQL query.

        Args:
            request: Query text and variables

        Returns:
            The ``data`` member of the response (empty dict when absent)

        Raises:
            UpstreamHttpError: On a non-2xx status, a transport failure or a
                body that is not JSON
            UpstreamTimeoutError: If the request exceeds the configured timeout
            UpstreamGraphQLError: If the body carries a non-empty errors array
        """
        client = await self._get_client()

        try:
            response = await client.post(
                self.config.github_graphql_url, json=request.to_payload()
            )
        except httpx.TimeoutException as e:
            logger.error("GraphQL request timed out: %s", e)
            raise UpstreamTimeoutError(
                f"GitHub API request timed out after {self.config.request_timeout}s",
                timeout=self.config.request_timeout,
            ) from e
        except httpx.TransportError as e:
            logger.error("GraphQL request failed: %s", e)
            raise UpstreamHttpError(f"GitHub API request failed: {e}") from e

        if not response.is_success:
            raise UpstreamHttpError(
                f"GitHub API error: {response.status_code} - {response.text}",
                status_code=response.status_code,
                response_body=response.text,
            )

        try:
            result = response.json()
        except ValueError as e:
            raise UpstreamHttpError(
                "GitHub API returned a body that is not JSON",
                status_code=response.status_code,
                response_body=response.text,
            ) from e

        errors = result.get("errors")
        if errors:
            message = errors[0].get("message", "Unknown error")
            raise UpstreamGraphQLError(message, errors=errors)

        return result.get("data") or {}

    async def fetch_user(self, username: str, year: int) -> dict[str, Any]:
        """Fetch the raw ``user`` object of the wrapped query.

        Args:
            username: GitHub username
            year: Calendar year to collect contributions for

        Returns:
            The GraphQL ``user`` object

        Raises:
            UserNotFoundError: If the response has no user
        """
        logger.debug("Fetching wrapped data for %s (%d)", username, year)

        data = await self.execute(build_wrapped_query(username, year))

        user = data.get("user")
        if not user:
            raise UserNotFoundError(username)

        return user
