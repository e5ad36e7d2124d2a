"""GitHub Wrapped SDK - High-level API for a user's year on GitHub."""

import logging
from datetime import date

from github_wrapped.config import DEFAULT_GRAPHQL_URL, Config
from github_wrapped.exceptions import AuthenticationError, GitHubWrappedError
from github_wrapped.models.profile import UserProfile
from github_wrapped.services.github_graphql_client import GitHubGraphQLClient
from github_wrapped.services.wrapped_collector import WrappedCollector

logger = logging.getLogger(__name__)


class GitHubWrapped:
    """High-level SDK for building a user's wrapped profile.

    Example usage:
        ```python
        from github_wrapped import GitHubWrapped

        async with GitHubWrapped(token="ghp_xxx") as client:
            profile = await client.get_wrapped("torvalds", year=2025)
            print(profile.streak.longest)
        ```

    Args:
        token: GitHub personal access token. The GraphQL API rejects
            anonymous requests, so a token is required.
        graphql_url: GitHub GraphQL API URL (default: https://api.github.com/graphql)
        timeout: Seconds to wait for the single upstream request
        default_year: Year used when ``get_wrapped`` is called without one
        top_languages_limit: Number of languages kept in the ranking
    """

    def __init__(
        self,
        token: str | None = None,
        graphql_url: str = DEFAULT_GRAPHQL_URL,
        timeout: float = 30.0,
        default_year: int = 2025,
        top_languages_limit: int = 5,
    ):
        self._config = Config(
            github_token=token,
            github_graphql_url=graphql_url,
            request_timeout=timeout,
            default_year=default_year,
            top_languages_limit=top_languages_limit,
        )
        self._graphql_client: GitHubGraphQLClient | None = None
        self._initialized = False

    @classmethod
    def from_config(cls, config: Config) -> "GitHubWrapped":
        """Create an SDK instance from an existing configuration."""
        return cls(
            token=config.github_token,
            graphql_url=config.github_graphql_url,
            timeout=config.request_timeout,
            default_year=config.default_year,
            top_languages_limit=config.top_languages_limit,
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a token is configured."""
        return self._config.is_authenticated

    async def __aenter__(self) -> "GitHubWrapped":
        """Async context manager entry."""
        await self._initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def _initialize(self) -> None:
        """Initialize the GraphQL client."""
        if self._initialized:
            return

        self._graphql_client = GitHubGraphQLClient(config=self._config)
        self._initialized = True
        logger.debug(
            "GitHubWrapped initialized (authenticated=%s)",
            self.is_authenticated,
        )

    async def close(self) -> None:
        """Close the HTTP connection."""
        if self._graphql_client:
            await self._graphql_client.close()
        self._initialized = False
        logger.debug("GitHubWrapped closed")

    def _ensure_initialized(self) -> None:
        """Ensure the client is initialized."""
        if not self._initialized:
            raise GitHubWrappedError(
                "Client not initialized. Use 'async with GitHubWrapped(...) as client:'"
            )

    async def get_wrapped(
        self,
        username: str,
        year: int | None = None,
        today: date | None = None,
    ) -> UserProfile:
        """Get a user's wrapped profile for a year.

        Args:
            username: GitHub username
            year: Calendar year (defaults to the configured default year)
            today: Reference date for the current streak (defaults to today)

        Returns:
            UserProfile with organizations, calendar, streak and languages

        Raises:
            AuthenticationError: If no token is configured
            UserNotFoundError: If the user does not exist
            UpstreamHttpError: If GitHub answers with a non-2xx status or times out
            UpstreamGraphQLError: If GitHub reports GraphQL errors
        """
        self._ensure_initialized()

        if not self.is_authenticated:
            raise AuthenticationError(
                "GitHub token is required for GraphQL API. "
                "Set GITHUB_TOKEN environment variable."
            )

        if year is None:
            year = self._config.default_year

        logger.info("Building wrapped profile for %s (%d)", username, year)

        collector = WrappedCollector(
            self._graphql_client,
            languages_limit=self._config.top_languages_limit,
        )
        return await collector.collect(username, year, today=today)
