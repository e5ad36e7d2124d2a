"""Wrapped profile collector service."""

import logging
from datetime import date

from github_wrapped.exceptions import GitHubWrappedError
from github_wrapped.models.profile import UserProfile
from github_wrapped.models.raw import RawUser
from github_wrapped.services.aggregator import TOP_LANGUAGES_LIMIT, aggregate
from github_wrapped.services.github_graphql_client import GitHubGraphQLClient
from github_wrapped.services.profile_assembler import assemble_profile

logger = logging.getLogger(__name__)


class WrappedCollector:
    """Fetches a user's year via GraphQL and turns it into a UserProfile."""

    def __init__(
        self,
        graphql_client: GitHubGraphQLClient,
        languages_limit: int = TOP_LANGUAGES_LIMIT,
    ):
        self.graphql_client = graphql_client
        self.languages_limit = languages_limit

    async def collect(
        self,
        username: str,
        year: int,
        today: date | None = None,
    ) -> UserProfile:
        """Collect the wrapped profile for a user.

        Args:
            username: GitHub username
            year: Calendar year to summarize
            today: Reference date for the current streak (defaults to today)

        Returns:
            UserProfile for the year
        """
        if today is None:
            today = date.today()

        try:
            data = await self.graphql_client.fetch_user(username, year)
        except GitHubWrappedError as e:
            logger.error("Failed to fetch wrapped data for %s: %s", username, e)
            raise

        raw_user = RawUser.from_graphql(data)
        summary = aggregate(raw_user, today, languages_limit=self.languages_limit)

        logger.debug(
            "Found %d contributions for %s in %d",
            summary.total_contributions,
            username,
            year,
        )

        return assemble_profile(username, raw_user, summary)
