"""GitHub Wrapped - A user's year on GitHub in one summary.

This SDK fetches a user's yearly activity through GitHub's GraphQL API and
aggregates it into:
- Organizations contributed to (memberships merged with PR/issue activity)
- A flattened contribution calendar and total
- Current and longest contribution streaks
- Top languages by bytes of code

Example usage:
    ```python
    from github_wrapped import GitHubWrapped

    async with GitHubWrapped(token="ghp_xxx") as client:
        profile = await client.get_wrapped("torvalds", year=2025)
        print(f"Longest streak: {profile.streak.longest}")
    ```
"""

from github_wrapped._version import version as __version__
from github_wrapped.config import Config
from github_wrapped.exceptions import (
    AuthenticationError,
    GitHubWrappedError,
    UpstreamGraphQLError,
    UpstreamHttpError,
    UpstreamTimeoutError,
    UserNotFoundError,
)
from github_wrapped.models import (
    ContributionDay,
    Language,
    Organization,
    RawUser,
    Streak,
    UserProfile,
    WrappedSummary,
)
from github_wrapped.sdk import GitHubWrapped
from github_wrapped.services.aggregator import (
    aggregate,
    calculate_streaks,
    calculate_top_languages,
    flatten_calendar,
    merge_organizations,
)

__all__ = [
    "__version__",
    # Main SDK class
    "GitHubWrapped",
    # Configuration
    "Config",
    # Exceptions
    "GitHubWrappedError",
    "UpstreamHttpError",
    "UpstreamTimeoutError",
    "UpstreamGraphQLError",
    "UserNotFoundError",
    "AuthenticationError",
    # Models
    "UserProfile",
    "WrappedSummary",
    "Organization",
    "ContributionDay",
    "Streak",
    "Language",
    "RawUser",
    # Aggregation
    "aggregate",
    "merge_organizations",
    "flatten_calendar",
    "calculate_streaks",
    "calculate_top_languages",
]
