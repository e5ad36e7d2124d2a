"""Services for GitHub Wrapped data collection."""

from github_wrapped.services.github_graphql_client import GitHubGraphQLClient
from github_wrapped.services.wrapped_collector import WrappedCollector

__all__ = [
    "GitHubGraphQLClient",
    "WrappedCollector",
]
