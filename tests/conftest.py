"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from github_wrapped.config import Config, set_config

GRAPHQL_URL = "https://api.github.com/graphql"


@pytest.fixture(autouse=True)
def reset_globals():
    """Reset global state before each test."""
    set_config(None)
    yield
    set_config(None)


@pytest.fixture
def test_config():
    """Create a test configuration."""
    config = Config(
        github_token="test_token",
        github_graphql_url=GRAPHQL_URL,
        request_timeout=5.0,
    )
    set_config(config)
    return config


def make_day(date: str, count: int, level: str = "FIRST_QUARTILE") -> dict[str, Any]:
    """Build a contributionDays entry as GitHub returns it."""
    return {
        "date": date,
        "contributionCount": count,
        "contributionLevel": level if count else "NONE",
    }


def make_repo_contribution(owner: str, repo: str, count: int) -> dict[str, Any]:
    """Build a *ContributionsByRepository entry as GitHub returns it."""
    return {
        "repository": {
            "name": repo,
            "owner": {"login": owner, "avatarUrl": f"https://avatars.example/{owner}"},
        },
        "contributions": {"totalCount": count},
    }


def make_language_edge(name: str, size: int, color: str | None = None) -> dict[str, Any]:
    """Build a languages.edges entry as GitHub returns it."""
    return {"size": size, "node": {"name": name, "color": color}}


@pytest.fixture
def graphql_user() -> dict[str, Any]:
    """A representative ``data.user`` object from the wrapped query."""
    return {
        "name": "The Octocat",
        "avatarUrl": "https://avatars.example/octocat",
        "organizations": {
            "nodes": [
                {"name": "GitHub", "login": "github", "avatarUrl": "https://avatars.example/github"},
            ]
        },
        "contributionsCollection": {
            "contributionCalendar": {
                "totalContributions": 9,
                "weeks": [
                    {
                        "contributionDays": [
                            make_day("2025-06-01", 2),
                            make_day("2025-06-02", 3, "SECOND_QUARTILE"),
                        ]
                    },
                    {
                        "contributionDays": [
                            make_day("2025-06-03", 0),
                            make_day("2025-06-04", 4, "FOURTH_QUARTILE"),
                        ]
                    },
                ],
            },
            "pullRequestContributionsByRepository": [
                make_repo_contribution("github", "docs", 2),
                make_repo_contribution("acme", "rocket", 1),
            ],
            "issueContributionsByRepository": [
                make_repo_contribution("acme", "rocket", 4),
            ],
        },
        "repositories": {
            "nodes": [
                {
                    "stargazerCount": 10,
                    "primaryLanguage": {"name": "Python", "color": "#3572A5"},
                    "languages": {
                        "edges": [
                            make_language_edge("Python", 300, "#3572A5"),
                            make_language_edge("Shell", 100, "#89e051"),
                        ]
                    },
                },
            ]
        },
    }
