"""GraphQL query text and variables for the wrapped profile."""

from dataclasses import dataclass, field
from typing import Any

# Fixed limits: 20 organizations, 100 repositories per contribution type,
# 100 owned repositories with their 10 largest languages each.
WRAPPED_QUERY = """
query($username: String!, $from: DateTime!, $to: DateTime!) {
  user(login: $username) {
    name
    avatarUrl
    organizations(first: 20) {
      nodes {
        name
        login
        avatarUrl
      }
    }
    contributionsCollection(from: $from, to: $to) {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            contributionLevel
          }
        }
      }
      pullRequestContributionsByRepository(maxRepositories: 100) {
        repository {
          name
          owner { login avatarUrl }
        }
        contributions(first: 100) { totalCount }
      }
      issueContributionsByRepository(maxRepositories: 100) {
        repository {
          name
          owner { login avatarUrl }
        }
        contributions(first: 100) { totalCount }
      }
    }
    repositories(first: 100, ownerAffiliations: OWNER, orderBy: {field: STARGAZERS, direction: DESC}) {
      nodes {
        stargazerCount
        primaryLanguage {
          name
          color
        }
        languages(first: 10) {
          edges {
            size
            node {
              name
              color
            }
          }
        }
      }
    }
  }
}
"""


@dataclass(frozen=True)
class GraphQLRequest:
    """A query and the variables to send along with it."""

    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> dict[str, Any]:
        """Build the JSON body for the POST request."""
        return {"query": self.query, "variables": self.variables}


def year_bounds(year: int) -> tuple[str, str]:
    """Return the ISO-8601 start and end timestamps of a calendar year."""
    return f"{year}-01-01T00:00:00Z", f"{year}-12-31T23:59:59Z"


def build_wrapped_query(username: str, year: int) -> GraphQLRequest:
    """Build the wrapped query for ``username`` over ``year``.

    The year is not range-checked; GitHub decides what an odd year means.
    """
    start, end = year_bounds(year)
    return GraphQLRequest(
        query=WRAPPED_QUERY,
        variables={"username": username, "from": start, "to": end},
    )
