"""Tests for the wrapped query builder."""

from github_wrapped.services.queries import (
    WRAPPED_QUERY,
    GraphQLRequest,
    build_wrapped_query,
    year_bounds,
)


class TestBuildWrappedQuery:
    """Tests for build_wrapped_query."""

    def test_variables(self):
        """Test the date range covers the whole year."""
        request = build_wrapped_query("octocat", 2025)

        assert request.variables == {
            "username": "octocat",
            "from": "2025-01-01T00:00:00Z",
            "to": "2025-12-31T23:59:59Z",
        }

    def test_query_text_is_fixed(self):
        """Test the same query text is used for every user and year."""
        assert build_wrapped_query("a", 2020).query == build_wrapped_query("b", 2025).query
        assert build_wrapped_query("a", 2020).query == WRAPPED_QUERY

    def test_query_requests_expected_fields(self):
        """Test the query asks for everything the aggregator reads."""
        for fragment in (
            "organizations(first: 20)",
            "contributionCalendar",
            "contributionLevel",
            "pullRequestContributionsByRepository(maxRepositories: 100)",
            "issueContributionsByRepository(maxRepositories: 100)",
            "ownerAffiliations: OWNER",
            "languages(first: 10)",
        ):
            assert fragment in WRAPPED_QUERY

    def test_year_not_validated(self):
        """Test odd years are passed through untouched."""
        assert year_bounds(-1) == ("-1-01-01T00:00:00Z", "-1-12-31T23:59:59Z")
        assert build_wrapped_query("octocat", 99999).variables["from"] == "99999-01-01T00:00:00Z"

    def test_to_payload(self):
        """Test the POST body shape."""
        request = GraphQLRequest(query="query { viewer { login } }", variables={"a": 1})

        assert request.to_payload() == {
            "query": "query { viewer { login } }",
            "variables": {"a": 1},
        }
