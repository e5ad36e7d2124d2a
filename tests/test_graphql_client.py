"""Tests for the GraphQL client."""

import json

import httpx
import pytest
import pytest_asyncio
from pytest_httpx import HTTPXMock

from conftest import GRAPHQL_URL
from github_wrapped.config import Config
from github_wrapped.exceptions import (
    AuthenticationError,
    UpstreamGraphQLError,
    UpstreamHttpError,
    UpstreamTimeoutError,
    UserNotFoundError,
)
from github_wrapped.services.github_graphql_client import GitHubGraphQLClient
from github_wrapped.services.queries import WRAPPED_QUERY, build_wrapped_query


@pytest_asyncio.fixture
async def graphql_client(test_config):
    client = GitHubGraphQLClient(config=test_config)
    yield client
    await client.close()


class TestExecute:
    """Tests for GitHubGraphQLClient.execute."""

    @pytest.mark.asyncio
    async def test_returns_data(self, graphql_client, httpx_mock: HTTPXMock):
        """Test a successful response returns its data member."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json={"data": {"user": {"name": "x"}}})

        data = await graphql_client.execute(build_wrapped_query("octocat", 2025))

        assert data == {"user": {"name": "x"}}

    @pytest.mark.asyncio
    async def test_request_shape(self, graphql_client, httpx_mock: HTTPXMock):
        """Test the body and headers sent upstream."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json={"data": {}})

        await graphql_client.execute(build_wrapped_query("octocat", 2024))

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer test_token"
        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["User-Agent"].startswith("github-wrapped/")
        assert json.loads(request.content) == {
            "query": WRAPPED_QUERY,
            "variables": {
                "username": "octocat",
                "from": "2024-01-01T00:00:00Z",
                "to": "2024-12-31T23:59:59Z",
            },
        }

    @pytest.mark.asyncio
    async def test_http_error(self, graphql_client, httpx_mock: HTTPXMock):
        """Test a non-2xx status raises with the code and body."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", status_code=401, text="Bad credentials")

        with pytest.raises(UpstreamHttpError) as exc_info:
            await graphql_client.execute(build_wrapped_query("octocat", 2025))

        assert exc_info.value.status_code == 401
        assert exc_info.value.response_body == "Bad credentials"
        assert str(exc_info.value) == "GitHub API error: 401 - Bad credentials"

    @pytest.mark.asyncio
    async def test_graphql_errors(self, graphql_client, httpx_mock: HTTPXMock):
        """Test the first GraphQL error message becomes the exception message."""
        errors = [{"message": "rate limited"}, {"message": "something else"}]
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json={"errors": errors})

        with pytest.raises(UpstreamGraphQLError) as exc_info:
            await graphql_client.execute(build_wrapped_query("octocat", 2025))

        assert str(exc_info.value) == "rate limited"
        assert exc_info.value.errors == errors

    @pytest.mark.asyncio
    async def test_empty_errors_array_is_success(self, graphql_client, httpx_mock: HTTPXMock):
        """Test an empty errors array is not treated as a failure."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json={"data": {"user": {}}, "errors": []})

        assert await graphql_client.execute(build_wrapped_query("octocat", 2025)) == {"user": {}}

    @pytest.mark.asyncio
    async def test_timeout(self, graphql_client, httpx_mock: HTTPXMock):
        """Test a timeout is reported as an upstream HTTP failure."""
        httpx_mock.add_exception(httpx.ReadTimeout("timed out"))

        with pytest.raises(UpstreamTimeoutError) as exc_info:
            await graphql_client.execute(build_wrapped_query("octocat", 2025))

        assert isinstance(exc_info.value, UpstreamHttpError)
        assert exc_info.value.status_code is None
        assert exc_info.value.timeout == 5.0

    @pytest.mark.asyncio
    async def test_connect_error(self, graphql_client, httpx_mock: HTTPXMock):
        """Test transport failures are reported without a status code."""
        httpx_mock.add_exception(httpx.ConnectError("connection refused"))

        with pytest.raises(UpstreamHttpError) as exc_info:
            await graphql_client.execute(build_wrapped_query("octocat", 2025))

        assert not isinstance(exc_info.value, UpstreamTimeoutError)
        assert exc_info.value.status_code is None

    @pytest.mark.asyncio
    async def test_non_json_body(self, graphql_client, httpx_mock: HTTPXMock):
        """Test a 2xx body that is not JSON is an upstream failure."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", text="<html>oops</html>")

        with pytest.raises(UpstreamHttpError) as exc_info:
            await graphql_client.execute(build_wrapped_query("octocat", 2025))

        assert exc_info.value.status_code == 200

    @pytest.mark.asyncio
    async def test_missing_token(self):
        """Test a request without a token fails before reaching the network."""
        client = GitHubGraphQLClient(config=Config(github_token=None))

        with pytest.raises(AuthenticationError):
            await client.execute(build_wrapped_query("octocat", 2025))


class TestFetchUser:
    """Tests for GitHubGraphQLClient.fetch_user."""

    @pytest.mark.asyncio
    async def test_returns_user(self, graphql_client, graphql_user, httpx_mock: HTTPXMock):
        """Test the user object is returned as-is."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json={"data": {"user": graphql_user}})

        assert await graphql_client.fetch_user("octocat", 2025) == graphql_user

    @pytest.mark.asyncio
    async def test_null_user(self, graphql_client, httpx_mock: HTTPXMock):
        """Test a null user without errors means the user does not exist."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json={"data": {"user": None}})

        with pytest.raises(UserNotFoundError) as exc_info:
            await graphql_client.fetch_user("ghost-user-404", 2025)

        assert exc_info.value.username == "ghost-user-404"

    @pytest.mark.asyncio
    async def test_missing_data(self, graphql_client, httpx_mock: HTTPXMock):
        """Test a body without data is also a missing user."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json={})

        with pytest.raises(UserNotFoundError):
            await graphql_client.fetch_user("octocat", 2025)

    @pytest.mark.asyncio
    async def test_errors_take_precedence_over_missing_user(
        self, graphql_client, httpx_mock: HTTPXMock
    ):
        """Test GitHub's NOT_FOUND error surfaces as a GraphQL error."""
        httpx_mock.add_response(
            url=GRAPHQL_URL,
            method="POST",
            json={
                "data": {"user": None},
                "errors": [{"type": "NOT_FOUND", "message": "Could not resolve to a User"}],
            },
        )

        with pytest.raises(UpstreamGraphQLError, match="Could not resolve to a User"):
            await graphql_client.fetch_user("octocat", 2025)
