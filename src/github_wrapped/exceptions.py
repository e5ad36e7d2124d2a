"""Exceptions for GitHub Wrapped.

Exception Hierarchy:
    GitHubWrappedError (base)
    ├── UpstreamHttpError (non-2xx status or transport failure)
    │   └── UpstreamTimeoutError (request exceeded the configured timeout)
    ├── UpstreamGraphQLError (GraphQL "errors" array in the response body)
    ├── UserNotFoundError (response carried no user object)
    └── AuthenticationError (token missing)

None of these are retried; they propagate unchanged to the caller.
"""

__all__ = [
    "GitHubWrappedError",
    "UpstreamHttpError",
    "UpstreamTimeoutError",
    "UpstreamGraphQLError",
    "UserNotFoundError",
    "AuthenticationError",
]


class GitHubWrappedError(Exception):
    """Base exception for all GitHub Wrapped errors."""

    pass


class UpstreamHttpError(GitHubWrappedError):
    """Raised when the GraphQL endpoint answers outside the 2xx range.

    Transport failures (connection refused, timeouts) are reported through this
    class as well, with ``status_code`` left as ``None``.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_body: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_body = response_body


class UpstreamTimeoutError(UpstreamHttpError):
    """Raised when the GraphQL request does not complete within the timeout."""

    def __init__(self, message: str, timeout: float | None = None):
        super().__init__(message)
        self.timeout = timeout


class UpstreamGraphQLError(GitHubWrappedError):
    """Raised when the response body contains a non-empty ``errors`` array.

    The exception message is the first error's message; the full list is kept
    on ``errors``.
    """

    def __init__(self, message: str, errors: list | None = None):
        super().__init__(message)
        self.errors = errors or []


class UserNotFoundError(GitHubWrappedError):
    """Raised when a GitHub user is not found."""

    def __init__(self, username: str):
        super().__init__(f"User not found: {username}")
        self.username = username


class AuthenticationError(GitHubWrappedError):
    """Raised when no GitHub token is configured."""

    pass
