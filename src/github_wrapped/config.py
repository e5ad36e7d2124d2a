"""Configuration management for GitHub Wrapped."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_GRAPHQL_URL = "https://api.github.com/graphql"


@dataclass
class Config:
    """Application configuration."""

    github_token: str | None
    github_graphql_url: str = DEFAULT_GRAPHQL_URL

    # Timeouts
    request_timeout: float = 30.0

    # Wrapped defaults
    default_year: int = 2025
    top_languages_limit: int = 5

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # Support both GITHUB_WRAPPED_TOKEN (preferred) and GITHUB_TOKEN (fallback)
        token = os.getenv("GITHUB_WRAPPED_TOKEN") or os.getenv("GITHUB_TOKEN")

        return cls(
            github_token=token,
            github_graphql_url=os.getenv("GITHUB_GRAPHQL_URL", DEFAULT_GRAPHQL_URL),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
