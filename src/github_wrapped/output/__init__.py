"""Output handlers for GitHub Wrapped."""

from github_wrapped.output.console import Console
from github_wrapped.output.json_writer import write_json_profile

__all__ = [
    "write_json_profile",
    "Console",
]
