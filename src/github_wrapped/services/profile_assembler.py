"""Combine identity fields and aggregated statistics into a UserProfile."""

from github_wrapped.models.profile import UserProfile, WrappedSummary
from github_wrapped.models.raw import RawUser


def assemble_profile(username: str, raw_user: RawUser, summary: WrappedSummary) -> UserProfile:
    """Build the final profile; ``name`` falls back to the username."""
    return UserProfile(
        username=username,
        name=raw_user.name or username,
        avatar_url=raw_user.avatar_url,
        organizations=summary.organizations,
        contribution_calendar=summary.contribution_calendar,
        total_contributions=summary.total_contributions,
        streak=summary.streak,
        top_languages=summary.top_languages,
    )
