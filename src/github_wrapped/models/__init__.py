"""Data models for GitHub Wrapped."""

from github_wrapped.models.contribution import ContributionDay, Streak
from github_wrapped.models.language import Language
from github_wrapped.models.organization import Organization
from github_wrapped.models.profile import UserProfile, WrappedSummary
from github_wrapped.models.raw import (
    CalendarDay,
    ContributionWeek,
    LanguageEdge,
    OrganizationNode,
    OwnedRepository,
    RawUser,
    RepositoryContribution,
    RepositoryOwner,
)

__all__ = [
    "UserProfile",
    "WrappedSummary",
    "Organization",
    "ContributionDay",
    "Streak",
    "Language",
    "RawUser",
    "OrganizationNode",
    "CalendarDay",
    "ContributionWeek",
    "RepositoryContribution",
    "RepositoryOwner",
    "OwnedRepository",
    "LanguageEdge",
]
