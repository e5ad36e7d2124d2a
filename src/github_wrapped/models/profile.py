"""Wrapped profile models."""

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from github_wrapped.models.contribution import ContributionDay, Streak
from github_wrapped.models.language import Language
from github_wrapped.models.organization import Organization


class WrappedSummary(BaseModel):
    """Everything the aggregator derives from a raw user."""

    organizations: list[Organization] = Field(default_factory=list)
    contribution_calendar: list[ContributionDay] = Field(default_factory=list)
    total_contributions: int = 0
    streak: Streak = Field(default_factory=Streak)
    top_languages: list[Language] = Field(default_factory=list)


class UserProfile(BaseModel):
    """A user's year on GitHub, ready to be rendered as a wrapped card.

    Serialized with ``to_json_dict`` the keys are ``username``, ``name``,
    ``avatarUrl``, ``organizations``, ``contributionCalendar``,
    ``totalContributions``, ``streak`` and ``topLanguages``.
    The profile and every entry it holds are immutable.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    username: str
    name: str
    avatar_url: str = Field(default="", alias="avatarUrl")
    organizations: tuple[Organization, ...] = ()
    contribution_calendar: tuple[ContributionDay, ...] = Field(
        default=(), alias="contributionCalendar"
    )
    total_contributions: int = Field(default=0, ge=0, alias="totalContributions")
    streak: Streak = Field(default_factory=Streak)
    top_languages: tuple[Language, ...] = Field(default=(), alias="topLanguages")

    def to_json_dict(self) -> dict[str, Any]:
        """Dump using the camelCase field names consumers expect."""
        return self.model_dump(mode="json", by_alias=True)

    def without_organizations(self, logins: Iterable[str]) -> "UserProfile":
        """Return a copy with the given organizations hidden from display."""
        excluded = {login.lower() for login in logins}
        kept = tuple(
            org for org in self.organizations if org.login.lower() not in excluded
        )
        return self.model_copy(update={"organizations": kept})

    @property
    def podium(self) -> list[Language]:
        """Top three languages; shorter when fewer languages were found."""
        return list(self.top_languages[:3])
