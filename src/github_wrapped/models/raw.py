"""Models mirroring the GraphQL ``user`` object returned by GitHub.

GitHub returns ``null`` for many nested fields (no organizations, a user with no
repositories, a language without a color). Every ``from_graphql`` constructor
here treats a missing or ``null`` value as an empty collection, zero or ``None``
so the aggregation code never has to.
"""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field


class OrganizationNode(BaseModel):
    """Organization the user is a declared member of."""

    login: str
    name: str | None = None
    avatar_url: str = ""

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "OrganizationNode":
        """Create from GraphQL response."""
        return cls(
            login=data.get("login") or "",
            name=data.get("name"),
            avatar_url=data.get("avatarUrl") or "",
        )


class CalendarDay(BaseModel):
    """Single day of the contribution calendar as GitHub reports it."""

    date: date
    contribution_count: int = 0
    contribution_level: str = "NONE"  # NONE, FIRST_QUARTILE, ..., FOURTH_QUARTILE

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "CalendarDay":
        """Create from GraphQL response."""
        return cls(
            date=date.fromisoformat(data["date"]),
            contribution_count=data.get("contributionCount") or 0,
            contribution_level=data.get("contributionLevel") or "NONE",
        )


class ContributionWeek(BaseModel):
    """Week of contribution days."""

    days: list[CalendarDay] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "ContributionWeek":
        """Create from GraphQL response."""
        days = [
            CalendarDay.from_graphql(day)
            for day in data.get("contributionDays") or []
            if day
        ]
        return cls(days=days)


class RepositoryOwner(BaseModel):
    """Owner (user or organization) of a repository."""

    login: str
    avatar_url: str = ""


class RepositoryContribution(BaseModel):
    """Pull request or issue contributions grouped under one repository."""

    repository_name: str
    owner: RepositoryOwner
    total_count: int = 0

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "RepositoryContribution":
        """Create from a ``*ContributionsByRepository`` entry."""
        repository = data.get("repository") or {}
        owner = repository.get("owner") or {}
        contributions = data.get("contributions") or {}
        return cls(
            repository_name=repository.get("name") or "",
            owner=RepositoryOwner(
                login=owner.get("login") or "",
                avatar_url=owner.get("avatarUrl") or "",
            ),
            total_count=contributions.get("totalCount") or 0,
        )


class LanguageEdge(BaseModel):
    """Bytes of code written in one language inside one repository."""

    name: str
    color: str | None = None
    size: int = 0

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "LanguageEdge":
        """Create from a ``languages.edges`` entry."""
        node = data.get("node") or {}
        return cls(
            name=node.get("name") or "",
            color=node.get("color"),
            size=data.get("size") or 0,
        )


class OwnedRepository(BaseModel):
    """Repository owned by the user, with its language breakdown."""

    stargazer_count: int = 0
    primary_language: str | None = None
    languages: list[LanguageEdge] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "OwnedRepository":
        """Create from GraphQL response."""
        primary = data.get("primaryLanguage") or {}
        languages = data.get("languages") or {}
        return cls(
            stargazer_count=data.get("stargazerCount") or 0,
            primary_language=primary.get("name"),
            languages=[
                LanguageEdge.from_graphql(edge)
                for edge in languages.get("edges") or []
                if edge
            ],
        )


class RawUser(BaseModel):
    """The ``data.user`` object of the wrapped query."""

    name: str | None = None
    avatar_url: str = ""
    organizations: list[OrganizationNode] = Field(default_factory=list)
    total_contributions: int = 0
    weeks: list[ContributionWeek] = Field(default_factory=list)
    pull_request_contributions: list[RepositoryContribution] = Field(default_factory=list)
    issue_contributions: list[RepositoryContribution] = Field(default_factory=list)
    repositories: list[OwnedRepository] = Field(default_factory=list)

    @classmethod
    def from_graphql(cls, data: dict[str, Any]) -> "RawUser":
        """Create from the GraphQL ``user`` object."""
        organizations = data.get("organizations") or {}
        collection = data.get("contributionsCollection") or {}
        calendar = collection.get("contributionCalendar") or {}
        repositories = data.get("repositories") or {}

        return cls(
            name=data.get("name"),
            avatar_url=data.get("avatarUrl") or "",
            organizations=[
                OrganizationNode.from_graphql(org)
                for org in organizations.get("nodes") or []
                if org
            ],
            total_contributions=calendar.get("totalContributions") or 0,
            weeks=[
                ContributionWeek.from_graphql(week)
                for week in calendar.get("weeks") or []
                if week
            ],
            pull_request_contributions=[
                RepositoryContribution.from_graphql(entry)
                for entry in collection.get("pullRequestContributionsByRepository") or []
                if entry
            ],
            issue_contributions=[
                RepositoryContribution.from_graphql(entry)
                for entry in collection.get("issueContributionsByRepository") or []
                if entry
            ],
            repositories=[
                OwnedRepository.from_graphql(repo)
                for repo in repositories.get("nodes") or []
                if repo
            ],
        )
