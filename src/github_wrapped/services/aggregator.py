"""Turn a raw GraphQL user into wrapped summary statistics.

Everything here is pure: the same input (and the same ``today``) always gives
the same output, and nothing touches the network or the clock.
"""

import logging
from collections.abc import Iterable
from datetime import date

from github_wrapped.models.contribution import ContributionDay, Streak
from github_wrapped.models.language import Language
from github_wrapped.models.organization import Organization
from github_wrapped.models.profile import WrappedSummary
from github_wrapped.models.raw import (
    ContributionWeek,
    OrganizationNode,
    OwnedRepository,
    RawUser,
    RepositoryContribution,
)

logger = logging.getLogger(__name__)

TOP_LANGUAGES_LIMIT = 5

# GitHub's ContributionLevel enum mapped onto a 0-4 heatmap scale
CONTRIBUTION_LEVELS = {
    "NONE": 0,
    "FIRST_QUARTILE": 1,
    "SECOND_QUARTILE": 2,
    "THIRD_QUARTILE": 3,
    "FOURTH_QUARTILE": 4,
}


def map_contribution_level(level: str | None) -> int:
    """Map a ContributionLevel name to 0-4; unknown names map to 0."""
    return CONTRIBUTION_LEVELS.get(level or "", 0)


def merge_organizations(
    memberships: Iterable[OrganizationNode],
    pull_request_contributions: Iterable[RepositoryContribution],
    issue_contributions: Iterable[RepositoryContribution],
) -> list[Organization]:
    """Merge declared memberships with per-repository contribution records.

    Membership alone misses drive-by contributions to organizations the user
    never joined, and the by-repository records are not grouped by owner, so
    both are folded into one mapping keyed by login.

    Ordering: memberships first (in membership order), then owners discovered
    through pull request records, then owners discovered through issue records,
    each in first-encounter order.
    """
    by_login: dict[str, Organization] = {}

    for node in memberships:
        by_login.setdefault(node.login, Organization.from_membership(node))

    for record in pull_request_contributions:
        org = _get_or_create(by_login, record)
        by_login[org.login] = org.record_pull_requests(
            record.repository_name, record.total_count
        )

    for record in issue_contributions:
        org = _get_or_create(by_login, record)
        by_login[org.login] = org.record_issues(record.repository_name, record.total_count)

    return list(by_login.values())


def _get_or_create(
    by_login: dict[str, Organization],
    record: RepositoryContribution,
) -> Organization:
    org = by_login.get(record.owner.login)
    if org is None:
        org = Organization.from_owner(record.owner)
        by_login[org.login] = org
    return org


def flatten_calendar(weeks: Iterable[ContributionWeek]) -> list[ContributionDay]:
    """Flatten weeks of days into one list, keeping the source order."""
    return [
        ContributionDay(
            date=day.date,
            count=day.contribution_count,
            level=map_contribution_level(day.contribution_level),
        )
        for week in weeks
        for day in week.days
    ]


def calculate_streaks(days: Iterable[ContributionDay], today: date) -> Streak:
    """Compute the current and longest contribution streaks.

    A streak is a run of consecutive days with a positive count; one zero day
    ends it. The current streak is the run ending on the most recent positive
    day dated today or yesterday (yesterday covers timezone skew and late-night
    commits). With no such day the current streak is 0.

    Args:
        days: Calendar days, in any order
        today: The caller's current date

    Returns:
        Streak with ``current`` and ``longest``
    """
    ordered = sorted(days, key=lambda day: day.date)

    # run_lengths[i] is the length of the positive run ending at ordered[i]
    run_lengths: list[int] = []
    running = 0
    longest = 0
    for day in ordered:
        if day.count > 0:
            running += 1
            longest = max(longest, running)
        else:
            running = 0
        run_lengths.append(running)

    current = 0
    for day, run_length in zip(reversed(ordered), reversed(run_lengths)):
        if day.count > 0 and 0 <= (today - day.date).days <= 1:
            current = run_length
            break

    return Streak(current=current, longest=longest)


def calculate_top_languages(
    repositories: Iterable[OwnedRepository],
    limit: int = TOP_LANGUAGES_LIMIT,
) -> list[Language]:
    """Rank languages by bytes of code summed across repositories.

    The first color seen for a language wins; later repositories only add to
    its size. Percentages are taken against the total of every language, not
    just the ones returned, so a truncated list does not sum to 100. Fewer
    than ``limit`` languages yields a shorter list.
    """
    sizes: dict[str, int] = {}
    colors: dict[str, str | None] = {}

    for repo in repositories:
        for edge in repo.languages:
            if edge.name in sizes:
                sizes[edge.name] += edge.size
            else:
                sizes[edge.name] = edge.size
                colors[edge.name] = edge.color

    total_size = sum(sizes.values())

    languages = [
        Language(
            name=name,
            color=colors[name],
            size=size,
            percentage=(size / total_size) * 100 if total_size else 0.0,
        )
        for name, size in sizes.items()
    ]

    # sorted() is stable, so equal sizes keep first-encounter order
    languages = sorted(languages, key=lambda lang: lang.size, reverse=True)

    return languages[:limit]


def aggregate(
    raw_user: RawUser,
    today: date,
    languages_limit: int = TOP_LANGUAGES_LIMIT,
) -> WrappedSummary:
    """Derive every wrapped statistic from a raw user.

    Args:
        raw_user: Parsed GraphQL user object
        today: Reference date for the current streak
        languages_limit: How many languages to keep

    Returns:
        WrappedSummary with organizations, calendar, totals, streak and languages
    """
    organizations = merge_organizations(
        raw_user.organizations,
        raw_user.pull_request_contributions,
        raw_user.issue_contributions,
    )
    calendar = flatten_calendar(raw_user.weeks)
    streak = calculate_streaks(calendar, today)
    top_languages = calculate_top_languages(raw_user.repositories, limit=languages_limit)

    logger.debug(
        "Aggregated %d organizations, %d days, %d languages",
        len(organizations),
        len(calendar),
        len(top_languages),
    )

    return WrappedSummary(
        organizations=organizations,
        contribution_calendar=calendar,
        total_contributions=raw_user.total_contributions,
        streak=streak,
        top_languages=top_languages,
    )
