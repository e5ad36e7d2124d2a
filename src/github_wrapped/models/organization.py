"""Organization model."""

from pydantic import BaseModel, ConfigDict, Field

from github_wrapped.models.raw import OrganizationNode, RepositoryOwner


class Organization(BaseModel):
    """Organization the user belongs to or contributed to during the year.

    Entries are immutable. Folding a contribution record in returns an updated
    copy, so a profile handed out never changes underneath its holder.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    login: str
    name: str | None = None
    avatar_url: str = Field(default="", alias="avatarUrl")
    total_prs: int = Field(default=0, ge=0, alias="totalPRs")
    total_issues: int = Field(default=0, ge=0, alias="totalIssues")
    repos: tuple[str, ...] = ()

    @classmethod
    def from_membership(cls, node: OrganizationNode) -> "Organization":
        """Seed an entry from a declared membership."""
        return cls(login=node.login, name=node.name, avatar_url=node.avatar_url)

    @classmethod
    def from_owner(cls, owner: RepositoryOwner) -> "Organization":
        """Create an entry for an owner only seen in contribution records."""
        return cls(login=owner.login, name=owner.login, avatar_url=owner.avatar_url)

    def _with_repo(self, repo_name: str) -> tuple[str, ...]:
        if repo_name in self.repos:
            return self.repos
        return (*self.repos, repo_name)

    def record_pull_requests(self, repo_name: str, count: int) -> "Organization":
        """Fold a pull-request-contributions-by-repository record in."""
        return self.model_copy(
            update={"total_prs": self.total_prs + count, "repos": self._with_repo(repo_name)}
        )

    def record_issues(self, repo_name: str, count: int) -> "Organization":
        """Fold an issue-contributions-by-repository record in."""
        return self.model_copy(
            update={"total_issues": self.total_issues + count, "repos": self._with_repo(repo_name)}
        )
