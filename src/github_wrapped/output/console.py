"""Rich console rendering of a wrapped profile."""

from rich.console import Console as RichConsole
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from github_wrapped.models.profile import UserProfile

PODIUM_PLACES = ("1st", "2nd", "3rd")


class Console:
    """Wrapper for rich console output."""

    def __init__(self, verbose: bool = False, quiet: bool = False):
        self.console = RichConsole()
        self.verbose = verbose
        self.quiet = quiet

    def print(self, *args, **kwargs):
        """Print to console (respects quiet mode)."""
        if not self.quiet:
            self.console.print(*args, **kwargs)

    def print_error(self, message: str):
        """Print error message."""
        self.console.print(f"[red]Error:[/red] {message}")

    def print_warning(self, message: str):
        """Print warning message."""
        self.console.print(f"[yellow]Warning:[/yellow] {message}")

    def print_success(self, message: str):
        """Print success message."""
        if not self.quiet:
            self.console.print(f"[green]{message}[/green]")

    def create_progress(self) -> Progress:
        """Create a spinner for the upstream request."""
        return Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=self.console,
            transient=True,
            disable=self.quiet,
        )

    def print_header(self, profile: UserProfile, year: int):
        """Print the card header."""
        if self.quiet:
            return

        subtitle = profile.username
        if profile.name != profile.username:
            subtitle = f"{profile.name} (@{profile.username})"
        self.console.print()
        self.console.print(
            Panel(
                f"[bold blue]GitHub Wrapped {year}[/bold blue]\n[dim]{subtitle}[/dim]",
                expand=False,
            )
        )
        self.console.print()

    def print_contribution_summary(self, profile: UserProfile):
        """Print totals and streaks."""
        if self.quiet:
            return

        active_days = sum(1 for day in profile.contribution_calendar if day.count > 0)

        table = Table(title="Contributions", show_header=False, expand=False)
        table.add_column("Metric", style="dim")
        table.add_column("Value")

        table.add_row("Total", str(profile.total_contributions))
        table.add_row("Active Days", str(active_days))
        table.add_row("Current Streak", f"{profile.streak.current} days")
        table.add_row("Longest Streak", f"{profile.streak.longest} days")

        self.console.print(table)
        self.console.print()

    def print_languages(self, profile: UserProfile):
        """Print the language podium and the full top list."""
        if self.quiet:
            return

        if not profile.top_languages:
            self.console.print("[dim]No languages found[/dim]")
            self.console.print()
            return

        podium = "   ".join(
            f"[bold]{place}[/bold] {lang.name}"
            for place, lang in zip(PODIUM_PLACES, profile.podium)
        )
        self.console.print(podium)
        self.console.print()

        table = Table(title="Top Languages", expand=False)
        table.add_column("Language")
        table.add_column("Bytes", justify="right")
        table.add_column("Share", justify="right")

        for lang in profile.top_languages:
            name = f"[{lang.color}]●[/] {lang.name}" if lang.color else lang.name
            table.add_row(name, f"{lang.size:,}", f"{lang.percentage:.1f}%")

        self.console.print(table)
        self.console.print()

    def print_organizations(self, profile: UserProfile):
        """Print organizations contributed to."""
        if self.quiet or not profile.organizations:
            return

        table = Table(title="Contributed To", expand=False)
        table.add_column("Organization")
        table.add_column("PRs", justify="right")
        table.add_column("Issues", justify="right")
        table.add_column("Repositories")

        for org in profile.organizations:
            table.add_row(
                org.name or org.login,
                str(org.total_prs),
                str(org.total_issues),
                ", ".join(org.repos) or "-",
            )

        self.console.print(table)
        self.console.print()

    def print_card(self, profile: UserProfile, year: int):
        """Print the complete wrapped card."""
        if self.quiet:
            return

        self.print_header(profile, year)
        self.print_contribution_summary(profile)
        self.print_languages(profile)
        self.print_organizations(profile)

    def print_output_path(self, path: str):
        """Print output file path."""
        if not self.quiet:
            self.console.print(f"\n[green]Profile saved to:[/green] {path}")
