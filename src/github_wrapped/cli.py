"""CLI interface for GitHub Wrapped."""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from github_wrapped import __version__
from github_wrapped.config import get_config
from github_wrapped.exceptions import GitHubWrappedError
from github_wrapped.output.console import Console as OutputConsole
from github_wrapped.output.json_writer import write_json_profile
from github_wrapped.sdk import GitHubWrapped

app = typer.Typer(
    name="github-wrapped",
    help="Summarize a GitHub user's year of activity",
    add_completion=False,
)

console = Console()


def version_callback(value: bool):
    """Print version and exit."""
    if value:
        console.print(f"github-wrapped version {__version__}")
        raise typer.Exit()


def setup_logging(verbose: bool = False):
    """Route library logging through rich."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """GitHub Wrapped - A user's year on GitHub in one summary."""
    pass


@app.command()
def wrapped(
    username: str = typer.Argument(..., help="GitHub username"),
    year: Optional[int] = typer.Option(
        None,
        "--year",
        "-y",
        help="Year to summarize (default: 2025)",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output JSON file path",
    ),
    exclude_org: Optional[list[str]] = typer.Option(
        None,
        "--exclude-org",
        "-x",
        help="Hide an organization from the card (repeatable)",
    ),
    summary_only: bool = typer.Option(
        False,
        "--summary-only",
        help="Print the card only, don't save JSON",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Verbose output",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Minimal output",
    ),
):
    """Build a user's wrapped card for a year.

    Examples:
        github-wrapped wrapped torvalds
        github-wrapped wrapped torvalds --year 2024 --summary-only
        github-wrapped wrapped torvalds -x some-org -o card.json
    """
    setup_logging(verbose)
    config = get_config()

    if not config.is_authenticated:
        console.print(
            "[red]No GitHub token found.[/red] "
            "Set GITHUB_TOKEN environment variable; the GraphQL API requires one."
        )
        raise typer.Exit(1)

    if year is None:
        year = config.default_year

    try:
        asyncio.run(
            _run_wrapped(
                username=username,
                year=year,
                output_path=output,
                excluded_orgs=exclude_org or [],
                summary_only=summary_only,
                verbose=verbose,
                quiet=quiet,
            )
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled[/yellow]")
        raise typer.Exit(1)
    except GitHubWrappedError as e:
        console.print(f"[red]Error: {e}[/red]")
        if verbose:
            console.print_exception()
        raise typer.Exit(1)


async def _run_wrapped(
    username: str,
    year: int,
    output_path: Optional[Path],
    excluded_orgs: list[str],
    summary_only: bool,
    verbose: bool,
    quiet: bool,
):
    """Fetch the profile and render it."""
    output_console = OutputConsole(verbose=verbose, quiet=quiet)

    async with GitHubWrapped.from_config(get_config()) as client:
        with output_console.create_progress() as progress:
            progress.add_task(f"Fetching {year} for {username}...", total=None)
            profile = await client.get_wrapped(username, year=year)

    output_console.print_card(profile.without_organizations(excluded_orgs), year)

    if not summary_only:
        # The saved profile is never filtered
        output_file = write_json_profile(profile, year, output_path)
        output_console.print_output_path(str(output_file))

    output_console.print_success("\nDone!")


@app.command()
def check_token():
    """Check GitHub token configuration."""
    config = get_config()

    if config.is_authenticated:
        console.print("[green]GitHub token is configured[/green]")
        console.print(f"GraphQL endpoint: {config.github_graphql_url}")
    else:
        console.print("[yellow]No GitHub token configured[/yellow]")
        console.print("GraphQL API: Not available")
        console.print()
        console.print("To configure a token:")
        console.print("  export GITHUB_TOKEN=your_token_here")
        console.print()
        console.print("Create a token at: https://github.com/settings/tokens")
        console.print("No special scopes needed for public data access.")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host", help="Bind address"),
    port: int = typer.Option(8000, "--port", "-p", help="Bind port"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose output"),
):
    """Serve wrapped profiles over HTTP at /wrapped/{username}."""
    import uvicorn

    setup_logging(verbose)
    uvicorn.run("github_wrapped.api:app", host=host, port=port)


if __name__ == "__main__":
    app()
