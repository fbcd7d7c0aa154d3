"""Main CLI command for generating commit messages."""

import typer

from diffmsg.config import DEFAULT_PROVIDER, DEFAULT_SOURCE, load_settings
from diffmsg.exceptions import DiffmsgError
from diffmsg.git import get_diff, is_git_repository, parse_source
from diffmsg.llm import get_provider, parse_provider
from diffmsg.cli.utils import render_commit_command, version_callback


def main_command(
    ai: str = typer.Option(
        DEFAULT_PROVIDER.value,
        "--ai",
        metavar="PROVIDER",
        help="Select AI provider (openai, claude, google)",
    ),
    source: str = typer.Option(
        DEFAULT_SOURCE,
        "--source",
        metavar="SOURCE",
        help="Specify the source of changes (staged, commit:<hash>, last)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the diff alongside the message",
    ),
    command: bool = typer.Option(
        False,
        "--command",
        "-c",
        help="Output the full git commit command",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Generate an AI-suggested git commit message from a diff."""
    try:
        # Step 1: Validate options before touching the repository
        provider = parse_provider(ai)
        diff_source = parse_source(source)
        settings = load_settings()

        # Step 2: Outside a repository there is nothing to do
        if not is_git_repository(settings.git_command):
            typer.echo("Not a Git repository.", err=True)
            return

        # Step 3: Build the provider (checks credentials)
        llm = get_provider(provider, settings)

        # Step 4: Fetch the diff
        diff = get_diff(diff_source, git_command=settings.git_command)
        if not diff.strip():
            typer.echo("No changes to generate a message for.")
            return

        if verbose:
            typer.echo("Original Diff:")
            typer.echo(diff)

        # Step 5: Generate and print the message
        message = llm.generate_message(diff)
        typer.echo("Suggested Commit Message:")
        typer.echo(message)

        if command:
            typer.echo("")
            typer.echo("Run the following command to commit:")
            typer.echo(render_commit_command(message))

    except DiffmsgError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
