"""Shared utility functions for CLI commands."""

import typer

from diffmsg import __version__


def render_commit_command(message: str) -> str:
    """Render a ready-to-run git commit command for a message.

    The message is placed inside double quotes as-is. Quotes, backticks and
    dollar signs in the message are not escaped, so the command is meant to
    be read and copied by a person, not passed to a shell unchecked.

    Args:
        message: The generated commit message.

    Returns:
        The git commit command line.
    """
    return f'git commit -m "{message}"'


def version_callback(value: bool) -> None:
    """Print the version and exit when --version is given."""
    if value:
        typer.echo(f"diffmsg {__version__}")
        raise typer.Exit()
