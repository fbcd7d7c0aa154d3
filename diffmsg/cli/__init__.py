"""CLI entry point for diffmsg."""

import typer

from diffmsg.cli.main import main_command

app = typer.Typer(
    name="diffmsg",
    help="diffmsg: AI-suggested git commit messages",
    add_completion=False,
)

app.command(context_settings={"help_option_names": ["-h", "--help"]})(main_command)


__all__ = [
    "app",
    "main_command",
]
