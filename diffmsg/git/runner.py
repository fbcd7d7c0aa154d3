"""Git command runner and repository utilities.

Contains:
- run_git_command: Run a git command and return its raw output
- is_git_repository: Check whether the working directory is inside a work tree
"""

import subprocess

import typer

from diffmsg.config import DEFAULT_GIT_COMMAND
from diffmsg.git.exceptions import GitError, SourceCommandFailedError


def run_git_command(args: list[str], git_command: str = DEFAULT_GIT_COMMAND) -> str:
    """Run a git command and return its output.

    The output is returned exactly as git wrote it; callers that need it
    trimmed must do so themselves.

    Args:
        args: List of arguments to pass to git.
        git_command: The git executable to invoke.

    Returns:
        The stdout of the git command.

    Raises:
        SourceCommandFailedError: If git exits with a non-zero status.
        GitError: If the git executable cannot be launched.
    """
    typer.echo(f"Running git command: {' '.join([git_command] + args)}", err=True)

    try:
        result = subprocess.run(
            [git_command] + args,
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=True,
        )
        return result.stdout
    except subprocess.CalledProcessError as e:
        raise SourceCommandFailedError(e.stderr or "") from e
    except FileNotFoundError as e:
        raise GitError(f"Git is not installed or not found at: {git_command}") from e


def is_git_repository(git_command: str = DEFAULT_GIT_COMMAND) -> bool:
    """Check if the current directory is inside a git work tree.

    Args:
        git_command: The git executable to invoke.

    Returns:
        True if git reports a work tree, False on any failure.
    """
    try:
        result = subprocess.run(
            [git_command, "rev-parse", "--is-inside-work-tree"],
            capture_output=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError:
        return False
    return result.returncode == 0
