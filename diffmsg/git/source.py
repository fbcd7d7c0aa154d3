"""Diff source selectors.

A selector names which diff to send to the LLM:

- ``staged``         changes in the index (``git diff --cached``)
- ``last``           the latest commit (``git show HEAD``)
- ``commit:<hash>``  a specific commit (``git show <hash>``)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from diffmsg.config import DEFAULT_GIT_COMMAND
from diffmsg.git.exceptions import InvalidSelectorError
from diffmsg.git.runner import run_git_command

COMMIT_PREFIX = "commit:"

VALID_SELECTORS = "staged, last, commit:<hash>"


class SourceKind(Enum):
    """The kinds of diff source."""

    STAGED = "staged"
    LAST = "last"
    COMMIT = "commit"


@dataclass(frozen=True)
class DiffSource:
    """A parsed diff source selector."""

    kind: SourceKind
    ref: Optional[str] = None

    def git_args(self) -> list[str]:
        """Build the git arguments that produce this source's diff."""
        if self.kind == SourceKind.STAGED:
            return ["diff", "--cached"]
        if self.kind == SourceKind.LAST:
            return ["show", "HEAD"]
        return ["show", self.ref]


def parse_source(selector: str) -> DiffSource:
    """Parse a diff source selector.

    For ``commit:<hash>`` the hash is the segment after the first colon and
    before any further colon, so ``commit:a:b`` selects ``a``.

    Args:
        selector: The user-supplied selector string.

    Returns:
        The parsed DiffSource.

    Raises:
        InvalidSelectorError: If the selector is not one of the known forms.
    """
    if selector == SourceKind.STAGED.value:
        return DiffSource(SourceKind.STAGED)
    if selector == SourceKind.LAST.value:
        return DiffSource(SourceKind.LAST)
    if selector.startswith(COMMIT_PREFIX):
        return DiffSource(SourceKind.COMMIT, ref=selector.split(":")[1])

    raise InvalidSelectorError(
        f"Invalid source: {selector}. Valid sources: {VALID_SELECTORS}"
    )


def get_diff(
    source: Union[str, DiffSource],
    git_command: str = DEFAULT_GIT_COMMAND,
) -> str:
    """Fetch the diff text for a source.

    Empty output is not an error here; the caller decides what to do with it.

    Args:
        source: A selector string or an already parsed DiffSource.
        git_command: The git executable to invoke.

    Returns:
        The raw diff text, unmodified.

    Raises:
        InvalidSelectorError: If a selector string is not recognized.
        SourceCommandFailedError: If git exits with a non-zero status.
        GitError: If git cannot be launched.
    """
    if isinstance(source, str):
        source = parse_source(source)
    return run_git_command(source.git_args(), git_command=git_command)
