"""Git diff source module for diffmsg.

This package provides diff retrieval with:
- exceptions: GitError, InvalidSelectorError, SourceCommandFailedError
- runner: run_git_command, is_git_repository
- source: DiffSource, SourceKind, parse_source, get_diff
"""

# Exceptions
from diffmsg.git.exceptions import (
    GitError,
    InvalidSelectorError,
    SourceCommandFailedError,
)

# Runner utilities
from diffmsg.git.runner import (
    is_git_repository,
    run_git_command,
)

# Source selectors
from diffmsg.git.source import (
    DiffSource,
    SourceKind,
    get_diff,
    parse_source,
)


__all__ = [
    # Exceptions
    "GitError",
    "InvalidSelectorError",
    "SourceCommandFailedError",
    # Runner
    "run_git_command",
    "is_git_repository",
    # Source
    "DiffSource",
    "SourceKind",
    "get_diff",
    "parse_source",
]
