"""Git-related exception classes.

Contains all exception classes for Git operations:
- GitError: Base exception for git-related errors
- InvalidSelectorError: Raised when a diff source selector is not recognized
- SourceCommandFailedError: Raised when the git query exits non-zero
"""

from diffmsg.exceptions import DiffmsgError


class GitError(DiffmsgError):
    """Custom exception for git-related errors."""

    pass


class InvalidSelectorError(GitError):
    """Raised when the diff source selector matches none of the known forms."""

    pass


class SourceCommandFailedError(GitError):
    """Raised when git exits with a non-zero status while fetching a diff."""

    def __init__(self, stderr: str):
        self.stderr = stderr
        super().__init__(f"Git command failed: {stderr.strip()}")
