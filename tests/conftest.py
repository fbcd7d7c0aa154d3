"""Shared test fixtures and configuration."""

import subprocess
from unittest.mock import MagicMock

import pytest

from diffmsg.config import Settings


@pytest.fixture
def sample_diff():
    """Sample staged diff for testing."""
    return """diff --git a/existing_file.py b/existing_file.py
index 1234567..abcdefg 100644
--- a/existing_file.py
+++ b/existing_file.py
@@ -1,5 +1,8 @@
 def main():
-    print("old")
+    print("new")
+
+def helper():
+    return True
"""


@pytest.fixture
def settings():
    """Settings with credentials for every provider."""
    return Settings(openai_api_key="sk-test", google_api_key="google-test")


@pytest.fixture
def empty_settings():
    """Settings with no credentials."""
    return Settings()


@pytest.fixture
def completed_process():
    """Factory for subprocess.run results."""

    def _make(stdout: str = "", returncode: int = 0) -> MagicMock:
        result = MagicMock()
        result.stdout = stdout
        result.stderr = ""
        result.returncode = returncode
        return result

    return _make


@pytest.fixture
def git_failure():
    """Factory for the error subprocess.run raises when git exits non-zero."""

    def _make(stderr: str, returncode: int = 128) -> subprocess.CalledProcessError:
        return subprocess.CalledProcessError(returncode, "git", output="", stderr=stderr)

    return _make


@pytest.fixture
def mock_git_commands(mocker):
    """Mock subprocess.run for git commands."""
    mock_run = mocker.patch("subprocess.run")
    return mock_run
