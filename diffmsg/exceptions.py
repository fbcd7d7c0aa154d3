"""Root exception for diffmsg.

Every failure that should end a run with ``Error: <message>`` derives from
DiffmsgError, either through the git family (diffmsg.git.exceptions) or the
LLM family (diffmsg.llm.exceptions).
"""


class DiffmsgError(Exception):
    """Base exception for all diffmsg errors."""

    pass
