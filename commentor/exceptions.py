"""Exception hierarchy for Commentor.

All exceptions inherit from CommentorError so that the batch fixer and the
project runner can isolate a failing unit without aborting the others.
"""


class CommentorError(Exception):
    """Base exception for all Commentor errors."""


class MalformedFindingError(CommentorError):
    """Raised when a finding's properties cannot be rendered (missing summary, bad parameter key)."""


class UnresolvedLocationError(CommentorError):
    """Raised when a finding's location does not resolve to a declaration in the document."""


class SourceParseError(CommentorError):
    """Raised when a source file is unsupported or cannot be decoded."""
