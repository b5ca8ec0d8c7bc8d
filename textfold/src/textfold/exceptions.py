"""Exception hierarchy for textfold."""
from __future__ import annotations


class TextfoldError(Exception):
    """Base exception for textfold"""


class InvalidInputError(TextfoldError):
    """Raised when input falls outside the documented domain of a transform"""


class EncodingModeError(TextfoldError):
    """Raised when an interpretation encoding cannot be resolved"""


__all__ = ["TextfoldError", "InvalidInputError", "EncodingModeError"]
