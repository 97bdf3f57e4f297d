from __future__ import annotations

from typing import Optional


class QuizAuthorError(ValueError):
    """Base class for input the authoring tool refuses to accept."""


class DecodeError(QuizAuthorError):
    """Raised when JSON-mode input is not syntactically valid JSON."""

    def __init__(self, message: str, lineno: Optional[int] = None, colno: Optional[int] = None):
        super().__init__(message)
        self.lineno = lineno
        self.colno = colno


class RecordValidationError(QuizAuthorError):
    """Raised when an item handed to the question bank is not a valid quiz record."""

    def __init__(self, message: str, position: int):
        super().__init__(message)
        self.position = position


class IncompleteRecordError(QuizAuthorError):
    """Raised when a single-entry question is missing its subject, prompt, or an option."""
