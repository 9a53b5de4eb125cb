from __future__ import annotations


class EssayCheckerError(RuntimeError):
    """Base class for errors raised by the essay checker engine."""


class InputTooShortError(EssayCheckerError):
    """Raised when the text is too short to analyze."""

    def __init__(self, length: int, minimum: int) -> None:
        super().__init__(
            f"Please enter at least {minimum} characters for a proper analysis "
            f"(got {length})."
        )
        self.length = length
        self.minimum = minimum


class PositionOutOfRange(EssayCheckerError):
    """Raised when an issue's stored position no longer fits the document."""

    def __init__(self, issue_id: str, reason: str) -> None:
        super().__init__(f"Cannot apply issue {issue_id!r}: {reason}")
        self.issue_id = issue_id
        self.reason = reason


class IssueNotFoundError(EssayCheckerError, KeyError):
    """Raised when an issue id is not part of the current analysis."""

    def __init__(self, issue_id: str) -> None:
        super().__init__(f"No issue with id {issue_id!r} in the current analysis.")
        self.issue_id = issue_id

    def __str__(self) -> str:
        return str(self.args[0])


class InvalidOptionError(EssayCheckerError, ValueError):
    """Raised when an analysis option is outside its closed set of values."""
