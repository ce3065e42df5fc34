"""
Custom exceptions for StackMatch.

Scoring and ranking are total functions and never raise. The exceptions
below only guard the configuration seams: looking up a ranker for a catalog
kind and selecting a scoring regime. All of them inherit from
StackMatchBaseException.

Example:
    try:
        ranker = factory.create("plugins")
    except UnknownCatalogKindError as e:
        logger.error(f"Ranker lookup failed: {e}")
"""

from typing import Iterable, Optional


class StackMatchBaseException(Exception):
    """
    Base exception class for all StackMatch errors.

    Attributes:
        message: Human-readable description of the error.
        details: Optional additional context for debugging.
    """

    def __init__(self, message: str, details: Optional[str] = None) -> None:
        """
        Initialize the base exception.

        Args:
            message: Human-readable description of the error.
            details: Optional additional context for debugging.
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation with optional details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class UnknownCatalogKindError(StackMatchBaseException):
    """
    Exception raised when no ranker exists for a catalog kind.

    Attributes:
        kind: The catalog kind that was requested.
        valid_kinds: The kinds that are currently registered.
    """

    def __init__(
        self,
        kind: str,
        valid_kinds: Iterable[str] = (),
        details: Optional[str] = None,
    ) -> None:
        self.kind = kind
        self.valid_kinds = [str(k) for k in valid_kinds]

        message = f"[RankerFactory] Unknown catalog kind: '{kind}'"
        if self.valid_kinds:
            message = f"{message}. Valid kinds are: {self.valid_kinds}"

        super().__init__(message, details)


class ScoringConfigurationError(StackMatchBaseException):
    """
    Exception raised when a scoring regime cannot be resolved.

    Attributes:
        mode: The scoring mode value that was rejected.
    """

    def __init__(
        self,
        mode: object,
        details: Optional[str] = None,
    ) -> None:
        self.mode = mode
        super().__init__(
            f"[Scorer] Unknown scoring mode: '{mode}' (expected 'improved' or 'legacy')",
            details,
        )
