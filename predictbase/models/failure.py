"""
Failure classification for PredictBase.

Known failures carry a kind, a user-appropriate message, and optional
detail/suggestion so a view can explain what went wrong.

Failures only happen at the edges (catalog loading, entity lookup).
Filtering and pagination are total and never raise.
An empty result is NOT a failure.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"

    # Constraint violations
    VALIDATION_FAILED = "validation_failed"

    # Internal errors
    INVARIANT_VIOLATION = "invariant_violation"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail for display."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class CatalogError(KnownError):
    """Raised when catalog data cannot be loaded or violates an invariant."""

    def __init__(
        self,
        message: str,
        detail: str | None = None,
        kind: FailureKind = FailureKind.VALIDATION_FAILED,
    ):
        super().__init__(
            kind=kind,
            message=message,
            detail=detail,
            suggestion="Check the catalog data files for missing or malformed records.",
        )
