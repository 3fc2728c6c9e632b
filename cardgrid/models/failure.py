"""
Failure Envelope — Render Outcome Classification.

This module defines the response envelope that every HTTP endpoint uses to
report a render outcome, and the exception hierarchy the renderer raises.

Error kinds:
- DimensionMismatchError: a block of text is not the required width x height
- FieldTooLongError: card text would overflow its fixed place on the card
- InternalConsistencyError: the grid constants no longer add up (a defect)

The first two are KnownErrors: deterministic, explainable, not retryable.
The third is deliberately NOT a KnownError. It must fail loudly and is never
converted into an ordinary response.

AUTHORITY BOUNDARY:
All user-visible responses MUST pass through `finalize_response()`.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, PrivateAttr


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Constraint violations
    DIMENSION_MISMATCH = "dimension_mismatch"
    FIELD_TOO_LONG = "field_too_long"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    KNOWN_FAILURE = "known_failure"


T = TypeVar("T")


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


class ApiResponse(BaseModel, Generic[T]):
    """
    Universal response envelope for all API endpoints.

    Every response is either a success or a known failure.
    """

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    # Set only by finalize_response(); not part of the serialized envelope
    _finalized: bool = PrivateAttr(default=False)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Re-running the same input reproduces the same error, so nothing
    catching a KnownError should retry.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 422,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to a finalized ApiResponse."""
        response: ApiResponse[Any] = ApiResponse(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            ),
        )
        return finalize_response(response)


class DimensionMismatchError(KnownError):
    """
    Raised when a text block is not exactly the required width x height.

    Full card composition normalizes art first, so in practice this is only
    reachable through standalone dimension validation.
    """

    def __init__(
        self,
        message: str,
        expected_width: int,
        expected_height: int,
        actual_width: int,
        actual_height: int,
    ):
        self.expected_width = expected_width
        self.expected_height = expected_height
        self.actual_width = actual_width
        self.actual_height = actual_height
        super().__init__(
            kind=FailureKind.DIMENSION_MISMATCH,
            message=message,
            detail=(
                f"expected {expected_width}x{expected_height}, "
                f"got {actual_width}x{actual_height}"
            ),
            suggestion="This art cannot be used as supplied. Regenerate it at the required size.",
        )


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """
    One card field that breaks its limit.

    Attributes:
        field: Card field name (e.g., "agent_name")
        limit: The maximum allowed
        unit: What the limit counts ("characters", "words", "columns", "lines")
        actual: What the field measured
    """

    field: str
    limit: int
    unit: str
    actual: int

    def describe(self) -> str:
        return f"{self.field} exceeds {self.limit} {self.unit} (got {self.actual})"


class FieldTooLongError(KnownError):
    """
    Raised before composition when card text would not fit the card.

    Carries EVERY violation, not just the first. Card text is never
    silently truncated to make it fit.
    """

    def __init__(self, violations: list[FieldViolation]):
        self.violations = tuple(violations)
        summary = "; ".join(v.describe() for v in self.violations)
        super().__init__(
            kind=FailureKind.FIELD_TOO_LONG,
            message=f"Card field validation failed: {summary}",
            detail=", ".join(self.fields),
            suggestion="Shorten the listed fields and try again.",
        )

    @property
    def fields(self) -> tuple[str, ...]:
        """Names of the offending fields, in validation order, without repeats."""
        return tuple(dict.fromkeys(v.field for v in self.violations))


class InternalConsistencyError(AssertionError):
    """
    Raised when a composed card does not match the grid contract.

    This signals a defect in the grid constants, not bad data.
    It must never be caught and turned into a normal response.
    """

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Card composition error: expected {expected}, got {actual}")


# =============================================================================
# FAILURE AUTHORITY BOUNDARY
# =============================================================================
#
# All user-visible responses MUST pass through this boundary.
#
# =============================================================================


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response through the authority boundary.

    Args:
        response: The ApiResponse to finalize

    Returns:
        The same response, marked as having passed through the boundary

    Raises:
        ValueError: If response structure is invalid
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")

    response._finalized = True

    return response


def is_finalized(response: ApiResponse[Any]) -> bool:
    """Check if a response has passed through the authority boundary."""
    return response._finalized


def create_success(data: T) -> ApiResponse[T]:
    """Create a finalized success response."""
    response = ApiResponse[T](outcome=OutcomeType.SUCCESS, data=data)
    return finalize_response(response)
