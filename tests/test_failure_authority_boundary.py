"""
Tests for the Failure Authority Boundary.

These tests verify the core invariant:

    All user-visible responses MUST pass through the authority boundary.
    No endpoint may bypass finalize_response().

They also pin down which render errors are known failures and which
are defects that must never become an ordinary response.
"""

import pytest

from cardgrid.models import failure as failure_module
from cardgrid.models.failure import (
    ApiResponse,
    DimensionMismatchError,
    FailureDetail,
    FailureKind,
    FieldTooLongError,
    FieldViolation,
    InternalConsistencyError,
    KnownError,
    OutcomeType,
    create_success,
    finalize_response,
    is_finalized,
)


class TestFinalizeResponse:
    """Tests for the finalize_response authority boundary."""

    def test_success_response_is_finalized(self) -> None:
        """Success responses pass through the boundary."""
        response = ApiResponse(outcome=OutcomeType.SUCCESS, data={"key": "value"})
        finalized = finalize_response(response)

        assert is_finalized(finalized)
        assert finalized.outcome == OutcomeType.SUCCESS

    def test_failure_response_is_finalized(self) -> None:
        """Failure responses pass through the boundary."""
        response = ApiResponse(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(kind=FailureKind.FIELD_TOO_LONG, message="Too long"),
        )
        finalized = finalize_response(response)

        assert is_finalized(finalized)

    def test_unfinalized_response_not_marked(self) -> None:
        """Responses that bypass the boundary are detectable."""
        response = ApiResponse(outcome=OutcomeType.SUCCESS, data={"key": "value"})

        assert not is_finalized(response)

    def test_success_with_failure_raises(self) -> None:
        """Success response with failure details is invalid."""
        response = ApiResponse(
            outcome=OutcomeType.SUCCESS,
            data={"key": "value"},
            failure=FailureDetail(kind=FailureKind.DIMENSION_MISMATCH, message="oops"),
        )

        with pytest.raises(ValueError, match="must not have failure"):
            finalize_response(response)

    def test_failure_without_details_raises(self) -> None:
        """Failure response without details is invalid."""
        response = ApiResponse(outcome=OutcomeType.KNOWN_FAILURE, failure=None)

        with pytest.raises(ValueError, match="must have failure details"):
            finalize_response(response)

    def test_marker_lives_on_the_response(self) -> None:
        """Finalizing leaves no trace outside the response itself."""
        finalized = create_success({"card": "..."})

        assert is_finalized(finalized)
        assert not any(isinstance(value, set) for value in vars(failure_module).values())
        assert "_finalized" not in finalized.model_dump()

    def test_discarded_responses_do_not_mark_new_ones(self) -> None:
        """A fresh response is never finalized, however many came before it."""
        for _ in range(200):
            create_success({"card": "..."})

        fresh = ApiResponse(outcome=OutcomeType.SUCCESS, data={"card": "..."})

        assert not is_finalized(fresh)

    def test_create_success_is_finalized(self) -> None:
        response = create_success({"card": "..."})

        assert is_finalized(response)
        assert response.data == {"card": "..."}


class TestKnownErrors:
    """Render errors that are deterministic and explainable."""

    def test_dimension_mismatch(self) -> None:
        error = DimensionMismatchError("Block width is wrong", 70, 26, 69, 26)
        response = error.to_response()

        assert is_finalized(response)
        assert response.outcome == OutcomeType.KNOWN_FAILURE
        assert response.failure is not None
        assert response.failure.kind == FailureKind.DIMENSION_MISMATCH
        assert response.failure.detail == "expected 70x26, got 69x26"
        assert response.failure.suggestion is not None
        assert error.status_code == 422

    def test_field_too_long_lists_every_violation(self) -> None:
        error = FieldTooLongError(
            [
                FieldViolation("agent_name", 30, "characters", 31),
                FieldViolation("notes", 15, "words", 16),
            ]
        )

        assert error.message == (
            "Card field validation failed: "
            "agent_name exceeds 30 characters (got 31); notes exceeds 15 words (got 16)"
        )
        assert error.detail == "agent_name, notes"
        assert error.to_response().failure.kind == FailureKind.FIELD_TOO_LONG  # type: ignore[union-attr]

    def test_field_names_not_repeated(self) -> None:
        error = FieldTooLongError(
            [
                FieldViolation("notes", 15, "words", 20),
                FieldViolation("notes", 75, "columns", 80),
            ]
        )

        assert error.fields == ("notes",)
        assert len(error.violations) == 2

    @pytest.mark.parametrize("error_type", [DimensionMismatchError, FieldTooLongError])
    def test_known_errors(self, error_type: type) -> None:
        assert issubclass(error_type, KnownError)


class TestInternalConsistencyError:
    """A broken grid contract is a defect, never a known failure."""

    def test_not_a_known_error(self) -> None:
        assert not issubclass(InternalConsistencyError, KnownError)

    def test_is_an_assertion(self) -> None:
        assert issubclass(InternalConsistencyError, AssertionError)

    def test_message(self) -> None:
        error = InternalConsistencyError("60 lines", "59 lines")
        assert str(error) == "Card composition error: expected 60 lines, got 59 lines"
