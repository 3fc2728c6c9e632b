from cardgrid.models.card import (
    RARITY_MULTIPLIERS,
    STAT_FIELDS,
    STAT_LABELS,
    CardRecord,
    Rarity,
)
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
from cardgrid.models.payload import CardPayload

__all__ = [
    "ApiResponse",
    "CardPayload",
    "CardRecord",
    "DimensionMismatchError",
    "FailureDetail",
    "FailureKind",
    "FieldTooLongError",
    "FieldViolation",
    "InternalConsistencyError",
    "KnownError",
    "OutcomeType",
    "RARITY_MULTIPLIERS",
    "Rarity",
    "STAT_FIELDS",
    "STAT_LABELS",
    "create_success",
    "finalize_response",
    "is_finalized",
]
