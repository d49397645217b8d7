from .user_validation import (
    EMAIL_PATTERN,
    MAX_AGE,
    MIN_AGE,
    ValidRecord,
    validate_for_create,
    validate_for_update,
)

__all__ = [
    "EMAIL_PATTERN",
    "MAX_AGE",
    "MIN_AGE",
    "ValidRecord",
    "validate_for_create",
    "validate_for_update",
]
