"""
Field-level validation for user records.

Both entry points are pure: they look only at the candidate mapping and
return either a ValidRecord holding the accepted fields or the first
ValidationError found (checked in the order name, email, age). Fields
outside the schema are dropped.
"""

# Standard library imports
import re
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Union

# Local application imports
from ..constants import UserFields
from ..errors import ValidationError


# Matched with fullmatch; the store validator anchors the same body
EMAIL_PATTERN = re.compile(r"[\w.-]+@([\w-]+\.)+[\w-]{2,4}", re.ASCII)
MIN_AGE = 18
MAX_AGE = 120


@dataclass(frozen=True)
class ValidRecord:
    """Fields that passed validation, keyed by UserFields names"""
    fields: Dict[str, Any] = field(default_factory=dict)


def _check_name(value: Any) -> Optional[ValidationError]:
    if not isinstance(value, str) or not value.strip():
        return ValidationError(message="Name must be a non-empty string", field=UserFields.NAME)
    return None


def _check_email(value: Any) -> Optional[ValidationError]:
    if not isinstance(value, str) or not EMAIL_PATTERN.fullmatch(value):
        return ValidationError(message="Please enter a valid email", field=UserFields.EMAIL)
    return None


def _check_age(value: Any) -> Optional[ValidationError]:
    """Only JSON integers are ages; true and false are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return ValidationError(message="Age must be an integer", field=UserFields.AGE)
    if value < MIN_AGE:
        return ValidationError(message=f"Age must be at least {MIN_AGE}", field=UserFields.AGE)
    if value > MAX_AGE:
        return ValidationError(message=f"Age must be at most {MAX_AGE}", field=UserFields.AGE)
    return None


_FIELD_CHECKS: Tuple[Tuple[str, Callable[[Any], Optional[ValidationError]]], ...] = (
    (UserFields.NAME, _check_name),
    (UserFields.EMAIL, _check_email),
    (UserFields.AGE, _check_age),
)


def _validate(candidate: Any, partial: bool) -> Union[ValidRecord, ValidationError]:
    if not isinstance(candidate, Mapping):
        return ValidationError(message="Request body must be a JSON object", field="body")

    accepted: Dict[str, Any] = {}
    for field_name, check in _FIELD_CHECKS:
        if field_name not in candidate:
            if partial:
                continue
            return ValidationError(
                message=f"{field_name.capitalize()} is required",
                field=field_name,
            )
        error = check(candidate[field_name])
        if error is not None:
            return error
        accepted[field_name] = candidate[field_name]

    return ValidRecord(fields=accepted)


def validate_for_create(candidate: Any) -> Union[ValidRecord, ValidationError]:
    """
    Validate a full user record before creation

    Args:
        candidate: Decoded request body

    Returns:
        ValidRecord with name, email and age, or the first ValidationError
    """
    return _validate(candidate, partial=False)


def validate_for_update(candidate: Any) -> Union[ValidRecord, ValidationError]:
    """
    Validate the fields present in a partial update

    Absent fields are not required and are left out of the ValidRecord,
    so the merge keeps their stored values. An empty candidate is valid.
    """
    return _validate(candidate, partial=True)
