"""
Error values for the user service core.

The validation layer, the repository and the use cases return these values
instead of raising. The HTTP layer is the only place that turns them into
status codes (see api/v1/errors.py).
"""

# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True)
class UserError:
    """Base error value. `message` is safe to show to API clients."""
    message: str


@dataclass(frozen=True)
class ValidationError(UserError):
    """A field is missing or malformed."""
    field: str = ""

    @property
    def reason(self) -> str:
        return self.message


@dataclass(frozen=True)
class ConstraintError(UserError):
    """The store rejected a write (duplicate email, schema rule)."""
    pass


@dataclass(frozen=True)
class NotFoundError(UserError):
    """No record exists for the given identifier."""
    message: str = "User not found"


@dataclass(frozen=True)
class StoreUnavailableError(UserError):
    """Connectivity or driver fault. Details are logged, never returned."""
    message: str = "Database operation failed"
