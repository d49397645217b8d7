"""
Boundary mapping from error values to HTTP responses.

Every failure leaves the API as {"error": message}. Validation and store
constraint failures are client errors; a missing record is 404; anything
the store could not complete is 500 with a generic message.
"""

# Standard library imports
from typing import Dict, Type

# External package imports
from fastapi import status
from fastapi.responses import JSONResponse

# Local application imports
from ...domain.errors import (
    ConstraintError,
    NotFoundError,
    StoreUnavailableError,
    UserError,
    ValidationError,
)


ERROR_STATUS_CODES: Dict[Type[UserError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    ConstraintError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    StoreUnavailableError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_body(message: str) -> Dict[str, str]:
    return {"error": message}


def error_response(error: UserError) -> JSONResponse:
    """
    Convert an error value into the JSON response sent to the client
    
    Args:
        error: Error value returned by a use case
        
    Returns:
        JSONResponse with the mapped status code
    """
    status_code = ERROR_STATUS_CODES.get(type(error), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status_code, content=error_body(error.message))
