# Standard library imports
from typing import Any, List, Union

# External package imports
from fastapi import APIRouter, Body, Depends, status
from fastapi.responses import JSONResponse

# Local application imports
from ...application.dto.user_dto import ErrorResponse, MessageResponse, UserResponse
from ...application.use_cases.user.create_user import CreateUserUseCase
from ...application.use_cases.user.list_users import ListUsersUseCase
from ...application.use_cases.user.get_user import GetUserUseCase
from ...application.use_cases.user.update_user import UpdateUserUseCase
from ...application.use_cases.user.delete_user import DeleteUserUseCase
from ...di.base_container import BaseContainer
from ...domain.errors import UserError
from .dependencies import get_container
from .errors import error_response


router = APIRouter(tags=["users"])

_CLIENT_ERROR = {"model": ErrorResponse, "description": "Validation or constraint failure"}
_NOT_FOUND = {"model": ErrorResponse, "description": "User not found"}
_SERVER_ERROR = {"model": ErrorResponse, "description": "Database failure"}


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: _CLIENT_ERROR, 500: _SERVER_ERROR},
)
async def create_user(
    payload: Any = Body(...),
    container: BaseContainer = Depends(get_container),
) -> Union[UserResponse, JSONResponse]:
    """
    Create a new user

    Args:
        payload: User JSON with name, email and age

    Returns:
        UserResponse with the generated ID
    """
    create_user_use_case = container.get(CreateUserUseCase)

    result = await create_user_use_case.execute(payload)
    if isinstance(result, UserError):
        return error_response(result)
    return result


@router.get("", response_model=List[UserResponse], responses={500: _SERVER_ERROR})
async def list_users(
    container: BaseContainer = Depends(get_container),
) -> Union[List[UserResponse], JSONResponse]:
    """List all users"""
    list_users_use_case = container.get(ListUsersUseCase)

    result = await list_users_use_case.execute()
    if isinstance(result, UserError):
        return error_response(result)
    return result


@router.get("/{user_id}", response_model=UserResponse, responses={404: _NOT_FOUND, 500: _SERVER_ERROR})
async def get_user(
    user_id: str,
    container: BaseContainer = Depends(get_container),
) -> Union[UserResponse, JSONResponse]:
    """
    Get a user by ID

    Args:
        user_id: ID of the user

    Returns:
        UserResponse with user information
    """
    get_user_use_case = container.get(GetUserUseCase)

    result = await get_user_use_case.execute(user_id)
    if isinstance(result, UserError):
        return error_response(result)
    return result


@router.put(
    "/{user_id}",
    response_model=UserResponse,
    responses={400: _CLIENT_ERROR, 404: _NOT_FOUND, 500: _SERVER_ERROR},
)
async def update_user(
    user_id: str,
    payload: Any = Body(...),
    container: BaseContainer = Depends(get_container),
) -> Union[UserResponse, JSONResponse]:
    """
    Update a user by ID

    Provided fields replace the stored ones; omitted fields are kept.

    Args:
        user_id: ID of the user
        payload: Any subset of name, email and age

    Returns:
        UserResponse with the merged record
    """
    update_user_use_case = container.get(UpdateUserUseCase)

    result = await update_user_use_case.execute(user_id, payload)
    if isinstance(result, UserError):
        return error_response(result)
    return result


@router.delete("/{user_id}", response_model=MessageResponse, responses={404: _NOT_FOUND, 500: _SERVER_ERROR})
async def delete_user(
    user_id: str,
    container: BaseContainer = Depends(get_container),
) -> Union[MessageResponse, JSONResponse]:
    """Delete a user by ID"""
    delete_user_use_case = container.get(DeleteUserUseCase)

    result = await delete_user_use_case.execute(user_id)
    if isinstance(result, UserError):
        return error_response(result)
    return result
