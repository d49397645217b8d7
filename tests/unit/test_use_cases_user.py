"""
Unit tests for user use cases (Create, List, Get, Update, Delete).
"""
from unittest.mock import AsyncMock

import pytest
from user_service.application.dto.user_dto import MessageResponse, UserResponse
from user_service.application.use_cases.user.create_user import CreateUserUseCase
from user_service.application.use_cases.user.list_users import ListUsersUseCase
from user_service.application.use_cases.user.get_user import GetUserUseCase
from user_service.application.use_cases.user.update_user import UpdateUserUseCase
from user_service.application.use_cases.user.delete_user import DeleteUserUseCase
from user_service.domain.errors import (
    ConstraintError,
    NotFoundError,
    StoreUnavailableError,
    ValidationError,
)
from user_service.domain.models.user import User
from user_service.domain.validation import ValidRecord


def _make_user(user_id: str = "usr-1", name: str = "Ann", email: str = "ann@x.com", age: int = 25) -> User:
    return User(id=user_id, name=name, email=email, age=age)


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class TestCreateUserUseCase:
    """Tests for CreateUserUseCase"""

    @pytest.mark.asyncio
    async def test_create_success(self, mock_user_repo):
        mock_user_repo.create.return_value = _make_user("usr-new")

        use_case = CreateUserUseCase(mock_user_repo)
        result = await use_case.execute({"name": "Ann", "email": "ann@x.com", "age": 25})

        assert isinstance(result, UserResponse)
        assert result.id == "usr-new"
        assert result.name == "Ann"
        mock_user_repo.create.assert_awaited_once_with(
            ValidRecord(fields={"name": "Ann", "email": "ann@x.com", "age": 25})
        )

    @pytest.mark.asyncio
    async def test_invalid_payload_never_reaches_store(self, mock_user_repo):
        use_case = CreateUserUseCase(mock_user_repo)
        result = await use_case.execute({"name": "Ann", "email": "ann@x.com", "age": 12})

        assert isinstance(result, ValidationError)
        assert result.field == "age"
        mock_user_repo.create.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_email_is_returned(self, mock_user_repo):
        mock_user_repo.create.return_value = ConstraintError(message="Email already exists")

        use_case = CreateUserUseCase(mock_user_repo)
        result = await use_case.execute({"name": "Ann", "email": "ann@x.com", "age": 25})

        assert result == ConstraintError(message="Email already exists")


class TestListUsersUseCase:
    """Tests for ListUsersUseCase"""

    @pytest.mark.asyncio
    async def test_list_empty(self, mock_user_repo):
        mock_user_repo.list_all.return_value = []
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert result == []

    @pytest.mark.asyncio
    async def test_list_returns_users(self, mock_user_repo):
        mock_user_repo.list_all.return_value = [
            _make_user("usr-1", "Ann", "ann@x.com"),
            _make_user("usr-2", "Bob", "bob@x.com", 40),
        ]
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert [user.id for user in result] == ["usr-1", "usr-2"]
        assert result[1].age == 40

    @pytest.mark.asyncio
    async def test_store_failure(self, mock_user_repo):
        mock_user_repo.list_all.return_value = StoreUnavailableError()
        result = await ListUsersUseCase(mock_user_repo).execute()
        assert isinstance(result, StoreUnavailableError)


class TestGetUserUseCase:
    """Tests for GetUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_found(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = _make_user("usr-1")
        result = await GetUserUseCase(mock_user_repo).execute("usr-1")
        assert result == UserResponse(id="usr-1", name="Ann", email="ann@x.com", age=25)

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_user_repo):
        mock_user_repo.find_by_id.return_value = NotFoundError()
        result = await GetUserUseCase(mock_user_repo).execute("missing")
        assert isinstance(result, NotFoundError)
        assert result.message == "User not found"


class TestUpdateUserUseCase:
    """Tests for UpdateUserUseCase"""

    @pytest.mark.asyncio
    async def test_update_passes_only_provided_fields(self, mock_user_repo):
        mock_user_repo.update.return_value = _make_user("usr-1", age=30)

        result = await UpdateUserUseCase(mock_user_repo).execute("usr-1", {"age": 30})

        assert isinstance(result, UserResponse)
        assert result.age == 30
        assert result.email == "ann@x.com"
        mock_user_repo.update.assert_awaited_once_with("usr-1", ValidRecord(fields={"age": 30}))

    @pytest.mark.asyncio
    async def test_invalid_update_never_reaches_store(self, mock_user_repo):
        result = await UpdateUserUseCase(mock_user_repo).execute("usr-1", {"email": "not-an-email"})
        assert isinstance(result, ValidationError)
        mock_user_repo.update.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_not_found(self, mock_user_repo):
        mock_user_repo.update.return_value = NotFoundError()
        result = await UpdateUserUseCase(mock_user_repo).execute("missing", {"age": 30})
        assert isinstance(result, NotFoundError)


class TestDeleteUserUseCase:
    """Tests for DeleteUserUseCase"""

    @pytest.mark.asyncio
    async def test_delete_success(self, mock_user_repo):
        mock_user_repo.delete.return_value = _make_user("usr-1")
        result = await DeleteUserUseCase(mock_user_repo).execute("usr-1")
        assert result == MessageResponse(message="User deleted successfully")

    @pytest.mark.asyncio
    async def test_delete_not_found(self, mock_user_repo):
        mock_user_repo.delete.return_value = NotFoundError()
        result = await DeleteUserUseCase(mock_user_repo).execute("missing")
        assert isinstance(result, NotFoundError)
