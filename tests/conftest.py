"""
Shared pytest fixtures for user-service tests.
"""
import os
from typing import Dict, List, Optional, Union
from unittest.mock import MagicMock, patch

import pytest
from bson import ObjectId

from user_service.di.base_container import BaseContainer
from user_service.di.providers import UserProvider
from user_service.domain.errors import ConstraintError, NotFoundError, UserError
from user_service.domain.models.user import User
from user_service.domain.repositories.user_repository import UserRepository
from user_service.domain.validation import ValidRecord


class InMemoryUserRepository(UserRepository):
    """UserRepository test double with the same outcomes as the MongoDB one."""

    def __init__(self) -> None:
        self.documents: Dict[str, dict] = {}

    async def create(self, record: ValidRecord) -> Union[User, UserError]:
        if self._email_taken(record.fields["email"]):
            return ConstraintError(message="Email already exists")
        user_id = str(ObjectId())
        self.documents[user_id] = dict(record.fields)
        return self._to_user(user_id)

    async def list_all(self) -> Union[List[User], UserError]:
        return [self._to_user(user_id) for user_id in self.documents]

    async def find_by_id(self, user_id: str) -> Union[User, UserError]:
        if user_id not in self.documents:
            return NotFoundError()
        return self._to_user(user_id)

    async def update(self, user_id: str, record: ValidRecord) -> Union[User, UserError]:
        if user_id not in self.documents:
            return NotFoundError()
        email = record.fields.get("email")
        if email is not None and self._email_taken(email, exclude_id=user_id):
            return ConstraintError(message="Email already exists")
        self.documents[user_id].update(record.fields)
        return self._to_user(user_id)

    async def delete(self, user_id: str) -> Union[User, UserError]:
        if user_id not in self.documents:
            return NotFoundError()
        user = self._to_user(user_id)
        del self.documents[user_id]
        return user

    async def ensure_constraints(self) -> Optional[UserError]:
        return None

    def _email_taken(self, email: str, exclude_id: Optional[str] = None) -> bool:
        return any(
            document["email"] == email
            for user_id, document in self.documents.items()
            if user_id != exclude_id
        )

    def _to_user(self, user_id: str) -> User:
        document = self.documents[user_id]
        return User(id=user_id, name=document["name"], email=document["email"], age=document["age"])


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_user_db",
        "MONGO_USERS_COLLECTION": "users_test",
        "PORT": "3001",
        "LOG_LEVEL": "debug",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture providing a settings object that needs no environment."""
    mock = MagicMock()
    mock.mongo_uri = "mongodb://localhost:27017"
    mock.mongo_database_name = "test_db"
    mock.mongo_users_collection = "users"
    mock.mongo_server_selection_timeout_ms = 100
    mock.host = "127.0.0.1"
    mock.port = 3000
    mock.log_level = "INFO"
    mock.cors_allow_origins = []
    return mock


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def container(user_repository):
    """Container wired like DIContainer but with the in-memory repository."""
    container = BaseContainer()
    container.register_singleton(UserRepository, user_repository)
    UserProvider.register(container)
    return container
