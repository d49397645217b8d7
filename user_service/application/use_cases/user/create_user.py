# Standard library imports
import logging
from typing import Any, Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.errors import UserError
from ....domain.validation import validate_for_create
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class CreateUserUseCase:
    """Use case for creating a new user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, payload: Any) -> Union[UserResponse, UserError]:
        """
        Create a new user
        
        Args:
            payload: Decoded request body
            
        Returns:
            UserResponse with the assigned ID, or the ValidationError /
            ConstraintError / StoreUnavailableError that stopped it.
            Nothing is written when validation fails.
        """
        record = validate_for_create(payload)
        if isinstance(record, UserError):
            return record
        
        user = await self.user_repository.create(record)
        if isinstance(user, UserError):
            return user
        
        logger.info(f"Created user {user.id}")
        return UserResponse.from_domain(user)
