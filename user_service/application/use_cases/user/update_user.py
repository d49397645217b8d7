# Standard library imports
import logging
from typing import Any, Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.errors import UserError
from ....domain.validation import validate_for_update
from ...dto.user_dto import UserResponse

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """Use case for updating an existing user"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str, payload: Any) -> Union[UserResponse, UserError]:
        """
        Replace the provided fields of a user, keeping the rest
        
        Args:
            user_id: ID of the user
            payload: Decoded request body with any subset of name, email, age
            
        Returns:
            UserResponse with the merged record, or the error value
        """
        record = validate_for_update(payload)
        if isinstance(record, UserError):
            return record
        
        user = await self.user_repository.update(user_id, record)
        if isinstance(user, UserError):
            return user
        
        logger.info(f"Updated user {user.id} (fields: {', '.join(sorted(record.fields)) or 'none'})")
        return UserResponse.from_domain(user)
