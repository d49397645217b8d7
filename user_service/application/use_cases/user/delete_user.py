# Standard library imports
import logging
from typing import Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.errors import UserError
from ...dto.user_dto import MessageResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """Use case for deleting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> Union[MessageResponse, UserError]:
        user = await self.user_repository.delete(user_id)
        if isinstance(user, UserError):
            return user
        
        logger.info(f"Deleted user {user.id}")
        return MessageResponse(message="User deleted successfully")
