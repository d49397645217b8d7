# Standard library imports
from typing import Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.errors import UserError
from ...dto.user_dto import UserResponse


class GetUserUseCase:
    """Use case for getting a user by ID"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self, user_id: str) -> Union[UserResponse, UserError]:
        """
        Get a user by ID
        
        Args:
            user_id: ID of the user
            
        Returns:
            UserResponse, or NotFoundError (also for malformed IDs)
        """
        user = await self.user_repository.find_by_id(user_id)
        if isinstance(user, UserError):
            return user
        
        return UserResponse.from_domain(user)
