# Standard library imports
from typing import List, Union

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.errors import UserError
from ...dto.user_dto import UserResponse


class ListUsersUseCase:
    """Use case for listing all users"""
    
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository
    
    async def execute(self) -> Union[List[UserResponse], UserError]:
        users = await self.user_repository.list_all()
        if isinstance(users, UserError):
            return users
        
        return [UserResponse.from_domain(user) for user in users]
