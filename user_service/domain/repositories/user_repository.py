from abc import ABC, abstractmethod
from typing import List, Optional, Union
from ..models.user import User
from ..errors import UserError
from ..validation import ValidRecord


class UserRepository(ABC):
    """Repository interface - defines contract for user data access.

    Methods return error values (see domain/errors.py) instead of raising.
    An identifier that is not well formed resolves to NotFoundError, the
    same as a well-formed identifier with no record.
    """
    
    @abstractmethod
    async def create(self, record: ValidRecord) -> Union[User, UserError]:
        """Insert a new user; the store assigns the ID"""
        pass
    
    @abstractmethod
    async def list_all(self) -> Union[List[User], UserError]:
        """Return every stored user in store order"""
        pass
    
    @abstractmethod
    async def find_by_id(self, user_id: str) -> Union[User, UserError]:
        """Find user by ID"""
        pass
    
    @abstractmethod
    async def update(self, user_id: str, record: ValidRecord) -> Union[User, UserError]:
        """Atomically set the given fields and return the merged user"""
        pass
    
    @abstractmethod
    async def delete(self, user_id: str) -> Union[User, UserError]:
        """Remove user permanently and return the removed record"""
        pass
    
    @abstractmethod
    async def ensure_constraints(self) -> Optional[UserError]:
        """Install store-side rules (unique email, field schema)"""
        pass
