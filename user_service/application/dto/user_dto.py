from pydantic import BaseModel

from ...domain.models.user import User


class UserResponse(BaseModel):
    """DTO for user response"""
    id: str
    name: str
    email: str
    age: int

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id or "",
            name=user.name,
            email=user.email,
            age=user.age,
        )


class MessageResponse(BaseModel):
    """DTO for a plain confirmation message"""
    message: str


class ErrorResponse(BaseModel):
    """DTO for every error body returned by the API"""
    error: str
