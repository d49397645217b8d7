from .user_dto import UserResponse, MessageResponse, ErrorResponse

__all__ = [
    "UserResponse",
    "MessageResponse",
    "ErrorResponse",
]
