from .user_controller import router as user_router
from .health_controller import router as health_router


__all__ = ["user_router", "health_router"]
