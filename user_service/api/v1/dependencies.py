# External package imports
from fastapi import Request

# Local application imports
from ...di.base_container import BaseContainer


def get_container(request: Request) -> BaseContainer:
    """
    FastAPI dependency returning the container built for this application
    
    Args:
        request: Incoming request (gives access to app.state)
        
    Returns:
        The container registered by create_application()
    """
    return request.app.state.container
