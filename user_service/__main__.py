# Standard library imports
import logging

# External package imports
import uvicorn

# Local application imports
from .main import app
from .core.config import get_settings


def main() -> None:
    """Run the API with uvicorn on the configured host and port"""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger(__name__).info(f"Starting User Service on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
