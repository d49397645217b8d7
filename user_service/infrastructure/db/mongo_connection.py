# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase, AsyncIOMotorCollection

# Local application imports
from ...core.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """
    Create the MongoDB client for this process
    
    The client connects lazily, so creating it never blocks. The server
    selection timeout bounds how long a request waits on an unreachable
    store before the driver gives up.
    
    Args:
        settings: Application settings
        
    Returns:
        Motor client; the caller owns it and must close it on shutdown
    """
    return AsyncIOMotorClient(
        settings.mongo_uri,
        serverSelectionTimeoutMS=settings.mongo_server_selection_timeout_ms,
    )


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the configured database from a client"""
    return client[settings.mongo_database_name]


def get_user_collection(database: AsyncIOMotorDatabase, settings: Settings) -> AsyncIOMotorCollection:
    """
    Get users collection from MongoDB
    
    Returns:
        MongoDB collection for users
    """
    return database[settings.mongo_users_collection]
