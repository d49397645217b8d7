"""User Service: CRUD HTTP API for user records stored in MongoDB."""

__version__ = "1.0.0"
