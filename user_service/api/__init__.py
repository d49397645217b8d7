"""
API layer for the User Service.

Exposes the /users CRUD endpoints and a /health probe.
"""
