"""
API Routers module.
"""
from user_service.routers import health, users

__all__ = ["health", "users"]
