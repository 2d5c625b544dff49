"""
Service layer for business logic.
"""
from user_service.services.users import UserService

__all__ = ["UserService"]
