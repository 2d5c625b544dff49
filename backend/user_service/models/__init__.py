"""
Pydantic models for database documents.
"""
from user_service.models.user import User

__all__ = ["User"]
