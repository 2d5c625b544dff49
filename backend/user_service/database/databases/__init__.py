"""
Database definitions and collection constants.
"""
from user_service.database.databases import users_db

__all__ = ["users_db"]
