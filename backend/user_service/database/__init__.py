"""
Database module - MongoDB connection and database definitions.
"""
from user_service.database.connections import (
    StoreStartup,
    close_store,
    connect_store,
    get_mongo_client,
    get_users_collection,
)
from user_service.database.databases import users_db

__all__ = [
    "StoreStartup",
    "connect_store",
    "close_store",
    "get_mongo_client",
    "get_users_collection",
    "users_db",
]
