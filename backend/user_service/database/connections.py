"""
MongoDB connection management.

The connection is acquired once by the application lifespan and kept on
`app.state.store`; request handlers reach it through the dependencies below.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Request
from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from user_service.config import Settings
from user_service.database.databases import users_db
from user_service.database.indexes import create_indexes

logger = logging.getLogger(__name__)


@dataclass
class StoreStartup:
    """Outcome of connecting to the record store at startup."""
    client: AsyncIOMotorClient
    database: AsyncIOMotorDatabase
    connected: bool
    error: Optional[str] = None
    owns_client: bool = True

    def require(self) -> None:
        """Raise if the store could not be reached."""
        if not self.connected:
            raise RuntimeError(f"Record store unavailable: {self.error}")


def create_client(settings: Settings) -> AsyncIOMotorClient:
    """Build a Motor client whose operations are bounded by the configured timeout."""
    return AsyncIOMotorClient(
        settings.mongodb_uri,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        timeoutMS=settings.mongodb_timeout_ms,
    )


async def connect_store(
    settings: Settings,
    client: Optional[AsyncIOMotorClient] = None,
) -> StoreStartup:
    """
    Connect to MongoDB and prepare the users collection.

    Never raises for an unreachable server: the failure is logged and
    reported in the returned StoreStartup for the caller to act on.

    Args:
        settings: Application settings
        client: Pre-built client to adopt instead of creating one

    Returns:
        StoreStartup describing the connection
    """
    owns_client = client is None
    if client is None:
        client = create_client(settings)
    database = client[settings.database_name]

    try:
        await client.admin.command("ping")
        if settings.enforce_unique_email:
            await create_indexes(database)
    except Exception as e:
        logger.error("Database connection failed: %s", e)
        return StoreStartup(
            client=client,
            database=database,
            connected=False,
            error=str(e),
            owns_client=owns_client,
        )

    logger.info("Connected to MongoDB database '%s'", settings.database_name)
    return StoreStartup(
        client=client,
        database=database,
        connected=True,
        owns_client=owns_client,
    )


async def close_store(store: StoreStartup) -> None:
    """Close the client if it was created by connect_store."""
    if store.owns_client:
        store.client.close()


def get_store(request: Request) -> StoreStartup:
    """Dependency returning the store handle acquired at startup."""
    return request.app.state.store


def get_mongo_client(request: Request) -> AsyncIOMotorClient:
    """Dependency returning the shared MongoDB client."""
    return get_store(request).client


def get_users_collection(request: Request) -> AsyncIOMotorCollection:
    """Dependency returning the users collection."""
    return get_store(request).database[users_db.Collections.USERS]
