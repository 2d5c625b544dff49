"""
Index management for the users database.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from user_service.database.databases import users_db


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """Create the unique email index that backs the registration conflict check."""
    users = db[users_db.Collections.USERS]
    await users.create_index("email", unique=True)
