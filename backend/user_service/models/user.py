"""
User model for the users collection.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """
    User document model for MongoDB users collection.

    The password is stored exactly as received; no hashing is applied.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")
    nome: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address, unique across users")
    senha: str = Field(..., description="Password (plain text)")

    def to_document(self) -> dict:
        """Document to insert; `_id` is left to MongoDB."""
        return self.model_dump(exclude={"id"})
