"""
app/models/user.py

Purpose: User document model

- Mirrors a document in the users collection
- Converts the store's _id into a string id
- Builds insert/update payloads from validated input
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Optional

from bson import ObjectId


class UserFields(BaseModel):
    """
    Writable User fields (createUser / updateUser input).
    """
    name: str
    email: str
    phone: Optional[str] = None
    age: Optional[int] = None
    profession: Optional[str] = None
    address: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        """Only fields the client actually sent; absent ones are left alone."""
        return self.model_dump(exclude_unset=True)


class UserDocument(UserFields):
    """
    A User as stored, with its store-assigned id.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_mongo(cls, document: Optional[Dict[str, Any]]) -> Optional["UserDocument"]:
        """Returns None for a missing document."""
        if document is None:
            return None
        return cls.model_validate(document)
