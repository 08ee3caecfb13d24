"""
app/models/post.py

Purpose: Post document model

- Mirrors a document in the posts collection
- userId is stored as an ObjectId reference to a User (not enforced)
- createdAt is kept exactly as the store returned it
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Dict, Optional, Union
from datetime import datetime

from bson import ObjectId


class PostFields(BaseModel):
    """
    Writable Post fields (createPost input).
    """
    title: str
    content: str
    user_id: str = Field(..., alias="userId")

    model_config = ConfigDict(populate_by_name=True)


class PostDocument(BaseModel):
    """
    A Post as stored.

    created_at stays a raw value because older documents may hold
    strings instead of native dates; formatting happens at the edge.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    title: str
    content: str
    user_id: str = Field(..., alias="userId")
    created_at: Union[datetime, str, int, float] = Field(..., alias="createdAt")
    updated_at: Optional[Union[datetime, str, int, float]] = Field(default=None, alias="updatedAt")

    @field_validator("id", "user_id", mode="before")
    @classmethod
    def stringify_object_id(cls, v):
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_mongo(cls, document: Optional[Dict[str, Any]]) -> Optional["PostDocument"]:
        """Returns None for a missing document."""
        if document is None:
            return None
        return cls.model_validate(document)
