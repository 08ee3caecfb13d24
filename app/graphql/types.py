"""
app/graphql/types.py

Purpose: GraphQL object and input types

- User, Post, MetaData and UserList output types
- UserInput, PostInput, PageQueryOptions and PaginateOptions inputs
- Conversions from store documents and into validated fields
"""

import dataclasses
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

import strawberry
from strawberry import UNSET

from app.models.post import PostDocument, PostFields
from app.models.user import UserDocument, UserFields
from app.schemas.pagination import Pagination
from utils.time_utils import to_iso8601


def _provided(input_obj) -> Dict[str, Any]:
    """Fields the client sent, explicit nulls included."""
    return {
        field.name: getattr(input_obj, field.name)
        for field in dataclasses.fields(input_obj)
        if getattr(input_obj, field.name) is not UNSET
    }


@strawberry.type
class User:
    id: strawberry.ID
    name: str
    email: str
    phone: Optional[str] = None
    age: Optional[int] = None
    profession: Optional[str] = None
    address: Optional[str] = None

    @classmethod
    def from_document(cls, document: UserDocument) -> "User":
        return cls(
            id=strawberry.ID(document.id),
            name=document.name,
            email=document.email,
            phone=document.phone,
            age=document.age,
            profession=document.profession,
            address=document.address,
        )


@strawberry.type
class Post:
    id: strawberry.ID
    title: str
    content: str
    user_id: strawberry.ID
    stored_created_at: strawberry.Private[Union[datetime, str, int, float]]

    @strawberry.field
    def created_at(self) -> str:
        """Creation time as an ISO-8601 UTC string."""
        return to_iso8601(self.stored_created_at)

    @classmethod
    def from_document(cls, document: PostDocument) -> "Post":
        return cls(
            id=strawberry.ID(document.id),
            title=document.title,
            content=document.content,
            user_id=strawberry.ID(document.user_id),
            stored_created_at=document.created_at,
        )


@strawberry.type
class MetaData:
    total_count: int


@strawberry.type
class UserList:
    data: List[User]
    meta: MetaData


@strawberry.input
class UserInput:
    name: str
    email: str
    phone: str
    age: Optional[int] = UNSET
    profession: Optional[str] = UNSET
    address: Optional[str] = UNSET

    def to_fields(self) -> UserFields:
        return UserFields(**_provided(self))


@strawberry.input
class PostInput:
    title: str
    content: str
    user_id: strawberry.ID

    def to_fields(self) -> PostFields:
        return PostFields(title=self.title, content=self.content, user_id=str(self.user_id))


@strawberry.input
class PaginateOptions:
    page: Optional[int] = UNSET
    limit: Optional[int] = UNSET


@strawberry.input
class PageQueryOptions:
    paginate: Optional[PaginateOptions] = UNSET

    @staticmethod
    def to_pagination(options: Optional["PageQueryOptions"]) -> Pagination:
        """
        Resolves the optional nested input into a pagination window.
        Any missing level falls back to the defaults.
        """
        paginate = options.paginate if options else None
        if not paginate:
            return Pagination.resolve()
        return Pagination.resolve(
            page=paginate.page or None,
            limit=paginate.limit or None,
        )
