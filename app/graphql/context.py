"""
app/graphql/context.py

Purpose: Per-request GraphQL context

- Hands the repositories built at startup to every resolver
"""

from typing import Any, Dict

import strawberry
from fastapi import Request

from app.core.exceptions import StoreUnavailableError
from app.services.post_service import PostRepository
from app.services.user_service import UserRepository


async def get_context(request: Request) -> Dict[str, Any]:
    """Get the context for GraphQL resolvers."""
    state = request.app.state
    return {
        "request": request,
        "users": getattr(state, "users", None),
        "posts": getattr(state, "posts", None),
    }


def get_user_repository(info: strawberry.Info) -> UserRepository:
    users = info.context.get("users")
    if users is None:
        raise StoreUnavailableError()
    return users


def get_post_repository(info: strawberry.Info) -> PostRepository:
    posts = info.context.get("posts")
    if posts is None:
        raise StoreUnavailableError()
    return posts
