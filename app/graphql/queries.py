"""
Root GraphQL query definitions
"""

from typing import List, Optional

import strawberry

from app.graphql.context import get_post_repository, get_user_repository
from app.graphql.types import MetaData, PageQueryOptions, Post, User, UserList


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field(name="getUser")
    async def get_user(self, info: strawberry.Info, id: strawberry.ID) -> Optional[User]:
        """Get a user by ID, or null if there is none."""
        document = await get_user_repository(info).get_by_id(str(id))
        return User.from_document(document) if document else None

    @strawberry.field(name="getAllUsers")
    async def get_all_users(
        self, info: strawberry.Info, options: Optional[PageQueryOptions] = None
    ) -> UserList:
        """Get one page of users (default page 1, limit 10) and the total user count."""
        pagination = PageQueryOptions.to_pagination(options)
        documents, total_count = await get_user_repository(info).list_page(pagination)
        return UserList(
            data=[User.from_document(doc) for doc in documents],
            meta=MetaData(total_count=total_count),
        )

    @strawberry.field(name="getPostsByUser")
    async def get_posts_by_user(self, info: strawberry.Info, user_id: strawberry.ID) -> List[Post]:
        """Get every post by a user, newest first."""
        documents = await get_post_repository(info).list_by_user(str(user_id))
        return [Post.from_document(doc) for doc in documents]
