"""
Root GraphQL mutation definitions
"""

from typing import Optional

import strawberry

from app.graphql.context import get_post_repository, get_user_repository
from app.graphql.types import Post, PostInput, User, UserInput


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(self, info: strawberry.Info, input: UserInput) -> Optional[User]:
        """Create a new user."""
        document = await get_user_repository(info).create(input.to_fields())
        return User.from_document(document)

    @strawberry.mutation(name="updateUser")
    async def update_user(
        self, info: strawberry.Info, id: strawberry.ID, input: UserInput
    ) -> Optional[User]:
        """Update a user's fields. Returns null if the user does not exist."""
        document = await get_user_repository(info).update(str(id), input.to_fields())
        return User.from_document(document) if document else None

    @strawberry.mutation(name="deleteUser")
    async def delete_user(self, info: strawberry.Info, id: strawberry.ID) -> Optional[bool]:
        """Delete a user. Their posts are kept."""
        return await get_user_repository(info).delete(str(id))

    # Post mutations
    @strawberry.mutation(name="createPost")
    async def create_post(self, info: strawberry.Info, input: PostInput) -> Optional[Post]:
        """Create a new post."""
        document = await get_post_repository(info).create(input.to_fields())
        return Post.from_document(document)
