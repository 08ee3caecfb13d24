"""
app/services/post_service.py

Purpose: Post data management

- Create Post documents with server-assigned timestamps
- List a user's posts, most recent first
"""

from motor.motor_asyncio import AsyncIOMotorCollection
from typing import List

from app.core.logging import get_logger, LogContext
from app.models.post import PostDocument, PostFields
from utils.constants import (
    DESCENDING,
    ID_FIELD,
    POST_CREATED_AT_FIELD,
    POST_UPDATED_AT_FIELD,
    POST_USER_ID_FIELD,
)
from utils.time_utils import utc_now
from utils.validation_utils import parse_object_id, require_object_id

logger = get_logger(__name__)


class PostRepository:
    """Operations on the posts collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def create(self, fields: PostFields) -> PostDocument:
        """
        Inserts a new post.

        The referenced user is not checked for existence.

        Args:
            fields: Validated post fields

        Returns:
            The persisted post with its id and createdAt

        Raises:
            InvalidIdentifierError: If userId is not a valid ObjectId
        """
        with LogContext(operation="createPost", user_id=fields.user_id):
            now = utc_now()
            document = {
                "title": fields.title,
                "content": fields.content,
                POST_USER_ID_FIELD: require_object_id(fields.user_id, field="userId"),
                POST_CREATED_AT_FIELD: now,
                POST_UPDATED_AT_FIELD: now,
            }

            result = await self.collection.insert_one(document)
            logger.info("Post created", extra={"post_id": str(result.inserted_id)})
            return PostDocument.from_mongo({ID_FIELD: result.inserted_id, **document})

    async def list_by_user(self, user_id: str) -> List[PostDocument]:
        """
        Retrieves every post referencing a user, newest first.

        Unbounded: a prolific user returns everything in one response.

        Args:
            user_id: User ID

        Returns:
            List of posts (empty when the user has none)
        """
        oid = parse_object_id(user_id)
        if oid is None:
            logger.debug("Malformed user id, no posts", extra={"user_id": user_id})
            return []

        cursor = self.collection.find({POST_USER_ID_FIELD: oid}).sort(
            POST_CREATED_AT_FIELD, DESCENDING
        )
        documents = await cursor.to_list(length=None)

        logger.debug(f"Found {len(documents)} posts", extra={"user_id": user_id})
        return [PostDocument.from_mongo(doc) for doc in documents]
