"""
app/services/user_service.py

Purpose: User data management

- Create, read, update and delete User documents
- Paginated listing with a total count
- No cascade to the user's posts on delete
"""

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from typing import List, Optional, Tuple

from app.core.logging import get_logger, LogContext
from app.models.user import UserDocument, UserFields
from app.schemas.pagination import Pagination
from utils.constants import ID_FIELD
from utils.validation_utils import parse_object_id

logger = get_logger(__name__)


class UserRepository:
    """Operations on the users collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def get_by_id(self, user_id: str) -> Optional[UserDocument]:
        """
        Retrieves a user by ID.

        Args:
            user_id: User ID (ObjectId hex string)

        Returns:
            User document or None if not found
        """
        oid = parse_object_id(user_id)
        if oid is None:
            logger.debug("Malformed user id, treating as not found", extra={"user_id": user_id})
            return None

        document = await self.collection.find_one({ID_FIELD: oid})
        return UserDocument.from_mongo(document)

    async def list_page(self, pagination: Pagination) -> Tuple[List[UserDocument], int]:
        """
        Retrieves one page of users and the size of the whole collection.

        The fetch and the count are separate, non-atomic calls; under
        concurrent writes the count may not match the page.

        Args:
            pagination: Page window

        Returns:
            (users on this page, total number of users)
        """
        cursor = self.collection.find({}).skip(pagination.skip).limit(pagination.limit)
        documents = await cursor.to_list(length=None)
        total_count = await self.collection.count_documents({})

        logger.debug(
            f"Listed users page={pagination.page} limit={pagination.limit} "
            f"returned={len(documents)} total={total_count}"
        )
        return [UserDocument.from_mongo(doc) for doc in documents], total_count

    async def create(self, fields: UserFields) -> UserDocument:
        """
        Inserts a new user.

        Args:
            fields: Validated user fields

        Returns:
            The persisted user, including its assigned id
        """
        with LogContext(operation="createUser"):
            document = fields.to_document()
            result = await self.collection.insert_one(document)
            logger.info("User created", extra={"user_id": str(result.inserted_id)})
            return UserDocument.from_mongo({ID_FIELD: result.inserted_id, **document})

    async def update(self, user_id: str, fields: UserFields) -> Optional[UserDocument]:
        """
        Replaces a user's fields with the given input.

        Args:
            user_id: User ID
            fields: Validated user fields

        Returns:
            The user after the update, or None if it does not exist
        """
        with LogContext(operation="updateUser", user_id=user_id):
            oid = parse_object_id(user_id)
            if oid is None:
                logger.debug("Malformed user id, nothing to update")
                return None

            document = await self.collection.find_one_and_update(
                {ID_FIELD: oid},
                {"$set": fields.to_document()},
                return_document=ReturnDocument.AFTER
            )

            if document is None:
                logger.info("User not found for update")
            else:
                logger.info("User updated")

            return UserDocument.from_mongo(document)

    async def delete(self, user_id: str) -> bool:
        """
        Removes a user. Their posts are left in place.

        Args:
            user_id: User ID

        Returns:
            True if a document was removed
        """
        with LogContext(operation="deleteUser", user_id=user_id):
            oid = parse_object_id(user_id)
            if oid is None:
                return False

            result = await self.collection.delete_one({ID_FIELD: oid})

            deleted = result.deleted_count > 0
            if deleted:
                logger.info("User deleted")
            else:
                logger.info("User not found for delete")

            return deleted
