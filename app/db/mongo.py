"""
app/db/mongo.py

Purpose: MongoDB connection handle

- Wraps one Motor client for the lifetime of the process
- Exposes the users and posts collections
- Health checks
- Explicit open/close driven by the application lifespan
"""

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError
from typing import Optional

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import StoreUnavailableError
from app.core.logging import get_logger

logger = get_logger(__name__)


class MongoStore:
    """
    Handle on the document store.

    Created once at startup and passed to whatever needs collections.
    Motor connects lazily, so a store that is unreachable at startup
    still yields a usable handle; operations fail until it comes back.
    """

    def __init__(self, config: Settings = default_settings):
        self.config = config
        self._client: Optional[AsyncIOMotorClient] = None
        self._database: Optional[AsyncIOMotorDatabase] = None

    @property
    def is_open(self) -> bool:
        return self._client is not None

    async def connect(self) -> bool:
        """
        Creates the client and pings the server once.

        Returns:
            True if the ping succeeded. A failed ping is logged and the
            handle stays open.
        """
        if self._client is not None:
            logger.warning("MongoDB client already initialized")
            return await self.ping()

        logger.info(f"Connecting to MongoDB database '{self.config.MONGO_DB_NAME}'")

        self._client = AsyncIOMotorClient(
            self.config.MONGO_URI,
            serverSelectionTimeoutMS=self.config.MONGO_SERVER_SELECTION_TIMEOUT_MS,
        )
        self._database = self._client[self.config.MONGO_DB_NAME]

        try:
            await self._client.admin.command("ping")
        except PyMongoError as e:
            logger.error(f"❌ MongoDB error: {e}")
            return False

        logger.info("✅ MongoDB connected")
        return True

    async def close(self):
        """
        Closes the client. Safe to call more than once.
        """
        if self._client is not None:
            logger.info("Closing MongoDB connection")
            self._client.close()
            self._client = None
            self._database = None
            logger.info("MongoDB connection closed")

    async def ping(self) -> bool:
        """
        Checks if the database connection is healthy.

        Returns:
            True if connection is healthy, False otherwise
        """
        if self._client is None:
            logger.error("MongoDB client not initialized")
            return False

        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"Database health check failed: {str(e)}")
            return False

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self._database is None:
            raise StoreUnavailableError(
                "Database not initialized. Call connect() during startup."
            )
        return self._database

    @property
    def users(self) -> AsyncIOMotorCollection:
        """
        User documents: name, email, phone, age, profession, address.
        """
        return self.database[self.config.USERS_COLLECTION]

    @property
    def posts(self) -> AsyncIOMotorCollection:
        """
        Post documents: title, content, userId, createdAt, updatedAt.
        """
        return self.database[self.config.POSTS_COLLECTION]
