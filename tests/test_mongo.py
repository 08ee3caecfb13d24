"""
Tests for the MongoStore handle. The Motor client is patched out.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import ServerSelectionTimeoutError

from app.core.config import Settings
from app.core.exceptions import StoreUnavailableError
from app.db.mongo import MongoStore


@pytest.fixture
def config():
    return Settings(MONGO_URI="mongodb://db:27017", MONGO_DB_NAME="testdb")


def make_client(ping_error=None):
    client = MagicMock()
    client.admin.command = AsyncMock(side_effect=ping_error)
    return client


def test_collections_unavailable_before_connect(config):
    store = MongoStore(config)

    assert not store.is_open
    with pytest.raises(StoreUnavailableError):
        store.users


@pytest.mark.asyncio
async def test_connect_and_close(config):
    client = make_client()

    with patch("app.db.mongo.AsyncIOMotorClient", return_value=client) as motor:
        store = MongoStore(config)
        assert await store.connect() is True

    motor.assert_called_once_with("mongodb://db:27017", serverSelectionTimeoutMS=5000)
    client.__getitem__.assert_called_once_with("testdb")
    assert store.is_open
    assert await store.ping() is True

    database = client.__getitem__.return_value
    store.users
    database.__getitem__.assert_called_with("users")
    store.posts
    database.__getitem__.assert_called_with("posts")

    await store.close()
    client.close.assert_called_once()
    assert not store.is_open
    assert await store.ping() is False


@pytest.mark.asyncio
async def test_unreachable_store_does_not_raise(config):
    client = make_client(ping_error=ServerSelectionTimeoutError("no servers"))

    with patch("app.db.mongo.AsyncIOMotorClient", return_value=client):
        store = MongoStore(config)
        assert await store.connect() is False

    # Handle stays usable; operations will fail at the store
    assert store.is_open
    store.users
    assert await store.ping() is False
