"""
Tests for UserRepository against a mocked Motor collection.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import ReturnDocument

from app.models.user import UserFields
from app.schemas.pagination import Pagination
from app.services.user_service import UserRepository


def make_cursor(documents):
    cursor = MagicMock()
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=documents)
    return cursor


@pytest.fixture
def collection():
    return MagicMock()


@pytest.fixture
def repository(collection):
    return UserRepository(collection)


@pytest.fixture
def stored_user():
    return {
        "_id": ObjectId(),
        "name": "A",
        "email": "a@x.com",
        "phone": "1",
        "__v": 0,
    }


@pytest.mark.asyncio
async def test_get_by_id(repository, collection, stored_user):
    collection.find_one = AsyncMock(return_value=stored_user)

    user = await repository.get_by_id(str(stored_user["_id"]))

    collection.find_one.assert_awaited_once_with({"_id": stored_user["_id"]})
    assert user.id == str(stored_user["_id"])
    assert user.name == "A"
    assert user.age is None


@pytest.mark.asyncio
async def test_get_by_id_not_found(repository, collection):
    collection.find_one = AsyncMock(return_value=None)

    assert await repository.get_by_id(str(ObjectId())) is None


@pytest.mark.asyncio
async def test_get_by_id_malformed_skips_store(repository, collection):
    collection.find_one = AsyncMock()

    assert await repository.get_by_id("12345") is None
    collection.find_one.assert_not_awaited()


@pytest.mark.asyncio
async def test_list_page_applies_window_and_counts_everything(repository, collection, stored_user):
    cursor = make_cursor([stored_user])
    collection.find.return_value = cursor
    collection.count_documents = AsyncMock(return_value=42)

    users, total = await repository.list_page(Pagination(page=2, limit=5))

    collection.find.assert_called_once_with({})
    cursor.skip.assert_called_once_with(5)
    cursor.limit.assert_called_once_with(5)
    collection.count_documents.assert_awaited_once_with({})
    assert [u.name for u in users] == ["A"]
    assert total == 42


@pytest.mark.asyncio
async def test_create_returns_assigned_id(repository, collection):
    new_id = ObjectId()
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=new_id))

    user = await repository.create(UserFields(name="A", email="a@x.com", phone="1"))

    collection.insert_one.assert_awaited_once_with({"name": "A", "email": "a@x.com", "phone": "1"})
    assert user.id == str(new_id)
    assert (user.name, user.email, user.phone) == ("A", "a@x.com", "1")


@pytest.mark.asyncio
async def test_update_sets_provided_fields_and_returns_new_document(repository, collection, stored_user):
    updated = {**stored_user, "name": "B", "age": None}
    collection.find_one_and_update = AsyncMock(return_value=updated)

    user = await repository.update(
        str(stored_user["_id"]),
        UserFields(name="B", email="a@x.com", phone="1", age=None),
    )

    collection.find_one_and_update.assert_awaited_once_with(
        {"_id": stored_user["_id"]},
        {"$set": {"name": "B", "email": "a@x.com", "phone": "1", "age": None}},
        return_document=ReturnDocument.AFTER,
    )
    assert user.name == "B"


@pytest.mark.asyncio
async def test_update_not_found(repository, collection):
    collection.find_one_and_update = AsyncMock(return_value=None)

    result = await repository.update(str(ObjectId()), UserFields(name="B", email="b@x.com"))

    assert result is None


@pytest.mark.asyncio
async def test_delete(repository, collection):
    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=1))
    user_id = ObjectId()

    assert await repository.delete(str(user_id)) is True
    collection.delete_one.assert_awaited_once_with({"_id": user_id})

    collection.delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))
    assert await repository.delete(str(user_id)) is False


@pytest.mark.asyncio
async def test_delete_malformed_id(repository, collection):
    collection.delete_one = AsyncMock()

    assert await repository.delete("not-an-id") is False
    collection.delete_one.assert_not_awaited()


@pytest.mark.asyncio
async def test_store_failure_propagates(repository, collection):
    from pymongo.errors import AutoReconnect

    collection.find_one = AsyncMock(side_effect=AutoReconnect("connection lost"))

    with pytest.raises(AutoReconnect):
        await repository.get_by_id(str(ObjectId()))
