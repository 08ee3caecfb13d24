"""
Shared pytest fixtures.

The GraphQL tests run against the real FastAPI app with the repositories
swapped for in-memory versions that honour the same contracts
(not-found is None/False, pagination window, newest-first posts).
"""

from typing import Dict, List, Optional, Tuple

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.models.post import PostDocument, PostFields
from app.models.user import UserDocument, UserFields
from app.schemas.pagination import Pagination
from utils.time_utils import to_utc, utc_now
from utils.validation_utils import parse_object_id, require_object_id


class InMemoryUserRepository:
    def __init__(self):
        self.documents: Dict[ObjectId, dict] = {}
        self.list_calls: List[Pagination] = []

    async def get_by_id(self, user_id: str) -> Optional[UserDocument]:
        oid = parse_object_id(user_id)
        return UserDocument.from_mongo(self.documents.get(oid))

    async def list_page(self, pagination: Pagination) -> Tuple[List[UserDocument], int]:
        self.list_calls.append(pagination)
        documents = list(self.documents.values())
        window = documents[pagination.skip:pagination.skip + pagination.limit]
        return [UserDocument.from_mongo(doc) for doc in window], len(documents)

    async def create(self, fields: UserFields) -> UserDocument:
        document = {"_id": ObjectId(), **fields.to_document()}
        self.documents[document["_id"]] = document
        return UserDocument.from_mongo(document)

    async def update(self, user_id: str, fields: UserFields) -> Optional[UserDocument]:
        document = self.documents.get(parse_object_id(user_id))
        if document is None:
            return None
        document.update(fields.to_document())
        return UserDocument.from_mongo(document)

    async def delete(self, user_id: str) -> bool:
        return self.documents.pop(parse_object_id(user_id), None) is not None


class InMemoryPostRepository:
    def __init__(self):
        self.documents: List[dict] = []

    def seed(self, user_id: str, created_at, title: str = "T", content: str = "C") -> dict:
        document = {
            "_id": ObjectId(),
            "title": title,
            "content": content,
            "userId": ObjectId(user_id),
            "createdAt": created_at,
        }
        self.documents.append(document)
        return document

    async def create(self, fields: PostFields) -> PostDocument:
        now = utc_now()
        document = {
            "_id": ObjectId(),
            "title": fields.title,
            "content": fields.content,
            "userId": require_object_id(fields.user_id, field="userId"),
            "createdAt": now,
            "updatedAt": now,
        }
        self.documents.append(document)
        return PostDocument.from_mongo(document)

    async def list_by_user(self, user_id: str) -> List[PostDocument]:
        oid = parse_object_id(user_id)
        matches = [doc for doc in self.documents if doc["userId"] == oid]
        # Insertion order breaks ties, newest insert first
        matches.reverse()
        matches.sort(key=lambda doc: to_utc(doc["createdAt"]), reverse=True)
        return [PostDocument.from_mongo(doc) for doc in matches]


class FakeStore:
    """Stands in for MongoStore on the health routes."""

    def __init__(self, healthy: bool = True):
        self.healthy = healthy

    async def ping(self) -> bool:
        return self.healthy


@pytest.fixture
def settings():
    return Settings(ENVIRONMENT="development", GRAPHQL_PATH="/")


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def users():
    return InMemoryUserRepository()


@pytest.fixture
def posts():
    return InMemoryPostRepository()


@pytest.fixture
def app(settings, store, users, posts):
    application = create_app(settings, store=store)
    application.state.users = users
    application.state.posts = posts
    return application


@pytest.fixture
def client(app):
    # No context manager: the lifespan (real MongoDB connection) is skipped
    return TestClient(app)


@pytest.fixture
def graphql(client):
    """POST a GraphQL document and return the decoded body."""

    def execute(query: str, variables: Optional[dict] = None) -> dict:
        response = client.post("/", json={"query": query, "variables": variables or {}})
        return response.json()

    return execute
