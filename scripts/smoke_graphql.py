"""
Smoke test against a running server

Creates a user and a post, lists the user's posts, then deletes the user.

Run: python scripts/smoke_graphql.py [url]
"""
import asyncio
import sys

import httpx

DEFAULT_URL = "http://localhost:4000/"


async def call(client: httpx.AsyncClient, url: str, query: str, variables: dict) -> dict:
    response = await client.post(url, json={"query": query, "variables": variables}, timeout=10.0)
    response.raise_for_status()
    body = response.json()
    if body.get("errors"):
        raise RuntimeError(f"GraphQL errors: {body['errors']}")
    return body["data"]


async def smoke(url: str):
    print(f"🧪 Testing GraphQL endpoint: {url}\n")

    async with httpx.AsyncClient() as client:
        data = await call(
            client, url,
            "mutation($input: UserInput!) { createUser(input: $input) { id name } }",
            {"input": {"name": "A", "email": "a@x.com", "phone": "1"}},
        )
        user_id = data["createUser"]["id"]
        print(f"✅ Created user {user_id}")

        data = await call(
            client, url,
            "mutation($input: PostInput!) { createPost(input: $input) { id createdAt } }",
            {"input": {"title": "T", "content": "C", "userId": user_id}},
        )
        print(f"✅ Created post {data['createPost']['id']} at {data['createPost']['createdAt']}")

        data = await call(
            client, url,
            "query($userId: ID!) { getPostsByUser(userId: $userId) { id title } }",
            {"userId": user_id},
        )
        print(f"📥 Posts by user: {data['getPostsByUser']}")

        data = await call(
            client, url,
            "query { getAllUsers(options: {paginate: {page: 1, limit: 5}}) { meta { totalCount } } }",
            {},
        )
        print(f"📊 Total users: {data['getAllUsers']['meta']['totalCount']}")

        data = await call(
            client, url,
            "mutation($id: ID!) { deleteUser(id: $id) }",
            {"id": user_id},
        )
        print(f"🗑️  Deleted user: {data['deleteUser']}")

    print("\n✅ GraphQL endpoint is working!")


if __name__ == "__main__":
    try:
        asyncio.run(smoke(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_URL))
    except (httpx.HTTPError, RuntimeError) as e:
        print(f"❌ Error: {e}")
        sys.exit(1)
