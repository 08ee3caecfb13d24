"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any, Dict, List, Optional

import strawberry
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.extensions import MaskErrors
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from app.core.config import Settings, settings as default_settings
from app.core.exceptions import UserPostsError
from app.core.logging import get_logger
from app.graphql.context import get_context
from app.graphql.mutations import Mutation
from app.graphql.queries import Query

logger = get_logger(__name__)


def _is_unexpected(error: GraphQLError) -> bool:
    """Errors raised inside resolvers that are not ours (store failures, bugs)."""
    original = error.original_error
    return original is not None and not isinstance(original, UserPostsError)


class UserPostsSchema(strawberry.Schema):
    """Schema that reports resolver errors through the application logger."""

    def process_errors(
        self,
        errors: List[GraphQLError],
        execution_context: Optional[ExecutionContext] = None,
    ) -> None:
        for error in errors:
            original = error.original_error
            if _is_unexpected(error):
                logger.error(
                    f"GraphQL resolver failed at {error.path}: {original}",
                    exc_info=(type(original), original, original.__traceback__),
                )
            elif isinstance(original, UserPostsError):
                logger.warning(f"GraphQL request rejected ({original.code}): {original.message}")
            else:
                logger.info(f"GraphQL request invalid: {error.message}")


def create_schema(config: Settings = default_settings) -> UserPostsSchema:
    """
    Builds the schema. In production, messages of unexpected errors are
    replaced by a generic one; validation and application errors stay
    visible to the client.
    """
    extensions = []
    if config.is_production:
        extensions.append(MaskErrors(should_mask_error=_is_unexpected))

    return UserPostsSchema(
        query=Query,
        mutation=Mutation,
        extensions=extensions,
    )


schema = create_schema()


def validate_schema(target: strawberry.Schema = schema) -> None:
    """Validate the GraphQL schema at startup.

    Raises:
        Exception: If the schema is invalid or has unresolved types
    """
    try:
        graphql_schema = target._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error(f"GraphQL schema validation failed: {e}")
        raise


def create_graphql_router(
    config: Settings = default_settings,
    target: strawberry.Schema = schema,
) -> GraphQLRouter[Dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        target,
        path=config.GRAPHQL_PATH,
        graphql_ide="graphiql" if config.graphiql_enabled else None,
        context_getter=get_context,
    )
