"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from fastapi import Request
from graphql import get_introspection_query, graphql_sync
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter

from ..config import settings
from ..logging import get_logger
from ..units import check_unit_tables
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


class SchemaValidationError(Exception):
    """Raised when the GraphQL schema or the unit tables behind it are broken."""

    pass


def validate_schema() -> None:
    """Validate the GraphQL schema and unit tables at startup.

    Raises:
        SchemaValidationError: If the schema or a unit table is invalid
    """
    try:
        check_unit_tables()

        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise SchemaValidationError(
                f"GraphQL schema validation failed: {'; '.join(error_messages)}"
            )

        # Introspection catches most type resolution issues
        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise SchemaValidationError(
                f"GraphQL introspection failed: {'; '.join(error_messages)}"
            )

        logger.info("GraphQL schema validation successful")

    except SchemaValidationError as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise
    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise SchemaValidationError(str(e)) from e


def create_graphql_router() -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""

    async def get_context(request: Request) -> dict[str, Any]:
        """Get the context for GraphQL resolvers."""
        return {
            "request": request,
        }

    return GraphQLRouter(
        schema,
        path="/graphql",
        graphiql=settings.graphiql,
        context_getter=get_context,
    )
