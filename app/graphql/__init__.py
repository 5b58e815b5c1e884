"""
GraphQL package.

Exposes the strawberry schema for the Hacker News clone and a factory for
the FastAPI router that serves it.

Example query::

    query {
        feed(filterNeedle: "python", take: 10) {
            id
            url
            comments { id body }
        }
    }
"""
import strawberry
from strawberry.fastapi import GraphQLRouter

from app.config import settings

from .context import GraphQLContext, get_context
from .mutations import Mutation
from .queries import Query

schema = strawberry.Schema(
    query=Query,
    mutation=Mutation,
)


def create_graphql_router() -> GraphQLRouter[GraphQLContext, None]:
    """Create the GraphQL router for FastAPI, mounted at ``/graphql``."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        context_getter=get_context,
        graphql_ide="graphiql" if settings.GRAPHIQL else None,
    )


__all__ = ["schema", "create_graphql_router"]
