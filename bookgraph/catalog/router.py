"""
HTTP route for the catalogue GraphQL API.

A single endpoint accepts GraphQL over GET and POST. When GraphiQL is
enabled, a browser opening the same path gets the interactive console.
The store is passed in by the caller and exposed to resolvers through
the request context.
"""

from strawberry.fastapi import GraphQLRouter

from .graphql_schema import schema
from .store import BookStore


def create_graphql_router(store: BookStore, graphiql: bool = True) -> GraphQLRouter:
    """Build a GraphQL router bound to ``store``.

    Parameters
    ----------
    store : BookStore
        The catalog every request reads and writes.
    graphiql : bool
        Serve the GraphiQL console on browser GET requests.
    """

    async def get_context() -> dict:
        # Merged into strawberry's default request/response context.
        return {"store": store}

    return GraphQLRouter(
        schema,
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
