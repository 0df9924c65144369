# bookgraph/main.py
import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from .catalog import BookStore, create_graphql_router
from .config import Settings, settings as default_settings
from .logging_config import setup_logging


logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, store: Optional[BookStore] = None) -> FastAPI:
    """Build the FastAPI application.

    The store is created here (seeded with the sample books unless
    disabled in settings) and kept on ``app.state.store``. Tests pass
    their own store to start from a known catalog.
    """
    settings = settings or default_settings
    setup_logging(settings.log_level)

    if store is None:
        store = BookStore(seed=settings.seed_sample_books)

    app = FastAPI(
        title=settings.project_name,
        description="CRUD over an in-memory book catalog, exposed through GraphQL.",
        version=settings.api_version,
    )
    app.state.store = store

    app.include_router(
        create_graphql_router(store, graphiql=settings.graphiql),
        prefix=settings.graphql_path,
    )

    @app.get("/")
    def health_check():
        return {"status": "ok", "books": len(store), "graphql": settings.graphql_path}

    return app


app = create_app()


def run() -> None:
    url = f"http://localhost:{default_settings.port}{default_settings.graphql_path}"
    logger.info("Server running at %s", url)
    if default_settings.graphiql:
        logger.info("Open GraphiQL at %s", url)
    uvicorn.run(app, host=default_settings.host, port=default_settings.port)


if __name__ == "__main__":
    run()
