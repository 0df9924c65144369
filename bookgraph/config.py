"""
Application settings read from environment variables.

A ``.env`` file in the working directory is loaded first, so local
overrides can live there instead of the shell. Each field reads its
variable when a ``Settings`` instance is created, which lets tests
patch the environment and build a fresh instance.
"""

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = field(default_factory=lambda: os.getenv("PROJECT_NAME", "Book Catalog GraphQL API"))
    api_version: str = field(default_factory=lambda: os.getenv("API_VERSION", "1.0.0"))
    host: str = field(default_factory=lambda: os.getenv("HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "4000")))
    graphql_path: str = field(default_factory=lambda: os.getenv("GRAPHQL_PATH", "/graphql"))
    # Serve the GraphiQL console at ``graphql_path``.
    graphiql: bool = field(default_factory=lambda: _env_bool("GRAPHIQL", "true"))
    # Start with the two sample books.
    seed_sample_books: bool = field(default_factory=lambda: _env_bool("SEED_SAMPLE_BOOKS", "true"))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))


settings = Settings()
