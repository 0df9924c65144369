"""
Logging for the catalog service.

The store logs every add, update and delete at INFO, and the GraphQL
layer logs rejected requests (unknown ids, bad input) at WARNING. All
of it goes to stderr through the root logger, configured from
``Settings.log_level`` when ``create_app`` runs. uvicorn keeps its own
access log handlers.
"""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO") -> None:
    """Send catalog logs to stderr at ``level``.

    ``level`` is a level name such as ``"debug"`` or ``"INFO"``; unknown
    names fall back to ``INFO``. Does nothing when the root logger
    already has handlers, so building several apps (as the tests do)
    never stacks duplicate output.
    """
    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
