"""Logging setup for processes embedding the gateway encoder.

The package itself only creates module loggers; the shard orchestrator (or
whatever process owns the connection) calls ``configure_logging()`` once at
startup, the way a daemon entry point calls ``logging.basicConfig``.
"""

import logging

from .config import settings

LOG_FORMAT = "%(levelname)s:     %(name)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging; defaults to ``settings.log_level``."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format=LOG_FORMAT,
    )
