"""Logging setup for processes embedding workspace_auth."""

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging with a consistent format and level name."""
    normalized = level.strip().upper() if level and level.strip() else "INFO"
    resolved = getattr(logging, normalized, logging.INFO)

    logging.basicConfig(level=resolved, format=_LOG_FORMAT)
