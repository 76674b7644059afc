"""Logging configuration for the service search engine."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    include_timestamp: bool = True
) -> None:
    """
    Set up logging for the service search engine.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        include_timestamp: Whether to include timestamps
    """
    if format_string is None:
        if include_timestamp:
            format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_string = "%(name)s - %(levelname)s - %(message)s"

    numeric_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        stream=sys.stdout,
        force=True
    )

    logging.getLogger("service_search").setLevel(numeric_level)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {level}")


class StructuredLogger:
    """Logger that appends key=value context to every message."""

    def __init__(self, name: str):
        """Initialize structured logger."""
        self.logger = logging.getLogger(name)
        self.context = {}

    def with_context(self, **kwargs) -> 'StructuredLogger':
        """Return a logger carrying additional context."""
        new_logger = StructuredLogger(self.logger.name)
        new_logger.context = {**self.context, **kwargs}
        return new_logger

    def _format_message(self, message: str) -> str:
        if not self.context:
            return message

        context_str = " ".join([f"{k}={v}" for k, v in self.context.items()])
        return f"{message} [{context_str}]"

    def debug(self, message: str) -> None:
        self.logger.debug(self._format_message(message))

    def warning(self, message: str) -> None:
        self.logger.warning(self._format_message(message))
