import logging
import sys

from app.config import VALID_LOG_LEVELS

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class _AppStreamHandler(logging.StreamHandler):
    """Marker subclass so configure_logging can recognise its own handler."""


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Install a single stream handler on the root logger.

    Calling this again only updates the level; it never stacks handlers.

    Args:
        level: Name of a standard logging level (case-insensitive).

    Returns:
        The root logger.

    Raises:
        ValueError: If ``level`` is not a standard level name.
    """
    level_name = level.strip().upper()
    if level_name not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level!r}")

    root = logging.getLogger()
    root.setLevel(level_name)

    if not any(isinstance(h, _AppStreamHandler) for h in root.handlers):
        handler = _AppStreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    return root
