"""Logging setup for Lexicon and the resolver engine."""

import logging

from lexicon.config import get_log_level

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

# Loggers owned by this project
LOGGER_NAMES = ("lexicon", "template_resolver")


def setup_logging(level: str | int | None = None) -> None:
    """Attach a stream handler to the project loggers.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Level name or number. Defaults to LEXICON_LOG_LEVEL.
    """
    if level is None:
        level = get_log_level()

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not any(getattr(h, "_lexicon", False) for h in logger.handlers):
            handler = logging.StreamHandler()
            handler.setFormatter(logging.Formatter(LOG_FORMAT))
            handler._lexicon = True  # type: ignore[attr-defined]
            logger.addHandler(handler)
