"""Runtime configuration read from the environment.

LEXICON_DEFAULT_LOCALE  locale used when neither provider nor factory names one
LEXICON_LOG_LEVEL       level passed to setup_logging()
"""

import os

DEFAULT_LOCALE = "en"
DEFAULT_LOG_LEVEL = "INFO"


def get_default_locale() -> str:
    """Get the fallback locale code."""
    return os.getenv("LEXICON_DEFAULT_LOCALE", "").strip() or DEFAULT_LOCALE


def get_log_level() -> str:
    """Get the configured log level name (upper case)."""
    return (os.getenv("LEXICON_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL).upper()
