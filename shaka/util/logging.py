"""Logging configuration for the comment thread tools."""

import logging
import sys

from shaka.config import Settings

# Loggers from the Firestore client that report every watch-stream reconnect
_NOISY_LOGGERS = (
    "google.cloud.firestore_v1.watch",
    "google.api_core.bidi",
    "urllib3.connectionpool",
)


def setup_logging(settings: Settings) -> None:
    """Configure stdlib logging.

    Application events go through logfire; this covers the Google client
    libraries, which log through ``logging``.

    Args:
        settings: Application settings
    """
    if settings.debug:
        level = logging.DEBUG
    elif settings.environment == "production":
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    if not settings.debug:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger("shaka").setLevel(level)
