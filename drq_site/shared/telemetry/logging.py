"""Logging configuration for the application."""

import logging
import sys

from drq_site.core.config import get_settings


def setup_logging() -> None:
    """Configure application-wide logging.

    DEBUG when settings.debug is True, otherwise INFO; output to stdout.
    """
    settings = get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
