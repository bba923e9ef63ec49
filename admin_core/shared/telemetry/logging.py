"""Logging configuration for admin-core."""

import logging
import sys

from admin_core.core.config import get_settings


def setup_logging() -> None:
    """Configure library-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. Host applications that configure logging
    themselves can skip this.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )

