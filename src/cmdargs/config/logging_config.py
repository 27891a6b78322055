"""Logging setup for the demo program.

Library modules only call ``logging.getLogger(__name__)``; handlers are
attached here and nowhere else.
"""

from __future__ import annotations

import logging
import logging.config

from cmdargs.config.settings import ParserSettings


def configure_logging(settings: ParserSettings) -> None:
    """Apply a ``dictConfig`` for the ``cmdargs`` logger tree.

    Level is DEBUG when ``settings.debug`` is set, WARNING otherwise.
    """
    level = logging.DEBUG if settings.debug else logging.WARNING
    logging.captureWarnings(True)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": settings.log_format,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": level,
                "formatter": "standard",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "cmdargs": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
            "py.warnings": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }

    logging.config.dictConfig(config)
