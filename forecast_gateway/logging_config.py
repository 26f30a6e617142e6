from __future__ import annotations

import logging
from logging.config import dictConfig

LOG_FORMAT = "%(levelprefix)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Route application logs through uvicorn's formatter."""

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "uvicorn": {
                    "()": "uvicorn.logging.DefaultFormatter",
                    "fmt": LOG_FORMAT,
                },
            },
            "handlers": {
                "default": {
                    "class": "logging.StreamHandler",
                    "formatter": "uvicorn",
                }
            },
            "root": {
                "handlers": ["default"],
                "level": getattr(logging, level.upper(), logging.INFO),
            },
        }
    )
