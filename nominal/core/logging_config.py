"""Logging configuration for scripts and applications embedding nominal."""

from __future__ import annotations

import logging
from logging.config import dictConfig
from typing import Optional

from nominal.core.config import LOG_LEVELS, get_settings


class ChannelAliasFilter(logging.Filter):
    """Map package logger names to concise aliases for log output."""

    NAME_MAP = {
        "nominal.core.registry": "registry",
        "nominal.core.installer": "installer",
        "nominal.core.tagging": "tagging",
    }

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - trivial
        record.channel = self.NAME_MAP.get(record.name, record.name)
        return True


def _resolve_log_level(default: Optional[str] = None) -> str:
    """Resolve the log level from the explicit default or the settings."""
    level = (default or "").strip().upper()
    if level in LOG_LEVELS:
        return level
    return get_settings().app.log_level


def configure_logging(default_level: Optional[str] = None) -> str:
    """Configure console logging and return the level that was applied."""

    level = _resolve_log_level(default_level)

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "filters": {
            "channel": {"()": "nominal.core.logging_config.ChannelAliasFilter"},
        },
        "formatters": {
            "default": {
                "format": "%(asctime)s | %(levelname)-8s | %(channel)-12s | %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "level": level,
                "stream": "ext://sys.stdout",
                "filters": ["channel"],
            },
        },
        "loggers": {
            "": {
                "handlers": ["console"],
                "level": level,
            },
            "nominal": {
                "handlers": ["console"],
                "level": level,
                "propagate": False,
            },
        },
    }

    dictConfig(config)
    logging.getLogger(__name__).debug("Logging configured with level %s", level)
    return level
