from __future__ import annotations

import logging
import sys

PRODUCTION_ENV_VALUES = frozenset({"prod", "production"})
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def resolve_log_level(*, app_env: str, log_level: str | None = None) -> int:
    """Pick the root log level: an explicit LOG_LEVEL wins, otherwise INFO in production and DEBUG elsewhere."""
    if log_level:
        level = logging.getLevelName(log_level.strip().upper())
        if isinstance(level, int):
            return level
    return logging.INFO if app_env.lower() in PRODUCTION_ENV_VALUES else logging.DEBUG


def configure_logging(*, app_env: str, log_level: str | None = None) -> None:
    level = resolve_log_level(app_env=app_env, log_level=log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))

    root_logger.handlers.clear()
    root_logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)


__all__ = ["LOG_FORMAT", "PRODUCTION_ENV_VALUES", "configure_logging", "get_logger", "resolve_log_level"]
