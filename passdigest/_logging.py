# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Logging configuration module."""

import logging.config
import os
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple, get_args

ENV_PREFIX = "PASSDIGEST_"


class LogLevel(str, Enum):
    """The log level type."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


LogLevelType = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]
"""Possible log levels."""


# fmt: off
def get_logging_config(log_level: str) -> Dict[str, Any]:
    """Get logging config dict.

    Parameters
    ----------
    log_level : str
        The log level

    Returns
    -------
    Dict[str, Any]
        The logging config dict
    """
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": (
                    "%(levelname)s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s"  # pylint: disable=line-too-long # noqa: E501
                ),
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "formatter": "default",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "passdigest": {
                "handlers": ["default"],
                "level": log_level,
                "propagate": False,
            },
            # skip spamming logs from passlib's backend detection
            "passlib": {
                "handlers": ["default"],
                "level": "WARNING",
                "propagate": False,
            },
        },
    }
# fmt: on


# pyright: reportInvalidTypeForm=false
def get_log_level() -> LogLevelType:
    """Get the default log level.

    Returns
    -------
    LogLevel
        The default log level
    """
    possible_log_levels: Tuple[LogLevelType, ...] = get_args(LogLevelType)
    for_env = os.environ.get(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper()
    if for_env in possible_log_levels:
        return for_env  # type: ignore[return-value]
    return "INFO"


def configure_logging(log_level: Optional[str] = None) -> None:
    """Apply the logging config.

    Parameters
    ----------
    log_level : Optional[str], optional
        The log level, from the environment if not given
    """
    level = (log_level or get_log_level()).upper()
    logging.config.dictConfig(get_logging_config(level))


__all__ = [
    "LogLevel",
    "LogLevelType",
    "configure_logging",
    "get_log_level",
    "get_logging_config",
]
