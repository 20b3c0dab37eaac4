# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Tests for the logging configuration."""
# pylint: disable=missing-return-doc,missing-param-doc,missing-raises-doc

import logging
import os
from unittest.mock import patch

import pytest

# noinspection PyProtectedMember
from passdigest._logging import (
    ENV_PREFIX,
    LogLevel,
    configure_logging,
    get_log_level,
    get_logging_config,
)


def test_get_logging_config() -> None:
    """Test the get_logging_config function."""
    log_level = "WARNING"
    config = get_logging_config(log_level)
    assert (
        config["formatters"]["default"]["format"]
        == "%(levelname)s %(asctime)s.%(msecs)03d [%(name)s:%(filename)s:%(lineno)d] %(message)s"  # pylint: disable=line-too-long # noqa: E501
    )
    assert config["formatters"]["default"]["datefmt"] == "%Y-%m-%d %H:%M:%S"
    package_logger = config["loggers"]["passdigest"]
    assert package_logger["level"] == log_level
    assert package_logger["handlers"] == ["default"]
    assert package_logger["propagate"] is False
    passlib_logger = config["loggers"]["passlib"]
    assert passlib_logger["level"] == "WARNING"
    assert passlib_logger["propagate"] is False
    assert config["handlers"]["default"]["stream"] == "ext://sys.stderr"


@pytest.mark.parametrize(
    "env_value,expected",
    [
        ("DEBUG", "DEBUG"),
        ("warning", "WARNING"),
        ("INVALID", "INFO"),
        ("", "INFO"),
    ],
)
def test_get_log_level(env_value: str, expected: str) -> None:
    """Test get_log_level."""
    with patch.dict(os.environ, {f"{ENV_PREFIX}LOG_LEVEL": env_value}):
        assert get_log_level() == expected


def test_get_log_level_unset() -> None:
    """Test get_log_level without the environment variable."""
    with patch.dict(os.environ, {}):
        os.environ.pop(f"{ENV_PREFIX}LOG_LEVEL", None)
        assert get_log_level() == "INFO"


def test_configure_logging() -> None:
    """Test that the package logger gets the level."""
    logger = logging.getLogger("passdigest")
    level = logger.level
    propagate = logger.propagate
    handlers = list(logger.handlers)
    try:
        configure_logging(LogLevel.DEBUG.value.lower())
        assert logger.level == logging.DEBUG
        assert logger.propagate is False
        with patch.dict(os.environ, {f"{ENV_PREFIX}LOG_LEVEL": "ERROR"}):
            configure_logging()
        assert logger.level == logging.ERROR
    finally:
        logger.setLevel(level)
        logger.propagate = propagate
        logger.handlers = handlers
