# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# pylint: disable=missing-return-doc,missing-yield-doc,missing-param-doc
"""Shared fixtures for tests."""

import logging
from collections.abc import Generator

import pytest

from passdigest.decoder import Decoder, new_decoder, new_decoder_all

PASSWORD = "apple123"  # nosemgrep # nosec
"""The password of most of the known digests."""

LDAP_PASSWORD = "example"  # nosemgrep # nosec
"""The password of the known LDAP digests."""


@pytest.fixture(name="password")
def password_fixture() -> str:
    """The password of the known digests."""
    return PASSWORD


@pytest.fixture(name="decoder")
def decoder_fixture() -> Decoder:
    """A registry with the recommended algorithms."""
    return new_decoder()


@pytest.fixture(name="decoder_all")
def decoder_all_fixture() -> Decoder:
    """A registry with all the algorithms."""
    return new_decoder_all()


@pytest.fixture(name="debug_logs")
def debug_logs_fixture(
    caplog: pytest.LogCaptureFixture,
) -> Generator[pytest.LogCaptureFixture, None, None]:
    """Capture the package debug logs."""
    logger = logging.getLogger("passdigest")
    propagate = logger.propagate
    logger.propagate = True
    with caplog.at_level(logging.DEBUG, logger="passdigest"):
        yield caplog
    logger.propagate = propagate
