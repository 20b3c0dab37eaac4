# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# cspell: disable

"""Tests for passdigest.normalize."""

import pytest

from passdigest import normalize


@pytest.mark.parametrize(
    "encoded,expected",
    [
        (
            "{CRYPT}$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$a2V5",
            "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$a2V5",
        ),
        (
            "{ARGON2}$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$a2V5",
            "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$a2V5",
        ),
        ("{CLEARTEXT}secret", "$plaintext$secret"),
        (
            "{PBKDF2-SHA256}10000$xxOL0cKNcEfejM9hoWFBCA$gTSq",
            "$pbkdf2-sha256$10000$xxOL0cKNcEfejM9hoWFBCA$gTSq",
        ),
        (
            "{pbkdf2-sha512}10000$c2FsdA$a2V5",
            "$pbkdf2-sha512$10000$c2FsdA$a2V5",
        ),
        ("{PBKDF2}10000$c2FsdA$a2V5", "$pbkdf2$10000$c2FsdA$a2V5"),
        ("{SCHEME}25$c2FsdA$a2V5", "$scheme$25$c2FsdA$a2V5"),
        ("$2a$10$abc", "$2b$10$abc"),
        ("$2x$10$abc", "$2b$10$abc"),
        ("$2y$10$abc", "$2b$10$abc"),
        ("$2$10$abc", "$2b$10$abc"),
        ("{CRYPT}$2y$10$abc", "$2b$10$abc"),
    ],
)
def test_normalize_rewrites(encoded: str, expected: str) -> None:
    """Test that legacy forms are rewritten."""
    assert normalize(encoded) == expected


@pytest.mark.parametrize(
    "encoded",
    [
        "$argon2id$v=19$m=65536,t=3,p=4$c2FsdA$a2V5",
        "$2b$10$abc",
        "$5$rounds=5000$salt$key",
        "{SSHA512}c2FsdGVk",
        "not a digest",
        "",
    ],
)
def test_normalize_keeps_canonical(encoded: str) -> None:
    """Test that canonical or unknown input is returned unchanged."""
    assert normalize(encoded) == encoded


def test_normalize_is_idempotent() -> None:
    """Test that normalizing twice changes nothing."""
    encoded = "{CRYPT}$2y$10$abc"
    once = normalize(encoded)
    assert normalize(once) == once
