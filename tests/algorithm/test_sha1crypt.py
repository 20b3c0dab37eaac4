# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# cspell: disable

# pylint: disable=no-self-use
"""Tests for passdigest.algorithm.sha1crypt."""

import re

import pytest
from passlib.hash import sha1_crypt  # type: ignore[import-untyped]

from passdigest.algorithm.sha1crypt import (
    Sha1CryptDigest,
    Sha1CryptHasher,
    decode,
)
from passdigest.errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidOptionValueError,
    InvalidParameterError,
    InvalidSaltEncodingError,
    InvalidSaltError,
)

KEY = "abcdefghijklmnopqrstuvwxyz01"
DIGEST_RE = re.compile(r"^\$sha1\$1000\$[./A-Za-z0-9]{8}\$[./A-Za-z0-9]{28}$")


class TestSha1CryptDecode:
    """Test decoding sha1crypt digests."""

    def test_decode(self) -> None:
        """Test decoding a digest."""
        encoded = f"$sha1$40000$saltsalt${KEY}"
        digest = decode(encoded)
        assert isinstance(digest, Sha1CryptDigest)
        assert digest.iterations == 40000
        assert digest.salt == b"saltsalt"
        assert digest.key == KEY.encode()
        assert digest.encode() == encoded

    def test_empty_iterations_default(self) -> None:
        """Test that empty iterations take the default."""
        digest = decode(f"$sha1$$saltsalt${KEY}")
        assert digest.iterations == 480000
        assert digest.encode() == f"$sha1$480000$saltsalt${KEY}"

    @pytest.mark.parametrize(
        "encoded,error",
        [
            (f"$sha1$40000${KEY}", InvalidFormatError),
            (f"$sha2$40000$saltsalt${KEY}", InvalidIdentifierError),
            (f"$sha1$many$saltsalt${KEY}", InvalidOptionValueError),
            (f"$sha1$40000${'s' * 65}${KEY}", InvalidSaltEncodingError),
            (f"$sha1$40000$salt-alt${KEY}", InvalidSaltEncodingError),
            ("$sha1$40000$saltsalt$", InvalidKeyEncodingError),
            ("$sha1$40000$saltsalt$key=", InvalidKeyEncodingError),
        ],
    )
    def test_decode_errors(self, encoded: str, error: type) -> None:
        """Test that malformed digests are rejected."""
        with pytest.raises(error, match="^sha1crypt decode error: "):
            decode(encoded)


class TestSha1CryptHasher:
    """Test the sha1crypt hasher builder."""

    def test_defaults(self) -> None:
        """Test the default parameters."""
        hasher = Sha1CryptHasher().build()
        assert hasher.iterations == 480000
        assert hasher.salt_length == 8

    def test_hash_then_match(self, password: str) -> None:
        """Test that a fresh digest matches after decoding."""
        digest = Sha1CryptHasher().with_iterations(1000).hash(password)
        encoded = digest.encode()
        assert DIGEST_RE.match(encoded)
        decoded = decode(encoded)
        assert decoded == digest
        assert decoded.match(password)
        assert not decoded.match("apple124")
        assert sha1_crypt.verify(password, encoded)

    def test_hash_with_salt(self, password: str) -> None:
        """Test that a fixed salt is kept."""
        hasher = Sha1CryptHasher(iterations=1000, salt_length=16)
        digest = hasher.hash_with_salt(password, b"0123456789abcdef")
        assert digest.salt == b"0123456789abcdef"
        assert digest == hasher.hash_with_salt(password, b"0123456789abcdef")
        assert len(hasher.hash(password).salt) == 16

    @pytest.mark.parametrize("salt", [b"s" * 65, b"salt salt"])
    def test_invalid_salts(self, salt: bytes, password: str) -> None:
        """Test that salts must be at most 64 crypt characters."""
        with pytest.raises(InvalidSaltError):
            Sha1CryptHasher(iterations=1000).hash_with_salt(password, salt)

    @pytest.mark.parametrize(
        "method,value",
        [
            ("with_iterations", 0),
            ("with_iterations", 2**32),
            ("with_salt_length", 65),
        ],
    )
    def test_setters_check_bounds(self, method: str, value: int) -> None:
        """Test that the setters reject invalid values."""
        with pytest.raises(InvalidParameterError):
            getattr(Sha1CryptHasher(), method)(value)

    def test_needs_rehash(self) -> None:
        """Test the rehash decision."""
        digest = decode(f"$sha1$40000$saltsalt${KEY}")
        assert Sha1CryptHasher().needs_rehash(digest)
        assert not Sha1CryptHasher(iterations=40000).needs_rehash(digest)
        assert Sha1CryptHasher().needs_rehash("$sha1$40000$saltsalt$key")
