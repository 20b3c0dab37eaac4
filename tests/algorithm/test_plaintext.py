# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# cspell: disable

# pylint: disable=no-self-use
"""Tests for passdigest.algorithm.plaintext."""

import pytest

from passdigest.algorithm.plaintext import (
    PlaintextDigest,
    PlaintextHasher,
    Variant,
    decode,
)
from passdigest.errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidParameterError,
)


class TestPlaintextDecode:
    """Test decoding plaintext digests."""

    def test_plaintext(self, password: str) -> None:
        """Test decoding a raw password."""
        digest = decode(f"$plaintext${password}")
        assert isinstance(digest, PlaintextDigest)
        assert digest.variant is Variant.PLAINTEXT
        assert digest.match(password)
        assert not digest.match("apple12")

    def test_key_keeps_delimiters(self) -> None:
        """Test that the key may hold the delimiter."""
        digest = decode("$plaintext$pass$word$")
        assert digest.key == b"pass$word$"
        assert digest.match("pass$word$")
        assert digest.encode() == "$plaintext$pass$word$"

    def test_base64(self, password: str) -> None:
        """Test decoding a base64 password."""
        digest = decode("$base64$YXBwbGUxMjM")
        assert digest.variant is Variant.BASE64
        assert digest.key == password.encode()
        assert digest.match(password)
        assert digest.encode() == "$base64$YXBwbGUxMjM"

    @pytest.mark.parametrize(
        "encoded,error",
        [
            ("$plaintext", InvalidFormatError),
            ("$clear$apple123", InvalidIdentifierError),
            ("$plaintext$", InvalidKeyEncodingError),
            ("$base64$YXBw!GUxMjM", InvalidKeyEncodingError),
        ],
    )
    def test_decode_errors(self, encoded: str, error: type) -> None:
        """Test that malformed digests are rejected."""
        with pytest.raises(error, match="^plaintext decode error: "):
            decode(encoded)


class TestPlaintextHasher:
    """Test the plaintext hasher builder."""

    @pytest.mark.parametrize(
        "variant,encoded",
        [
            ("plaintext", "$plaintext$apple123"),
            ("base64", "$base64$YXBwbGUxMjM"),
        ],
    )
    def test_hash(self, variant: str, encoded: str, password: str) -> None:
        """Test that the password is stored as it is."""
        digest = PlaintextHasher().with_variant(variant).hash(password)
        assert digest.encode() == encoded
        assert decode(encoded) == digest

    def test_default_variant(self, password: str) -> None:
        """Test that the raw variant is the default."""
        assert PlaintextHasher().build().variant is Variant.PLAINTEXT
        digest = PlaintextHasher().hash_with_salt(password, b"ignored")
        assert digest.encode() == f"$plaintext${password}"

    def test_unknown_variant(self) -> None:
        """Test that an unknown variant is rejected."""
        with pytest.raises(InvalidParameterError):
            PlaintextHasher().with_variant("hex")

    def test_needs_rehash(self) -> None:
        """Test the rehash decision."""
        digest = decode("$base64$YXBwbGUxMjM")
        assert PlaintextHasher().needs_rehash(digest)
        assert not PlaintextHasher(variant=Variant.BASE64).needs_rehash(
            digest
        )
