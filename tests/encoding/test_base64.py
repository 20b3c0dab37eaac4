# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use
"""Tests for passdigest.encoding._base64."""

import pytest

from passdigest.encoding import (
    decode_adapted,
    decode_bcrypt,
    decode_crypt,
    decode_std,
    decode_std_padded,
    encode_adapted,
    encode_bcrypt,
    encode_crypt,
    encode_std,
    encode_std_padded,
)


class TestStandard:
    """Test unpadded and padded standard base64."""

    def test_encode_without_padding(self) -> None:
        """Test that padding is stripped."""
        assert encode_std(b"salt") == "c2FsdA"

    def test_decode_without_padding(self) -> None:
        """Test decoding unpadded text."""
        assert decode_std("c2FsdA") == b"salt"
        assert decode_std("") == b""

    @pytest.mark.parametrize("text", ["c2FsdA==", "c2Fsd.", "c", "c2F sdA"])
    def test_decode_invalid(self, text: str) -> None:
        """Test that padding, foreign characters and bad lengths fail."""
        with pytest.raises(ValueError):
            decode_std(text)

    def test_padded(self) -> None:
        """Test the padded form used by the LDAP schemes."""
        assert encode_std_padded(b"salt") == "c2FsdA=="
        assert decode_std_padded("c2FsdA==") == b"salt"

    @pytest.mark.parametrize("text", ["c2FsdA", "c2Fsd@==", "éé=="])
    def test_padded_invalid(self, text: str) -> None:
        """Test that missing padding or foreign characters fail."""
        with pytest.raises(ValueError):
            decode_std_padded(text)


class TestAdapted:
    """Test the ``./`` alphabet of pbkdf2 digests."""

    def test_encode(self) -> None:
        """Test that '+' becomes '.' and padding is stripped."""
        assert encode_adapted(b"\xfb\xff") == "./8"

    def test_decode(self) -> None:
        """Test decoding adapted text."""
        assert decode_adapted("./8") == b"\xfb\xff"
        assert decode_adapted("c2FsdA") == b"salt"

    @pytest.mark.parametrize("text", ["+/8", "c2FsdA==", "a"])
    def test_decode_invalid(self, text: str) -> None:
        """Test that the standard alphabet and padding are rejected."""
        with pytest.raises(ValueError):
            decode_adapted(text)


class TestBcrypt:
    """Test the bcrypt alphabet."""

    def test_salt_length(self) -> None:
        """Test that a 16 byte salt has 22 characters."""
        encoded = encode_bcrypt(bytes(16))
        assert encoded == "." * 22
        assert decode_bcrypt(encoded) == bytes(16)

    def test_known_salt(self) -> None:
        """Test that a real bcrypt salt survives decoding."""
        salt = "3o9IF74Phgdz4Q6j7K7s0u"  # cspell: disable-line
        assert encode_bcrypt(decode_bcrypt(salt)) == salt

    def test_decode_invalid(self) -> None:
        """Test that characters outside the alphabet are rejected."""
        with pytest.raises(ValueError):
            decode_bcrypt("+" * 22)


class TestCrypt:
    """Test the little-endian crypt alphabet."""

    def test_encode(self) -> None:
        """Test encoding zero bytes."""
        assert encode_crypt(bytes(3)) == "...."

    def test_decode(self) -> None:
        """Test decoding with a partial trailing group."""
        assert decode_crypt("./") == b"\x40"
        assert decode_crypt(encode_crypt(b"yescrypt")) == b"yescrypt"

    @pytest.mark.parametrize("text", [".z", "....-", "....."])
    def test_decode_invalid(self, text: str) -> None:
        """Test that trailing bits, foreign chars and lengths fail."""
        with pytest.raises(ValueError):
            decode_crypt(text)
