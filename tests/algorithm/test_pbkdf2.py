# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# cspell: disable

# pylint: disable=no-self-use
"""Tests for passdigest.algorithm.pbkdf2."""

import pytest

from passdigest.algorithm.pbkdf2 import (
    Pbkdf2Digest,
    Pbkdf2Hasher,
    Variant,
    decode,
    decode_variant,
)
from passdigest.encoding import decode_adapted
from passdigest.errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidOptionValueError,
    InvalidParameterError,
    InvalidSaltEncodingError,
    InvalidSaltError,
)

SHA1_DIGEST = (
    "$pbkdf2$131000$OMd4jxFCqFWq9T7HWEvpvQ$MniJ8FEvDtukO8KmKYM1yUV0VWk"
)
SHA256_DIGEST = (
    "$pbkdf2-sha256$29000$/N.bsxZibA3B2NubM6b0Xg$"
    "pboBgU5tpMWi2YealJZFFzAviGWgHLp1BFXCCibQO6I"
)
SHA512_DIGEST = (
    "$pbkdf2-sha512$25000$VSolZMy59z4HgPDeWwuBMA$"
    "2Ioxz6Zr1jutEYWnFm3X6eIH4TostlklSy4WVWgCQseZuI3LPnw87xJokXj.M1pvobVk1"
    "/8NGwGiIvfJuWm63A"
)


class TestPbkdf2Decode:
    """Test decoding pbkdf2 digests."""

    @pytest.mark.parametrize(
        "encoded,variant,iterations",
        [
            (SHA1_DIGEST, Variant.SHA1, 131000),
            (SHA256_DIGEST, Variant.SHA256, 29000),
            (SHA512_DIGEST, Variant.SHA512, 25000),
        ],
    )
    def test_known_digests(
        self, encoded: str, variant: Variant, iterations: int, password: str
    ) -> None:
        """Test that the known digests match their password."""
        digest = decode(encoded)
        assert isinstance(digest, Pbkdf2Digest)
        assert digest.variant is variant
        assert digest.iterations == iterations
        assert len(digest.key) == variant.digest_size
        assert digest.match(password)
        assert not digest.match("wrong_password")
        assert digest.encode() == encoded

    def test_sha1_long_identifier(self, password: str) -> None:
        """Test that pbkdf2-sha1 is encoded with the short identifier."""
        digest = decode(SHA1_DIGEST.replace("$pbkdf2$", "$pbkdf2-sha1$"))
        assert digest.variant is Variant.SHA1
        assert digest.match(password)
        assert digest.encode() == SHA1_DIGEST

    def test_decode_variant(self) -> None:
        """Test that a variant restricted decoder rejects the others."""
        assert decode_variant(Variant.SHA256)(SHA256_DIGEST).iterations == (
            29000
        )
        with pytest.raises(InvalidIdentifierError):
            decode_variant(Variant.SHA512)(SHA256_DIGEST)

    @pytest.mark.parametrize(
        "encoded,error",
        [
            ("$pbkdf2-sha256$29000$c2FsdHNhbHQ", InvalidFormatError),
            ("$pbkdf2-md5$29000$c2FsdHNhbHQ$a2V5", InvalidIdentifierError),
            ("$sha256$29000$c2FsdHNhbHQ$a2V5", InvalidIdentifierError),
            ("$pbkdf2-sha256$many$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            ("$pbkdf2-sha256$-1$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            (
                "$pbkdf2-sha256$29000$c2FsdHNhbHQ=$a2V5",
                InvalidSaltEncodingError,
            ),
            ("$pbkdf2-sha256$29000$c2FsdHNhbHQ$a+V5", InvalidKeyEncodingError),
            ("$pbkdf2-sha256$29000$c2FsdHNhbHQ$", InvalidKeyEncodingError),
        ],
    )
    def test_decode_errors(self, encoded: str, error: type) -> None:
        """Test that malformed digests are rejected."""
        with pytest.raises(error, match="^pbkdf2 decode error: "):
            decode(encoded)


class TestPbkdf2Hasher:
    """Test the pbkdf2 hasher builder."""

    def test_defaults(self) -> None:
        """Test the defaults of the sha256 variant."""
        hasher = Pbkdf2Hasher().build()
        assert hasher.variant is Variant.SHA256
        assert hasher.iterations == 310000
        assert hasher.key_length == 32
        assert hasher.salt_length == 16

    @pytest.mark.parametrize(
        "variant,iterations",
        [("sha1", 720000), ("sha512", 120000), ("pbkdf2-sha384", 310000)],
    )
    def test_variant_default_iterations(
        self, variant: str, iterations: int
    ) -> None:
        """Test that each variant has its own default iterations."""
        hasher = Pbkdf2Hasher().with_variant(variant).build()
        assert hasher.iterations == iterations
        assert hasher.key_length == hasher.variant.digest_size

    def test_hash_with_salt_known_digest(self, password: str) -> None:
        """Test that a known digest is reproduced from its salt."""
        hasher = (
            Pbkdf2Hasher()
            .with_variant("sha256")
            .with_iterations(29000)
            .with_unsafe()
        )
        salt = decode_adapted("/N.bsxZibA3B2NubM6b0Xg")
        assert hasher.hash_with_salt(password, salt).encode() == SHA256_DIGEST

    def test_hash_then_match(self, password: str) -> None:
        """Test that a fresh digest matches after decoding."""
        hasher = Pbkdf2Hasher(variant=Variant.SHA512, iterations=100000)
        digest = hasher.hash(password)
        decoded = decode(digest.encode())
        assert decoded == digest
        assert decoded.match(password)
        assert len(decoded.salt) == 16

    def test_iterations_below_minimum(self, password: str) -> None:
        """Test that too few iterations need the unsafe flag."""
        hasher = Pbkdf2Hasher().with_iterations(1000)
        with pytest.raises(InvalidParameterError, match="iterations"):
            hasher.hash(password)
        assert hasher.with_unsafe().hash(password).iterations == 1000

    def test_key_shorter_than_hash(self) -> None:
        """Test that keys shorter than the hash output are rejected."""
        hasher = Pbkdf2Hasher(variant=Variant.SHA256).with_key_length(16)
        with pytest.raises(InvalidParameterError, match="key_length"):
            hasher.build()

    def test_salt_bounds(self, password: str) -> None:
        """Test that short salts need the unsafe flag."""
        hasher = Pbkdf2Hasher(iterations=100000)
        with pytest.raises(InvalidSaltError):
            hasher.hash_with_salt(password, b"1234567")
        with pytest.raises(InvalidSaltError):
            hasher.with_unsafe().hash_with_salt(password, b"")
        digest = hasher.hash_with_salt(password, b"1")
        assert digest.salt == b"1"

    @pytest.mark.parametrize(
        "method,value",
        [
            ("with_iterations", 0),
            ("with_key_length", 0),
            ("with_salt_length", 0),
            ("with_variant", "md5"),
        ],
    )
    def test_setters_check_bounds(self, method: str, value: object) -> None:
        """Test that the setters reject invalid values."""
        with pytest.raises(InvalidParameterError):
            getattr(Pbkdf2Hasher(), method)(value)

    def test_needs_rehash(self) -> None:
        """Test the rehash decision."""
        digest = decode(SHA256_DIGEST)
        assert Pbkdf2Hasher().needs_rehash(digest)
        hasher = Pbkdf2Hasher(iterations=29000, unsafe=True)
        assert not hasher.needs_rehash(digest)
        assert hasher.with_variant("sha512").needs_rehash(digest)
