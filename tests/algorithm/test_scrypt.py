# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
# cspell: disable

# pylint: disable=no-self-use
"""Tests for passdigest.algorithm.scrypt."""

from unittest.mock import patch

import pytest

from passdigest.algorithm.scrypt import (
    ScryptDigest,
    ScryptHasher,
    Variant,
    decode,
    decode_variant,
    scrypt_maxmem,
)
from passdigest.encoding import YescryptSetting
from passdigest.errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidOptionKeyError,
    InvalidOptionValueError,
    InvalidParameterError,
    InvalidSaltEncodingError,
    InvalidSaltError,
    KeyDerivationError,
)

KNOWN_DIGEST = (
    "$scrypt$ln=15,r=8,p=1$m7M2BqBUytk75zznfK91jg$"
    "F11VwAGrQanCaexGVmBafSbTs1X2l165eyb+m8uN/mg"
)
SMALL_DIGEST = (
    "$scrypt$ln=4,r=8,p=1$ySYknWRq9On6wWfpsOUQQg$"
    "C28LpWaXQ3P0/dcbN0njxJx4VL/UCQIAWlnYAJgT/mY"
)
YESCRYPT_DIGEST = (
    "$y$jD5$K3wjJ.n1W9g1TfLeI0ESC0$SAt46wIbyewhlHlKVQcelosVETYUGOaV6mC1qjurql9"
)
YESCRYPT_PASSWORD = "password"  # nosemgrep # nosec


class TestScryptDecode:
    """Test decoding scrypt and yescrypt digests."""

    def test_known_digest(self, password: str) -> None:
        """Test that the known digest matches its password."""
        digest = decode(KNOWN_DIGEST)
        assert isinstance(digest, ScryptDigest)
        assert digest.variant is Variant.SCRYPT
        assert (digest.ln, digest.r, digest.p) == (15, 8, 1)
        assert digest.match(password)
        assert not digest.match("wrong_password")
        assert digest.encode() == KNOWN_DIGEST

    def test_small_digest(self) -> None:
        """Test that decoding keeps the encoded form."""
        digest = decode(SMALL_DIGEST)
        assert digest.ln == 4
        assert len(digest.salt) == 16
        assert len(digest.key) == 32
        assert digest.encode() == SMALL_DIGEST

    def test_absent_parameters_default(self) -> None:
        """Test that absent parameters take the defaults."""
        digest = decode("$scrypt$$c2FsdHNhbHQ$a2V5")
        assert (digest.ln, digest.r, digest.p) == (16, 8, 1)

    def test_yescrypt_settings(self) -> None:
        """Test that yescrypt settings are decoded."""
        digest = decode(YESCRYPT_DIGEST)
        assert digest.variant is Variant.YESCRYPT
        assert (digest.flavor, digest.ln, digest.r, digest.p) == (47, 16, 8, 1)
        assert len(digest.key) == 32
        assert digest.encode() == YESCRYPT_DIGEST

    def test_decode_variant(self) -> None:
        """Test that a variant restricted decoder rejects the other."""
        with pytest.raises(InvalidIdentifierError):
            decode_variant(Variant.YESCRYPT)(KNOWN_DIGEST)
        with pytest.raises(InvalidIdentifierError):
            decode_variant(Variant.SCRYPT)(YESCRYPT_DIGEST)

    @pytest.mark.parametrize(
        "encoded,error",
        [
            ("$scrypt$ln=4,r=8,p=1$c2FsdHNhbHQ", InvalidFormatError),
            ("$yescrypt$jD5$c2FsdHNhbHQ$a2V5", InvalidIdentifierError),
            ("$scrypt$ln=4,n=8$c2FsdHNhbHQ$a2V5", InvalidOptionKeyError),
            ("$scrypt$ln=four$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            ("$scrypt$ln=4$c2FsdHNhbHQ.$a2V5", InvalidSaltEncodingError),
            ("$scrypt$ln=4$c2FsdHNhbHQ$", InvalidKeyEncodingError),
            ("$y$jD$K3wjJ.n1W9g1TfLeI0ESC0$SAt4", InvalidOptionValueError),
            ("$y$jD5$K3wjJ+$SAt4", InvalidSaltEncodingError),
            ("$y$jD5$K3wjJ.n1W9g1TfLeI0ESC0$", InvalidKeyEncodingError),
            ("$scrypt$ln=0$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            ("$scrypt$ln=59$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            ("$scrypt$ln=64$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            ("$scrypt$ln=200$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            (
                "$scrypt$ln=4294967295$c2FsdHNhbHQ$a2V5",
                InvalidOptionValueError,
            ),
            ("$scrypt$ln=4,r=0$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            ("$scrypt$ln=4,p=0$c2FsdHNhbHQ$a2V5", InvalidOptionValueError),
            ("$y$ju5$K3wjJ.n1W9g1TfLeI0ESC0$SAt4", InvalidOptionValueError),
        ],
    )
    def test_decode_errors(self, encoded: str, error: type) -> None:
        """Test that malformed digests are rejected."""
        with pytest.raises(error, match="^scrypt decode error: "):
            decode(encoded)


class TestYescrypt:
    """Test yescrypt key derivation."""

    def test_known_digest(self) -> None:
        """Test that the known digest matches its password."""
        digest = decode(YESCRYPT_DIGEST)
        assert digest.match(YESCRYPT_PASSWORD)
        assert not digest.match("wrong_password")

    def test_hash_with_salt(self) -> None:
        """Test that a known salt gives the known digest."""
        hasher = ScryptHasher().with_variant("yescrypt")
        digest = hasher.hash_with_salt(YESCRYPT_PASSWORD, b"aa131311")
        assert digest.encode() == (
            "$y$jD5$V3KAn2nAl21$2f0mscSRW3Z0u.oHoVtRAfYwQ3ZbWUIbi4SB04ztMSB"
        )

    def test_hash_then_match(self) -> None:
        """Test that a fresh yescrypt digest matches after decoding."""
        hasher = ScryptHasher(variant=Variant.YESCRYPT, ln=10, r=8)
        digest = hasher.hash(YESCRYPT_PASSWORD)
        assert decode(digest.encode()).match(YESCRYPT_PASSWORD)

    def test_unsupported_flavor(self) -> None:
        """Test that flavors other than the default fail to derive."""
        digest = decode(YESCRYPT_DIGEST.replace("$y$jD5$", "$y$.D5$"))
        assert digest.flavor == 0
        assert not digest.match(YESCRYPT_PASSWORD)
        with pytest.raises(KeyDerivationError, match="flavor 0"):
            digest.match_advanced(YESCRYPT_PASSWORD)

    def test_backend_errors_are_wrapped(self) -> None:
        """Test that a failing yescrypt backend raises a typed error."""
        digest = decode(YESCRYPT_DIGEST)
        with patch("pyescrypt.Yescrypt", side_effect=RuntimeError("boom")):
            assert not digest.match(YESCRYPT_PASSWORD)
            with pytest.raises(KeyDerivationError, match="boom"):
                digest.match_advanced(YESCRYPT_PASSWORD)


def test_scrypt_out_of_range_ln_is_typed() -> None:
    """Test that deriving with an oversized ln raises a typed error."""
    setting = YescryptSetting(ln=64, r=8, p=1)
    with pytest.raises(KeyDerivationError):
        Variant.SCRYPT.derive(b"password", b"saltsalt", setting, 32)


class TestScryptHasher:
    """Test the scrypt hasher builder."""

    def test_defaults(self) -> None:
        """Test the default parameters."""
        hasher = ScryptHasher().build()
        assert hasher.variant is Variant.SCRYPT
        assert (hasher.ln, hasher.r, hasher.p) == (16, 8, 1)
        assert hasher.key_length == 32
        assert hasher.salt_length == 16

    def test_yescrypt_key_length_is_fixed(self) -> None:
        """Test that yescrypt keys always have 32 bytes."""
        hasher = ScryptHasher(variant=Variant.YESCRYPT, key_length=64)
        assert hasher.build().key_length == 32

    def test_hash_then_match(self, password: str) -> None:
        """Test that a fresh digest matches after decoding."""
        hasher = (
            ScryptHasher()
            .with_ln(4)
            .with_block_size(8)
            .with_parallelism(2)
            .with_key_length(16)
            .with_salt_length(8)
        )
        digest = hasher.hash(password)
        assert digest.encode().startswith("$scrypt$ln=4,r=8,p=2$")
        decoded = decode(digest.encode())
        assert decoded == digest
        assert decoded.match(password)
        assert not decoded.match("apple12")

    @pytest.mark.parametrize(
        "method,value",
        [
            ("with_ln", 0),
            ("with_ln", 59),
            ("with_block_size", 0),
            ("with_parallelism", 0),
            ("with_key_length", 0),
            ("with_salt_length", 7),
            ("with_salt_length", 1025),
            ("with_variant", "argon2"),
        ],
    )
    def test_setters_check_bounds(self, method: str, value: object) -> None:
        """Test that the setters reject invalid values."""
        with pytest.raises(InvalidParameterError):
            getattr(ScryptHasher(), method)(value)

    def test_block_parallelism_product(self) -> None:
        """Test that r * p must stay below 2^30."""
        with pytest.raises(InvalidParameterError, match="r\\*p"):
            ScryptHasher(ln=4, r=2**15, p=2**15).build()

    def test_salt_bounds(self, password: str) -> None:
        """Test that short salts need the unsafe flag."""
        hasher = ScryptHasher(ln=4)
        with pytest.raises(InvalidSaltError):
            hasher.hash_with_salt(password, b"short")
        assert hasher.with_unsafe().hash_with_salt(password, b"s").salt == (
            b"s"
        )

    def test_needs_rehash(self) -> None:
        """Test the rehash decision."""
        digest = decode(SMALL_DIGEST)
        assert ScryptHasher().needs_rehash(digest)
        assert not ScryptHasher(ln=4).needs_rehash(digest)
        assert ScryptHasher(ln=4, p=2).needs_rehash(digest)


def test_scrypt_maxmem() -> None:
    """Test that the memory limit covers the work area."""
    assert scrypt_maxmem(4, 8, 1) > 128 * 8 * 16
    assert scrypt_maxmem(58, 8, 1) == 2**31 - 1
