# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""PBKDF2 variants."""

import hashlib
from enum import Enum

from ...errors import KeyDerivationError
from ._const import (
    ALG_NAME,
    IDENTIFIER,
    IDENTIFIER_SHA1,
    IDENTIFIER_SHA224,
    IDENTIFIER_SHA256,
    IDENTIFIER_SHA384,
    IDENTIFIER_SHA512,
    ITERATIONS_DEFAULT_SHA1,
    ITERATIONS_DEFAULT_SHA256,
    ITERATIONS_DEFAULT_SHA512,
)


class Variant(str, Enum):
    """The PBKDF2 HMAC variants, named after the hash function."""

    NONE = ""
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"

    @classmethod
    def resolve(cls, identifier: str) -> "Variant":
        """Get the variant for an identifier or hash name.

        Parameters
        ----------
        identifier : str
            The identifier (``pbkdf2-sha256``) or hash name (``sha256``).

        Returns
        -------
        Variant
            The variant, ``Variant.NONE`` if unknown.
        """
        if identifier in (IDENTIFIER, IDENTIFIER_SHA1):
            return cls.SHA1
        for variant, prefix in _PREFIXES.items():
            if identifier in (prefix, variant.value):
                return variant
        return cls.NONE

    @property
    def prefix(self) -> str:
        """The identifier used in encoded digests."""
        return _PREFIXES.get(self, "")

    @property
    def digest_size(self) -> int:
        """The output size of the hash function."""
        return hashlib.new(self.value).digest_size

    @property
    def default_iterations(self) -> int:
        """The default iterations of the variant."""
        return _ITERATIONS[self]

    def derive(
        self, password: bytes, salt: bytes, iterations: int, key_length: int
    ) -> bytes:
        """Derive a PBKDF2 key.

        Parameters
        ----------
        password : bytes
            The password.
        salt : bytes
            The salt.
        iterations : int
            The iterations.
        key_length : int
            The key length.

        Returns
        -------
        bytes
            The key.

        Raises
        ------
        KeyDerivationError
            If the variant is unknown or derivation fails.
        """
        if self is Variant.NONE:
            raise KeyDerivationError(f"{ALG_NAME}: no variant to derive with")
        try:
            return hashlib.pbkdf2_hmac(
                self.value, password, salt, iterations, key_length
            )
        except (ValueError, OverflowError) as error:
            raise KeyDerivationError(f"{ALG_NAME}: {error}") from error


_PREFIXES = {
    Variant.SHA1: IDENTIFIER,
    Variant.SHA224: IDENTIFIER_SHA224,
    Variant.SHA256: IDENTIFIER_SHA256,
    Variant.SHA384: IDENTIFIER_SHA384,
    Variant.SHA512: IDENTIFIER_SHA512,
}

_ITERATIONS = {
    Variant.SHA1: ITERATIONS_DEFAULT_SHA1,
    Variant.SHA224: ITERATIONS_DEFAULT_SHA1,
    Variant.SHA256: ITERATIONS_DEFAULT_SHA256,
    Variant.SHA384: ITERATIONS_DEFAULT_SHA256,
    Variant.SHA512: ITERATIONS_DEFAULT_SHA512,
}

VARIANT_DEFAULT = Variant.SHA256

__all__ = ["Variant", "VARIANT_DEFAULT"]
