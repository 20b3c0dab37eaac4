# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""SHA-crypt variants."""

from enum import Enum

from passlib.hash import (  # type: ignore[import-untyped]
    sha256_crypt,
    sha512_crypt,
)

from ...errors import KeyDerivationError
from .._crypt import passlib_checksum
from ._const import (
    ALG_NAME,
    IDENTIFIER_SHA256,
    IDENTIFIER_SHA512,
    ITERATIONS_DEFAULT_SHA256,
    ITERATIONS_DEFAULT_SHA512,
    ITERATIONS_MAX,
    ITERATIONS_MIN,
)


class Variant(str, Enum):
    """The SHA-crypt variants, named after the hash function."""

    NONE = ""
    SHA256 = "sha256"
    SHA512 = "sha512"

    @classmethod
    def resolve(cls, identifier: str) -> "Variant":
        """Get the variant for an identifier or hash name.

        Parameters
        ----------
        identifier : str
            The identifier (``5``, ``6``) or hash name (``sha256``).

        Returns
        -------
        Variant
            The variant, ``Variant.NONE`` if unknown.
        """
        for variant, prefix in _PREFIXES.items():
            if identifier in (prefix, variant.value):
                return variant
        return cls.NONE

    @property
    def prefix(self) -> str:
        """The identifier used in encoded digests."""
        return _PREFIXES.get(self, "")

    @property
    def default_iterations(self) -> int:
        """The default rounds of the variant."""
        return _ITERATIONS[self]

    def derive(self, password: bytes, salt: str, iterations: int) -> bytes:
        """Derive a SHA-crypt key.

        Rounds outside the supported range are clamped to it, the way
        glibc crypt(3) does.

        Parameters
        ----------
        password : bytes
            The password.
        salt : str
            The salt.
        iterations : int
            The rounds.

        Returns
        -------
        bytes
            The encoded key.

        Raises
        ------
        KeyDerivationError
            If the variant is unknown or derivation fails.
        """
        handler = _HANDLERS.get(self)
        if handler is None:
            raise KeyDerivationError(f"{ALG_NAME}: no variant to derive with")
        rounds = min(max(iterations, ITERATIONS_MIN), ITERATIONS_MAX)
        return passlib_checksum(
            ALG_NAME, handler, password, salt, rounds=rounds
        )


VARIANT_DEFAULT = Variant.SHA512

_PREFIXES = {
    Variant.SHA256: IDENTIFIER_SHA256,
    Variant.SHA512: IDENTIFIER_SHA512,
}

_ITERATIONS = {
    Variant.SHA256: ITERATIONS_DEFAULT_SHA256,
    Variant.SHA512: ITERATIONS_DEFAULT_SHA512,
}

_HANDLERS = {
    Variant.SHA256: sha256_crypt,
    Variant.SHA512: sha512_crypt,
}

__all__ = ["Variant", "VARIANT_DEFAULT"]
