# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""md5crypt variants."""

from enum import Enum

from passlib.hash import (  # type: ignore[import-untyped]
    md5_crypt,
    sun_md5_crypt,
)

from ...errors import KeyDerivationError
from .._crypt import passlib_checksum
from ._const import ALG_NAME, IDENTIFIER, IDENTIFIER_SUN


class Variant(str, Enum):
    """The md5crypt variants."""

    NONE = ""
    STANDARD = "standard"
    SUN = "sun"

    @classmethod
    def resolve(cls, identifier: str) -> "Variant":
        """Get the variant for an identifier or name.

        Parameters
        ----------
        identifier : str
            The identifier (``1``, ``md5``) or name (``standard``, ``sun``).

        Returns
        -------
        Variant
            The variant, ``Variant.NONE`` if unknown.
        """
        if identifier in (IDENTIFIER, cls.STANDARD):
            return cls.STANDARD
        if identifier in (IDENTIFIER_SUN, cls.SUN):
            return cls.SUN
        return cls.NONE

    @property
    def prefix(self) -> str:
        """The identifier used in encoded digests."""
        return _PREFIXES.get(self, "")

    def derive(self, password: bytes, salt: str, iterations: int) -> bytes:
        """Derive an md5crypt key.

        Parameters
        ----------
        password : bytes
            The password.
        salt : str
            The salt.
        iterations : int
            The extra Sun rounds, ignored by the standard variant.

        Returns
        -------
        bytes
            The encoded key.

        Raises
        ------
        KeyDerivationError
            If the variant is unknown or derivation fails.
        """
        if self is Variant.SUN:
            return passlib_checksum(
                ALG_NAME, sun_md5_crypt, password, salt, rounds=iterations
            )
        if self is Variant.STANDARD:
            return passlib_checksum(ALG_NAME, md5_crypt, password, salt)
        raise KeyDerivationError(f"{ALG_NAME}: no variant to derive with")


_PREFIXES = {
    Variant.STANDARD: IDENTIFIER,
    Variant.SUN: IDENTIFIER_SUN,
}

__all__ = ["Variant"]
