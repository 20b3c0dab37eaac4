# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt variants."""

import base64
import hashlib
import hmac
from enum import Enum

import bcrypt

from ...errors import KeyDerivationError
from ._const import (
    ALG_NAME,
    IDENTIFIER,
    IDENTIFIER_SHA256,
    IDENTIFIER_VARIANTS,
    KEY_ENCODED_LENGTH,
    PASSWORD_INPUT_SIZE_MAX,
)


class Variant(str, Enum):
    """The bcrypt variants."""

    NONE = ""
    STANDARD = "standard"
    SHA256 = "sha256"

    @classmethod
    def resolve(cls, identifier: str) -> "Variant":
        """Get the variant for an identifier or name.

        Parameters
        ----------
        identifier : str
            The identifier (``2a``, ``bcrypt-sha256``, ...) or
            name (``standard``, ``sha256``).

        Returns
        -------
        Variant
            The variant, ``Variant.NONE`` if unknown.
        """
        if identifier in IDENTIFIER_VARIANTS or identifier == cls.STANDARD:
            return cls.STANDARD
        if identifier in (IDENTIFIER_SHA256, cls.SHA256):
            return cls.SHA256
        return cls.NONE

    @property
    def prefix(self) -> str:
        """The identifier used in encoded digests."""
        return _PREFIXES.get(self, "")

    def encode_input(self, password: bytes, salt: str) -> bytes:
        """Get the bcrypt input for a password.

        The standard variant passes the first 72 bytes of the password.
        The sha256 variant passes the base64 HMAC-SHA-256 of the password
        keyed with the encoded salt.

        Parameters
        ----------
        password : bytes
            The password.
        salt : str
            The bcrypt base64 encoded salt.

        Returns
        -------
        bytes
            The bcrypt input.
        """
        if self is Variant.SHA256:
            mac = hmac.new(salt.encode("ascii"), password, hashlib.sha256)
            return base64.b64encode(mac.digest())
        return password[:PASSWORD_INPUT_SIZE_MAX]

    def derive(self, password: bytes, salt: str, cost: int) -> bytes:
        """Derive a bcrypt key.

        Parameters
        ----------
        password : bytes
            The password.
        salt : str
            The bcrypt base64 encoded salt.
        cost : int
            The cost factor.

        Returns
        -------
        bytes
            The 31 character encoded key.

        Raises
        ------
        KeyDerivationError
            If the variant is unknown or bcrypt fails.
        """
        if self is Variant.NONE:
            raise KeyDerivationError(f"{ALG_NAME}: no variant to derive with")
        setting = f"${IDENTIFIER}${cost:02d}${salt}".encode("ascii")
        try:
            hashed = bcrypt.hashpw(self.encode_input(password, salt), setting)
        except ValueError as error:
            raise KeyDerivationError(f"{ALG_NAME}: {error}") from error
        return hashed[-KEY_ENCODED_LENGTH:]


_PREFIXES = {
    Variant.STANDARD: IDENTIFIER,
    Variant.SHA256: IDENTIFIER_SHA256,
}

__all__ = ["Variant"]
