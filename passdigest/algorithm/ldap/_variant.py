# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""LDAP SHA variants (RFC 2307 schemes)."""

import hashlib
from enum import Enum

from ._const import IDENTIFIER_PREFIX


class Variant(str, Enum):
    """The LDAP SHA variants, the ``s`` ones being salted."""

    NONE = ""
    SHA1 = "sha1"
    SSHA1 = "ssha1"
    SHA256 = "sha256"
    SSHA256 = "ssha256"
    SHA384 = "sha384"
    SSHA384 = "ssha384"
    SHA512 = "sha512"
    SSHA512 = "ssha512"

    @classmethod
    def resolve(cls, identifier: str) -> "Variant":
        """Get the variant for a name, scheme or registry identifier.

        Parameters
        ----------
        identifier : str
            e.g. ``ssha512``, ``SSHA512``, ``{SSHA512}`` or
            ``ldap-ssha512``.

        Returns
        -------
        Variant
            The variant, ``Variant.NONE`` if unknown.
        """
        name = identifier.lower()
        if name.startswith(IDENTIFIER_PREFIX):
            name = name[len(IDENTIFIER_PREFIX) :]
        for variant in cls:
            if variant is not cls.NONE and name in (
                variant.value,
                variant.scheme.lower(),
                variant.prefix.lower(),
            ):
                return variant
        return cls.NONE

    @property
    def scheme(self) -> str:
        """The RFC 2307 scheme name, e.g. ``SSHA512``."""
        return _SCHEMES.get(self, "")

    @property
    def prefix(self) -> str:
        """The scheme prefix of encoded digests, e.g. ``{SSHA512}``."""
        return "{" + self.scheme + "}" if self.scheme else ""

    @property
    def identifier(self) -> str:
        """The registry identifier, e.g. ``ldap-ssha512``."""
        return IDENTIFIER_PREFIX + self.value

    @property
    def salted(self) -> bool:
        """Whether the digest carries a salt."""
        return self.value.startswith("ss")

    @property
    def hash_name(self) -> str:
        """The hashlib name of the hash function."""
        return _HASH_NAMES[self]

    @property
    def digest_size(self) -> int:
        """The output size of the hash function."""
        return hashlib.new(self.hash_name).digest_size

    def derive(self, password: bytes, salt: bytes) -> bytes:
        """Hash the password followed by the salt.

        Parameters
        ----------
        password : bytes
            The password.
        salt : bytes
            The salt, empty for the unsalted variants.

        Returns
        -------
        bytes
            The key.
        """
        return hashlib.new(self.hash_name, password + salt).digest()


VARIANT_DEFAULT = Variant.SSHA512

_SCHEMES = {
    Variant.SHA1: "SHA",
    Variant.SSHA1: "SSHA",
    Variant.SHA256: "SHA256",
    Variant.SSHA256: "SSHA256",
    Variant.SHA384: "SHA384",
    Variant.SSHA384: "SSHA384",
    Variant.SHA512: "SHA512",
    Variant.SSHA512: "SSHA512",
}

_HASH_NAMES = {
    Variant.SHA1: "sha1",
    Variant.SSHA1: "sha1",
    Variant.SHA256: "sha256",
    Variant.SSHA256: "sha256",
    Variant.SHA384: "sha384",
    Variant.SSHA384: "sha384",
    Variant.SHA512: "sha512",
    Variant.SSHA512: "sha512",
}

__all__ = ["Variant", "VARIANT_DEFAULT"]
