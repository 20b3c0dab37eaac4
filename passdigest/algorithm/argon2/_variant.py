# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=too-many-arguments,too-many-positional-arguments
# pyright: reportUnknownMemberType=false
"""Argon2 variants."""

from enum import Enum

from argon2.exceptions import HashingError
from argon2.low_level import ARGON2_VERSION, Type, hash_secret_raw

from ...errors import KeyDerivationError
from ._const import ALG_NAME, IDENTIFIER_D, IDENTIFIER_I, IDENTIFIER_ID


class Variant(str, Enum):
    """The argon2 variants."""

    NONE = ""
    I = IDENTIFIER_I  # noqa: E741
    D = IDENTIFIER_D
    ID = IDENTIFIER_ID

    @classmethod
    def resolve(cls, identifier: str) -> "Variant":
        """Get the variant for an identifier or a short name.

        Parameters
        ----------
        identifier : str
            The identifier (``argon2id``) or name (``id``).

        Returns
        -------
        Variant
            The variant, ``Variant.NONE`` if unknown.
        """
        for variant in (cls.I, cls.D, cls.ID):
            if identifier in (variant.value, variant.name.lower()):
                return variant
        return cls.NONE

    @property
    def prefix(self) -> str:
        """The identifier used in encoded digests."""
        return self.value

    def derive(
        self,
        password: bytes,
        salt: bytes,
        iterations: int,
        memory: int,
        parallelism: int,
        key_length: int,
    ) -> bytes:
        """Derive an argon2 key.

        Parameters
        ----------
        password : bytes
            The password.
        salt : bytes
            The salt.
        iterations : int
            The time cost.
        memory : int
            The memory cost in KiB.
        parallelism : int
            The number of lanes.
        key_length : int
            The length of the key.

        Returns
        -------
        bytes
            The key.

        Raises
        ------
        KeyDerivationError
            If the variant is unknown or derivation fails.
        """
        argon2_type = _TYPES.get(self)
        if argon2_type is None:
            raise KeyDerivationError(f"{ALG_NAME}: no variant to derive with")
        try:
            return hash_secret_raw(
                secret=password,
                salt=salt,
                time_cost=iterations,
                memory_cost=memory,
                parallelism=parallelism,
                hash_len=key_length,
                type=argon2_type,
                version=ARGON2_VERSION,
            )
        except HashingError as error:
            raise KeyDerivationError(f"{ALG_NAME}: {error}") from error


_TYPES = {
    Variant.I: Type.I,
    Variant.D: Type.D,
    Variant.ID: Type.ID,
}

VERSION = ARGON2_VERSION
"""The argon2 version implemented by the key derivation library."""

__all__ = ["Variant", "VERSION"]
