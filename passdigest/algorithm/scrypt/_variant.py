# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=too-many-arguments,too-many-positional-arguments
# pyright: reportUnknownVariableType=false
"""Scrypt variants: scrypt and yescrypt."""

import hashlib
from enum import Enum

from ...encoding import FLAVOR_DEFAULT, YescryptSetting
from ...errors import KeyDerivationError
from ._const import (
    ALG_NAME,
    ALG_NAME_YESCRYPT,
    IDENTIFIER,
    IDENTIFIER_YESCRYPT,
    KEY_LENGTH_YESCRYPT,
)


def scrypt_maxmem(ln: int, r: int, p: int) -> int:
    """Get the memory limit that allows the scrypt parameters."""
    return min(128 * r * ((1 << ln) + 2) + 128 * r * p + 1024, 2**31 - 1)


class Variant(str, Enum):
    """The scrypt family variants."""

    NONE = ""
    SCRYPT = ALG_NAME
    YESCRYPT = ALG_NAME_YESCRYPT

    @classmethod
    def resolve(cls, identifier: str) -> "Variant":
        """Get the variant for an identifier or name.

        Parameters
        ----------
        identifier : str
            The identifier (``scrypt``, ``y``) or name (``yescrypt``).

        Returns
        -------
        Variant
            The variant, ``Variant.NONE`` if unknown.
        """
        if identifier == IDENTIFIER:
            return cls.SCRYPT
        if identifier in (IDENTIFIER_YESCRYPT, ALG_NAME_YESCRYPT):
            return cls.YESCRYPT
        return cls.NONE

    @property
    def prefix(self) -> str:
        """The identifier used in encoded digests."""
        return _PREFIXES.get(self, "")

    def derive(
        self,
        password: bytes,
        salt: bytes,
        setting: YescryptSetting,
        key_length: int,
    ) -> bytes:
        """Derive a key.

        Parameters
        ----------
        password : bytes
            The password.
        salt : bytes
            The salt.
        setting : YescryptSetting
            The cost parameters, ``flavor`` and ``t`` being used by
            yescrypt only.
        key_length : int
            The key length, yescrypt keys are always 32 bytes.

        Returns
        -------
        bytes
            The key.

        Raises
        ------
        KeyDerivationError
            If the variant is unknown or derivation fails.
        """
        if self is Variant.SCRYPT:
            return _derive_scrypt(password, salt, setting, key_length)
        if self is Variant.YESCRYPT:
            return _derive_yescrypt(password, salt, setting)
        raise KeyDerivationError(f"{ALG_NAME}: no variant to derive with")


def _derive_scrypt(
    password: bytes, salt: bytes, setting: YescryptSetting, key_length: int
) -> bytes:
    try:
        return hashlib.scrypt(
            password,
            salt=salt,
            n=1 << setting.ln,
            r=setting.r,
            p=setting.p,
            maxmem=scrypt_maxmem(setting.ln, setting.r, setting.p),
            dklen=key_length,
        )
    except (
        ValueError,
        TypeError,
        MemoryError,
        OverflowError,
    ) as error:
        raise KeyDerivationError(f"{ALG_NAME}: {error}") from error


def _derive_yescrypt(
    password: bytes, salt: bytes, setting: YescryptSetting
) -> bytes:
    if setting.flavor != FLAVOR_DEFAULT:
        raise KeyDerivationError(
            f"{ALG_NAME_YESCRYPT}: flavor {setting.flavor} is not supported"
        )
    # pylint: disable=import-outside-toplevel
    from pyescrypt import Mode, Yescrypt  # type: ignore[import-untyped]

    try:
        hasher = Yescrypt(
            n=1 << setting.ln,
            r=setting.r,
            t=setting.t,
            p=setting.p,
            mode=Mode.RAW,
        )
        return bytes(
            hasher.digest(
                password=password,
                salt=salt,
                hash_length=KEY_LENGTH_YESCRYPT,
            )
        )
    except Exception as error:  # pylint: disable=broad-exception-caught
        raise KeyDerivationError(f"{ALG_NAME_YESCRYPT}: {error}") from error


_PREFIXES = {
    Variant.SCRYPT: IDENTIFIER,
    Variant.YESCRYPT: IDENTIFIER_YESCRYPT,
}

__all__ = ["Variant", "scrypt_maxmem"]
