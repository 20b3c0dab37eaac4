# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportUnknownMemberType=false,reportUnknownVariableType=false
"""Key derivation for the crypt(3) style families through passlib."""

import re
from typing import Any

from ..errors import InvalidSaltError, KeyDerivationError

SALT_CHARSET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789./"
)
"""The characters allowed in crypt(3) salts and keys."""

_CHARSET_RE = re.compile(r"[A-Za-z0-9./]*")


def is_crypt_text(text: str) -> bool:
    """Check that text only holds crypt(3) salt characters."""
    return bool(_CHARSET_RE.fullmatch(text))


def check_salt_charset(alg_name: str, salt: bytes) -> str:
    """Get a salt as text, checking it only holds salt characters.

    Parameters
    ----------
    alg_name : str
        The algorithm name.
    salt : bytes
        The salt.

    Returns
    -------
    str
        The salt text.

    Raises
    ------
    InvalidSaltError
        If the salt holds other characters.
    """
    text = salt.decode("latin-1")
    if not is_crypt_text(text):
        raise InvalidSaltError(
            "salt", None, None, repr(text), algorithm=alg_name
        )
    return text


def passlib_checksum(
    alg_name: str, handler: Any, password: bytes, salt: str, **settings: Any
) -> bytes:
    """Derive a crypt(3) key with a passlib handler.

    Parameters
    ----------
    alg_name : str
        The algorithm name.
    handler : Any
        The passlib handler class, e.g. ``passlib.hash.md5_crypt``.
    password : bytes
        The password.
    salt : str
        The salt.
    **settings : Any
        Extra handler settings, e.g. ``rounds``.

    Returns
    -------
    bytes
        The encoded key.

    Raises
    ------
    KeyDerivationError
        If passlib rejects the parameters or the password.
    """
    try:
        hashed = handler.using(salt=salt, **settings).hash(password)
        return handler.from_string(hashed).checksum.encode("ascii")
    except (ValueError, TypeError) as error:
        raise KeyDerivationError(f"{alg_name}: {error}") from error


__all__ = [
    "SALT_CHARSET",
    "check_salt_charset",
    "is_crypt_text",
    "passlib_checksum",
]
