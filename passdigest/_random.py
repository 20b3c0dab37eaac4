# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Salt generation from the operating system CSPRNG."""

import secrets

from .errors import SaltReadError


def salt_bytes(length: int) -> bytes:
    """Read random salt bytes.

    Parameters
    ----------
    length : int
        The number of bytes.

    Returns
    -------
    bytes
        The random bytes.

    Raises
    ------
    SaltReadError
        If the CSPRNG could not be read.
    """
    try:
        return secrets.token_bytes(length)
    except OSError as error:
        raise SaltReadError(f"could not read {length} random bytes") from error


def salt_chars(length: int, charset: str) -> str:
    """Generate a random salt from a character set.

    Parameters
    ----------
    length : int
        The number of characters.
    charset : str
        The allowed characters.

    Returns
    -------
    str
        The random salt.

    Raises
    ------
    SaltReadError
        If the CSPRNG could not be read.
    """
    try:
        return "".join(secrets.choice(charset) for _ in range(length))
    except OSError as error:
        raise SaltReadError(
            f"could not read {length} random characters"
        ) from error


__all__ = ["salt_bytes", "salt_chars"]
