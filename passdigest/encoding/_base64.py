# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportUnknownVariableType=false,reportUnknownMemberType=false
"""Base64 variants used by the encoded digest formats.

- standard: ``A-Za-z0-9+/`` without padding (argon2, scrypt).
- adapted: ``A-Za-z0-9./`` without padding (pbkdf2, plaintext).
- bcrypt: ``./A-Za-z0-9`` big-endian packing (bcrypt salts).
- crypt: ``./0-9A-Za-z`` little-endian packing (yescrypt salts and keys).

Decoders are strict: they reject padding, foreign characters and
lengths that cannot be produced by the matching encoder and raise
:class:`ValueError`.
"""

import base64
import binascii
import re

from passlib.utils.binary import (  # type: ignore[import-untyped]
    ab64_decode,
    ab64_encode,
    b64s_decode,
    b64s_encode,
    bcrypt64,
    h64,
)

_STD_RE = re.compile(r"[A-Za-z0-9+/]*")
_ADAPTED_RE = re.compile(r"[A-Za-z0-9./]*")
_CRYPT_RE = re.compile(r"[./0-9A-Za-z]*")


def _check(text: str, pattern: re.Pattern[str], name: str) -> None:
    if not pattern.fullmatch(text):
        raise ValueError(f"illegal character in {name} base64 data")
    if len(text) % 4 == 1:
        raise ValueError(f"illegal length {len(text)} of {name} base64 data")


def encode_std(data: bytes) -> str:
    """Encode bytes as standard base64 without padding."""
    return b64s_encode(data).decode("ascii")


def decode_std(text: str) -> bytes:
    """Decode standard base64 without padding.

    Parameters
    ----------
    text : str
        The encoded text.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        If the text is not valid unpadded standard base64.
    """
    _check(text, _STD_RE, "standard")
    try:
        return b64s_decode(text.encode("ascii"))
    except binascii.Error as error:  # pragma: no cover
        raise ValueError(str(error)) from error


def encode_std_padded(data: bytes) -> str:
    """Encode bytes as padded standard base64."""
    return base64.b64encode(data).decode("ascii")


def decode_std_padded(text: str) -> bytes:
    """Decode padded standard base64.

    Parameters
    ----------
    text : str
        The encoded text.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        If the text is not valid padded standard base64.
    """
    try:
        return base64.b64decode(text.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as error:
        raise ValueError(str(error)) from error


def encode_adapted(data: bytes) -> str:
    """Encode bytes with the adapted ``A-Za-z0-9./`` alphabet."""
    return ab64_encode(data).decode("ascii")


def decode_adapted(text: str) -> bytes:
    """Decode the adapted ``A-Za-z0-9./`` alphabet.

    Parameters
    ----------
    text : str
        The encoded text.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        If the text is not valid adapted base64.
    """
    _check(text, _ADAPTED_RE, "adapted")
    try:
        return ab64_decode(text.encode("ascii"))
    except binascii.Error as error:  # pragma: no cover
        raise ValueError(str(error)) from error


def encode_bcrypt(data: bytes) -> str:
    """Encode bytes with the bcrypt alphabet."""
    return bcrypt64.encode_bytes(data).decode("ascii")


def decode_bcrypt(text: str) -> bytes:
    """Decode the bcrypt alphabet.

    Parameters
    ----------
    text : str
        The encoded text.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        If the text is not valid bcrypt base64.
    """
    _check(text, _CRYPT_RE, "bcrypt")
    return bcrypt64.decode_bytes(text.encode("ascii"))


def encode_crypt(data: bytes) -> str:
    """Encode bytes with the little-endian crypt alphabet."""
    return h64.encode_bytes(data).decode("ascii")


def decode_crypt(text: str) -> bytes:
    """Decode the little-endian crypt alphabet.

    Unused trailing bits must be zero so that decoding and encoding
    again yields the same text.

    Parameters
    ----------
    text : str
        The encoded text.

    Returns
    -------
    bytes
        The decoded bytes.

    Raises
    ------
    ValueError
        If the text is not valid crypt base64.
    """
    _check(text, _CRYPT_RE, "crypt")
    data = h64.decode_bytes(text.encode("ascii"))
    if encode_crypt(data) != text:
        raise ValueError("crypt base64 data has non-zero trailing bits")
    return data


__all__ = [
    "encode_std",
    "decode_std",
    "encode_std_padded",
    "decode_std_padded",
    "encode_adapted",
    "decode_adapted",
    "encode_bcrypt",
    "decode_bcrypt",
    "encode_crypt",
    "decode_crypt",
]
