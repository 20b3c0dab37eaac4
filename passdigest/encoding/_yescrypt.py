# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Yescrypt settings micro-encoding.

The settings field of a ``$y$`` digest is a sequence of variable
length integers. Each integer starts with a character whose position
in the crypt alphabet selects both the number of following characters
and the high bits of the value.
"""

from dataclasses import dataclass
from typing import List, Tuple

from ._base64 import decode_crypt, encode_crypt

ITOA64 = "./0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"

FLAVOR_RW = 2
FLAVOR_MAX = FLAVOR_RW + (0x3FC >> 2)
FLAVOR_DEFAULT = 47
"""The flavor of the yescrypt defaults (``j``)."""

_HAVE_P = 1
_HAVE_T = 2
_HAVE_G = 4
_HAVE_NROM = 8


def encode64(data: bytes) -> str:
    """Encode bytes with the yescrypt (crypt) alphabet."""
    return encode_crypt(data)


def decode64(text: str) -> bytes:
    """Decode text in the yescrypt (crypt) alphabet.

    Raises
    ------
    ValueError
        If the text is not valid.
    """
    return decode_crypt(text)


def encode64_uint32(value: int, minimum: int) -> str:
    """Encode a single variable length integer.

    Parameters
    ----------
    value : int
        The value.
    minimum : int
        The smallest value the field can hold.

    Returns
    -------
    str
        The encoded characters.

    Raises
    ------
    ValueError
        If the value is below ``minimum`` or too large.
    """
    if value < minimum or value > 0xFFFFFFFF:
        raise ValueError(f"value {value} cannot be encoded")
    src = value - minimum
    start, end, chars, bits = 0, 47, 1, 0
    while True:
        count = (end + 1 - start) << bits
        if src < count:
            break
        if start >= 63:
            raise ValueError(f"value {value} cannot be encoded")
        start = end + 1
        end = start + (62 - end) // 2
        src -= count
        chars += 1
        bits += 6
    out = [ITOA64[start + (src >> bits)]]
    for _ in range(chars - 1):
        bits -= 6
        out.append(ITOA64[(src >> bits) & 0x3F])
    return "".join(out)


def decode64_uint32(text: str, pos: int, minimum: int) -> Tuple[int, int]:
    """Decode a single variable length integer.

    Parameters
    ----------
    text : str
        The settings text.
    pos : int
        The index of the first character of the integer.
    minimum : int
        The smallest value the field can hold.

    Returns
    -------
    Tuple[int, int]
        The value and the index just past it.

    Raises
    ------
    ValueError
        If the text is truncated or contains foreign characters.
    """
    first = _atoi64(text, pos)
    pos += 1
    value = minimum
    start, end, chars, bits = 0, 47, 1, 0
    while first > end:
        value += (end + 1 - start) << bits
        start = end + 1
        end = start + (62 - end) // 2
        chars += 1
        bits += 6
    value += (first - start) << bits
    for _ in range(chars - 1):
        bits -= 6
        value += _atoi64(text, pos) << bits
        pos += 1
    return value, pos


def _atoi64(text: str, pos: int) -> int:
    if pos >= len(text):
        raise ValueError("settings are truncated")
    index = ITOA64.find(text[pos])
    if index < 0:
        raise ValueError(f"illegal character '{text[pos]}' in settings")
    return index


@dataclass(frozen=True)
class YescryptSetting:
    """The tunable parameters of a yescrypt digest."""

    flavor: int = FLAVOR_DEFAULT
    ln: int = 12
    r: int = 32
    p: int = 1
    t: int = 0


def encode_setting(setting: YescryptSetting) -> str:
    """Encode yescrypt parameters into the settings field.

    Parameters
    ----------
    setting : YescryptSetting
        The parameters.

    Returns
    -------
    str
        The settings field, e.g. ``j9T``.

    Raises
    ------
    ValueError
        If a parameter cannot be encoded.
    """
    parts: List[str] = [
        encode64_uint32(setting.flavor, 0),
        encode64_uint32(setting.ln, 1),
        encode64_uint32(setting.r, 1),
    ]
    have = 0
    if setting.p != 1:
        have |= _HAVE_P
    if setting.t:
        have |= _HAVE_T
    if have:
        parts.append(encode64_uint32(have, 1))
        if have & _HAVE_P:
            parts.append(encode64_uint32(setting.p, 2))
        if have & _HAVE_T:
            parts.append(encode64_uint32(setting.t, 1))
    return "".join(parts)


def decode_setting(text: str) -> YescryptSetting:
    """Decode the settings field of a yescrypt digest.

    Parameters
    ----------
    text : str
        The settings field, e.g. ``j9T``.

    Returns
    -------
    YescryptSetting
        The parameters.

    Raises
    ------
    ValueError
        If the settings are malformed or use unsupported features.
    """
    flavor, pos = decode64_uint32(text, 0, 0)
    if flavor > FLAVOR_MAX:
        raise ValueError(f"flavor {flavor} is not supported")
    ln, pos = decode64_uint32(text, pos, 1)
    if ln > 63:
        raise ValueError(f"ln {ln} is too large")
    r, pos = decode64_uint32(text, pos, 1)
    p, t = 1, 0
    if pos < len(text):
        have, pos = decode64_uint32(text, pos, 1)
        if have & (_HAVE_G | _HAVE_NROM):
            raise ValueError("g and NROM parameters are not supported")
        if have & ~(_HAVE_P | _HAVE_T):
            raise ValueError(f"unknown parameter flags {have}")
        if have & _HAVE_P:
            p, pos = decode64_uint32(text, pos, 2)
        if have & _HAVE_T:
            t, pos = decode64_uint32(text, pos, 1)
    if pos != len(text):
        raise ValueError("settings have trailing characters")
    return YescryptSetting(flavor=flavor, ln=ln, r=r, p=p, t=t)


__all__ = [
    "ITOA64",
    "FLAVOR_DEFAULT",
    "YescryptSetting",
    "encode64",
    "decode64",
    "encode64_uint32",
    "decode64_uint32",
    "encode_setting",
    "decode_setting",
]
