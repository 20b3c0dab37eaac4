# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt decoder."""

import re
from typing import Callable, List, Optional, Tuple

from ...encoding import Option, decode_bcrypt, parse_options, split
from ...errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidOptionError,
    InvalidOptionKeyError,
    InvalidSaltEncodingError,
    InvalidVersionError,
)
from ...protocol import DecoderRegister
from .._base import decode_errors
from ._const import (
    ALG_NAME,
    IDENTIFIER_SHA256,
    IDENTIFIER_VARIANTS,
    KEY_ENCODED_LENGTH,
    SALT_ENCODED_LENGTH,
    SHA256_VERSION,
)
from ._digest import BcryptDigest
from ._variant import Variant

_KEY_RE = re.compile(r"[./A-Za-z0-9]{%d}" % KEY_ENCODED_LENGTH)


def register_decoder(register: DecoderRegister) -> None:
    """Register the decoders of all bcrypt variants.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register_decoder_standard(register)
    register_decoder_sha256(register)


def register_decoder_standard(register: DecoderRegister) -> None:
    """Register the standard bcrypt decoder and its version tags.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    decode_func = decode_variant(Variant.STANDARD)
    for identifier in IDENTIFIER_VARIANTS:
        register.register(identifier, decode_func)


def register_decoder_sha256(register: DecoderRegister) -> None:
    """Register the bcrypt-sha256 decoder.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register.register(Variant.SHA256.prefix, decode_variant(Variant.SHA256))


def decode(encoded: str) -> BcryptDigest:
    """Decode a bcrypt digest of any variant.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    BcryptDigest
        The digest.
    """
    return decode_variant(Variant.NONE)(encoded)


def decode_variant(variant: Variant) -> Callable[[str], BcryptDigest]:
    """Get a decoder restricted to one bcrypt variant.

    Parameters
    ----------
    variant : Variant
        The variant, ``Variant.NONE`` allowing all of them.

    Returns
    -------
    Callable[[str], BcryptDigest]
        The decode function.
    """

    @decode_errors(ALG_NAME)
    def _decode(encoded: str) -> BcryptDigest:
        resolved, parts = _decoder_parts(encoded)
        if variant is not Variant.NONE and resolved is not variant:
            raise InvalidIdentifierError(
                f"the '{resolved.value}' variant cannot be decoded, "
                f"only the '{variant.value}' variant can be"
            )
        return _decode_parts(resolved, parts)

    return _decode


def _decoder_parts(encoded: str) -> Tuple[Variant, List[str]]:
    parts = split(encoded)
    if len(parts) < 4:
        raise InvalidFormatError(
            f"encoded digest has {len(parts)} fields, at least 4 are required"
        )
    if parts[1] not in IDENTIFIER_VARIANTS + (IDENTIFIER_SHA256,):
        raise InvalidIdentifierError(
            f"identifier '{parts[1]}' is not an encoded {ALG_NAME} digest"
        )
    return Variant.resolve(parts[1]), parts[2:]


def _decode_parts(variant: Variant, parts: List[str]) -> BcryptDigest:
    if variant is Variant.SHA256:
        if len(parts) != 3:
            raise InvalidFormatError(
                f"encoded digest has {len(parts) + 2} fields, 5 are required"
            )
        cost = _decode_sha256_options(parts[0])
        salt, key = parts[1], parts[2]
    else:
        if len(parts) != 2:
            raise InvalidFormatError(
                f"encoded digest has {len(parts) + 2} fields, 4 are required"
            )
        cost = Option("cost", parts[0]).as_uint(32)
        salt = parts[1][:SALT_ENCODED_LENGTH]
        key = parts[1][SALT_ENCODED_LENGTH:]
    if len(salt) != SALT_ENCODED_LENGTH:
        raise InvalidSaltEncodingError(
            f"salt has {len(salt)} characters, "
            f"{SALT_ENCODED_LENGTH} are required"
        )
    try:
        salt_bytes = decode_bcrypt(salt)
    except ValueError as error:
        raise InvalidSaltEncodingError(str(error)) from error
    if not key:
        raise InvalidKeyEncodingError("key has 0 bytes")
    if not _KEY_RE.fullmatch(key):
        raise InvalidKeyEncodingError(
            f"key must be {KEY_ENCODED_LENGTH} bcrypt base64 characters"
        )
    return BcryptDigest(
        variant=variant,
        cost=cost,
        salt=salt_bytes,
        key=key.encode("ascii"),
    )


def _decode_sha256_options(options: str) -> int:
    cost: Optional[int] = None
    for option in parse_options(options):
        if option.key == "v":
            version = option.as_uint(32)
            if version != SHA256_VERSION:
                raise InvalidVersionError(
                    f"version {version} is not supported, "
                    f"only {SHA256_VERSION} is"
                )
        elif option.key == "r":
            cost = option.as_uint(32)
        elif option.key != "t":
            raise InvalidOptionKeyError(
                f"option '{option.key}' with value '{option.value}' "
                "is unknown"
            )
    if cost is None:
        raise InvalidOptionError("option 'r' is missing")
    return cost


__all__ = [
    "register_decoder",
    "register_decoder_standard",
    "register_decoder_sha256",
    "decode",
    "decode_variant",
]
