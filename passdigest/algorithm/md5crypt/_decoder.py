# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""md5crypt decoder."""

from typing import Callable, List, Optional, Tuple

from ...encoding import parse_options, split
from ...errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidOptionError,
    InvalidOptionKeyError,
    InvalidSaltEncodingError,
)
from ...protocol import DecoderRegister
from .._base import decode_errors
from .._crypt import is_crypt_text
from ._const import ALG_NAME, PREFIX_SUN_OPTIONS, SALT_LENGTH_MAX
from ._digest import Md5CryptDigest
from ._variant import Variant


def register_decoder(register: DecoderRegister) -> None:
    """Register the decoders of both md5crypt variants.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register_decoder_standard(register)
    register_decoder_sun(register)


def register_decoder_standard(register: DecoderRegister) -> None:
    """Register the standard md5crypt decoder.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register.register(
        Variant.STANDARD.prefix, decode_variant(Variant.STANDARD)
    )


def register_decoder_sun(register: DecoderRegister) -> None:
    """Register the Sun md5crypt decoder and its ``$md5,`` prefix.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register.register(Variant.SUN.prefix, decode_variant(Variant.SUN))
    register.register_prefix(PREFIX_SUN_OPTIONS, Variant.SUN.prefix)


def decode(encoded: str) -> Md5CryptDigest:
    """Decode an md5crypt digest of either variant.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    Md5CryptDigest
        The digest.
    """
    return decode_variant(Variant.NONE)(encoded)


def decode_variant(variant: Variant) -> Callable[[str], Md5CryptDigest]:
    """Get a decoder restricted to one md5crypt variant.

    Parameters
    ----------
    variant : Variant
        The variant, ``Variant.NONE`` allowing both.

    Returns
    -------
    Callable[[str], Md5CryptDigest]
        The decode function.
    """

    @decode_errors(ALG_NAME)
    def _decode(encoded: str) -> Md5CryptDigest:
        resolved, options, parts = _decoder_parts(encoded)
        if variant is not Variant.NONE and resolved is not variant:
            raise InvalidIdentifierError(
                f"the '{resolved.value}' variant cannot be decoded, "
                f"only the '{variant.value}' variant can be"
            )
        return _decode_parts(resolved, options, parts)

    return _decode


def _decoder_parts(encoded: str) -> Tuple[Variant, str, List[str]]:
    parts = split(encoded)
    if len(parts) not in (4, 5):
        raise InvalidFormatError(
            f"encoded digest has {len(parts)} fields, 4 or 5 are required"
        )
    identifier, _, options = parts[1].partition(",")
    variant = Variant.resolve(identifier)
    if variant is Variant.NONE or identifier != variant.prefix:
        raise InvalidIdentifierError(
            f"identifier '{parts[1]}' is not an encoded {ALG_NAME} digest"
        )
    if variant is Variant.STANDARD:
        if len(parts) != 4:
            raise InvalidFormatError(
                f"encoded digest has {len(parts)} fields, 4 are required"
            )
        if options:
            raise InvalidOptionError(
                f"options are only valid for the '{Variant.SUN.value}' "
                "variant"
            )
        return variant, options, [parts[2], parts[3]]
    if len(parts) != 5 or parts[3]:
        raise InvalidFormatError(
            "encoded digest must have 5 fields with an empty fourth field"
        )
    return variant, options, [parts[2], parts[4]]


def _decode_parts(
    variant: Variant, options: str, parts: List[str]
) -> Md5CryptDigest:
    iterations: Optional[int] = None
    for option in parse_options(options):
        if option.key in ("iterations", "rounds"):
            iterations = option.as_uint(32)
        else:
            raise InvalidOptionKeyError(
                f"option '{option.key}' with value '{option.value}' "
                "is unknown"
            )
    salt, key = parts
    if len(salt) > SALT_LENGTH_MAX or not is_crypt_text(salt):
        raise InvalidSaltEncodingError(
            f"salt must be at most {SALT_LENGTH_MAX} crypt characters"
        )
    if not key:
        raise InvalidKeyEncodingError("key has 0 bytes")
    if not is_crypt_text(key):
        raise InvalidKeyEncodingError("key holds non crypt characters")
    return Md5CryptDigest(
        variant=variant,
        salt=salt.encode("ascii"),
        key=key.encode("ascii"),
        iterations=0 if iterations is None else iterations,
    )


__all__ = [
    "register_decoder",
    "register_decoder_standard",
    "register_decoder_sun",
    "decode",
    "decode_variant",
]
