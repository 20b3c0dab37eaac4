# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""SHA-crypt decoder."""

from typing import Callable, Optional, Tuple

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
from ._const import ALG_NAME, ITERATIONS_DEFAULT_OMITTED, SALT_LENGTH_MAX
from ._digest import ShaCryptDigest
from ._variant import Variant


def register_decoder(register: DecoderRegister) -> None:
    """Register the decoders of both SHA-crypt variants.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register_decoder_sha256(register)
    register_decoder_sha512(register)


def register_decoder_sha256(register: DecoderRegister) -> None:
    """Register the sha256crypt decoder."""
    register.register(Variant.SHA256.prefix, decode_variant(Variant.SHA256))


def register_decoder_sha512(register: DecoderRegister) -> None:
    """Register the sha512crypt decoder."""
    register.register(Variant.SHA512.prefix, decode_variant(Variant.SHA512))


def decode(encoded: str) -> ShaCryptDigest:
    """Decode a SHA-crypt digest of either variant.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    ShaCryptDigest
        The digest.
    """
    return decode_variant(Variant.NONE)(encoded)


def decode_variant(variant: Variant) -> Callable[[str], ShaCryptDigest]:
    """Get a decoder restricted to one SHA-crypt variant.

    Parameters
    ----------
    variant : Variant
        The variant, ``Variant.NONE`` allowing both.

    Returns
    -------
    Callable[[str], ShaCryptDigest]
        The decode function.
    """

    @decode_errors(ALG_NAME)
    def _decode(encoded: str) -> ShaCryptDigest:
        resolved, options, salt, key = _decoder_parts(encoded)
        if variant is not Variant.NONE and resolved is not variant:
            raise InvalidIdentifierError(
                f"the '{resolved.value}' variant cannot be decoded, "
                f"only the '{variant.value}' variant can be"
            )
        return _decode_parts(resolved, options, salt, key)

    return _decode


def _decoder_parts(
    encoded: str,
) -> Tuple[Variant, Optional[str], str, str]:
    parts = split(encoded)
    if len(parts) not in (4, 5):
        raise InvalidFormatError(
            f"encoded digest has {len(parts)} fields, 4 or 5 are required"
        )
    variant = Variant.resolve(parts[1])
    if variant is Variant.NONE or parts[1] != variant.prefix:
        raise InvalidIdentifierError(
            f"identifier '{parts[1]}' is not an encoded {ALG_NAME} digest"
        )
    if len(parts) == 4:
        return variant, None, parts[2], parts[3]
    return variant, parts[2], parts[3], parts[4]


def _decode_parts(
    variant: Variant, options: Optional[str], salt: str, key: str
) -> ShaCryptDigest:
    iterations = ITERATIONS_DEFAULT_OMITTED
    if options is not None:
        iterations = _decode_rounds(options)
    if len(salt) > SALT_LENGTH_MAX or not is_crypt_text(salt):
        raise InvalidSaltEncodingError(
            f"salt must be at most {SALT_LENGTH_MAX} crypt characters"
        )
    if not key:
        raise InvalidKeyEncodingError("key has 0 bytes")
    if not is_crypt_text(key):
        raise InvalidKeyEncodingError("key holds non crypt characters")
    return ShaCryptDigest(
        variant=variant,
        iterations=iterations,
        salt=salt.encode("ascii"),
        key=key.encode("ascii"),
        rounds_omitted=options is None,
    )


def _decode_rounds(options: str) -> int:
    rounds: Optional[int] = None
    for option in parse_options(options):
        if option.key != "rounds":
            raise InvalidOptionKeyError(
                f"option '{option.key}' with value '{option.value}' "
                "is unknown"
            )
        rounds = option.as_uint(32)
    if rounds is None:
        raise InvalidOptionError("option 'rounds' is required")
    return rounds


__all__ = [
    "register_decoder",
    "register_decoder_sha256",
    "register_decoder_sha512",
    "decode",
    "decode_variant",
]
