# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""PBKDF2 decoder."""

from typing import Callable

from ...encoding import Option, decode_adapted, split
from ...errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidSaltEncodingError,
)
from ...protocol import DecoderRegister
from .._base import decode_errors
from ._const import ALG_NAME, IDENTIFIER_SHA1
from ._digest import Pbkdf2Digest
from ._variant import Variant


def register_decoder(register: DecoderRegister) -> None:
    """Register the decoders of all PBKDF2 variants.

    ``pbkdf2-sha1`` is accepted as an alias of ``pbkdf2``.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    for variant in (
        Variant.SHA1,
        Variant.SHA224,
        Variant.SHA256,
        Variant.SHA384,
        Variant.SHA512,
    ):
        register.register(variant.prefix, decode_variant(variant))
    register.register(IDENTIFIER_SHA1, decode_variant(Variant.SHA1))


def decode(encoded: str) -> Pbkdf2Digest:
    """Decode a PBKDF2 digest of any variant.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    Pbkdf2Digest
        The digest.
    """
    return decode_variant(Variant.NONE)(encoded)


def decode_variant(variant: Variant) -> Callable[[str], Pbkdf2Digest]:
    """Get a decoder restricted to one PBKDF2 variant.

    Parameters
    ----------
    variant : Variant
        The variant, ``Variant.NONE`` allowing all of them.

    Returns
    -------
    Callable[[str], Pbkdf2Digest]
        The decode function.
    """

    @decode_errors(ALG_NAME)
    def _decode(encoded: str) -> Pbkdf2Digest:
        parts = split(encoded)
        if len(parts) != 5:
            raise InvalidFormatError(
                f"encoded digest has {len(parts)} fields, 5 are required"
            )
        resolved = Variant.resolve(parts[1])
        if resolved is Variant.NONE or not parts[1].startswith(ALG_NAME):
            raise InvalidIdentifierError(
                f"identifier '{parts[1]}' is not an encoded {ALG_NAME} digest"
            )
        if variant is not Variant.NONE and resolved is not variant:
            raise InvalidIdentifierError(
                f"the '{resolved.prefix}' variant cannot be decoded, "
                f"only the '{variant.prefix}' variant can be"
            )
        iterations = Option("iterations", parts[2]).as_uint(32)
        try:
            salt = decode_adapted(parts[3])
        except ValueError as error:
            raise InvalidSaltEncodingError(str(error)) from error
        try:
            key = decode_adapted(parts[4])
        except ValueError as error:
            raise InvalidKeyEncodingError(str(error)) from error
        if not key:
            raise InvalidKeyEncodingError("key has 0 bytes")
        return Pbkdf2Digest(
            variant=resolved, iterations=iterations, salt=salt, key=key
        )

    return _decode


__all__ = ["register_decoder", "decode", "decode_variant"]
