# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2 decoder."""

from typing import Callable, List, Optional, Tuple

from ...encoding import decode_std, parse_options, split
from ...errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidOptionKeyError,
    InvalidSaltEncodingError,
    InvalidVersionError,
)
from ...protocol import DecoderRegister
from .._base import decode_errors
from ._const import (
    ALG_NAME,
    DECODE_ITERATIONS_DEFAULT,
    DECODE_MEMORY_DEFAULT,
    DECODE_PARALLELISM_DEFAULT,
)
from ._digest import Argon2Digest
from ._variant import VERSION, Variant


def register_decoder(register: DecoderRegister) -> None:
    """Register the decoders of all argon2 variants.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    for variant in (Variant.ID, Variant.I, Variant.D):
        register.register(variant.prefix, decode_variant(variant))


def decode(encoded: str) -> Argon2Digest:
    """Decode an argon2 digest of any variant.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    Argon2Digest
        The digest.
    """
    return decode_variant(Variant.NONE)(encoded)


def decode_variant(variant: Variant) -> Callable[[str], Argon2Digest]:
    """Get a decoder restricted to one argon2 variant.

    Parameters
    ----------
    variant : Variant
        The variant, ``Variant.NONE`` allowing all of them.

    Returns
    -------
    Callable[[str], Argon2Digest]
        The decode function.
    """

    @decode_errors(ALG_NAME)
    def _decode(encoded: str) -> Argon2Digest:
        resolved, parts = _decoder_parts(encoded)
        if variant is not Variant.NONE and resolved is not variant:
            raise InvalidIdentifierError(
                f"the '{resolved.prefix}' variant cannot be decoded, "
                f"only the '{variant.prefix}' variant can be"
            )
        return _decode_parts(resolved, parts)

    return _decode


def _decoder_parts(encoded: str) -> Tuple[Variant, List[str]]:
    parts = split(encoded)
    if len(parts) != 6:
        raise InvalidFormatError(
            f"encoded digest has {len(parts)} fields, 6 are required"
        )
    variant = Variant.resolve(parts[1])
    if variant is Variant.NONE or parts[1] != variant.prefix:
        raise InvalidIdentifierError(
            f"identifier '{parts[1]}' is not an encoded {ALG_NAME} digest"
        )
    return variant, parts[2:]


def _decode_parts(variant: Variant, parts: List[str]) -> Argon2Digest:
    version: Optional[int] = None
    iterations: Optional[int] = None
    memory: Optional[int] = None
    parallelism: Optional[int] = None
    for option in parse_options(parts[0]) + parse_options(parts[1]):
        if option.key == "v":
            version = option.as_uint(32)
        elif option.key == "m":
            memory = option.as_uint(32)
        elif option.key == "t":
            iterations = option.as_uint(32)
        elif option.key == "p":
            parallelism = option.as_uint(32)
        elif option.key != "k":
            raise InvalidOptionKeyError(
                f"option '{option.key}' with value '{option.value}' "
                "is unknown"
            )
    if version is None:
        raise InvalidVersionError("version is missing")
    if version != VERSION:
        raise InvalidVersionError(
            f"version {version} is not supported, only {VERSION} is"
        )
    try:
        salt = decode_std(parts[2])
    except ValueError as error:
        raise InvalidSaltEncodingError(str(error)) from error
    try:
        key = decode_std(parts[3])
    except ValueError as error:
        raise InvalidKeyEncodingError(str(error)) from error
    if not key:
        raise InvalidKeyEncodingError("key has 0 bytes")
    return Argon2Digest(
        variant=variant,
        iterations=(
            DECODE_ITERATIONS_DEFAULT if iterations is None else iterations
        ),
        memory=DECODE_MEMORY_DEFAULT if memory is None else memory,
        parallelism=(
            DECODE_PARALLELISM_DEFAULT if parallelism is None else parallelism
        ),
        salt=salt,
        key=key,
    )


__all__ = ["register_decoder", "decode", "decode_variant"]
