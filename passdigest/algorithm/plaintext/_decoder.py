# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Plaintext decoder."""

from ...encoding import split
from ...errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
)
from ...protocol import DecoderRegister
from .._base import decode_errors
from ._const import ALG_NAME
from ._digest import PlaintextDigest
from ._variant import Variant


def register_decoder(register: DecoderRegister) -> None:
    """Register the decoders of both plaintext variants.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register.register(Variant.PLAINTEXT.prefix, decode)
    register.register(Variant.BASE64.prefix, decode)


@decode_errors(ALG_NAME)
def decode(encoded: str) -> PlaintextDigest:
    """Decode a plaintext digest.

    Everything after the identifier is the key, ``$`` included.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    PlaintextDigest
        The digest.

    Raises
    ------
    EncodedDigestError
        If the digest is malformed or the key is empty.
    """
    parts = split(encoded, 3)
    if len(parts) != 3:
        raise InvalidFormatError(
            f"encoded digest has {len(parts)} fields, 3 are required"
        )
    variant = Variant.resolve(parts[1])
    if variant is Variant.NONE:
        raise InvalidIdentifierError(
            f"identifier '{parts[1]}' is not an encoded {ALG_NAME} digest"
        )
    try:
        key = variant.decode_key(parts[2])
    except ValueError as error:
        raise InvalidKeyEncodingError(str(error)) from error
    if not key:
        raise InvalidKeyEncodingError("key has 0 bytes")
    return PlaintextDigest(variant=variant, key=key)


__all__ = ["register_decoder", "decode"]
