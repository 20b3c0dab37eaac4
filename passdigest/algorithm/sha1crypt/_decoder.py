# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""sha1crypt decoder."""

from ...encoding import Option, split
from ...errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidSaltEncodingError,
)
from ...protocol import DecoderRegister
from .._base import decode_errors
from .._crypt import is_crypt_text
from ._const import ALG_NAME, IDENTIFIER, ITERATIONS_DEFAULT, SALT_LENGTH_MAX
from ._digest import Sha1CryptDigest


def register_decoder(register: DecoderRegister) -> None:
    """Register the sha1crypt decoder.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register.register(IDENTIFIER, decode)


@decode_errors(ALG_NAME)
def decode(encoded: str) -> Sha1CryptDigest:
    """Decode a sha1crypt digest.

    An empty iterations field takes the default iterations.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    Sha1CryptDigest
        The digest.

    Raises
    ------
    EncodedDigestError
        If the digest is malformed.
    """
    parts = split(encoded)
    if len(parts) != 5:
        raise InvalidFormatError(
            f"encoded digest has {len(parts)} fields, 5 are required"
        )
    if parts[1] != IDENTIFIER:
        raise InvalidIdentifierError(
            f"identifier '{parts[1]}' is not an encoded {ALG_NAME} digest"
        )
    iterations = ITERATIONS_DEFAULT
    if parts[2]:
        iterations = Option("rounds", parts[2]).as_uint(32)
    salt, key = parts[3], parts[4]
    if len(salt) > SALT_LENGTH_MAX or not is_crypt_text(salt):
        raise InvalidSaltEncodingError(
            f"salt must be at most {SALT_LENGTH_MAX} crypt characters"
        )
    if not key:
        raise InvalidKeyEncodingError("key has 0 bytes")
    if not is_crypt_text(key):
        raise InvalidKeyEncodingError("key holds non crypt characters")
    return Sha1CryptDigest(
        iterations=iterations,
        salt=salt.encode("ascii"),
        key=key.encode("ascii"),
    )


__all__ = ["register_decoder", "decode"]
