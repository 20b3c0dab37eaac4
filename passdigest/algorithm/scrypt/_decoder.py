# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt and yescrypt decoder."""

from typing import Callable, List, Optional

from ...encoding import (
    decode64,
    decode_setting,
    decode_std,
    parse_options,
    split,
)
from ...errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidOptionKeyError,
    InvalidOptionValueError,
    InvalidSaltEncodingError,
)
from ...protocol import DecoderRegister
from .._base import decode_errors
from ._const import (
    ALG_NAME,
    BLOCK_SIZE_DEFAULT,
    BLOCK_SIZE_MAX,
    BLOCK_SIZE_MIN,
    LN_DEFAULT,
    LN_MAX,
    LN_MIN,
    PARALLELISM_DEFAULT,
    PARALLELISM_MAX,
    PARALLELISM_MIN,
)
from ._digest import ScryptDigest
from ._variant import Variant


def register_decoder(register: DecoderRegister) -> None:
    """Register the scrypt and yescrypt decoders.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register_decoder_scrypt(register)
    register_decoder_yescrypt(register)


def register_decoder_scrypt(register: DecoderRegister) -> None:
    """Register the scrypt decoder.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register.register(Variant.SCRYPT.prefix, decode_variant(Variant.SCRYPT))


def register_decoder_yescrypt(register: DecoderRegister) -> None:
    """Register the yescrypt decoder.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register.register(
        Variant.YESCRYPT.prefix, decode_variant(Variant.YESCRYPT)
    )


def decode(encoded: str) -> ScryptDigest:
    """Decode a scrypt or yescrypt digest.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    ScryptDigest
        The digest.
    """
    return decode_variant(Variant.NONE)(encoded)


def decode_variant(variant: Variant) -> Callable[[str], ScryptDigest]:
    """Get a decoder restricted to one variant.

    Parameters
    ----------
    variant : Variant
        The variant, ``Variant.NONE`` allowing both.

    Returns
    -------
    Callable[[str], ScryptDigest]
        The decode function.
    """

    @decode_errors(ALG_NAME)
    def _decode(encoded: str) -> ScryptDigest:
        parts = split(encoded)
        if len(parts) != 5:
            raise InvalidFormatError(
                f"encoded digest has {len(parts)} fields, 5 are required"
            )
        resolved = Variant.resolve(parts[1])
        if resolved is Variant.NONE or parts[1] != resolved.prefix:
            raise InvalidIdentifierError(
                f"identifier '{parts[1]}' is not an encoded {ALG_NAME} digest"
            )
        if variant is not Variant.NONE and resolved is not variant:
            raise InvalidIdentifierError(
                f"the '{resolved.value}' variant cannot be decoded, "
                f"only the '{variant.value}' variant can be"
            )
        if resolved is Variant.YESCRYPT:
            return _decode_yescrypt(parts[2:])
        return _decode_scrypt(parts[2:])

    return _decode


def _decode_scrypt(parts: List[str]) -> ScryptDigest:
    ln: Optional[int] = None
    r: Optional[int] = None
    p: Optional[int] = None
    for option in parse_options(parts[0]):
        if option.key == "ln":
            ln = option.as_uint(32)
        elif option.key == "r":
            r = option.as_uint(32)
        elif option.key == "p":
            p = option.as_uint(32)
        else:
            raise InvalidOptionKeyError(
                f"option '{option.key}' with value '{option.value}' "
                "is unknown"
            )
    try:
        salt = decode_std(parts[1])
    except ValueError as error:
        raise InvalidSaltEncodingError(str(error)) from error
    ln = LN_DEFAULT if ln is None else ln
    r = BLOCK_SIZE_DEFAULT if r is None else r
    p = PARALLELISM_DEFAULT if p is None else p
    _check_costs(ln, r, p)
    key = _decode_key(parts[2], decode_std)
    return ScryptDigest(
        variant=Variant.SCRYPT,
        ln=ln,
        r=r,
        p=p,
        salt=salt,
        key=key,
    )


def _decode_yescrypt(parts: List[str]) -> ScryptDigest:
    try:
        setting = decode_setting(parts[0])
    except ValueError as error:
        raise InvalidOptionValueError(
            f"settings '{parts[0]}' are invalid: {error}"
        ) from error
    _check_costs(setting.ln, setting.r, setting.p)
    try:
        salt = decode64(parts[1])
    except ValueError as error:
        raise InvalidSaltEncodingError(str(error)) from error
    key = _decode_key(parts[2], decode64)
    return ScryptDigest(
        variant=Variant.YESCRYPT,
        ln=setting.ln,
        r=setting.r,
        p=setting.p,
        salt=salt,
        key=key,
        flavor=setting.flavor,
        t=setting.t,
    )


def _check_costs(ln: int, r: int, p: int) -> None:
    for name, value, minimum, maximum in (
        ("ln", ln, LN_MIN, LN_MAX),
        ("r", r, BLOCK_SIZE_MIN, BLOCK_SIZE_MAX),
        ("p", p, PARALLELISM_MIN, PARALLELISM_MAX),
    ):
        if not minimum <= value <= maximum:
            raise InvalidOptionValueError(
                f"option '{name}' with value '{value}' is not "
                f"between {minimum} and {maximum}"
            )


def _decode_key(text: str, decoder: Callable[[str], bytes]) -> bytes:
    try:
        key = decoder(text)
    except ValueError as error:
        raise InvalidKeyEncodingError(str(error)) from error
    if not key:
        raise InvalidKeyEncodingError("key has 0 bytes")
    return key


__all__ = [
    "register_decoder",
    "register_decoder_scrypt",
    "register_decoder_yescrypt",
    "decode",
    "decode_variant",
]
