# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""LDAP SHA decoder.

The schemes have no ``$`` delimited form, so the decoders are reached
through their ``{SCHEME}`` prefix.
"""

from typing import Callable, Iterable, Tuple

from ...encoding import decode_std_padded
from ...errors import InvalidIdentifierError, InvalidKeyEncodingError
from ...protocol import DecoderRegister
from .._base import decode_errors
from ._const import ALG_NAME
from ._digest import LdapDigest
from ._variant import Variant

SHA1_VARIANTS = (Variant.SHA1, Variant.SSHA1)
SHA2_VARIANTS = (
    Variant.SHA256,
    Variant.SSHA256,
    Variant.SHA384,
    Variant.SSHA384,
    Variant.SHA512,
    Variant.SSHA512,
)


def register_decoder(register: DecoderRegister) -> None:
    """Register the decoders of the SHA-2 schemes.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register_decoder_variants(register, SHA2_VARIANTS)


def register_decoder_sha1(register: DecoderRegister) -> None:
    """Register the decoders of the legacy ``{SHA}`` and ``{SSHA}`` schemes.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    """
    register_decoder_variants(register, SHA1_VARIANTS)


def register_decoder_variants(
    register: DecoderRegister, variants: Iterable[Variant]
) -> None:
    """Register the decoders of some variants and their scheme prefixes.

    Parameters
    ----------
    register : DecoderRegister
        The registry.
    variants : Iterable[Variant]
        The variants.
    """
    for variant in variants:
        register.register(variant.identifier, decode_variant(variant))
        register.register_prefix(variant.prefix, variant.identifier)


def decode(encoded: str) -> LdapDigest:
    """Decode an LDAP SHA digest of any scheme.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    LdapDigest
        The digest.
    """
    return decode_variant(Variant.NONE)(encoded)


def decode_variant(variant: Variant) -> Callable[[str], LdapDigest]:
    """Get a decoder restricted to one LDAP SHA scheme.

    Parameters
    ----------
    variant : Variant
        The variant, ``Variant.NONE`` allowing all of them.

    Returns
    -------
    Callable[[str], LdapDigest]
        The decode function.
    """

    @decode_errors(ALG_NAME)
    def _decode(encoded: str) -> LdapDigest:
        resolved, payload = _decoder_parts(encoded)
        if variant is not Variant.NONE and resolved is not variant:
            raise InvalidIdentifierError(
                f"the '{resolved.scheme}' scheme cannot be decoded, "
                f"only the '{variant.scheme}' scheme can be"
            )
        return _decode_payload(resolved, payload)

    return _decode


def _decoder_parts(encoded: str) -> Tuple[Variant, str]:
    scheme, sep, payload = encoded.partition("}")
    variant = Variant.NONE
    if scheme.startswith("{") and sep:
        variant = Variant.resolve(scheme[1:])
    if variant is Variant.NONE or scheme[1:] != variant.scheme:
        raise InvalidIdentifierError(
            f"scheme '{scheme}{sep}' is not an encoded {ALG_NAME} digest"
        )
    return variant, payload


def _decode_payload(variant: Variant, payload: str) -> LdapDigest:
    try:
        raw = decode_std_padded(payload)
    except ValueError as error:
        raise InvalidKeyEncodingError(str(error)) from error
    size = variant.digest_size
    if variant.salted and len(raw) <= size:
        raise InvalidKeyEncodingError(
            f"salted digest has {len(raw)} bytes, more than {size} "
            "are required"
        )
    if not variant.salted and len(raw) != size:
        raise InvalidKeyEncodingError(
            f"digest has {len(raw)} bytes, {size} are required"
        )
    return LdapDigest(variant=variant, salt=raw[size:], key=raw[:size])


__all__ = [
    "SHA1_VARIANTS",
    "SHA2_VARIANTS",
    "register_decoder",
    "register_decoder_sha1",
    "register_decoder_variants",
    "decode",
    "decode_variant",
]
