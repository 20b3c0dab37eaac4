# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""RFC 2307 LDAP SHA digests (``{SHA}``, ``{SSHA512}`` and friends).

The SHA-2 schemes are registered by the default decoder profile, the
SHA-1 ones only by the ``all`` profile.
"""

from ._const import ALG_NAME
from ._decoder import (
    SHA1_VARIANTS,
    SHA2_VARIANTS,
    decode,
    decode_variant,
    register_decoder,
    register_decoder_sha1,
    register_decoder_variants,
)
from ._digest import LdapDigest
from ._hasher import LdapHasher
from ._variant import VARIANT_DEFAULT, Variant

__all__ = [
    "ALG_NAME",
    "SHA1_VARIANTS",
    "SHA2_VARIANTS",
    "VARIANT_DEFAULT",
    "LdapDigest",
    "LdapHasher",
    "Variant",
    "decode",
    "decode_variant",
    "register_decoder",
    "register_decoder_sha1",
    "register_decoder_variants",
]
