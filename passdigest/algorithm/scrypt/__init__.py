# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt and yescrypt digests."""

from ._const import ALG_NAME, ALG_NAME_YESCRYPT
from ._decoder import (
    decode,
    decode_variant,
    register_decoder,
    register_decoder_scrypt,
    register_decoder_yescrypt,
)
from ._digest import ScryptDigest
from ._hasher import ScryptHasher
from ._variant import Variant, scrypt_maxmem

__all__ = [
    "ALG_NAME",
    "ALG_NAME_YESCRYPT",
    "ScryptDigest",
    "ScryptHasher",
    "Variant",
    "decode",
    "decode_variant",
    "register_decoder",
    "register_decoder_scrypt",
    "register_decoder_yescrypt",
    "scrypt_maxmem",
]
