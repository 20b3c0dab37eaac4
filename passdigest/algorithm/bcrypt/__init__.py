# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt digests (standard and bcrypt-sha256)."""

from ._const import ALG_NAME, ALG_NAME_SHA256
from ._decoder import (
    decode,
    decode_variant,
    register_decoder,
    register_decoder_sha256,
    register_decoder_standard,
)
from ._digest import BcryptDigest
from ._hasher import BcryptHasher
from ._variant import Variant

__all__ = [
    "ALG_NAME",
    "ALG_NAME_SHA256",
    "BcryptDigest",
    "BcryptHasher",
    "Variant",
    "decode",
    "decode_variant",
    "register_decoder",
    "register_decoder_sha256",
    "register_decoder_standard",
]
