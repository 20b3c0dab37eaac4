# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""PBKDF2-HMAC digests (SHA-1, SHA-224, SHA-256, SHA-384 and SHA-512)."""

from ._const import ALG_NAME
from ._decoder import decode, decode_variant, register_decoder
from ._digest import Pbkdf2Digest
from ._hasher import Pbkdf2Hasher
from ._variant import Variant

__all__ = [
    "ALG_NAME",
    "Pbkdf2Digest",
    "Pbkdf2Hasher",
    "Variant",
    "decode",
    "decode_variant",
    "register_decoder",
]
