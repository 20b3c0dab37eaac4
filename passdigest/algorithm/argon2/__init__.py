# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2 digests (argon2i, argon2d and argon2id)."""

from ._const import ALG_NAME
from ._decoder import decode, decode_variant, register_decoder
from ._digest import Argon2Digest
from ._hasher import Argon2Hasher, round_memory
from ._profile import Profile, ProfileParams
from ._variant import VERSION, Variant

__all__ = [
    "ALG_NAME",
    "VERSION",
    "Argon2Digest",
    "Argon2Hasher",
    "Profile",
    "ProfileParams",
    "Variant",
    "decode",
    "decode_variant",
    "register_decoder",
    "round_memory",
]
