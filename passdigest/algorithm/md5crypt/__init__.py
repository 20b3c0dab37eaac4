# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""md5crypt digests (standard ``$1$`` and Sun ``$md5$``).

These are legacy formats, only registered by the ``all`` decoder profile.
"""

from ._const import ALG_NAME
from ._decoder import (
    decode,
    decode_variant,
    register_decoder,
    register_decoder_standard,
    register_decoder_sun,
)
from ._digest import Md5CryptDigest
from ._hasher import Md5CryptHasher
from ._variant import Variant

__all__ = [
    "ALG_NAME",
    "Md5CryptDigest",
    "Md5CryptHasher",
    "Variant",
    "decode",
    "decode_variant",
    "register_decoder",
    "register_decoder_standard",
    "register_decoder_sun",
]
