# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""SHA-crypt digests (``$5$`` and ``$6$``)."""

from ._const import ALG_NAME
from ._decoder import (
    decode,
    decode_variant,
    register_decoder,
    register_decoder_sha256,
    register_decoder_sha512,
)
from ._digest import ShaCryptDigest
from ._hasher import ShaCryptHasher
from ._variant import VARIANT_DEFAULT, Variant

__all__ = [
    "ALG_NAME",
    "VARIANT_DEFAULT",
    "Variant",
    "ShaCryptDigest",
    "ShaCryptHasher",
    "decode",
    "decode_variant",
    "register_decoder",
    "register_decoder_sha256",
    "register_decoder_sha512",
]
