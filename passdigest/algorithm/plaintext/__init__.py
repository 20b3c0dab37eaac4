# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Plaintext digests (``$plaintext$`` and ``$base64$``).

Only registered by the ``all`` decoder profile.
"""

from ._const import ALG_NAME
from ._decoder import decode, register_decoder
from ._digest import PlaintextDigest
from ._hasher import PlaintextHasher
from ._variant import Variant

__all__ = [
    "ALG_NAME",
    "PlaintextDigest",
    "PlaintextHasher",
    "Variant",
    "decode",
    "register_decoder",
]
