# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""sha1crypt digests (``$sha1$``), a legacy format."""

from ._const import ALG_NAME
from ._decoder import decode, register_decoder
from ._digest import Sha1CryptDigest
from ._hasher import Sha1CryptHasher

__all__ = [
    "ALG_NAME",
    "Sha1CryptDigest",
    "Sha1CryptHasher",
    "decode",
    "register_decoder",
]
