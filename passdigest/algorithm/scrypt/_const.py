# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt and yescrypt constants."""

ALG_NAME = "scrypt"
ALG_NAME_YESCRYPT = "yescrypt"

IDENTIFIER = "scrypt"
IDENTIFIER_YESCRYPT = "y"

MAX_INT = 2**63 - 1

KEY_LENGTH_MIN = 1
KEY_LENGTH_MAX = 2**31 - 1
KEY_LENGTH_DEFAULT = 32
KEY_LENGTH_YESCRYPT = 32

SALT_LENGTH_MIN = 8
SALT_LENGTH_MAX = 1024
SALT_LENGTH_DEFAULT = 16

LN_MIN = 1
LN_MAX = 58
LN_DEFAULT = 16

BLOCK_SIZE_MIN = 1
BLOCK_SIZE_MAX = MAX_INT // 256
BLOCK_SIZE_DEFAULT = 8

PARALLELISM_MIN = 1
PARALLELISM_MAX = 2**30 - 1
PARALLELISM_DEFAULT = 1

BLOCK_PARALLELISM_PRODUCT_LIMIT = 1 << 30

__all__ = [
    "ALG_NAME",
    "ALG_NAME_YESCRYPT",
    "IDENTIFIER",
    "IDENTIFIER_YESCRYPT",
    "MAX_INT",
    "KEY_LENGTH_MIN",
    "KEY_LENGTH_MAX",
    "KEY_LENGTH_DEFAULT",
    "KEY_LENGTH_YESCRYPT",
    "SALT_LENGTH_MIN",
    "SALT_LENGTH_MAX",
    "SALT_LENGTH_DEFAULT",
    "LN_MIN",
    "LN_MAX",
    "LN_DEFAULT",
    "BLOCK_SIZE_MIN",
    "BLOCK_SIZE_MAX",
    "BLOCK_SIZE_DEFAULT",
    "PARALLELISM_MIN",
    "PARALLELISM_MAX",
    "PARALLELISM_DEFAULT",
    "BLOCK_PARALLELISM_PRODUCT_LIMIT",
]
