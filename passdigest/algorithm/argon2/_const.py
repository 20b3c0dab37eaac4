# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2 constants."""

ALG_NAME = "argon2"

IDENTIFIER_I = "argon2i"
IDENTIFIER_D = "argon2d"
IDENTIFIER_ID = "argon2id"

KEY_LENGTH_MIN = 4
KEY_LENGTH_MAX = 2**31 - 1

SALT_LENGTH_MIN = 1
SALT_LENGTH_MAX = 2**31 - 1

ITERATIONS_MIN = 1
ITERATIONS_MAX = 2**32 - 1

PARALLELISM_MIN = 1
PARALLELISM_MAX = 2**24 - 1

MEMORY_MIN_PARALLELISM_MULTIPLIER = 8
MEMORY_ROUNDING_PARALLELISM_MULTIPLIER = 4
MEMORY_MAX = 2**31 - 1

# used when the option is absent from an encoded digest
DECODE_ITERATIONS_DEFAULT = 1
DECODE_PARALLELISM_DEFAULT = 4
DECODE_MEMORY_DEFAULT = 32 * 1024

__all__ = [
    "ALG_NAME",
    "IDENTIFIER_I",
    "IDENTIFIER_D",
    "IDENTIFIER_ID",
    "KEY_LENGTH_MIN",
    "KEY_LENGTH_MAX",
    "SALT_LENGTH_MIN",
    "SALT_LENGTH_MAX",
    "ITERATIONS_MIN",
    "ITERATIONS_MAX",
    "PARALLELISM_MIN",
    "PARALLELISM_MAX",
    "MEMORY_MIN_PARALLELISM_MULTIPLIER",
    "MEMORY_ROUNDING_PARALLELISM_MULTIPLIER",
    "MEMORY_MAX",
    "DECODE_ITERATIONS_DEFAULT",
    "DECODE_PARALLELISM_DEFAULT",
    "DECODE_MEMORY_DEFAULT",
]
