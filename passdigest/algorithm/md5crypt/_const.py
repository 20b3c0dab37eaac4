# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""md5crypt constants."""

ALG_NAME = "md5crypt"

IDENTIFIER = "1"
IDENTIFIER_SUN = "md5"
PREFIX_SUN_OPTIONS = "$md5,"

SALT_LENGTH_MIN = 1
SALT_LENGTH_MAX = 8
SALT_LENGTH_DEFAULT = SALT_LENGTH_MAX

ITERATIONS_MIN = 0
ITERATIONS_MAX = 2**32 - 1
ITERATIONS_DEFAULT = 34000

__all__ = [
    "ALG_NAME",
    "IDENTIFIER",
    "IDENTIFIER_SUN",
    "PREFIX_SUN_OPTIONS",
    "SALT_LENGTH_MIN",
    "SALT_LENGTH_MAX",
    "SALT_LENGTH_DEFAULT",
    "ITERATIONS_MIN",
    "ITERATIONS_MAX",
    "ITERATIONS_DEFAULT",
]
