# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""sha1crypt constants."""

ALG_NAME = "sha1crypt"

IDENTIFIER = "sha1"

SALT_LENGTH_MIN = 0
SALT_LENGTH_MAX = 64
SALT_LENGTH_DEFAULT = 8

ITERATIONS_MIN = 1
ITERATIONS_MAX = 2**32 - 1
ITERATIONS_DEFAULT = 480000

__all__ = [
    "ALG_NAME",
    "IDENTIFIER",
    "SALT_LENGTH_MIN",
    "SALT_LENGTH_MAX",
    "SALT_LENGTH_DEFAULT",
    "ITERATIONS_MIN",
    "ITERATIONS_MAX",
    "ITERATIONS_DEFAULT",
]
