# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""SHA-crypt constants."""

ALG_NAME = "shacrypt"

IDENTIFIER_SHA256 = "5"
IDENTIFIER_SHA512 = "6"

ITERATIONS_MIN = 1000
ITERATIONS_MAX = 999999999
ITERATIONS_DEFAULT_SHA256 = 1000000
ITERATIONS_DEFAULT_SHA512 = 500000
ITERATIONS_DEFAULT_OMITTED = 5000
"""The rounds of a digest without a ``rounds=`` field."""

SALT_LENGTH_MIN = 1
SALT_LENGTH_MAX = 16
SALT_LENGTH_DEFAULT = 16

__all__ = [
    "ALG_NAME",
    "IDENTIFIER_SHA256",
    "IDENTIFIER_SHA512",
    "ITERATIONS_MIN",
    "ITERATIONS_MAX",
    "ITERATIONS_DEFAULT_SHA256",
    "ITERATIONS_DEFAULT_SHA512",
    "ITERATIONS_DEFAULT_OMITTED",
    "SALT_LENGTH_MIN",
    "SALT_LENGTH_MAX",
    "SALT_LENGTH_DEFAULT",
]
