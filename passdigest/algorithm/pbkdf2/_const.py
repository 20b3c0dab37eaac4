# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""PBKDF2 constants."""

ALG_NAME = "pbkdf2"

IDENTIFIER = ALG_NAME
IDENTIFIER_SHA1 = "pbkdf2-sha1"
IDENTIFIER_SHA224 = "pbkdf2-sha224"
IDENTIFIER_SHA256 = "pbkdf2-sha256"
IDENTIFIER_SHA384 = "pbkdf2-sha384"
IDENTIFIER_SHA512 = "pbkdf2-sha512"

KEY_LENGTH_MAX = 2**31 - 1

SALT_LENGTH_MIN = 8
SALT_LENGTH_MAX = 2**31 - 1
SALT_LENGTH_DEFAULT = 16

ITERATIONS_MIN = 100000
ITERATIONS_MAX = 2**31 - 1
ITERATIONS_DEFAULT_SHA1 = 720000
ITERATIONS_DEFAULT_SHA256 = 310000
ITERATIONS_DEFAULT_SHA512 = 120000

__all__ = [
    "ALG_NAME",
    "IDENTIFIER",
    "IDENTIFIER_SHA1",
    "IDENTIFIER_SHA224",
    "IDENTIFIER_SHA256",
    "IDENTIFIER_SHA384",
    "IDENTIFIER_SHA512",
    "KEY_LENGTH_MAX",
    "SALT_LENGTH_MIN",
    "SALT_LENGTH_MAX",
    "SALT_LENGTH_DEFAULT",
    "ITERATIONS_MIN",
    "ITERATIONS_MAX",
    "ITERATIONS_DEFAULT_SHA1",
    "ITERATIONS_DEFAULT_SHA256",
    "ITERATIONS_DEFAULT_SHA512",
]
