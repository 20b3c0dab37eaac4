# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt constants."""

ALG_NAME = "bcrypt"
ALG_NAME_SHA256 = "bcrypt-sha256"

IDENTIFIER = "2b"
IDENTIFIER_VARIANTS = ("2b", "2a", "2x", "2y", "2")
IDENTIFIER_SHA256 = "bcrypt-sha256"

SHA256_VERSION = 2

COST_MIN = 10
COST_MAX = 31
COST_DEFAULT = 13

PASSWORD_INPUT_SIZE_MAX = 72

SALT_LENGTH = 16
SALT_ENCODED_LENGTH = 22
KEY_ENCODED_LENGTH = 31

__all__ = [
    "ALG_NAME",
    "ALG_NAME_SHA256",
    "IDENTIFIER",
    "IDENTIFIER_VARIANTS",
    "IDENTIFIER_SHA256",
    "SHA256_VERSION",
    "COST_MIN",
    "COST_MAX",
    "COST_DEFAULT",
    "PASSWORD_INPUT_SIZE_MAX",
    "SALT_LENGTH",
    "SALT_ENCODED_LENGTH",
    "KEY_ENCODED_LENGTH",
]
