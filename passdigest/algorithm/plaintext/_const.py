# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Plaintext constants."""

ALG_NAME = "plaintext"

IDENTIFIER_PLAINTEXT = ALG_NAME
IDENTIFIER_BASE64 = "base64"

__all__ = [
    "ALG_NAME",
    "IDENTIFIER_PLAINTEXT",
    "IDENTIFIER_BASE64",
]
