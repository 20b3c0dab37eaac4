# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""LDAP SHA constants."""

ALG_NAME = "ldap"

IDENTIFIER_PREFIX = "ldap-"
"""Registry identifiers are ``ldap-<variant>``, e.g. ``ldap-ssha512``."""

SALT_LENGTH_MIN = 8
SALT_LENGTH_MAX = 2**31 - 1
SALT_LENGTH_DEFAULT = 8

__all__ = [
    "ALG_NAME",
    "IDENTIFIER_PREFIX",
    "SALT_LENGTH_MIN",
    "SALT_LENGTH_MAX",
    "SALT_LENGTH_DEFAULT",
]
