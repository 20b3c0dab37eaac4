# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Rewriting of legacy encodings into the canonical ``$id$...`` form."""

import re

PREFIX_CRYPT = "{CRYPT}"
PREFIX_ARGON2 = "{ARGON2}"
PREFIX_CLEARTEXT = "{CLEARTEXT}"

_PBKDF2_RE = re.compile(
    r"^\{(?P<identifier>(?i:PBKDF2(-SHA\d+)?))}(?P<remainder>\d+\$.*)$"
)
_LDAP_RE = re.compile(r"^\{(?P<identifier>\w+)}(?P<remainder>\d+\$.*)$")
_BCRYPT_PREFIXES = ("$2$", "$2a$", "$2x$", "$2y$")
_BCRYPT_CANONICAL = "$2b$"


def normalize(encoded: str) -> str:
    """Normalize an encoded digest.

    Strips the LDAP ``{CRYPT}`` and ``{ARGON2}`` wrappers, rewrites
    ``{CLEARTEXT}`` and ``{PBKDF2...}`` style schemes into the canonical
    form and unifies the historical bcrypt version tags. Input that is
    not recognised is returned unchanged.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    str
        The normalized encoded digest.
    """
    if encoded.startswith(PREFIX_CRYPT):
        encoded = encoded[len(PREFIX_CRYPT) :]
    if encoded.startswith(PREFIX_ARGON2):
        encoded = encoded[len(PREFIX_ARGON2) :]
    if encoded.startswith(PREFIX_CLEARTEXT):
        encoded = "$plaintext$" + encoded[len(PREFIX_CLEARTEXT) :]
    match = _PBKDF2_RE.match(encoded) or _LDAP_RE.match(encoded)
    if match:
        identifier = match.group("identifier").lower()
        encoded = f"${identifier}${match.group('remainder')}"
    for prefix in _BCRYPT_PREFIXES:
        if encoded.startswith(prefix):
            encoded = _BCRYPT_CANONICAL + encoded[len(prefix) :]
            break
    return encoded


__all__ = ["normalize"]
