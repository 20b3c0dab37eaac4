# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Algorithm families: variants, digests, decoders and hashers."""

from . import (
    argon2,
    bcrypt,
    ldap,
    md5crypt,
    pbkdf2,
    plaintext,
    scrypt,
    sha1crypt,
    shacrypt,
)
from .argon2 import Argon2Digest, Argon2Hasher
from .bcrypt import BcryptDigest, BcryptHasher
from .ldap import LdapDigest, LdapHasher
from .md5crypt import Md5CryptDigest, Md5CryptHasher
from .pbkdf2 import Pbkdf2Digest, Pbkdf2Hasher
from .plaintext import PlaintextDigest, PlaintextHasher
from .scrypt import ScryptDigest, ScryptHasher
from .sha1crypt import Sha1CryptDigest, Sha1CryptHasher
from .shacrypt import ShaCryptDigest, ShaCryptHasher

__all__ = [
    "argon2",
    "bcrypt",
    "ldap",
    "md5crypt",
    "pbkdf2",
    "plaintext",
    "scrypt",
    "sha1crypt",
    "shacrypt",
    "Argon2Digest",
    "Argon2Hasher",
    "BcryptDigest",
    "BcryptHasher",
    "LdapDigest",
    "LdapHasher",
    "Md5CryptDigest",
    "Md5CryptHasher",
    "Pbkdf2Digest",
    "Pbkdf2Hasher",
    "PlaintextDigest",
    "PlaintextHasher",
    "ScryptDigest",
    "ScryptHasher",
    "Sha1CryptDigest",
    "Sha1CryptHasher",
    "ShaCryptDigest",
    "ShaCryptHasher",
]
