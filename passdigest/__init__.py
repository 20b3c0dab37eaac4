# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Password digest decoding, encoding and hashing.

Decode stored digests with a registry and check passwords::

    from passdigest import check_password, new_decoder

    decoder = new_decoder()
    digest = decoder.decode(stored)
    digest.match_advanced("secret")

Make new digests with a hasher of an algorithm family::

    from passdigest.algorithm import Argon2Hasher

    stored = Argon2Hasher().hash("secret").encode()
"""

from ._logging import LogLevel, configure_logging
from ._version import __version__
from .decoder import (
    Decoder,
    check_password,
    check_password_advanced,
    decode,
    get_global_decoder,
    needs_rehash,
    new_decoder,
    new_decoder_all,
)
from .errors import (
    EncodedDigestError,
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidKeyEncodingError,
    InvalidOptionError,
    InvalidOptionKeyError,
    InvalidOptionValueError,
    InvalidParameterError,
    InvalidPasswordError,
    InvalidSaltEncodingError,
    InvalidSaltError,
    InvalidVersionError,
    KeyDerivationError,
    PassDigestError,
    RegistrationError,
    SaltReadError,
)
from .normalize import normalize
from .protocol import DecodeFunc, DecoderRegister, Digest, Hasher
from .serializable import (
    DigestField,
    NullDigest,
    NullDigestField,
    StoredDigest,
)

__all__ = [
    "__version__",
    "DecodeFunc",
    "Decoder",
    "DecoderRegister",
    "Digest",
    "DigestField",
    "EncodedDigestError",
    "Hasher",
    "InvalidFormatError",
    "InvalidIdentifierError",
    "InvalidKeyEncodingError",
    "InvalidOptionError",
    "InvalidOptionKeyError",
    "InvalidOptionValueError",
    "InvalidParameterError",
    "InvalidPasswordError",
    "InvalidSaltEncodingError",
    "InvalidSaltError",
    "InvalidVersionError",
    "KeyDerivationError",
    "LogLevel",
    "NullDigest",
    "NullDigestField",
    "PassDigestError",
    "RegistrationError",
    "SaltReadError",
    "StoredDigest",
    "check_password",
    "check_password_advanced",
    "configure_logging",
    "decode",
    "get_global_decoder",
    "needs_rehash",
    "new_decoder",
    "new_decoder_all",
    "normalize",
]
