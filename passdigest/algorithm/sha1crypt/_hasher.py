# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportArgumentType=false
"""sha1crypt hasher."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from typing_extensions import Self

from ..._random import salt_chars
from ...errors import InvalidSaltError
from .._base import BaseHasher, check_range
from .._crypt import SALT_CHARSET, check_salt_charset
from ._const import (
    ALG_NAME,
    ITERATIONS_DEFAULT,
    ITERATIONS_MAX,
    ITERATIONS_MIN,
    SALT_LENGTH_DEFAULT,
    SALT_LENGTH_MAX,
    SALT_LENGTH_MIN,
)
from ._digest import Sha1CryptDigest, derive

LOG = logging.getLogger(__name__)


@dataclass
class Sha1CryptHasher(BaseHasher):
    """sha1crypt hasher builder."""

    ALG_NAME = ALG_NAME

    iterations: Optional[int] = None
    salt_length: Optional[int] = None

    def with_iterations(self, iterations: int) -> Self:
        """Set the iterations."""
        self.iterations = check_range(
            ALG_NAME, "iterations", iterations, ITERATIONS_MIN, ITERATIONS_MAX
        )
        self._defaulted = False
        return self

    def with_salt_length(self, salt_length: int) -> Self:
        """Set the salt length in characters."""
        self.salt_length = check_range(
            ALG_NAME,
            "salt_length",
            salt_length,
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
        )
        self._defaulted = False
        return self

    def needs_rehash(self, digest: Any) -> bool:
        """Check whether a digest was made with other iterations."""
        self.validate()
        if not isinstance(digest, Sha1CryptDigest):
            return True
        return digest.iterations != self.iterations

    def _defaults(self) -> None:
        if self.iterations is None:
            self.iterations = ITERATIONS_DEFAULT
        if self.salt_length is None:
            self.salt_length = SALT_LENGTH_DEFAULT

    def _validate(self) -> None:
        check_range(
            ALG_NAME,
            "iterations",
            self.iterations,
            ITERATIONS_MIN,
            ITERATIONS_MAX,
        )
        check_range(
            ALG_NAME,
            "salt_length",
            self.salt_length,
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
        )

    def _validate_salt(self, salt: bytes) -> None:
        check_range(
            ALG_NAME,
            "salt",
            len(salt),
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
            error=InvalidSaltError,
        )
        check_salt_charset(ALG_NAME, salt)

    def _new_salt(self) -> bytes:
        return salt_chars(self.salt_length, SALT_CHARSET).encode("ascii")

    def _hash(self, password: bytes, salt: bytes) -> Sha1CryptDigest:
        LOG.debug(
            "Deriving %s key with %d iterations", ALG_NAME, self.iterations
        )
        key = derive(password, salt.decode("ascii"), self.iterations)
        return Sha1CryptDigest(iterations=self.iterations, salt=salt, key=key)


__all__ = ["Sha1CryptHasher"]
