# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportUnknownVariableType=false
"""sha1crypt digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from passlib.hash import sha1_crypt  # type: ignore[import-untyped]

from ...encoding import join
from .._base import BaseDigest
from .._crypt import passlib_checksum
from ._const import ALG_NAME, IDENTIFIER


def derive(password: bytes, salt: str, iterations: int) -> bytes:
    """Derive a sha1crypt key.

    Raises
    ------
    KeyDerivationError
        If derivation fails.
    """
    return passlib_checksum(
        ALG_NAME, sha1_crypt, password, salt, rounds=iterations
    )


@dataclass(frozen=True)
class Sha1CryptDigest(BaseDigest):
    """A sha1crypt digest, encoded as ``$sha1$<iterations>$<salt>$<key>``."""

    ALG_NAME: ClassVar[str] = ALG_NAME

    iterations: int
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)

    def derive(self, password: bytes) -> bytes:
        return derive(password, self.salt.decode("ascii"), self.iterations)

    def encode(self) -> str:
        return join(
            IDENTIFIER,
            self.iterations,
            self.salt.decode("ascii"),
            self.key.decode("ascii"),
        )


__all__ = ["Sha1CryptDigest", "derive"]
