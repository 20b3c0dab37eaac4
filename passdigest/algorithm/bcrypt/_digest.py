# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Bcrypt digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from ...encoding import encode_bcrypt, join
from .._base import BaseDigest
from ._const import ALG_NAME, IDENTIFIER, SHA256_VERSION
from ._variant import Variant


@dataclass(frozen=True)
class BcryptDigest(BaseDigest):
    """A bcrypt digest.

    The standard variant is encoded as ``$2b$<cost>$<salt><key>`` and
    the sha256 variant as ``$bcrypt-sha256$v=2,t=2b,r=<cost>$<salt>$<key>``.
    The salt holds the raw 16 bytes, the key the 31 encoded characters.
    """

    ALG_NAME: ClassVar[str] = ALG_NAME

    variant: Variant
    cost: int
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)

    def derive(self, password: bytes) -> bytes:
        return self.variant.derive(
            password, encode_bcrypt(self.salt), self.cost
        )

    def encode(self) -> str:
        salt = encode_bcrypt(self.salt)
        key = self.key.decode("ascii")
        if self.variant is Variant.SHA256:
            return join(
                self.variant.prefix,
                f"v={SHA256_VERSION},t={IDENTIFIER},r={self.cost}",
                salt,
                key,
            )
        return join(IDENTIFIER, f"{self.cost:02d}", salt + key)


__all__ = ["BcryptDigest"]
