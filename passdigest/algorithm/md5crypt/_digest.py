# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""md5crypt digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from ...encoding import join
from .._base import BaseDigest
from ._const import ALG_NAME
from ._variant import Variant


@dataclass(frozen=True)
class Md5CryptDigest(BaseDigest):
    """An md5crypt digest.

    The standard variant is encoded as ``$1$<salt>$<key>``, the Sun
    variant as ``$md5,iterations=<n>$<salt>$$<key>`` or, when the
    iterations are 0, as ``$md5$<salt>$$<key>``.
    """

    ALG_NAME: ClassVar[str] = ALG_NAME

    variant: Variant
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)
    iterations: int = 0

    def derive(self, password: bytes) -> bytes:
        return self.variant.derive(
            password, self.salt.decode("ascii"), self.iterations
        )

    def encode(self) -> str:
        salt = self.salt.decode("ascii")
        key = self.key.decode("ascii")
        if self.variant is Variant.SUN:
            identifier = self.variant.prefix
            if self.iterations > 0:
                identifier += f",iterations={self.iterations}"
            return join(identifier, salt, "", key)
        return join(self.variant.prefix, salt, key)


__all__ = ["Md5CryptDigest"]
