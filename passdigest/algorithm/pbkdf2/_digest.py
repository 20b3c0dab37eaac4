# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""PBKDF2 digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from ...encoding import encode_adapted, join
from .._base import BaseDigest
from ._const import ALG_NAME
from ._variant import Variant


@dataclass(frozen=True)
class Pbkdf2Digest(BaseDigest):
    """A PBKDF2 digest.

    Encoded as ``$<identifier>$<iterations>$<salt>$<key>`` with the
    adapted base64 alphabet, the SHA-1 variant using ``pbkdf2``.
    """

    ALG_NAME: ClassVar[str] = ALG_NAME

    variant: Variant
    iterations: int
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)

    def derive(self, password: bytes) -> bytes:
        return self.variant.derive(
            password, self.salt, self.iterations, len(self.key)
        )

    def encode(self) -> str:
        return join(
            self.variant.prefix,
            self.iterations,
            encode_adapted(self.salt),
            encode_adapted(self.key),
        )


__all__ = ["Pbkdf2Digest"]
