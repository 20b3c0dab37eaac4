# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Argon2 digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from ...encoding import encode_std, join
from .._base import BaseDigest
from ._const import ALG_NAME
from ._variant import VERSION, Variant


@dataclass(frozen=True)
class Argon2Digest(BaseDigest):
    """An argon2 digest.

    Encoded as ``$<variant>$v=19$m=<m>,t=<t>,p=<p>$<salt>$<key>``
    with unpadded standard base64 salt and key.
    """

    ALG_NAME: ClassVar[str] = ALG_NAME

    variant: Variant
    iterations: int
    memory: int
    parallelism: int
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)

    def derive(self, password: bytes) -> bytes:
        return self.variant.derive(
            password,
            self.salt,
            self.iterations,
            self.memory,
            self.parallelism,
            len(self.key),
        )

    def encode(self) -> str:
        return join(
            self.variant.prefix,
            f"v={VERSION}",
            f"m={self.memory},t={self.iterations},p={self.parallelism}",
            encode_std(self.salt),
            encode_std(self.key),
        )


__all__ = ["Argon2Digest"]
