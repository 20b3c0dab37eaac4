# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""SHA-crypt digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from ...encoding import join
from .._base import BaseDigest
from ._const import ALG_NAME
from ._variant import Variant


@dataclass(frozen=True)
class ShaCryptDigest(BaseDigest):
    """A SHA-crypt digest.

    Encoded as ``$<5|6>$rounds=<n>$<salt>$<key>``, or as
    ``$<5|6>$<salt>$<key>`` when it was decoded without rounds.
    """

    ALG_NAME: ClassVar[str] = ALG_NAME

    variant: Variant
    iterations: int
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)
    rounds_omitted: bool = False

    def derive(self, password: bytes) -> bytes:
        return self.variant.derive(
            password, self.salt.decode("ascii"), self.iterations
        )

    def encode(self) -> str:
        salt = self.salt.decode("ascii")
        key = self.key.decode("ascii")
        if self.rounds_omitted:
            return join(self.variant.prefix, salt, key)
        return join(
            self.variant.prefix, f"rounds={self.iterations}", salt, key
        )


__all__ = ["ShaCryptDigest"]
