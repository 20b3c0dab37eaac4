# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Plaintext digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from ...encoding import join
from .._base import BaseDigest
from ._const import ALG_NAME
from ._variant import Variant


@dataclass(frozen=True)
class PlaintextDigest(BaseDigest):
    """A stored password, as ``$plaintext$<raw>`` or ``$base64$<b64>``."""

    ALG_NAME: ClassVar[str] = ALG_NAME

    variant: Variant
    key: bytes = field(repr=False)

    def derive(self, password: bytes) -> bytes:
        return password

    def encode(self) -> str:
        return join(self.variant.prefix, self.variant.encode_key(self.key))


__all__ = ["PlaintextDigest"]
