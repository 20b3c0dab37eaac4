# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Scrypt and yescrypt digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from ...encoding import (
    FLAVOR_DEFAULT,
    YescryptSetting,
    encode64,
    encode_setting,
    encode_std,
    join,
)
from .._base import BaseDigest
from ._const import ALG_NAME
from ._variant import Variant


@dataclass(frozen=True)
class ScryptDigest(BaseDigest):
    """A scrypt or yescrypt digest.

    scrypt is encoded as ``$scrypt$ln=<ln>,r=<r>,p=<p>$<salt>$<key>``
    with unpadded standard base64, yescrypt as
    ``$y$<settings>$<salt>$<key>`` with the crypt alphabet.
    """

    ALG_NAME: ClassVar[str] = ALG_NAME

    variant: Variant
    ln: int
    r: int
    p: int
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)
    flavor: int = FLAVOR_DEFAULT
    t: int = 0

    @property
    def setting(self) -> YescryptSetting:
        """The cost parameters."""
        return YescryptSetting(
            flavor=self.flavor, ln=self.ln, r=self.r, p=self.p, t=self.t
        )

    def derive(self, password: bytes) -> bytes:
        return self.variant.derive(
            password, self.salt, self.setting, len(self.key)
        )

    def encode(self) -> str:
        if self.variant is Variant.YESCRYPT:
            return join(
                self.variant.prefix,
                encode_setting(self.setting),
                encode64(self.salt),
                encode64(self.key),
            )
        return join(
            self.variant.prefix,
            f"ln={self.ln},r={self.r},p={self.p}",
            encode_std(self.salt),
            encode_std(self.key),
        )


__all__ = ["ScryptDigest"]
