# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""LDAP SHA digest."""

from dataclasses import dataclass, field
from typing import ClassVar

from ...encoding import encode_std_padded
from .._base import BaseDigest
from ._const import ALG_NAME
from ._variant import Variant


@dataclass(frozen=True)
class LdapDigest(BaseDigest):
    """An RFC 2307 digest, ``{SCHEME}<base64(key || salt)>``."""

    ALG_NAME: ClassVar[str] = ALG_NAME

    variant: Variant
    salt: bytes = field(repr=False)
    key: bytes = field(repr=False)

    def derive(self, password: bytes) -> bytes:
        return self.variant.derive(password, self.salt)

    def encode(self) -> str:
        return self.variant.prefix + encode_std_padded(self.key + self.salt)


__all__ = ["LdapDigest"]
