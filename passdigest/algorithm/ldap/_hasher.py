# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportArgumentType=false
"""LDAP SHA hasher."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from typing_extensions import Self

from ..._random import salt_bytes
from ...errors import InvalidParameterError, InvalidSaltError
from .._base import BaseHasher, check_range
from ._const import (
    ALG_NAME,
    SALT_LENGTH_DEFAULT,
    SALT_LENGTH_MAX,
    SALT_LENGTH_MIN,
)
from ._digest import LdapDigest
from ._variant import VARIANT_DEFAULT, Variant

LOG = logging.getLogger(__name__)


@dataclass
class LdapHasher(BaseHasher):
    """LDAP SHA hasher builder.

    The unsalted variants ignore the salt and the salt length.
    """

    ALG_NAME = ALG_NAME

    variant: Variant = Variant.NONE
    salt_length: Optional[int] = None

    def with_variant(self, variant: Union[Variant, str]) -> Self:
        """Set the variant.

        Parameters
        ----------
        variant : Union[Variant, str]
            The variant, its scheme or its registry identifier.

        Returns
        -------
        Self
            The hasher.

        Raises
        ------
        InvalidParameterError
            If the variant is unknown.
        """
        resolved = Variant.resolve(variant)
        if resolved is Variant.NONE:
            raise InvalidParameterError(
                "variant", None, None, variant, algorithm=ALG_NAME
            )
        self.variant = resolved
        self._defaulted = False
        return self

    def with_salt_length(self, salt_length: int) -> Self:
        """Set the salt length in bytes."""
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
        """Check whether a digest uses another scheme."""
        self.validate()
        if not isinstance(digest, LdapDigest):
            return True
        return digest.variant is not self.variant

    def _defaults(self) -> None:
        if self.variant is Variant.NONE:
            self.variant = VARIANT_DEFAULT
        if self.salt_length is None:
            self.salt_length = SALT_LENGTH_DEFAULT

    def _validate(self) -> None:
        check_range(
            ALG_NAME,
            "salt_length",
            self.salt_length,
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
        )

    def _validate_salt(self, salt: bytes) -> None:
        if not self.variant.salted:
            return
        check_range(
            ALG_NAME,
            "salt",
            len(salt),
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
            error=InvalidSaltError,
        )

    def _new_salt(self) -> bytes:
        if not self.variant.salted:
            return b""
        return salt_bytes(self.salt_length)

    def _hash(self, password: bytes, salt: bytes) -> LdapDigest:
        if not self.variant.salted:
            salt = b""
        LOG.debug("Deriving %s %s key", ALG_NAME, self.variant.scheme)
        key = self.variant.derive(password, salt)
        return LdapDigest(variant=self.variant, salt=salt, key=key)


__all__ = ["LdapHasher"]
