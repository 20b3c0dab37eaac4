# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportArgumentType=false
"""Bcrypt hasher."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from typing_extensions import Self

from ..._random import salt_bytes
from ...encoding import encode_bcrypt
from ...errors import (
    InvalidParameterError,
    InvalidPasswordError,
    InvalidSaltError,
)
from .._base import BaseHasher, check_range
from ._const import (
    ALG_NAME,
    COST_DEFAULT,
    COST_MAX,
    COST_MIN,
    PASSWORD_INPUT_SIZE_MAX,
    SALT_LENGTH,
)
from ._digest import BcryptDigest
from ._variant import Variant

LOG = logging.getLogger(__name__)


@dataclass
class BcryptHasher(BaseHasher):
    """Bcrypt hasher builder.

    The standard variant refuses passwords longer than 72 bytes
    instead of silently truncating them, the sha256 variant accepts
    passwords of any length.
    """

    ALG_NAME = ALG_NAME

    variant: Variant = Variant.NONE
    cost: Optional[int] = None

    def with_variant(self, variant: Union[Variant, str]) -> Self:
        """Set the variant.

        Parameters
        ----------
        variant : Union[Variant, str]
            The variant or its identifier or name.

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

    def with_cost(self, cost: int) -> Self:
        """Set the cost factor (log2 of the rounds)."""
        self.cost = check_range(ALG_NAME, "cost", cost, COST_MIN, COST_MAX)
        self._defaulted = False
        return self

    def needs_rehash(self, digest: Any) -> bool:
        """Check whether a digest was made with other parameters.

        Parameters
        ----------
        digest : Any
            The digest.

        Returns
        -------
        bool
            True if the digest is not a bcrypt digest with this
            hasher's variant and cost.
        """
        self.validate()
        if not isinstance(digest, BcryptDigest):
            return True
        return (digest.variant, digest.cost) != (self.variant, self.cost)

    def _defaults(self) -> None:
        if self.variant is Variant.NONE:
            self.variant = Variant.STANDARD
        if self.cost is None:
            self.cost = COST_DEFAULT

    def _validate(self) -> None:
        check_range(ALG_NAME, "cost", self.cost, COST_MIN, COST_MAX)

    def _validate_salt(self, salt: bytes) -> None:
        check_range(
            ALG_NAME,
            "salt",
            len(salt),
            SALT_LENGTH,
            SALT_LENGTH,
            error=InvalidSaltError,
        )

    def _new_salt(self) -> bytes:
        return salt_bytes(SALT_LENGTH)

    def _hash(self, password: bytes, salt: bytes) -> BcryptDigest:
        if (
            self.variant is Variant.STANDARD
            and len(password) > PASSWORD_INPUT_SIZE_MAX
        ):
            raise InvalidPasswordError(
                f"{ALG_NAME}: password is {len(password)} bytes long, "
                f"the maximum is {PASSWORD_INPUT_SIZE_MAX}"
            )
        LOG.debug("Deriving %s key with cost %d", self.variant, self.cost)
        key = self.variant.derive(password, encode_bcrypt(salt), self.cost)
        return BcryptDigest(
            variant=self.variant, cost=self.cost, salt=salt, key=key
        )


__all__ = ["BcryptHasher"]
