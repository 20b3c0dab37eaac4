# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportArgumentType=false
"""SHA-crypt hasher."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from typing_extensions import Self

from ..._random import salt_chars
from ...errors import InvalidParameterError, InvalidSaltError
from .._base import BaseHasher, check_range
from .._crypt import SALT_CHARSET, check_salt_charset
from ._const import (
    ALG_NAME,
    ITERATIONS_MAX,
    ITERATIONS_MIN,
    SALT_LENGTH_DEFAULT,
    SALT_LENGTH_MAX,
    SALT_LENGTH_MIN,
)
from ._digest import ShaCryptDigest
from ._variant import VARIANT_DEFAULT, Variant

LOG = logging.getLogger(__name__)


@dataclass
class ShaCryptHasher(BaseHasher):
    """SHA-crypt hasher builder.

    Unset rounds default per variant: 1000000 for sha256 and 500000
    for sha512.
    """

    ALG_NAME = ALG_NAME

    variant: Variant = Variant.NONE
    iterations: Optional[int] = None
    salt_length: Optional[int] = None

    @classmethod
    def sha256(cls) -> "ShaCryptHasher":
        """Get a sha256crypt hasher."""
        return cls(variant=Variant.SHA256)

    @classmethod
    def sha512(cls) -> "ShaCryptHasher":
        """Get a sha512crypt hasher."""
        return cls(variant=Variant.SHA512)

    def with_variant(self, variant: Union[Variant, str]) -> Self:
        """Set the variant.

        Parameters
        ----------
        variant : Union[Variant, str]
            The variant, its identifier or its hash name.

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

    def with_iterations(self, iterations: int) -> Self:
        """Set the rounds."""
        self.iterations = check_range(
            ALG_NAME, "iterations", iterations, ITERATIONS_MIN, ITERATIONS_MAX
        )
        self._defaulted = False
        return self

    def with_salt_length(self, salt_length: int) -> Self:
        """Set the salt length in characters."""
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
        """Check whether a digest was made with other parameters.

        Parameters
        ----------
        digest : Any
            The digest.

        Returns
        -------
        bool
            True unless the digest is a SHA-crypt digest with this
            hasher's variant and rounds.
        """
        self.validate()
        if not isinstance(digest, ShaCryptDigest):
            return True
        return (
            digest.variant is not self.variant
            or digest.iterations != self.iterations
        )

    def _defaults(self) -> None:
        if self.variant is Variant.NONE:
            self.variant = VARIANT_DEFAULT
        if self.iterations is None:
            self.iterations = self.variant.default_iterations
        if self.salt_length is None:
            self.salt_length = SALT_LENGTH_DEFAULT

    def _validate(self) -> None:
        check_range(
            ALG_NAME,
            "iterations",
            self.iterations,
            ITERATIONS_MIN,
            ITERATIONS_MAX,
        )
        check_range(
            ALG_NAME,
            "salt_length",
            self.salt_length,
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
        )

    def _validate_salt(self, salt: bytes) -> None:
        check_range(
            ALG_NAME,
            "salt",
            len(salt),
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
            error=InvalidSaltError,
        )
        check_salt_charset(ALG_NAME, salt)

    def _new_salt(self) -> bytes:
        return salt_chars(self.salt_length, SALT_CHARSET).encode("ascii")

    def _hash(self, password: bytes, salt: bytes) -> ShaCryptDigest:
        LOG.debug(
            "Deriving %s %s key with %d rounds",
            ALG_NAME,
            self.variant.value,
            self.iterations,
        )
        key = self.variant.derive(
            password, salt.decode("ascii"), self.iterations
        )
        return ShaCryptDigest(
            variant=self.variant,
            iterations=self.iterations,
            salt=salt,
            key=key,
        )


__all__ = ["ShaCryptHasher"]
