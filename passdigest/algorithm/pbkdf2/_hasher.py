# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportArgumentType=false
"""PBKDF2 hasher."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from typing_extensions import Self

from ..._random import salt_bytes
from ...errors import InvalidParameterError, InvalidSaltError
from .._base import BaseHasher, check_range
from ._const import (
    ALG_NAME,
    ITERATIONS_MAX,
    ITERATIONS_MIN,
    KEY_LENGTH_MAX,
    SALT_LENGTH_DEFAULT,
    SALT_LENGTH_MAX,
    SALT_LENGTH_MIN,
)
from ._digest import Pbkdf2Digest
from ._variant import VARIANT_DEFAULT, Variant

LOG = logging.getLogger(__name__)


@dataclass
class Pbkdf2Hasher(BaseHasher):
    """PBKDF2 hasher builder.

    The key length defaults to the digest size of the HMAC hash
    function. With ``unsafe`` set the bounds are not enforced.
    """

    ALG_NAME = ALG_NAME

    variant: Variant = Variant.NONE
    iterations: Optional[int] = None
    key_length: Optional[int] = None
    salt_length: Optional[int] = None
    unsafe: bool = False

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
        """Set the iterations."""
        self.iterations = check_range(
            ALG_NAME, "iterations", iterations, 1, ITERATIONS_MAX
        )
        self._defaulted = False
        return self

    def with_key_length(self, key_length: int) -> Self:
        """Set the key length in bytes."""
        self.key_length = check_range(
            ALG_NAME, "key_length", key_length, 1, KEY_LENGTH_MAX
        )
        self._defaulted = False
        return self

    def with_salt_length(self, salt_length: int) -> Self:
        """Set the salt length in bytes."""
        self.salt_length = check_range(
            ALG_NAME, "salt_length", salt_length, 1, SALT_LENGTH_MAX
        )
        self._defaulted = False
        return self

    def with_unsafe(self, unsafe: bool = True) -> Self:
        """Skip the bounds checks."""
        self.unsafe = unsafe
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
            True if the digest is not a PBKDF2 digest with this
            hasher's variant, iterations and key length.
        """
        self.validate()
        if not isinstance(digest, Pbkdf2Digest):
            return True
        return (digest.variant, digest.iterations, len(digest.key)) != (
            self.variant,
            self.iterations,
            self.key_length,
        )

    def _defaults(self) -> None:
        if self.variant is Variant.NONE:
            self.variant = VARIANT_DEFAULT
        if self.iterations is None:
            self.iterations = self.variant.default_iterations
        if self.key_length is None:
            self.key_length = self.variant.digest_size
        if self.salt_length is None:
            self.salt_length = SALT_LENGTH_DEFAULT

    def _validate(self) -> None:
        if self.unsafe:
            return
        check_range(
            ALG_NAME,
            "key_length",
            self.key_length,
            self.variant.digest_size,
            KEY_LENGTH_MAX,
        )
        check_range(
            ALG_NAME,
            "salt_length",
            self.salt_length,
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
        )
        check_range(
            ALG_NAME,
            "iterations",
            self.iterations,
            ITERATIONS_MIN,
            ITERATIONS_MAX,
        )

    def _validate_salt(self, salt: bytes) -> None:
        check_range(
            ALG_NAME,
            "salt",
            len(salt),
            1 if self.unsafe else SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
            error=InvalidSaltError,
        )

    def _new_salt(self) -> bytes:
        return salt_bytes(self.salt_length)

    def _hash(self, password: bytes, salt: bytes) -> Pbkdf2Digest:
        LOG.debug(
            "Deriving %s key with %d iterations",
            self.variant.prefix,
            self.iterations,
        )
        key = self.variant.derive(
            password, salt, self.iterations, self.key_length
        )
        return Pbkdf2Digest(
            variant=self.variant,
            iterations=self.iterations,
            salt=salt,
            key=key,
        )


__all__ = ["Pbkdf2Hasher"]
