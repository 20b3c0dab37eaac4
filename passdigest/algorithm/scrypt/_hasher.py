# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportArgumentType=false,reportOperatorIssue=false
"""Scrypt and yescrypt hasher."""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from typing_extensions import Self

from ..._random import salt_bytes
from ...encoding import FLAVOR_DEFAULT, YescryptSetting
from ...errors import InvalidParameterError, InvalidSaltError
from .._base import BaseHasher, check_range
from ._const import (
    ALG_NAME,
    BLOCK_PARALLELISM_PRODUCT_LIMIT,
    BLOCK_SIZE_DEFAULT,
    BLOCK_SIZE_MAX,
    BLOCK_SIZE_MIN,
    KEY_LENGTH_DEFAULT,
    KEY_LENGTH_MAX,
    KEY_LENGTH_MIN,
    KEY_LENGTH_YESCRYPT,
    LN_DEFAULT,
    LN_MAX,
    LN_MIN,
    MAX_INT,
    PARALLELISM_DEFAULT,
    PARALLELISM_MAX,
    PARALLELISM_MIN,
    SALT_LENGTH_DEFAULT,
    SALT_LENGTH_MAX,
    SALT_LENGTH_MIN,
)
from ._digest import ScryptDigest
from ._variant import Variant

LOG = logging.getLogger(__name__)


@dataclass
class ScryptHasher(BaseHasher):  # pylint: disable=too-many-instance-attributes
    """Scrypt and yescrypt hasher builder.

    ``ln`` is the log2 of the CPU/memory cost ``N``. yescrypt keys
    are always 32 bytes long. With ``unsafe`` set the bounds are not
    enforced.
    """

    ALG_NAME = ALG_NAME

    variant: Variant = Variant.NONE
    ln: Optional[int] = None
    r: Optional[int] = None
    p: Optional[int] = None
    key_length: Optional[int] = None
    salt_length: Optional[int] = None
    unsafe: bool = False

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

    def with_ln(self, ln: int) -> Self:
        """Set the log2 of the CPU/memory cost."""
        self.ln = check_range(ALG_NAME, "ln", ln, LN_MIN, LN_MAX)
        self._defaulted = False
        return self

    def with_block_size(self, r: int) -> Self:
        """Set the block size ``r``."""
        self.r = check_range(ALG_NAME, "r", r, BLOCK_SIZE_MIN, BLOCK_SIZE_MAX)
        self._defaulted = False
        return self

    def with_parallelism(self, p: int) -> Self:
        """Set the parallelism ``p``."""
        self.p = check_range(
            ALG_NAME, "p", p, PARALLELISM_MIN, PARALLELISM_MAX
        )
        self._defaulted = False
        return self

    def with_key_length(self, key_length: int) -> Self:
        """Set the key length in bytes."""
        self.key_length = check_range(
            ALG_NAME, "key_length", key_length, KEY_LENGTH_MIN, KEY_LENGTH_MAX
        )
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
            True if the digest is not a digest of this hasher's
            variant with its ln, r, p and key length.
        """
        self.validate()
        if not isinstance(digest, ScryptDigest):
            return True
        return (
            digest.variant,
            digest.ln,
            digest.r,
            digest.p,
            len(digest.key),
        ) != (self.variant, self.ln, self.r, self.p, self.key_length)

    def _defaults(self) -> None:
        if self.variant is Variant.NONE:
            self.variant = Variant.SCRYPT
        if self.ln is None:
            self.ln = LN_DEFAULT
        if self.r is None:
            self.r = BLOCK_SIZE_DEFAULT
        if self.p is None:
            self.p = PARALLELISM_DEFAULT
        if self.variant is Variant.YESCRYPT:
            self.key_length = KEY_LENGTH_YESCRYPT
        elif self.key_length is None:
            self.key_length = KEY_LENGTH_DEFAULT
        if self.salt_length is None:
            self.salt_length = SALT_LENGTH_DEFAULT

    def _validate(self) -> None:
        if self.unsafe:
            return
        check_range(
            ALG_NAME,
            "key_length",
            self.key_length,
            KEY_LENGTH_MIN,
            KEY_LENGTH_MAX,
        )
        check_range(
            ALG_NAME,
            "salt_length",
            self.salt_length,
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
        )
        check_range(ALG_NAME, "ln", self.ln, LN_MIN, LN_MAX)
        check_range(
            ALG_NAME,
            "r*p",
            self.r * self.p,
            None,
            BLOCK_PARALLELISM_PRODUCT_LIMIT - 1,
        )
        check_range(ALG_NAME, "r", self.r, BLOCK_SIZE_MIN, BLOCK_SIZE_MAX)
        check_range(
            ALG_NAME,
            "p",
            self.p,
            PARALLELISM_MIN,
            KEY_LENGTH_MAX // (128 * self.r),
        )
        check_range(ALG_NAME, "r", self.r, None, MAX_INT // 128 // self.p)
        check_range(
            ALG_NAME, "N", 1 << self.ln, None, MAX_INT // 128 // self.r
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

    def _hash(self, password: bytes, salt: bytes) -> ScryptDigest:
        LOG.debug(
            "Deriving %s key with ln=%d, r=%d, p=%d",
            self.variant.value,
            self.ln,
            self.r,
            self.p,
        )
        setting = YescryptSetting(
            flavor=FLAVOR_DEFAULT, ln=self.ln, r=self.r, p=self.p
        )
        key = self.variant.derive(password, salt, setting, self.key_length)
        return ScryptDigest(
            variant=self.variant,
            ln=self.ln,
            r=self.r,
            p=self.p,
            salt=salt,
            key=key,
        )


__all__ = ["ScryptHasher"]
