# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pyright: reportArgumentType=false,reportOptionalOperand=false
"""Argon2 hasher."""

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
    KEY_LENGTH_MIN,
    MEMORY_MAX,
    MEMORY_MIN_PARALLELISM_MULTIPLIER,
    MEMORY_ROUNDING_PARALLELISM_MULTIPLIER,
    PARALLELISM_MAX,
    PARALLELISM_MIN,
    SALT_LENGTH_MAX,
    SALT_LENGTH_MIN,
)
from ._digest import Argon2Digest
from ._profile import DEFAULT_PROFILE, Profile
from ._variant import Variant

LOG = logging.getLogger(__name__)


def round_memory(memory: int, parallelism: int) -> int:
    """Round memory down to a multiple of 4 * parallelism.

    Parameters
    ----------
    memory : int
        The memory in KiB.
    parallelism : int
        The parallelism.

    Returns
    -------
    int
        The rounded memory.
    """
    multiple = MEMORY_ROUNDING_PARALLELISM_MULTIPLIER * parallelism
    return memory // multiple * multiple


@dataclass
class Argon2Hasher(BaseHasher):
    """Argon2 hasher builder.

    Unset parameters take the RFC 9106 low memory profile values.
    """

    ALG_NAME = ALG_NAME

    variant: Variant = Variant.NONE
    iterations: Optional[int] = None
    memory: Optional[int] = None
    parallelism: Optional[int] = None
    key_length: Optional[int] = None
    salt_length: Optional[int] = None

    @classmethod
    def from_profile(cls, profile: Union[Profile, str]) -> Self:
        """Create a hasher from a profile.

        Parameters
        ----------
        profile : Union[Profile, str]
            The profile.

        Returns
        -------
        Argon2Hasher
            The hasher.
        """
        return cls().with_profile(profile)

    def with_profile(self, profile: Union[Profile, str]) -> Self:
        """Take all the parameters from a profile.

        Parameters
        ----------
        profile : Union[Profile, str]
            The profile.

        Returns
        -------
        Argon2Hasher
            The hasher.
        """
        params = Profile(profile).params
        self.variant = params.variant
        self.iterations = params.iterations
        self.memory = params.memory
        self.parallelism = params.parallelism
        self.key_length = params.key_length
        self.salt_length = params.salt_length
        self._defaulted = False
        return self

    def with_variant(self, variant: Union[Variant, str]) -> Self:
        """Set the variant.

        Parameters
        ----------
        variant : Union[Variant, str]
            The variant or its identifier or name.

        Returns
        -------
        Argon2Hasher
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
        """Set the time cost ``t``."""
        self.iterations = check_range(
            ALG_NAME, "iterations", iterations, ITERATIONS_MIN, ITERATIONS_MAX
        )
        self._defaulted = False
        return self

    def with_memory(self, memory: int) -> Self:
        """Set the memory cost ``m`` in KiB."""
        self.memory = check_range(
            ALG_NAME,
            "memory",
            memory,
            PARALLELISM_MIN * MEMORY_MIN_PARALLELISM_MULTIPLIER,
            MEMORY_MAX,
        )
        self._defaulted = False
        return self

    def with_parallelism(self, parallelism: int) -> Self:
        """Set the parallelism ``p``."""
        self.parallelism = check_range(
            ALG_NAME,
            "parallelism",
            parallelism,
            PARALLELISM_MIN,
            PARALLELISM_MAX,
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

    def needs_rehash(self, digest: Any) -> bool:
        """Check whether a digest was made with other parameters.

        Parameters
        ----------
        digest : Any
            The digest.

        Returns
        -------
        bool
            True if the digest is not an argon2 digest with this
            hasher's variant, iterations, memory, parallelism and
            key length.
        """
        self.validate()
        if not isinstance(digest, Argon2Digest):
            return True
        return (
            digest.variant,
            digest.iterations,
            digest.memory,
            digest.parallelism,
            len(digest.key),
        ) != (
            self.variant,
            self.iterations,
            self.memory,
            self.parallelism,
            self.key_length,
        )

    def _defaults(self) -> None:
        params = DEFAULT_PROFILE.params
        if self.variant is Variant.NONE:
            self.variant = params.variant
        if self.iterations is None:
            self.iterations = params.iterations
        if self.memory is None:
            self.memory = params.memory
        if self.parallelism is None:
            self.parallelism = params.parallelism
        if self.key_length is None:
            self.key_length = params.key_length
        if self.salt_length is None:
            self.salt_length = params.salt_length
        check_range(
            ALG_NAME,
            "parallelism",
            self.parallelism,
            PARALLELISM_MIN,
            PARALLELISM_MAX,
        )
        self.memory = round_memory(self.memory, self.parallelism)

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
            "parallelism",
            self.parallelism,
            PARALLELISM_MIN,
            PARALLELISM_MAX,
        )
        check_range(
            ALG_NAME,
            "memory",
            self.memory,
            self.parallelism * MEMORY_MIN_PARALLELISM_MULTIPLIER,
            MEMORY_MAX,
        )
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

    def _validate_salt(self, salt: bytes) -> None:
        check_range(
            ALG_NAME,
            "salt",
            len(salt),
            SALT_LENGTH_MIN,
            SALT_LENGTH_MAX,
            error=InvalidSaltError,
        )

    def _new_salt(self) -> bytes:
        return salt_bytes(self.salt_length)

    def _hash(self, password: bytes, salt: bytes) -> Argon2Digest:
        LOG.debug(
            "Deriving %s key with m=%d, t=%d, p=%d",
            self.variant.prefix,
            self.memory,
            self.iterations,
            self.parallelism,
        )
        key = self.variant.derive(
            password,
            salt,
            self.iterations,
            self.memory,
            self.parallelism,
            self.key_length,
        )
        return Argon2Digest(
            variant=self.variant,
            iterations=self.iterations,
            memory=self.memory,
            parallelism=self.parallelism,
            salt=salt,
            key=key,
        )


__all__ = ["Argon2Hasher", "round_memory"]
