# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Recommended argon2 parameter sets from RFC 9106."""

from dataclasses import dataclass
from enum import Enum

from ._variant import Variant


@dataclass(frozen=True)
class ProfileParams:
    """The argon2 parameters of a profile."""

    variant: Variant
    iterations: int
    memory: int
    parallelism: int
    key_length: int
    salt_length: int


class Profile(str, Enum):
    """The argon2 profiles."""

    RFC9106_LOW_MEMORY = "rfc9106-low-memory"
    RFC9106_RECOMMENDED = "rfc9106-recommended"

    @property
    def params(self) -> ProfileParams:
        """The parameters of the profile."""
        return _PARAMS[self]


_PARAMS = {
    Profile.RFC9106_LOW_MEMORY: ProfileParams(
        variant=Variant.ID,
        iterations=3,
        memory=64 * 1024,
        parallelism=4,
        key_length=32,
        salt_length=16,
    ),
    Profile.RFC9106_RECOMMENDED: ProfileParams(
        variant=Variant.ID,
        iterations=1,
        memory=2 * 1024 * 1024,
        parallelism=4,
        key_length=32,
        salt_length=16,
    ),
}

DEFAULT_PROFILE = Profile.RFC9106_LOW_MEMORY

__all__ = ["Profile", "ProfileParams", "DEFAULT_PROFILE"]
