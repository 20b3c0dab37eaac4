# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Plaintext hasher."""

from dataclasses import dataclass
from typing import Any, Union

from typing_extensions import Self

from ...errors import InvalidParameterError
from .._base import BaseHasher
from ._const import ALG_NAME
from ._digest import PlaintextDigest
from ._variant import Variant


@dataclass
class PlaintextHasher(BaseHasher):
    """Stores passwords as they are.

    Only meant for migrating previously unhashed passwords, salts are
    ignored.
    """

    ALG_NAME = ALG_NAME

    variant: Variant = Variant.NONE

    def with_variant(self, variant: Union[Variant, str]) -> Self:
        """Set the variant.

        Parameters
        ----------
        variant : Union[Variant, str]
            The variant or its identifier.

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

    def needs_rehash(self, digest: Any) -> bool:
        """Check whether a digest is not stored with this variant."""
        self.validate()
        if not isinstance(digest, PlaintextDigest):
            return True
        return digest.variant is not self.variant

    def _defaults(self) -> None:
        if self.variant is Variant.NONE:
            self.variant = Variant.PLAINTEXT

    def _validate(self) -> None:
        pass

    def _validate_salt(self, salt: bytes) -> None:
        pass

    def _new_salt(self) -> bytes:
        return b""

    def _hash(  # pylint: disable=unused-argument
        self, password: bytes, salt: bytes
    ) -> PlaintextDigest:
        return PlaintextDigest(variant=self.variant, key=password)


__all__ = ["PlaintextHasher"]
