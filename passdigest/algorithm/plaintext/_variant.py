# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Plaintext variants."""

from enum import Enum

from ...encoding import decode_adapted, encode_adapted
from ._const import IDENTIFIER_BASE64, IDENTIFIER_PLAINTEXT


class Variant(str, Enum):
    """The plaintext variants."""

    NONE = ""
    PLAINTEXT = IDENTIFIER_PLAINTEXT
    BASE64 = IDENTIFIER_BASE64

    @classmethod
    def resolve(cls, identifier: str) -> "Variant":
        """Get the variant for an identifier, ``Variant.NONE`` if unknown."""
        try:
            return cls(identifier)
        except ValueError:
            return cls.NONE

    @property
    def prefix(self) -> str:
        """The identifier used in encoded digests."""
        return self.value

    def encode_key(self, key: bytes) -> str:
        """Encode the stored password.

        Parameters
        ----------
        key : bytes
            The password bytes.

        Returns
        -------
        str
            The raw text or its adapted base64 form.
        """
        if self is Variant.BASE64:
            return encode_adapted(key)
        return key.decode("utf-8")

    def decode_key(self, text: str) -> bytes:
        """Decode the stored password.

        Parameters
        ----------
        text : str
            The key field.

        Returns
        -------
        bytes
            The password bytes.

        Raises
        ------
        ValueError
            If the base64 form is malformed.
        """
        if self is Variant.BASE64:
            return decode_adapted(text)
        return text.encode("utf-8")


__all__ = ["Variant"]
