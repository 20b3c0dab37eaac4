# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Digests as stored values: database columns and pydantic fields.

``DigestField`` and ``NullDigestField`` validate an encoded digest into
a ``StoredDigest`` or ``NullDigest`` and serialize them back to their
encoded form, for example::

    class User(BaseModel):
        name: str
        password: DigestField
"""

from typing import Any, Optional

from pydantic import PlainSerializer, PlainValidator
from typing_extensions import Annotated

from .decoder import Decoder, get_global_decoder
from .errors import InvalidPasswordError, PassDigestError
from .protocol import Digest

NULL = ""
"""The encoded form of a ``NullDigest`` without a digest."""


class StoredDigest:
    """A digest that is persisted in its encoded form.

    Parameters
    ----------
    digest : Digest
        The wrapped digest.
    """

    __slots__ = ("digest",)

    def __init__(self, digest: Digest) -> None:
        self.digest = digest

    @classmethod
    def from_encoded(
        cls, encoded: str, decoder: Optional[Decoder] = None
    ) -> "StoredDigest":
        """Decode a stored value.

        Parameters
        ----------
        encoded : str
            The encoded digest.
        decoder : Optional[Decoder], optional
            The registry, the global one if not given.

        Returns
        -------
        StoredDigest
            The stored digest.

        Raises
        ------
        EncodedDigestError
            If the value cannot be decoded.
        """
        registry = decoder or get_global_decoder()
        return cls(registry.decode(encoded))

    def match(self, password: str) -> bool:
        """Check a password, any error counting as a mismatch."""
        return self.digest.match(password)

    def match_bytes(self, password: bytes) -> bool:
        """Check password bytes, any error counting as a mismatch."""
        return self.digest.match_bytes(password)

    def match_advanced(self, password: str) -> bool:
        """Check a password, raising on errors."""
        return self.digest.match_advanced(password)

    def match_bytes_advanced(self, password: bytes) -> bool:
        """Check password bytes, raising on errors."""
        return self.digest.match_bytes_advanced(password)

    def encode(self) -> str:
        """Get the value to store."""
        return self.digest.encode()

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self.digest).__name__})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StoredDigest):
            return NotImplemented
        return self.encode() == other.encode()

    def __hash__(self) -> int:
        return hash(self.encode())


class NullDigest:
    """A stored digest that may be absent, stored as ``""`` then.

    Parameters
    ----------
    digest : Optional[Digest], optional
        The wrapped digest, if any.
    """

    __slots__ = ("digest",)

    def __init__(self, digest: Optional[Digest] = None) -> None:
        self.digest = digest

    @property
    def is_null(self) -> bool:
        """Whether there is no digest."""
        return self.digest is None

    @classmethod
    def from_encoded(
        cls, encoded: Optional[str], decoder: Optional[Decoder] = None
    ) -> "NullDigest":
        """Decode a stored value, ``None`` or ``""`` meaning no digest.

        Parameters
        ----------
        encoded : Optional[str]
            The encoded digest.
        decoder : Optional[Decoder], optional
            The registry, the global one if not given.

        Returns
        -------
        NullDigest
            The stored digest.

        Raises
        ------
        EncodedDigestError
            If the value cannot be decoded.
        """
        if encoded is None or encoded == NULL:
            return cls()
        registry = decoder or get_global_decoder()
        return cls(registry.decode(encoded))

    def match(self, password: str) -> bool:
        """Check a password, no digest never matching."""
        return self.digest is not None and self.digest.match(password)

    def match_bytes(self, password: bytes) -> bool:
        """Check password bytes, no digest never matching."""
        return self.digest is not None and self.digest.match_bytes(password)

    def match_advanced(self, password: str) -> bool:
        """Check a password.

        Parameters
        ----------
        password : str
            The password.

        Returns
        -------
        bool
            Whether the password matches.

        Raises
        ------
        InvalidPasswordError
            If there is no digest.
        PassDigestError
            If the key could not be derived.
        """
        return self._require().match_advanced(password)

    def match_bytes_advanced(self, password: bytes) -> bool:
        """Check password bytes, raising on errors and without digest."""
        return self._require().match_bytes_advanced(password)

    def encode(self) -> str:
        """Get the value to store, ``""`` without digest."""
        if self.digest is None:
            return NULL
        return self.digest.encode()

    def _require(self) -> Digest:
        if self.digest is None:
            raise InvalidPasswordError("there is no digest to match against")
        return self.digest

    def __str__(self) -> str:
        return self.encode()

    def __repr__(self) -> str:
        inner = type(self.digest).__name__ if self.digest else None
        return f"{type(self).__name__}({inner})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NullDigest):
            return NotImplemented
        return self.encode() == other.encode()

    def __hash__(self) -> int:
        return hash(self.encode())


def _validate_stored(value: Any) -> StoredDigest:
    if isinstance(value, StoredDigest):
        return value
    if isinstance(value, NullDigest) and value.digest is not None:
        return StoredDigest(value.digest)
    if not isinstance(value, str):
        raise ValueError(f"Expected an encoded digest, got: {value!r}")
    try:
        return StoredDigest.from_encoded(value)
    except PassDigestError as error:
        raise ValueError(str(error)) from error


def _validate_null(value: Any) -> NullDigest:
    if isinstance(value, NullDigest):
        return value
    if isinstance(value, StoredDigest):
        return NullDigest(value.digest)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"Expected an encoded digest, got: {value!r}")
    try:
        return NullDigest.from_encoded(value)
    except PassDigestError as error:
        raise ValueError(str(error)) from error


def _serialize(value: Any) -> str:
    return str(value.encode())


DigestField = Annotated[
    StoredDigest,
    PlainValidator(_validate_stored),
    PlainSerializer(_serialize, return_type=str),
]
"""A pydantic field holding a required digest."""

NullDigestField = Annotated[
    NullDigest,
    PlainValidator(_validate_null),
    PlainSerializer(_serialize, return_type=str),
]
"""A pydantic field holding an optional digest, ``""`` when absent."""

__all__ = [
    "NULL",
    "DigestField",
    "NullDigest",
    "NullDigestField",
    "StoredDigest",
]
