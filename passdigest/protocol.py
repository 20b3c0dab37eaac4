# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=unnecessary-ellipsis

"""Digest, hasher and decoder registry protocols."""

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class Digest(Protocol):  # pragma: no cover
    """Protocol for decoded or freshly hashed password digests."""

    def match(self, password: str) -> bool:
        """Check a password, treating any error as a mismatch.

        Parameters
        ----------
        password : str
            The plain text password
        """
        ...

    def match_bytes(self, password: bytes) -> bool:
        """Check a password, treating any error as a mismatch.

        Parameters
        ----------
        password : bytes
            The plain text password bytes
        """
        ...

    def match_advanced(self, password: str) -> bool:
        """Check a password, raising on errors.

        Parameters
        ----------
        password : str
            The plain text password
        """
        ...

    def match_bytes_advanced(self, password: bytes) -> bool:
        """Check a password, raising on errors.

        Parameters
        ----------
        password : bytes
            The plain text password bytes
        """
        ...

    def encode(self) -> str:
        """Render the digest in its canonical encoded form."""
        ...


@runtime_checkable
class Hasher(Protocol):  # pragma: no cover
    """Protocol for password hashing implementations."""

    def hash(self, password: str) -> Digest:
        """Hash a password with a random salt.

        Parameters
        ----------
        password : str
            The plain text password
        """
        ...

    def hash_with_salt(self, password: str, salt: bytes) -> Digest:
        """Hash a password with the given salt.

        Parameters
        ----------
        password : str
            The plain text password
        salt : bytes
            The salt
        """
        ...

    def validate(self) -> None:
        """Apply the defaults and validate the configuration."""
        ...

    def needs_rehash(self, digest: Digest) -> bool:
        """Check whether a digest was made with other parameters.

        Parameters
        ----------
        digest : Digest
            The decoded digest
        """
        ...


DecodeFunc = Callable[[str], Digest]
"""Decodes an encoded digest."""


@runtime_checkable
class DecoderRegister(Protocol):  # pragma: no cover
    """Protocol for registries of decode functions."""

    def register(self, identifier: str, decode_func: DecodeFunc) -> None:
        """Register a decode function for an identifier.

        Parameters
        ----------
        identifier : str
            The identifier, e.g. ``argon2id``
        decode_func : DecodeFunc
            The decode function
        """
        ...

    def register_prefix(self, prefix: str, identifier: str) -> None:
        """Route encoded digests starting with a prefix to an identifier.

        Parameters
        ----------
        prefix : str
            The prefix, e.g. ``$md5,``
        identifier : str
            The already registered identifier
        """
        ...


__all__ = ["Digest", "Hasher", "DecodeFunc", "DecoderRegister"]
