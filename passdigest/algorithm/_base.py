# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Behaviour shared by the digests and hashers of all algorithm families."""

import functools
import hmac
import logging
from typing import Any, Callable, ClassVar, Optional, TypeVar

from typing_extensions import Self

from ..errors import (
    EncodedDigestError,
    InvalidParameterError,
    InvalidPasswordError,
    PassDigestError,
)

LOG = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


class BaseDigest:
    """Password matching on top of ``derive`` and ``encode``."""

    ALG_NAME: ClassVar[str] = ""
    key: bytes

    def derive(self, password: bytes) -> bytes:
        """Derive the key for a password with this digest's parameters.

        Parameters
        ----------
        password : bytes
            The password bytes.

        Returns
        -------
        bytes
            The derived key.
        """
        raise NotImplementedError

    def encode(self) -> str:
        """Render the digest in its canonical encoded form."""
        raise NotImplementedError

    def match(self, password: str) -> bool:
        """Check a password, any error counting as a mismatch.

        Parameters
        ----------
        password : str
            The password.

        Returns
        -------
        bool
            Whether the password matches.
        """
        return self.match_bytes(password.encode("utf-8"))

    def match_bytes(self, password: bytes) -> bool:
        """Check password bytes, any error counting as a mismatch.

        Parameters
        ----------
        password : bytes
            The password bytes.

        Returns
        -------
        bool
            Whether the password matches.
        """
        try:
            return self.match_bytes_advanced(password)
        except PassDigestError as error:
            LOG.debug("%s match failed: %s", self.ALG_NAME, error)
            return False

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
        PassDigestError
            If the key could not be derived.
        """
        return self.match_bytes_advanced(password.encode("utf-8"))

    def match_bytes_advanced(self, password: bytes) -> bool:
        """Check password bytes.

        Parameters
        ----------
        password : bytes
            The password bytes.

        Returns
        -------
        bool
            Whether the password matches.

        Raises
        ------
        InvalidPasswordError
            If the digest has an empty key.
        PassDigestError
            If the key could not be derived.
        """
        if not self.key:
            raise InvalidPasswordError(f"{self.ALG_NAME}: key has 0 bytes")
        return hmac.compare_digest(self.key, self.derive(password))

    def __str__(self) -> str:
        return self.encode()


class BaseHasher:
    """Defaults latch and the hash entry points of a hasher builder."""

    ALG_NAME: ClassVar[str] = ""
    _defaulted: bool = False

    def apply_defaults(self) -> None:
        """Fill unset parameters with their defaults, once."""
        if self._defaulted:
            return
        self._defaults()
        self._defaulted = True

    def validate(self) -> None:
        """Apply the defaults and validate the configuration.

        Raises
        ------
        InvalidParameterError
            If a parameter is out of bounds.
        """
        self.apply_defaults()
        self._validate()

    def build(self) -> Self:
        """Finish configuring the hasher.

        Returns
        -------
        Self
            The validated hasher.

        Raises
        ------
        InvalidParameterError
            If a parameter is out of bounds.
        """
        self.validate()
        return self

    def hash(self, password: str) -> Any:
        """Hash a password with a random salt.

        Parameters
        ----------
        password : str
            The password.

        Returns
        -------
        Any
            The digest of the family.

        Raises
        ------
        PassDigestError
            If the configuration is invalid or hashing fails.
        """
        self.validate()
        return self._hash(password.encode("utf-8"), self._new_salt())

    def hash_with_salt(self, password: str, salt: bytes) -> Any:
        """Hash a password with the given salt.

        Parameters
        ----------
        password : str
            The password.
        salt : bytes
            The salt.

        Returns
        -------
        Any
            The digest of the family.

        Raises
        ------
        PassDigestError
            If the configuration or salt is invalid or hashing fails.
        """
        self.validate()
        self._validate_salt(salt)
        return self._hash(password.encode("utf-8"), salt)

    def _defaults(self) -> None:
        raise NotImplementedError

    def _validate(self) -> None:
        raise NotImplementedError

    def _validate_salt(self, salt: bytes) -> None:
        raise NotImplementedError

    def _new_salt(self) -> bytes:
        raise NotImplementedError

    def _hash(self, password: bytes, salt: bytes) -> Any:
        raise NotImplementedError


def check_range(
    alg_name: str,
    field: str,
    value: int,
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
    error: type[InvalidParameterError] = InvalidParameterError,
) -> int:
    """Check that a parameter lies within its bounds.

    Parameters
    ----------
    alg_name : str
        The algorithm name.
    field : str
        The parameter name.
    value : int
        The value.
    minimum : Optional[int], optional
        The inclusive lower bound.
    maximum : Optional[int], optional
        The inclusive upper bound.
    error : type[InvalidParameterError], optional
        The error type to raise.

    Returns
    -------
    int
        The value.

    Raises
    ------
    InvalidParameterError
        If the value is out of bounds.
    """
    if (minimum is not None and value < minimum) or (
        maximum is not None and value > maximum
    ):
        raise error(field, minimum, maximum, value, algorithm=alg_name)
    return value


def decode_errors(alg_name: str) -> Callable[[F], F]:
    """Prefix decode errors with the algorithm name.

    Parameters
    ----------
    alg_name : str
        The algorithm name.

    Returns
    -------
    Callable[[F], F]
        The decorator.
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return func(*args, **kwargs)
            except EncodedDigestError as error:
                raise type(error)(
                    f"{alg_name} decode error: {error}"
                ) from error

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "BaseDigest",
    "BaseHasher",
    "check_range",
    "decode_errors",
]
