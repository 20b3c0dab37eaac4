# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Exceptions raised while decoding, encoding and hashing digests."""

from typing import Any, Optional


class PassDigestError(Exception):
    """Base class for all passdigest errors."""


class EncodedDigestError(PassDigestError):
    """The encoded digest could not be decoded."""


class InvalidFormatError(EncodedDigestError):
    """The encoded digest has the wrong number of fields or no delimiter."""


class InvalidIdentifierError(EncodedDigestError):
    """The identifier does not belong to any known algorithm or variant."""


class InvalidVersionError(EncodedDigestError):
    """The version field does not match the supported version."""


class InvalidOptionError(EncodedDigestError):
    """An option token is malformed."""


class InvalidOptionKeyError(InvalidOptionError):
    """An option key is unknown."""


class InvalidOptionValueError(InvalidOptionError):
    """An option value could not be parsed or is out of range."""


class InvalidSaltEncodingError(EncodedDigestError):
    """The salt field could not be decoded."""


class InvalidKeyEncodingError(EncodedDigestError):
    """The key field could not be decoded or is empty."""


class InvalidParameterError(PassDigestError):
    """A numeric parameter is out of bounds.

    Parameters
    ----------
    field : str
        The name of the parameter.
    minimum : Optional[int]
        The lower bound, if any.
    maximum : Optional[int]
        The upper bound, if any.
    value : Any
        The offending value.
    algorithm : str
        The algorithm name, used as the message prefix.
    """

    def __init__(
        self,
        field: str,
        minimum: Optional[int],
        maximum: Optional[int],
        value: Any,
        algorithm: str = "",
    ) -> None:
        self.field = field
        self.minimum = minimum
        self.maximum = maximum
        self.value = value
        self.algorithm = algorithm
        super().__init__(self._message())

    def _message(self) -> str:
        if self.minimum is not None and self.maximum is not None:
            bounds = f"between {self.minimum} and {self.maximum}"
        elif self.minimum is not None:
            bounds = f"{self.minimum} or more"
        elif self.maximum is not None:
            bounds = f"{self.maximum} or less"
        else:
            bounds = "valid"
        prefix = f"{self.algorithm}: " if self.algorithm else ""
        return (
            f"{prefix}parameter '{self.field}' must be {bounds} "
            f"but is {self.value}"
        )


class InvalidSaltError(InvalidParameterError):
    """The salt has an invalid length or contains invalid characters."""


class InvalidPasswordError(PassDigestError):
    """The password cannot be checked against or hashed into a digest."""


class KeyDerivationError(PassDigestError):
    """The key derivation function failed."""


class SaltReadError(PassDigestError):
    """Random salt bytes could not be read."""


class RegistrationError(PassDigestError):
    """A decoder or prefix could not be registered."""


__all__ = [
    "PassDigestError",
    "EncodedDigestError",
    "InvalidFormatError",
    "InvalidIdentifierError",
    "InvalidVersionError",
    "InvalidOptionError",
    "InvalidOptionKeyError",
    "InvalidOptionValueError",
    "InvalidSaltEncodingError",
    "InvalidKeyEncodingError",
    "InvalidParameterError",
    "InvalidSaltError",
    "InvalidPasswordError",
    "KeyDerivationError",
    "SaltReadError",
    "RegistrationError",
]
