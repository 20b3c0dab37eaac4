# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Parsing of comma separated key=value option lists."""

import re
from dataclasses import dataclass
from typing import List

from ..errors import InvalidOptionError, InvalidOptionValueError

_UNSIGNED_RE = re.compile(r"[0-9]+")
_SIGNED_RE = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Option:
    """A single key=value option of an encoded digest."""

    key: str
    value: str

    def as_uint(self, bits: int = 32) -> int:
        """Get the value as an unsigned integer.

        Parameters
        ----------
        bits : int, optional
            The bit width the value must fit in, by default 32.

        Returns
        -------
        int
            The parsed value.

        Raises
        ------
        InvalidOptionValueError
            If the value is not a decimal number fitting in ``bits``.
        """
        if not _UNSIGNED_RE.fullmatch(self.value):
            raise self._invalid("not an unsigned integer")
        value = int(self.value)
        if value >= 1 << bits:
            raise self._invalid(f"out of range for {bits} bits")
        return value

    def as_int(self, bits: int = 64) -> int:
        """Get the value as a signed integer.

        Parameters
        ----------
        bits : int, optional
            The bit width the value must fit in, by default 64.

        Returns
        -------
        int
            The parsed value.

        Raises
        ------
        InvalidOptionValueError
            If the value is not a decimal number fitting in ``bits``.
        """
        if not _SIGNED_RE.fullmatch(self.value):
            raise self._invalid("not an integer")
        value = int(self.value)
        limit = 1 << (bits - 1)
        if not -limit <= value < limit:
            raise self._invalid(f"out of range for {bits} bits")
        return value

    def _invalid(self, reason: str) -> InvalidOptionValueError:
        return InvalidOptionValueError(
            f"option '{self.key}' has invalid value '{self.value}': {reason}"
        )

    def __str__(self) -> str:
        return f"{self.key}={self.value}"


def parse_options(options: str) -> List[Option]:
    """Parse a comma separated list of key=value options.

    Parameters
    ----------
    options : str
        The options string, e.g. ``m=65536,t=3,p=4``.

    Returns
    -------
    List[Option]
        The options in the order they appear. An empty string
        yields no options.

    Raises
    ------
    InvalidOptionError
        If a token does not contain exactly one ``=``.
    """
    if not options:
        return []
    parsed: List[Option] = []
    for token in options.split(","):
        if token.count("=") != 1:
            raise InvalidOptionError(f"option '{token}' is invalid")
        key, value = token.split("=", 1)
        parsed.append(Option(key=key, value=value))
    return parsed


__all__ = ["Option", "parse_options"]
