# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Splitting of encoded digests into fields."""

from typing import List

DELIMITER = "$"
"""The field delimiter of encoded digests."""


def split(encoded: str, limit: int = -1) -> List[str]:
    """Split an encoded digest on the field delimiter.

    Parameters
    ----------
    encoded : str
        The encoded digest.
    limit : int, optional
        The maximum number of fields to return, the last field holding
        the unsplit remainder. A negative value means no limit.

    Returns
    -------
    List[str]
        The fields. The first field is empty for a digest starting
        with the delimiter.
    """
    if limit < 0:
        return encoded.split(DELIMITER)
    if limit == 0:
        return []
    return encoded.split(DELIMITER, limit - 1)


def join(*fields: object) -> str:
    """Join fields into an encoded digest.

    A leading delimiter is always emitted and line feeds are stripped.

    Parameters
    ----------
    *fields : object
        The fields after the leading delimiter.

    Returns
    -------
    str
        The encoded digest.
    """
    joined = DELIMITER + DELIMITER.join(str(field) for field in fields)
    return joined.replace("\n", "")


__all__ = ["DELIMITER", "split", "join"]
