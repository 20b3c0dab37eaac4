# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Common configuration constants and functions."""

from pathlib import Path

from .._logging import ENV_PREFIX

DOT_ENV_PATH = Path.cwd() / ".env"


def to_kebab(value: str) -> str:
    """Convert a string to kebab case.

    Parameters
    ----------
    value : str
        The string to convert

    Returns
    -------
    str
        The converted string
    """
    return value.replace("_", "-")


__all__ = ["DOT_ENV_PATH", "ENV_PREFIX", "to_kebab"]
