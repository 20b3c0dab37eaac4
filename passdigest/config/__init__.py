# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.
"""Configuration module for passdigest."""

from ._common import DOT_ENV_PATH, ENV_PREFIX
from .settings import (
    AlgorithmType,
    DecoderProfileType,
    Settings,
    decoder_from_settings,
    hasher_from_settings,
)

__all__ = [
    "AlgorithmType",
    "DecoderProfileType",
    "DOT_ENV_PATH",
    "ENV_PREFIX",
    "Settings",
    "decoder_from_settings",
    "hasher_from_settings",
]
