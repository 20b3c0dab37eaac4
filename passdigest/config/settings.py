# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Passdigest settings module."""

import logging
from pathlib import Path
from typing import Any, Literal, Optional, Union

from dotenv import load_dotenv
from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from typing_extensions import Annotated

from .._logging import LogLevelType, get_log_level
from ..algorithm import (
    Argon2Hasher,
    BcryptHasher,
    Pbkdf2Hasher,
    ScryptHasher,
    ShaCryptHasher,
)
from ..decoder import Decoder, new_decoder_profile
from ._common import DOT_ENV_PATH, ENV_PREFIX, to_kebab

LOG = logging.getLogger(__name__)

AlgorithmType = Literal["argon2", "bcrypt", "pbkdf2", "scrypt", "shacrypt"]
"""The algorithms new digests can be made with."""

DecoderProfileType = Literal["default", "all"]
"""The decoder registry profiles."""

AnyHasher = Union[
    Argon2Hasher, BcryptHasher, Pbkdf2Hasher, ScryptHasher, ShaCryptHasher
]


class Settings(BaseSettings):
    """Settings class.

    Unset optional values fall back to the defaults of the hasher.
    """

    log_level: LogLevelType = get_log_level()
    algorithm: AlgorithmType = "argon2"
    decoder_profile: DecoderProfileType = "default"
    # argon2
    argon2_variant: Literal["argon2id", "argon2i", "argon2d"] = "argon2id"
    argon2_profile: Literal["rfc9106-low-memory", "rfc9106-recommended"] = (
        "rfc9106-low-memory"
    )
    # bcrypt
    bcrypt_cost: Annotated[int, Field(ge=10, le=31)] = 13
    # pbkdf2
    pbkdf2_variant: Literal["sha1", "sha224", "sha256", "sha384", "sha512"] = (
        "sha256"
    )
    pbkdf2_iterations: Optional[
        Annotated[int, Field(ge=100000, le=2**32 - 1)]
    ] = None
    # scrypt
    scrypt_ln: Annotated[int, Field(ge=1, le=58)] = 16
    scrypt_r: Annotated[int, Field(ge=1)] = 8
    scrypt_p: Annotated[int, Field(ge=1)] = 1
    # shacrypt
    shacrypt_variant: Literal["sha256", "sha512"] = "sha512"
    shacrypt_iterations: Optional[
        Annotated[int, Field(ge=1000, le=999999999)]
    ] = None
    # argon2, pbkdf2, scrypt and shacrypt
    salt_length: Optional[Annotated[int, Field(ge=1)]] = None

    model_config = SettingsConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        env_prefix=ENV_PREFIX,
        env_ignore_empty=True,
        case_sensitive=False,
        extra="ignore",
    )

    @classmethod
    def load(cls, dot_env: Optional[Path] = None) -> "Settings":
        """Load the settings.

        Parameters
        ----------
        dot_env : Optional[Path], optional
            The .env file to read, ``./.env`` if not given

        Returns
        -------
        Settings
            The settings instance
        """
        env_path = dot_env or DOT_ENV_PATH
        if env_path.exists():
            load_dotenv(env_path, override=True)
        return cls()

    # pylint: disable=unused-argument
    @field_validator(
        "log_level",
        "algorithm",
        "decoder_profile",
        "argon2_variant",
        "argon2_profile",
        "pbkdf2_variant",
        "shacrypt_variant",
        mode="before",
    )
    @classmethod
    def validate_choice(cls, value: Any, info: ValidationInfo) -> Any:
        """Normalize the case of the choice fields.

        Parameters
        ----------
        value : Any
            The value
        info : ValidationInfo
            The validation info

        Returns
        -------
        Any
            The value, upper case for the log level and lower case
            for the others
        """
        if not isinstance(value, str):
            return value  # pragma: no cover
        if info.field_name == "log_level":
            return value.upper()
        return value.lower()


def hasher_from_settings(settings: Settings) -> AnyHasher:
    """Build the hasher the settings select.

    Parameters
    ----------
    settings : Settings
        The settings

    Returns
    -------
    AnyHasher
        The validated hasher

    Raises
    ------
    InvalidParameterError
        If the settings hold parameters the hasher rejects.
    """
    LOG.debug("Building %s hasher from settings", settings.algorithm)
    if settings.algorithm == "bcrypt":
        return BcryptHasher().with_cost(settings.bcrypt_cost).build()
    hasher: AnyHasher
    if settings.algorithm == "pbkdf2":
        hasher = Pbkdf2Hasher().with_variant(settings.pbkdf2_variant)
        if settings.pbkdf2_iterations is not None:
            hasher.with_iterations(settings.pbkdf2_iterations)
    elif settings.algorithm == "scrypt":
        hasher = (
            ScryptHasher()
            .with_ln(settings.scrypt_ln)
            .with_block_size(settings.scrypt_r)
            .with_parallelism(settings.scrypt_p)
        )
    elif settings.algorithm == "shacrypt":
        hasher = ShaCryptHasher().with_variant(settings.shacrypt_variant)
        if settings.shacrypt_iterations is not None:
            hasher.with_iterations(settings.shacrypt_iterations)
    else:
        hasher = Argon2Hasher.from_profile(settings.argon2_profile)
        hasher.with_variant(settings.argon2_variant)
    if settings.salt_length is not None:
        hasher.with_salt_length(settings.salt_length)
    return hasher.build()


def decoder_from_settings(settings: Settings) -> Decoder:
    """Build the decoder registry profile the settings select.

    Parameters
    ----------
    settings : Settings
        The settings

    Returns
    -------
    Decoder
        The registry
    """
    return new_decoder_profile(settings.decoder_profile)


__all__ = [
    "AlgorithmType",
    "AnyHasher",
    "DecoderProfileType",
    "Settings",
    "decoder_from_settings",
    "hasher_from_settings",
]
