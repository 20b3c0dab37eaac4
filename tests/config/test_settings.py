# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=missing-return-doc,missing-param-doc
"""Test passdigest.config.settings.*."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from passdigest.algorithm import (
    Argon2Hasher,
    BcryptHasher,
    Pbkdf2Hasher,
    ScryptHasher,
    ShaCryptHasher,
)
from passdigest.algorithm.argon2 import Variant as Argon2Variant
from passdigest.algorithm.pbkdf2 import Variant as Pbkdf2Variant
from passdigest.algorithm.shacrypt import Variant as ShaCryptVariant
from passdigest.config import (
    ENV_PREFIX,
    Settings,
    decoder_from_settings,
    hasher_from_settings,
)


def test_default_settings() -> None:
    """Ensure the defaults select argon2 and the default profile."""
    settings = Settings()
    assert settings.algorithm == "argon2"
    assert settings.decoder_profile == "default"
    assert settings.bcrypt_cost == 13
    assert settings.pbkdf2_iterations is None
    assert settings.salt_length is None


@patch.dict(
    os.environ,
    {
        f"{ENV_PREFIX}ALGORITHM": "bcrypt",
        f"{ENV_PREFIX}BCRYPT_COST": "11",
    },
)
def test_env_override() -> None:
    """Ensure environment variables override the defaults."""
    settings = Settings()
    assert settings.algorithm == "bcrypt"
    assert settings.bcrypt_cost == 11


def test_choice_case_is_normalized() -> None:
    """Test that the choice fields ignore case."""
    settings = Settings(
        log_level="debug",
        algorithm="PBKDF2",
        pbkdf2_variant="SHA512",
        argon2_variant="Argon2i",
    )
    assert settings.log_level == "DEBUG"
    assert settings.algorithm == "pbkdf2"
    assert settings.pbkdf2_variant == "sha512"
    assert settings.argon2_variant == "argon2i"


@pytest.mark.parametrize(
    "field,value",
    [
        ("algorithm", "md5crypt"),
        ("decoder_profile", "legacy"),
        ("bcrypt_cost", 9),
        ("bcrypt_cost", 32),
        ("pbkdf2_iterations", 1000),
        ("scrypt_ln", 0),
        ("shacrypt_iterations", 999),
        ("salt_length", 0),
    ],
)
def test_invalid_values(field: str, value: object) -> None:
    """Test that invalid values are rejected."""
    with pytest.raises(ValidationError):
        Settings(**{field: value})  # type: ignore[arg-type]


def test_kebab_case_names() -> None:
    """Test that the kebab case names are accepted."""
    settings = Settings.model_validate(
        {"bcrypt-cost": 12, "decoder-profile": "all"}
    )
    assert settings.bcrypt_cost == 12
    assert settings.decoder_profile == "all"


def test_load_dot_env(tmp_path: Path) -> None:
    """Test loading the settings from a .env file."""
    dot_env = tmp_path / ".env"
    dot_env.write_text(
        f"{ENV_PREFIX}ALGORITHM=scrypt\n{ENV_PREFIX}SCRYPT_LN=15\n",
        encoding="utf-8",
    )
    with patch.dict(os.environ, {}):
        settings = Settings.load(dot_env)
    assert settings.algorithm == "scrypt"
    assert settings.scrypt_ln == 15


def test_load_without_dot_env(tmp_path: Path) -> None:
    """Test that a missing .env file is skipped."""
    with patch(
        "passdigest.config.settings.DOT_ENV_PATH", tmp_path / ".env"
    ), patch.dict(os.environ, {}):
        settings = Settings.load()
    assert settings.algorithm == "argon2"


class TestHasherFromSettings:
    """Test building hashers from the settings."""

    def test_argon2(self) -> None:
        """Test the default argon2 hasher."""
        hasher = hasher_from_settings(
            Settings(argon2_variant="argon2d", salt_length=32)
        )
        assert isinstance(hasher, Argon2Hasher)
        assert hasher.variant is Argon2Variant.D
        assert hasher.memory == 64 * 1024
        assert hasher.salt_length == 32

    def test_argon2_profile(self) -> None:
        """Test selecting the recommended argon2 profile."""
        hasher = hasher_from_settings(
            Settings(argon2_profile="rfc9106-recommended")
        )
        assert isinstance(hasher, Argon2Hasher)
        assert hasher.memory == 2 * 1024 * 1024

    def test_bcrypt(self) -> None:
        """Test the bcrypt hasher."""
        hasher = hasher_from_settings(
            Settings(algorithm="bcrypt", bcrypt_cost=12, salt_length=8)
        )
        assert isinstance(hasher, BcryptHasher)
        assert hasher.cost == 12

    def test_pbkdf2(self) -> None:
        """Test the pbkdf2 hasher."""
        hasher = hasher_from_settings(
            Settings(
                algorithm="pbkdf2",
                pbkdf2_variant="sha512",
                pbkdf2_iterations=200000,
                salt_length=24,
            )
        )
        assert isinstance(hasher, Pbkdf2Hasher)
        assert hasher.variant is Pbkdf2Variant.SHA512
        assert hasher.iterations == 200000
        assert hasher.salt_length == 24

    def test_pbkdf2_default_iterations(self) -> None:
        """Test that unset iterations follow the variant."""
        hasher = hasher_from_settings(
            Settings(algorithm="pbkdf2", pbkdf2_variant="sha1")
        )
        assert isinstance(hasher, Pbkdf2Hasher)
        assert hasher.iterations == 720000

    def test_scrypt(self) -> None:
        """Test the scrypt hasher."""
        hasher = hasher_from_settings(
            Settings(algorithm="scrypt", scrypt_ln=14, scrypt_p=2)
        )
        assert isinstance(hasher, ScryptHasher)
        assert (hasher.ln, hasher.r, hasher.p) == (14, 8, 2)

    def test_shacrypt(self) -> None:
        """Test the SHA-crypt hasher."""
        hasher = hasher_from_settings(
            Settings(
                algorithm="shacrypt",
                shacrypt_variant="SHA256",
                shacrypt_iterations=5000,
            )
        )
        assert isinstance(hasher, ShaCryptHasher)
        assert hasher.variant is ShaCryptVariant.SHA256
        assert hasher.iterations == 5000


@pytest.mark.parametrize("profile,legacy", [("default", False), ("all", True)])
def test_decoder_from_settings(profile: str, legacy: bool) -> None:
    """Test building the decoder registry profile."""
    decoder = decoder_from_settings(Settings(decoder_profile=profile))
    assert ("md5" in decoder.identifiers) is legacy
