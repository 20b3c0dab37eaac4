# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

# pylint: disable=no-self-use
"""Tests for passdigest.errors."""

import pytest

from passdigest import errors


class TestErrorHierarchy:
    """Test the exception hierarchy."""

    @pytest.mark.parametrize(
        "error_type",
        [
            errors.InvalidFormatError,
            errors.InvalidIdentifierError,
            errors.InvalidVersionError,
            errors.InvalidOptionError,
            errors.InvalidOptionKeyError,
            errors.InvalidOptionValueError,
            errors.InvalidSaltEncodingError,
            errors.InvalidKeyEncodingError,
        ],
    )
    def test_decode_errors_are_encoded_digest_errors(
        self, error_type: type
    ) -> None:
        """Test that the decode errors share a base class."""
        assert issubclass(error_type, errors.EncodedDigestError)
        assert issubclass(error_type, errors.PassDigestError)

    def test_option_errors(self) -> None:
        """Test that option key and value errors are option errors."""
        assert issubclass(
            errors.InvalidOptionKeyError, errors.InvalidOptionError
        )
        assert issubclass(
            errors.InvalidOptionValueError, errors.InvalidOptionError
        )

    @pytest.mark.parametrize(
        "error_type",
        [
            errors.InvalidParameterError,
            errors.InvalidPasswordError,
            errors.KeyDerivationError,
            errors.SaltReadError,
            errors.RegistrationError,
        ],
    )
    def test_other_errors_are_not_decode_errors(
        self, error_type: type
    ) -> None:
        """Test that hashing errors are not decode errors."""
        assert issubclass(error_type, errors.PassDigestError)
        assert not issubclass(error_type, errors.EncodedDigestError)


class TestInvalidParameterError:
    """Test the parameter error message."""

    def test_message_with_both_bounds(self) -> None:
        """Test the message of a bounded parameter."""
        error = errors.InvalidParameterError(
            "iterations", 1, 10, 11, algorithm="argon2"
        )
        assert str(error) == (
            "argon2: parameter 'iterations' must be between 1 and 10 "
            "but is 11"
        )
        assert error.field == "iterations"
        assert error.minimum == 1
        assert error.maximum == 10
        assert error.value == 11

    def test_message_with_lower_bound(self) -> None:
        """Test the message of a parameter with a lower bound only."""
        error = errors.InvalidParameterError("cost", 10, None, 4)
        assert str(error) == "parameter 'cost' must be 10 or more but is 4"

    def test_message_with_upper_bound(self) -> None:
        """Test the message of a parameter with an upper bound only."""
        error = errors.InvalidParameterError("r", None, 3, 4)
        assert str(error) == "parameter 'r' must be 3 or less but is 4"

    def test_message_without_bounds(self) -> None:
        """Test the message of an invalid choice."""
        error = errors.InvalidParameterError(
            "variant", None, None, "md4", algorithm="pbkdf2"
        )
        assert str(error) == (
            "pbkdf2: parameter 'variant' must be valid but is md4"
        )

    def test_salt_error_is_parameter_error(self) -> None:
        """Test that salt errors carry the parameter fields."""
        error = errors.InvalidSaltError("salt", 8, 16, 4, algorithm="ldap")
        assert isinstance(error, errors.InvalidParameterError)
        assert "between 8 and 16" in str(error)
