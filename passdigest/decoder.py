# SPDX-License-Identifier: Apache-2.0.
# Copyright (c) 2024 - 2025 Waldiez and contributors.

"""Registry of decode functions and the password checking helpers."""

import logging
import threading
from typing import Any, Dict, List, Optional

from .algorithm import (
    argon2,
    bcrypt,
    ldap,
    md5crypt,
    pbkdf2,
    plaintext,
    scrypt,
    sha1crypt,
    shacrypt,
)
from .encoding import DELIMITER, split
from .errors import (
    InvalidFormatError,
    InvalidIdentifierError,
    PassDigestError,
    RegistrationError,
)
from .normalize import normalize
from .protocol import DecodeFunc, Digest

LOG = logging.getLogger(__name__)

PROFILE_DEFAULT = "default"
PROFILE_ALL = "all"


class Decoder:
    """Dispatches encoded digests to the registered decode functions.

    Identifiers and prefixes can only be added, never replaced.
    """

    def __init__(self) -> None:
        self._decoders: Dict[str, DecodeFunc] = {}
        self._prefixes: Dict[str, str] = {}

    @property
    def identifiers(self) -> List[str]:
        """The registered identifiers, sorted."""
        return sorted(self._decoders)

    @property
    def prefixes(self) -> Dict[str, str]:
        """A copy of the registered prefixes and their identifiers."""
        return dict(self._prefixes)

    def register(self, identifier: str, decode_func: DecodeFunc) -> None:
        """Register a decode function for an identifier.

        Parameters
        ----------
        identifier : str
            The identifier, e.g. ``argon2id``.
        decode_func : DecodeFunc
            The decode function.

        Raises
        ------
        RegistrationError
            If the identifier is already registered.
        """
        if identifier in self._decoders:
            raise RegistrationError(
                f"decoder already registered for identifier '{identifier}'"
            )
        self._decoders[identifier] = decode_func
        LOG.debug("Registered decoder for identifier '%s'", identifier)

    def register_prefix(self, prefix: str, identifier: str) -> None:
        """Route encoded digests starting with a prefix to an identifier.

        Parameters
        ----------
        prefix : str
            The prefix, e.g. ``{SSHA512}``.
        identifier : str
            The registered identifier.

        Raises
        ------
        RegistrationError
            If no decoder is registered for the identifier or the
            prefix is already registered.
        """
        if identifier not in self._decoders:
            raise RegistrationError(
                f"decoder isn't registered for identifier '{identifier}'"
            )
        if prefix in self._prefixes:
            raise RegistrationError(
                f"prefix '{prefix}' already registered for "
                f"identifier '{self._prefixes[prefix]}'"
            )
        self._prefixes[prefix] = identifier
        LOG.debug("Registered prefix '%s' for '%s'", prefix, identifier)

    def decode(self, encoded: str) -> Digest:
        """Decode an encoded digest.

        Registered prefixes are tried first, longest first. Otherwise
        the digest is normalized and dispatched on its identifier.

        Parameters
        ----------
        encoded : str
            The encoded digest.

        Returns
        -------
        Digest
            The digest.

        Raises
        ------
        InvalidFormatError
            If the digest is not a delimited digest.
        InvalidIdentifierError
            If no decoder is registered for the identifier.
        EncodedDigestError
            If the family decoder rejects the digest.
        """
        decode_func = self._match_prefix(encoded)
        if decode_func is not None:
            return decode_func(encoded)
        normalized = normalize(encoded)
        if normalized != encoded:
            decode_func = self._match_prefix(normalized)
            if decode_func is not None:
                return decode_func(normalized)
        if not normalized.startswith(DELIMITER):
            raise InvalidFormatError(
                f"the digest doesn't begin with the delimiter '{DELIMITER}' "
                "and is not one of the other understood formats"
            )
        parts = split(normalized, 3)
        if len(parts) != 3:
            raise InvalidFormatError(
                "the digest doesn't have the minimum number of parts for "
                "it to be considered an encoded digest"
            )
        decode_func = self._decoders.get(parts[1])
        if decode_func is None:
            raise InvalidIdentifierError(
                f"the identifier '{parts[1]}' is unknown to the decoder"
            )
        LOG.debug("Decoding digest with identifier '%s'", parts[1])
        return decode_func(normalized)

    def _match_prefix(self, encoded: str) -> Optional[DecodeFunc]:
        for prefix in sorted(self._prefixes, key=len, reverse=True):
            if encoded.startswith(prefix):
                identifier = self._prefixes[prefix]
                LOG.debug(
                    "Decoding digest with prefix '%s' as '%s'",
                    prefix,
                    identifier,
                )
                return self._decoders[identifier]
        return None


def register_default_profile(decoder: Decoder) -> None:
    """Register the decoders of the recommended algorithms.

    These are argon2, bcrypt, pbkdf2, scrypt (with yescrypt),
    SHA-crypt and the SHA-2 LDAP schemes.

    Parameters
    ----------
    decoder : Decoder
        The registry.
    """
    argon2.register_decoder(decoder)
    bcrypt.register_decoder(decoder)
    pbkdf2.register_decoder(decoder)
    scrypt.register_decoder(decoder)
    shacrypt.register_decoder(decoder)
    ldap.register_decoder(decoder)


def register_legacy_profile(decoder: Decoder) -> None:
    """Register the decoders of the legacy and insecure algorithms.

    These are plaintext, md5crypt, sha1crypt and the SHA-1 LDAP
    schemes.

    Parameters
    ----------
    decoder : Decoder
        The registry.
    """
    plaintext.register_decoder(decoder)
    md5crypt.register_decoder(decoder)
    sha1crypt.register_decoder(decoder)
    ldap.register_decoder_sha1(decoder)


def new_decoder() -> Decoder:
    """Get a registry with the recommended algorithms.

    Returns
    -------
    Decoder
        The registry.
    """
    decoder = Decoder()
    register_default_profile(decoder)
    return decoder


def new_decoder_all() -> Decoder:
    """Get a registry that also decodes legacy and insecure formats.

    Returns
    -------
    Decoder
        The registry.
    """
    decoder = new_decoder()
    register_legacy_profile(decoder)
    return decoder


def new_decoder_profile(profile: str) -> Decoder:
    """Get the registry of a named profile.

    Parameters
    ----------
    profile : str
        ``default`` or ``all``.

    Returns
    -------
    Decoder
        The registry.

    Raises
    ------
    ValueError
        If the profile is unknown.
    """
    if profile == PROFILE_DEFAULT:
        return new_decoder()
    if profile == PROFILE_ALL:
        return new_decoder_all()
    raise ValueError(f"Unknown decoder profile: {profile}")


_GLOBAL_DECODER: Optional[Decoder] = None
_GLOBAL_LOCK = threading.Lock()


def get_global_decoder() -> Decoder:
    """Get the process wide registry, built on first use.

    It only holds the recommended algorithms.

    Returns
    -------
    Decoder
        The registry.
    """
    global _GLOBAL_DECODER  # pylint: disable=global-statement
    if _GLOBAL_DECODER is None:
        with _GLOBAL_LOCK:
            if _GLOBAL_DECODER is None:
                LOG.debug("Building the global decoder")
                _GLOBAL_DECODER = new_decoder()
    return _GLOBAL_DECODER


def decode(encoded: str) -> Digest:
    """Decode an encoded digest with the global registry.

    Parameters
    ----------
    encoded : str
        The encoded digest.

    Returns
    -------
    Digest
        The digest.

    Raises
    ------
    EncodedDigestError
        If the digest cannot be decoded.
    """
    return get_global_decoder().decode(encoded)


def check_password_advanced(
    password: str, encoded: str, decoder: Optional[Decoder] = None
) -> bool:
    """Decode a digest and check a password against it.

    Parameters
    ----------
    password : str
        The password.
    encoded : str
        The encoded digest.
    decoder : Optional[Decoder], optional
        The registry, the global one if not given.

    Returns
    -------
    bool
        Whether the password matches.

    Raises
    ------
    PassDigestError
        If the digest cannot be decoded or the key derived.
    """
    registry = decoder or get_global_decoder()
    return registry.decode(encoded).match_advanced(password)


def check_password(
    password: str, encoded: str, decoder: Optional[Decoder] = None
) -> bool:
    """Decode a digest and check a password, errors counting as mismatch.

    Parameters
    ----------
    password : str
        The password.
    encoded : str
        The encoded digest.
    decoder : Optional[Decoder], optional
        The registry, the global one if not given.

    Returns
    -------
    bool
        Whether the password matches.
    """
    try:
        return check_password_advanced(password, encoded, decoder)
    except PassDigestError as error:
        LOG.debug("Password check failed: %s", error)
        return False


def needs_rehash(
    encoded: str, hasher: Any, decoder: Optional[Decoder] = None
) -> bool:
    """Check whether a stored digest should be replaced.

    Digests that cannot be decoded, or were made with another
    algorithm or other parameters than the hasher's, need a rehash.

    Parameters
    ----------
    encoded : str
        The encoded digest.
    hasher : Any
        A hasher with a ``needs_rehash(digest)`` method.
    decoder : Optional[Decoder], optional
        The registry, the global one if not given.

    Returns
    -------
    bool
        True if the digest should be replaced on next login.
    """
    registry = decoder or get_global_decoder()
    try:
        digest = registry.decode(encoded)
    except PassDigestError as error:
        LOG.debug("Digest cannot be decoded, needs rehash: %s", error)
        return True
    return bool(hasher.needs_rehash(digest))


__all__ = [
    "PROFILE_ALL",
    "PROFILE_DEFAULT",
    "Decoder",
    "check_password",
    "check_password_advanced",
    "decode",
    "get_global_decoder",
    "needs_rehash",
    "new_decoder",
    "new_decoder_all",
    "new_decoder_profile",
    "register_default_profile",
    "register_legacy_profile",
]
