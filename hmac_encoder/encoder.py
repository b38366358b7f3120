"""
HMAC computation with base64 output.

This module computes HMAC digests over text or bytes and returns them
as standard padded base64 strings (RFC 4648), for callers that attach
the result to API requests or credentials.
"""

import base64
import hmac
from typing import Optional, Union

from .algorithms import HMACAlgorithm, digest_length_of, primitive_id_of
from .constants import DEFAULT_CONFIG, TEXT_ENCODING
from .exceptions import (
    ConfigurationError,
    DigestLengthError,
    InputEncodingError,
    UnsupportedAlgorithmError
)
from .log import get_logger

logger = get_logger(__name__)

TextOrBytes = Union[str, bytes, bytearray]
AlgorithmLike = Union[HMACAlgorithm, str]


def _to_bytes(value: TextOrBytes, name: str) -> bytes:
    """Encode text to UTF-8; pass bytes through unchanged."""
    if isinstance(value, str):
        try:
            return value.encode(TEXT_ENCODING)
        except UnicodeEncodeError as e:
            raise InputEncodingError(
                f"{name} is not representable as {TEXT_ENCODING}: {e.reason}"
            ) from e
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise TypeError(
        f"{name} must be str, bytes or bytearray, not {type(value).__name__}"
    )


def encode(message: TextOrBytes, key: TextOrBytes, algorithm: AlgorithmLike) -> str:
    """
    Compute base64(HMAC(algorithm, key, message)).

    Args:
        message: Value being authenticated (str is encoded as UTF-8)
        key: Shared secret (str is encoded as UTF-8); any length, may be empty
        algorithm: HMACAlgorithm member or a name accepted by HMACAlgorithm.from_name

    Returns:
        Padded base64 string of the raw HMAC digest

    Raises:
        InputEncodingError: If message or key text cannot be encoded as UTF-8
        UnsupportedAlgorithmError: If algorithm names no catalogue entry
        TypeError: If message or key has an unsupported type
    """
    algorithm = HMACAlgorithm.from_name(algorithm)
    message_bytes = _to_bytes(message, "message")
    key_bytes = _to_bytes(key, "key")

    digest = hmac.digest(key_bytes, message_bytes, primitive_id_of(algorithm))
    if len(digest) != digest_length_of(algorithm):
        raise DigestLengthError(
            f"{algorithm.name} produced {len(digest)} bytes, "
            f"expected {digest_length_of(algorithm)}"
        )

    return base64.b64encode(digest).decode('ascii')


class HMACEncoder:
    """
    HMAC encoder bound to a single shared secret.

    Intended for API clients and credential signers that sign many
    values with the same key.
    """

    def __init__(self, secret_key: TextOrBytes, **config):
        """
        Initialize HMAC encoder.

        Args:
            secret_key: HMAC secret key (must match the verifying party)
            **config: Configuration options (default_algorithm)
        """
        # Snapshot mutable buffers so later caller writes cannot change signatures
        if isinstance(secret_key, bytearray):
            secret_key = bytes(secret_key)
        self.secret_key = secret_key

        unknown = set(config) - set(DEFAULT_CONFIG)
        if unknown:
            logger.warning("hmac_encoder.config_rejected", unknown_keys=sorted(unknown))
            raise ConfigurationError(
                f"Unknown configuration options: {', '.join(sorted(unknown))}"
            )

        # Merge default config with user overrides
        self.config = {**DEFAULT_CONFIG, **config}

        self._validate_config()

        logger.debug(
            "hmac_encoder.configured",
            default_algorithm=self.default_algorithm.name,
            digest_length=self.default_algorithm.digest_length,
        )

    def _validate_config(self):
        """Validate encoder configuration."""
        if not isinstance(self.secret_key, (str, bytes, bytearray)):
            logger.warning("hmac_encoder.config_rejected", reason="secret_key type")
            raise ConfigurationError(
                f"secret_key must be str or bytes, not {type(self.secret_key).__name__}"
            )

        if not self.secret_key:
            logger.warning("hmac_encoder.config_rejected", reason="empty secret_key")
            raise ConfigurationError("secret_key cannot be empty")

        try:
            self.default_algorithm = HMACAlgorithm.from_name(
                self.config['default_algorithm']
            )
        except (UnsupportedAlgorithmError, TypeError) as e:
            logger.warning("hmac_encoder.config_rejected", reason=str(e))
            raise ConfigurationError(f"Invalid default_algorithm: {e}") from e

    def encode(self, message: TextOrBytes, algorithm: Optional[AlgorithmLike] = None) -> str:
        """
        Encode message with the bound secret key.

        Args:
            message: Value being authenticated
            algorithm: Algorithm override; the configured default when None

        Returns:
            Padded base64 HMAC string
        """
        if algorithm is None:
            algorithm = self.default_algorithm
        return encode(message, self.secret_key, algorithm)

    def __repr__(self):
        # Never render the secret key
        return f"HMACEncoder(default_algorithm={self.default_algorithm.name})"
