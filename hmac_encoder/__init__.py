"""
HMAC Encoder Library

Computes keyed-hash message authentication codes over text values with
a choice of digest algorithm, returning standard base64 strings.

Example usage:
    from hmac_encoder import HMACAlgorithm, encode

    signature = encode("message", "your-secret-key", HMACAlgorithm.SHA256)
"""

from .algorithms import (
    HMACAlgorithm,
    primitive_id_of,
    digest_length_of
)
from .encoder import HMACEncoder, encode
from .exceptions import (
    HMACEncoderError,
    UnsupportedAlgorithmError,
    InputEncodingError,
    ConfigurationError,
    DigestLengthError
)
from .constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_CONFIG,
    TEXT_ENCODING
)

__version__ = "1.0.0"
__all__ = [
    "HMACAlgorithm",
    "HMACEncoder",
    "encode",
    "primitive_id_of",
    "digest_length_of",
    "HMACEncoderError",
    "UnsupportedAlgorithmError",
    "InputEncodingError",
    "ConfigurationError",
    "DigestLengthError",
    "DEFAULT_ALGORITHM",
    "DEFAULT_CONFIG",
    "TEXT_ENCODING"
]
