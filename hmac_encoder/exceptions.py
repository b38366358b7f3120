"""
Custom exceptions for HMAC encoder library.
"""


class HMACEncoderError(Exception):
    """Base exception for HMAC encoder errors."""
    pass


class UnsupportedAlgorithmError(HMACEncoderError, ValueError):
    """Raised when an algorithm name does not match any catalogue entry."""
    pass


class InputEncodingError(HMACEncoderError, ValueError):
    """Raised when message or key text cannot be encoded as UTF-8."""
    pass


class ConfigurationError(HMACEncoderError):
    """Raised when encoder configuration is invalid."""
    pass


class DigestLengthError(HMACEncoderError):
    """Raised when the HMAC primitive output disagrees with the catalogue."""
    pass
