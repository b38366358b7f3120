"""
Constants for HMAC encoder library.
"""

# Text encoding applied to str messages and keys
TEXT_ENCODING = "utf-8"

# Default algorithm name (resolved through HMACAlgorithm.from_name)
DEFAULT_ALGORITHM = "SHA256"

# Default configuration values for HMACEncoder
DEFAULT_CONFIG = {
    'default_algorithm': DEFAULT_ALGORITHM,
}

# Digest sizes in bytes (RFC 1321, FIPS 180-4)
MD5_DIGEST_LENGTH = 16
SHA1_DIGEST_LENGTH = 20
SHA224_DIGEST_LENGTH = 28
SHA256_DIGEST_LENGTH = 32
SHA384_DIGEST_LENGTH = 48
SHA512_DIGEST_LENGTH = 64
