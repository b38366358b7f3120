"""
HMAC algorithm catalogue.

Maps every supported digest algorithm to the identifier passed to the
HMAC primitive and to the number of bytes that primitive produces.
Adding an algorithm means extending HMACAlgorithm and both tables below.
"""

import math
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from .constants import (
    MD5_DIGEST_LENGTH,
    SHA1_DIGEST_LENGTH,
    SHA224_DIGEST_LENGTH,
    SHA256_DIGEST_LENGTH,
    SHA384_DIGEST_LENGTH,
    SHA512_DIGEST_LENGTH
)
from .exceptions import UnsupportedAlgorithmError


class HMACAlgorithm(Enum):
    """Digest algorithms available for HMAC computation."""

    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA224 = "SHA224"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"

    @property
    def primitive_id(self) -> str:
        """hashlib name of the underlying digest."""
        return primitive_id_of(self)

    @property
    def digest_length(self) -> int:
        """Size in bytes of the raw HMAC output."""
        return digest_length_of(self)

    @property
    def encoded_length(self) -> int:
        """Size in characters of the padded base64 HMAC output."""
        return math.ceil(self.digest_length / 3) * 4

    @classmethod
    def from_name(cls, name: Union["HMACAlgorithm", str]) -> "HMACAlgorithm":
        """
        Resolve a caller-supplied algorithm name.

        Matching ignores case and '-' / '_' separators, so "sha-256",
        "SHA_256" and "sha256" all name SHA256.

        Args:
            name: Algorithm name, or an HMACAlgorithm returned unchanged

        Returns:
            Matching HMACAlgorithm member

        Raises:
            UnsupportedAlgorithmError: If no member matches the name
            TypeError: If name is neither a str nor an HMACAlgorithm
        """
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise TypeError(
                f"algorithm must be str or HMACAlgorithm, not {type(name).__name__}"
            )

        normalized = name.strip().upper().replace('-', '').replace('_', '')
        try:
            return cls[normalized]
        except KeyError:
            raise UnsupportedAlgorithmError(
                f"Unsupported HMAC algorithm: {name!r}"
            ) from None


PRIMITIVE_IDS: Mapping[HMACAlgorithm, str] = MappingProxyType({
    HMACAlgorithm.MD5: "md5",
    HMACAlgorithm.SHA1: "sha1",
    HMACAlgorithm.SHA224: "sha224",
    HMACAlgorithm.SHA256: "sha256",
    HMACAlgorithm.SHA384: "sha384",
    HMACAlgorithm.SHA512: "sha512",
})

DIGEST_LENGTHS: Mapping[HMACAlgorithm, int] = MappingProxyType({
    HMACAlgorithm.MD5: MD5_DIGEST_LENGTH,
    HMACAlgorithm.SHA1: SHA1_DIGEST_LENGTH,
    HMACAlgorithm.SHA224: SHA224_DIGEST_LENGTH,
    HMACAlgorithm.SHA256: SHA256_DIGEST_LENGTH,
    HMACAlgorithm.SHA384: SHA384_DIGEST_LENGTH,
    HMACAlgorithm.SHA512: SHA512_DIGEST_LENGTH,
})


def primitive_id_of(algorithm: HMACAlgorithm) -> str:
    """Return the digest identifier handed to the HMAC primitive."""
    return PRIMITIVE_IDS[algorithm]


def digest_length_of(algorithm: HMACAlgorithm) -> int:
    """Return the raw HMAC output size in bytes."""
    return DIGEST_LENGTHS[algorithm]
