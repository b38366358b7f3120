#!/usr/bin/env python3
"""
Basic usage examples for HMAC encoder library.

This script demonstrates how to compute base64 HMAC values for API
request signing with each supported digest algorithm.
"""

import sys

from hmac_encoder import (
    HMACAlgorithm,
    HMACEncoder,
    HMACEncoderError,
    encode
)
from hmac_encoder.log import configure_logging


def main():
    """Run basic usage examples."""

    configure_logging(json_output=False, level="DEBUG")

    secret_key = "python-encoder-demo-secret"
    message = "The quick brown fox jumps over the lazy dog"

    print("=== HMAC Encoder Basic Usage Examples ===\n")

    # Example 1: One-off encoding with every algorithm
    print("1. Encoding with every algorithm...")
    print(f"   Message: {message}")
    print(f"   Secret key: {secret_key[:8]}...\n")
    for algorithm in HMACAlgorithm:
        signature = encode(message, secret_key, algorithm)
        print(f"   {algorithm.name:<7} ({algorithm.digest_length:>2} bytes): {signature}")
    print()

    try:
        # Example 2: Encoder bound to one key
        print("2. Creating HMAC encoder...")
        encoder = HMACEncoder(secret_key, default_algorithm="sha-512")
        print(f"   {encoder!r}")
        print(f"   Default: {encoder.encode(message)}")
        print(f"   SHA1:    {encoder.encode(message, HMACAlgorithm.SHA1)}")
        print()

        # Example 3: Invalid configuration
        print("3. Rejecting an unknown algorithm...")
        HMACEncoder(secret_key, default_algorithm="crc32")
    except HMACEncoderError as e:
        print(f"   ✓ Rejected: {e}")
        return 0

    print("   ✗ Unknown algorithm was accepted")
    return 1


if __name__ == "__main__":
    sys.exit(main())
