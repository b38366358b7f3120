"""
Unit tests for the HMAC algorithm catalogue.
"""

import hashlib

import pytest

from hmac_encoder import (
    HMACAlgorithm,
    UnsupportedAlgorithmError,
    digest_length_of,
    primitive_id_of
)
from hmac_encoder.algorithms import DIGEST_LENGTHS, PRIMITIVE_IDS


class TestHMACAlgorithm:
    """Test algorithm catalogue lookups."""

    @pytest.mark.parametrize("algorithm,expected", [
        (HMACAlgorithm.MD5, 16),
        (HMACAlgorithm.SHA1, 20),
        (HMACAlgorithm.SHA224, 28),
        (HMACAlgorithm.SHA256, 32),
        (HMACAlgorithm.SHA384, 48),
        (HMACAlgorithm.SHA512, 64),
    ])
    def test_digest_length(self, algorithm, expected):
        """Test published digest sizes."""
        assert digest_length_of(algorithm) == expected
        assert algorithm.digest_length == expected

    @pytest.mark.parametrize("algorithm,expected", [
        (HMACAlgorithm.MD5, "md5"),
        (HMACAlgorithm.SHA1, "sha1"),
        (HMACAlgorithm.SHA224, "sha224"),
        (HMACAlgorithm.SHA256, "sha256"),
        (HMACAlgorithm.SHA384, "sha384"),
        (HMACAlgorithm.SHA512, "sha512"),
    ])
    def test_primitive_id(self, algorithm, expected):
        """Test primitive identifiers."""
        assert primitive_id_of(algorithm) == expected
        assert algorithm.primitive_id == expected

    def test_closed_set(self):
        """Test the catalogue holds exactly six algorithms."""
        assert [a.name for a in HMACAlgorithm] == [
            "MD5", "SHA1", "SHA224", "SHA256", "SHA384", "SHA512"
        ]

    def test_tables_in_lock_step(self):
        """Test every algorithm has both mappings and nothing else does."""
        members = set(HMACAlgorithm)

        assert set(PRIMITIVE_IDS) == members
        assert set(DIGEST_LENGTHS) == members
        for algorithm in HMACAlgorithm:
            assert digest_length_of(algorithm) > 0
            assert primitive_id_of(algorithm)

    def test_lengths_match_primitive(self):
        """Test catalogue lengths agree with what hashlib produces."""
        for algorithm in HMACAlgorithm:
            digest = hashlib.new(primitive_id_of(algorithm))
            assert digest.digest_size == digest_length_of(algorithm)

    def test_tables_read_only(self):
        """Test catalogue tables cannot be mutated."""
        with pytest.raises(TypeError):
            DIGEST_LENGTHS[HMACAlgorithm.MD5] = 32

        with pytest.raises(TypeError):
            PRIMITIVE_IDS[HMACAlgorithm.MD5] = "sha256"

    @pytest.mark.parametrize("algorithm,expected", [
        (HMACAlgorithm.MD5, 24),
        (HMACAlgorithm.SHA1, 28),
        (HMACAlgorithm.SHA224, 40),
        (HMACAlgorithm.SHA256, 44),
        (HMACAlgorithm.SHA384, 64),
        (HMACAlgorithm.SHA512, 88),
    ])
    def test_encoded_length(self, algorithm, expected):
        """Test base64 output length per algorithm."""
        assert algorithm.encoded_length == expected


class TestFromName:
    """Test algorithm name resolution."""

    @pytest.mark.parametrize("name", ["SHA256", "sha256", "sha-256", "SHA_256", " Sha256 "])
    def test_accepted_spellings(self, name):
        """Test case and separator insensitive names."""
        assert HMACAlgorithm.from_name(name) is HMACAlgorithm.SHA256

    def test_member_passthrough(self):
        """Test members are returned unchanged."""
        for algorithm in HMACAlgorithm:
            assert HMACAlgorithm.from_name(algorithm) is algorithm

    @pytest.mark.parametrize("name", ["", "sha3_256", "blake2b", "hmac-sha256", "RIPEMD160"])
    def test_unsupported_name(self, name):
        """Test unknown names are rejected."""
        with pytest.raises(UnsupportedAlgorithmError):
            HMACAlgorithm.from_name(name)

    def test_unsupported_name_is_value_error(self):
        """Test unsupported names can be caught as ValueError."""
        with pytest.raises(ValueError):
            HMACAlgorithm.from_name("whirlpool")

    def test_wrong_type(self):
        """Test non-string names are rejected."""
        with pytest.raises(TypeError):
            HMACAlgorithm.from_name(256)
