"""
:Description: Provides public types, type aliases, constants, and small classes used by all modules.
"""

from __future__ import annotations

import string
from enum import StrEnum
from typing import Final

# Every character a hex-encoded hash value may contain.
ALLOWED_CHARS: Final[str] = string.hexdigits

# Number of random hash strings generated per algorithm (each is stored in two letter cases).
DEFAULT_SAMPLE_SIZE: Final[int] = 10_000


class HashAlgorithm(StrEnum):
    """
    Hash algorithms that samples are generated for. Iteration order is the order in which algorithms are measured.
    """

    MD5 = "MD5"
    SHA1 = "SHA1"
    SHA256 = "SHA256"
    SHA384 = "SHA384"
    SHA512 = "SHA512"

    @property
    def hashlib_name(self) -> str:
        """
        :returns: The name `hashlib.new()` recognizes for this algorithm.
        """
        return self.value.lower()

    @property
    def hash_value_length(self) -> int:
        """
        :returns: Number of hex characters in a rendered digest of this algorithm.
        """
        return HASH_VALUE_LENGTHS[self]


# Length of a hex-rendered digest, per algorithm. Two hex characters represent one byte.
HASH_VALUE_LENGTHS: Final[dict[HashAlgorithm, int]] = {
    HashAlgorithm.MD5: 32,
    HashAlgorithm.SHA1: 40,
    HashAlgorithm.SHA256: 64,
    HashAlgorithm.SHA384: 96,
    HashAlgorithm.SHA512: 128,
}

# Maps each algorithm to its generated samples. See `hash_format_bench.generator.sample_generator`.
HashSampleSet = dict[HashAlgorithm, list[str]]
