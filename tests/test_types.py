"""
:Description: Tests the shared types and constants module.
"""

from __future__ import annotations

import pytest

from hash_format_bench.types import ALLOWED_CHARS, HASH_VALUE_LENGTHS, HashAlgorithm


def test_allowed_chars() -> None:
    """
    Ensures that exactly the hex digits of both letter cases are allowed, each once.
    """
    assert sorted(ALLOWED_CHARS) == sorted("0123456789ABCDEFabcdef")


@pytest.mark.parametrize("algo", list(HashAlgorithm))
def test_hash_algorithm_lengths(algo: HashAlgorithm) -> None:
    """
    Ensures that every algorithm has an expected length and a name `hashlib` recognizes.

    :param algo: Target hash algorithm.
    """
    assert algo.hash_value_length == HASH_VALUE_LENGTHS[algo]
    assert algo.hashlib_name == algo.value.lower()
