"""
:Description: Provides hashing utilities.
"""

from __future__ import annotations

import hashlib

from hash_format_bench.types import HashAlgorithm


def hash_bytes(data: bytes, hash_algo: HashAlgorithm) -> bytes:
    """
    Hashes an in-memory buffer with the given algorithm and returns the raw digest.

    :param data: Target buffer.
    :param hash_algo: Hash algorithm to digest the buffer with.
    :returns: The digest of the buffer, as bytes. The size is fixed per algorithm.
    """
    return hashlib.new(hash_algo.hashlib_name, data).digest()


def bytes_to_hex_str(digest: bytes) -> str:
    """
    Renders a digest as an uppercase hexadecimal string. Every byte becomes exactly two zero-padded hex characters, in
    the original byte order and without separators (e.g. `b"\\x0a\\xff"` becomes `"0AFF"`).

    :param digest: Bytes to render.
    :returns: The uppercase hexadecimal rendering of the bytes.
    """
    return digest.hex().upper()


def hash_bytes_to_hex_str(data: bytes, hash_algo: HashAlgorithm) -> str:
    """
    Convenience function that hashes a buffer and renders the digest as an uppercase hexadecimal string.

    :param data: Target buffer.
    :param hash_algo: Hash algorithm to digest the buffer with.
    :returns: The uppercase hexadecimal digest of the buffer.
    """
    return bytes_to_hex_str(hash_bytes(data, hash_algo))
