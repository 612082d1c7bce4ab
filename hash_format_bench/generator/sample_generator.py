"""
:Description: Generates the population of hash value strings that the validators are benchmarked against.
"""

from __future__ import annotations

import logging
import secrets
from collections.abc import Callable
from typing import Final, Optional

from hash_format_bench.generator.exceptions import InvalidSampleSizeError
from hash_format_bench.types import HashAlgorithm, HashSampleSet
from hash_format_bench.utils.cryptography.hashing import hash_bytes_to_hex_str

log: Final = logging.getLogger(__name__)

# Size of the random buffer that is hashed on every iteration.
RANDOM_BUFFER_SIZE: Final[int] = 512
# Approximate number of times the progress callback fires over a full generation run.
PROGRESS_STEPS: Final[int] = 10


def get_progress_divisor(sample_size: int) -> int:
    """
    Calculates how many iterations pass between two progress notifications.

    :param sample_size: Number of iterations.
    :returns: The iteration interval between progress notifications.
    """
    return 1 if sample_size < PROGRESS_STEPS else sample_size // PROGRESS_STEPS


def generate_hash_samples(
    sample_size: int,
    *,
    fill_buffer: Callable[[int], bytes] = secrets.token_bytes,
    on_progress: Optional[Callable[[], None]] = None,
) -> HashSampleSet:
    """
    Generates `2 * sample_size` hex hash strings for every hash algorithm.

    Index `i` holds the uppercase rendering of a digest and index `i + sample_size` holds its lowercase form, so that
    both letter cases are represented in the benchmark population. On each iteration, one random buffer is hashed by
    all algorithms. It is not re-drawn per algorithm, which keeps RNG overhead low relative to the measured work.

    :param sample_size: Number of random buffers to draw.
    :param fill_buffer: (Optional) Returns the requested number of random bytes. Defaults to a cryptographically secure
        source.
    :param on_progress: (Optional) Called roughly `PROGRESS_STEPS` times over the run.
    :raises InvalidSampleSizeError: If the sample size is not a positive integer.
    :returns: Generated hash strings, per algorithm.
    """
    if not isinstance(sample_size, int) or isinstance(sample_size, bool) or sample_size <= 0:
        raise InvalidSampleSizeError(f"Sample-Size has to be a positive integer, got: {sample_size!r}")

    log.debug("Generating %d random buffers of %d bytes.", sample_size, RANDOM_BUFFER_SIZE)

    samples: Final[HashSampleSet] = {algo: [""] * (sample_size * 2) for algo in HashAlgorithm}
    divisor: Final[int] = get_progress_divisor(sample_size)

    for i in range(sample_size):
        if on_progress is not None and i % divisor == 0:
            on_progress()

        data_buffer = fill_buffer(RANDOM_BUFFER_SIZE)
        for algo in HashAlgorithm:
            hash_value = hash_bytes_to_hex_str(data_buffer, algo)
            samples[algo][i] = hash_value
            samples[algo][i + sample_size] = hash_value.lower()

    log.debug("Generated %d hash strings per algorithm.", sample_size * 2)
    return samples
