"""
:Description: Measures how long every validation strategy takes to run over a full sample set, and formats the results.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final, Optional

from hash_format_bench.types import HashAlgorithm, HashSampleSet
from hash_format_bench.validator.hash_validator import HashValidator, ValidatorConfig

log: Final = logging.getLogger(__name__)

# Monotonic clock that returns an integer number of nanoseconds.
Clock = Callable[[], int]

# Width of the "<strategy name>:" column in a result line.
_NAME_COLUMN_WIDTH: Final[int] = 38
_RESULT_INDENT: Final[str] = " " * 4
_ALGORITHM_INDENT: Final[str] = " " * 2

_NS_PER_MS: Final[int] = 1_000_000


@dataclass(frozen=True)
class TimingResult:
    """
    Elapsed wall-clock time of one validation strategy over one sample set.
    """

    strategy_name: str
    elapsed_ns: int

    def __post_init__(self) -> None:
        """
        :raises ValueError: If the duration is negative.
        """
        if self.elapsed_ns < 0:
            raise ValueError(f"Elapsed time cannot be negative: {self.elapsed_ns}")


def format_time_span(elapsed_ns: int) -> str:
    """
    Renders a duration as `HH:MM:SS.mmm ; <ticks>`. Like a clock face, the hours field wraps after 23.

    :param elapsed_ns: Duration in nanoseconds.
    :returns: The formatted duration.
    """
    total_ms, _ = divmod(elapsed_ns, _NS_PER_MS)
    total_seconds, milliseconds = divmod(total_ms, 1_000)
    total_minutes, seconds = divmod(total_seconds, 60)
    total_hours, minutes = divmod(total_minutes, 60)
    return f"{total_hours % 24:02d}:{minutes:02d}:{seconds:02d}.{milliseconds:03d} ; {elapsed_ns}"


def format_timing_result(result: TimingResult) -> str:
    """
    Renders one result line of the benchmark report.

    :param result: Measurement to render.
    :returns: The indented, column-aligned result line.
    """
    label: Final[str] = f"{result.strategy_name}:"
    return f"{_RESULT_INDENT}{label.ljust(_NAME_COLUMN_WIDTH)}{format_time_span(result.elapsed_ns)}"


def measure(
    hashes: Sequence[str], validator: HashValidator, *, clock: Clock = time.perf_counter_ns
) -> list[TimingResult]:
    """
    Runs every strategy of a validator once over all hashes and times each full pass.

    The clock is read immediately before and after each pass. Validation results are discarded. There is no warm-up
    pass, so the first strategy absorbs any cold-start cost.

    :param hashes: Sample set to validate.
    :param validator: Validator whose strategies are measured.
    :param clock: (Optional) Monotonic nanosecond clock. Defaults to `time.perf_counter_ns()`.
    :returns: One result per strategy, in `HashValidator.strategies()` order.
    """
    results: list[TimingResult] = []
    for name, validate in validator.strategies():
        start = clock()
        for hash_value in hashes:
            validate(hash_value)
        stop = clock()
        results.append(TimingResult(name, stop - start))
    return results


def run_benchmark(
    samples: HashSampleSet, *, echo: Optional[Callable[[str], None]] = None
) -> dict[HashAlgorithm, list[TimingResult]]:
    """
    Measures every validation strategy against the samples of every hash algorithm, in `HashAlgorithm` order.

    :param samples: Generated hash strings, per algorithm.
    :param echo: (Optional) Receives each report line as soon as it is available.
    :returns: The measurements, per algorithm.
    """
    report: dict[HashAlgorithm, list[TimingResult]] = {}
    for algo in HashAlgorithm:
        if echo is not None:
            echo(f"{_ALGORITHM_INDENT}{algo}:")

        validator = HashValidator.from_config(ValidatorConfig.from_algorithm(algo))
        log.debug("Measuring %d %s hash strings.", len(samples[algo]), algo)
        results = measure(samples[algo], validator)
        if echo is not None:
            for result in results:
                echo(format_timing_result(result))
        report[algo] = results
    return report
