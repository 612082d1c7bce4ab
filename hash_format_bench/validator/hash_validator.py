"""
:Description: Provides a family of hash value format validators. Every validation method answers the same question
    ("is this string exactly N hex characters?") with a different algorithm, so that their performance can be compared.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Optional

from hash_format_bench.types import ALLOWED_CHARS, HashAlgorithm
from hash_format_bench.validator.exceptions import InvalidHashLengthError

# Signature shared by every validation strategy.
ValidationStrategy = Callable[[Optional[str]], bool]


@dataclass(frozen=True)
class ValidatorConfig:
    """
    Immutable validator settings for one hash algorithm.
    """

    hash_value_length: int

    def __post_init__(self) -> None:
        """
        Rejects lengths that no hash value can have.

        :raises InvalidHashLengthError: If the length is negative or not an integer.
        """
        # `bool` is an `int` subclass, but `True` is not a length.
        if (
            not isinstance(self.hash_value_length, int)
            or isinstance(self.hash_value_length, bool)
            or self.hash_value_length < 0
        ):
            raise InvalidHashLengthError(
                f"The hash value length must be a non-negative integer, got: {self.hash_value_length!r}"
            )

    @staticmethod
    def from_algorithm(hash_algo: HashAlgorithm) -> ValidatorConfig:
        """
        Constructs the validator settings that match a hash algorithm.

        :param hash_algo: Target hash algorithm.
        :returns: Settings for validating hex renderings of that algorithm's digests.
        """
        return ValidatorConfig(hash_algo.hash_value_length)


class HashValidator:
    """
    Validates the format of hexadecimal hash values of a fixed length.

    All `validate_with_*()` methods are semantically identical: they return `True` if and only if the input is a string
    of exactly `hash_value_length` characters drawn from `0-9`, `A-F` and `a-f`. They never raise and never mutate the
    input. The per-character range check is written out inside every loop so that no variant pays for an extra
    function call the others do not.
    """

    def __init__(self, hash_value_length: int) -> None:
        """
        Constructs a HashValidator. The expected length is fixed for the lifetime of the instance.

        :param hash_value_length: Number of hex characters a valid hash value has.
        :raises InvalidHashLengthError: If the length is negative or not an integer.
        """
        self._hash_value_length: Final[int] = ValidatorConfig(hash_value_length).hash_value_length
        self._validation_pattern: Final[re.Pattern[str]] = re.compile(
            r"\A[0-9A-Fa-f]{" + str(hash_value_length) + r"}\Z"
        )

    @staticmethod
    def from_config(config: ValidatorConfig) -> HashValidator:
        """
        Constructs a HashValidator from validator settings.

        :param config: Validator settings.
        :returns: A validator for the configured length.
        """
        return HashValidator(config.hash_value_length)

    @property
    def hash_value_length(self) -> int:
        """
        :returns: The number of hex characters a valid hash value has.
        """
        return self._hash_value_length

    @property
    def validation_pattern(self) -> re.Pattern[str]:
        """
        :returns: The compiled pattern used by `validate_with_regex()`.
        """
        return self._validation_pattern

    def strategies(self) -> list[tuple[str, ValidationStrategy]]:
        """
        Lists every validation strategy, in the order the benchmark harness measures them.

        :returns: Pairs of (display name, bound validation method).
        """
        return [
            ("ValidateWithRegex", self.validate_with_regex),
            ("ValidateWithLinq", self.validate_with_linq),
            ("ValidateWithForLoop1", self.validate_with_for_loop_1),
            ("ValidateWithForLoop2", self.validate_with_for_loop_2),
            ("ValidateWithBidirectionalForLoop", self.validate_with_bidirectional_for_loop),
            ("ValidateWithForeachLoop1", self.validate_with_foreach_loop_1),
            ("ValidateWithForeachLoop2", self.validate_with_foreach_loop_2),
        ]

    def validate_with_regex(self, hash_value: Optional[str]) -> bool:
        """
        Validates a hash value by matching it against a pattern compiled when the validator was constructed.

        :param hash_value: String to validate.
        :returns: True if the string is a valid hash value. False otherwise.
        """
        return isinstance(hash_value, str) and self._validation_pattern.match(hash_value) is not None

    def validate_with_linq(self, hash_value: Optional[str]) -> bool:
        """
        Validates a hash value by checking that every character is a member of the allowed character set.

        :param hash_value: String to validate.
        :returns: True if the string is a valid hash value. False otherwise.
        """
        return (
            isinstance(hash_value, str)
            and len(hash_value) == self._hash_value_length
            and all(c in ALLOWED_CHARS for c in hash_value)
        )

    def validate_with_for_loop_1(self, hash_value: Optional[str]) -> bool:
        """
        Validates a hash value by scanning character positions in order, indexing into the string.

        :param hash_value: String to validate.
        :returns: True if the string is a valid hash value. False otherwise.
        """
        if not isinstance(hash_value, str) or len(hash_value) != self._hash_value_length:
            return False

        for i in range(len(hash_value)):  # pylint: disable=consider-using-enumerate
            c = hash_value[i]
            if (c < "0" or c > "9") and (c < "A" or c > "F") and (c < "a" or c > "f"):
                return False

        return True

    def validate_with_for_loop_2(self, hash_value: Optional[str]) -> bool:
        """
        Validates a hash value by scanning character positions in order, indexing into a materialized character list.

        :param hash_value: String to validate.
        :returns: True if the string is a valid hash value. False otherwise.
        """
        if not isinstance(hash_value, str) or len(hash_value) != self._hash_value_length:
            return False

        char_arr: Final[list[str]] = list(hash_value)
        for i in range(len(char_arr)):  # pylint: disable=consider-using-enumerate
            c = char_arr[i]
            if (c < "0" or c > "9") and (c < "A" or c > "F") and (c < "a" or c > "f"):
                return False

        return True

    def validate_with_bidirectional_for_loop(self, hash_value: Optional[str]) -> bool:
        """
        Validates a hash value by walking the first half of the positions and checking the mirrored position from the
        back of the string in the same iteration.

        :param hash_value: String to validate.
        :returns: True if the string is a valid hash value. False otherwise.
        """
        if not isinstance(hash_value, str) or len(hash_value) != self._hash_value_length:
            return False

        char_arr: Final[list[str]] = list(hash_value)
        end: Final[int] = len(char_arr) // 2

        for i in range(end):
            c = char_arr[i]
            if (c < "0" or c > "9") and (c < "A" or c > "F") and (c < "a" or c > "f"):
                return False

            c = char_arr[-(i + 1)]
            if (c < "0" or c > "9") and (c < "A" or c > "F") and (c < "a" or c > "f"):
                return False

        # Odd lengths leave the middle character unvisited by the loop.
        if len(char_arr) % 2:
            c = char_arr[end]
            if (c < "0" or c > "9") and (c < "A" or c > "F") and (c < "a" or c > "f"):
                return False

        return True

    def validate_with_foreach_loop_1(self, hash_value: Optional[str]) -> bool:
        """
        Validates a hash value by iterating over the characters of the string.

        :param hash_value: String to validate.
        :returns: True if the string is a valid hash value. False otherwise.
        """
        if not isinstance(hash_value, str) or len(hash_value) != self._hash_value_length:
            return False

        for c in hash_value:
            if (c < "0" or c > "9") and (c < "A" or c > "F") and (c < "a" or c > "f"):
                return False

        return True

    def validate_with_foreach_loop_2(self, hash_value: Optional[str]) -> bool:
        """
        Validates a hash value by iterating over a materialized character list.

        :param hash_value: String to validate.
        :returns: True if the string is a valid hash value. False otherwise.
        """
        if not isinstance(hash_value, str) or len(hash_value) != self._hash_value_length:
            return False

        for c in list(hash_value):
            if (c < "0" or c > "9") and (c < "A" or c > "F") and (c < "a" or c > "f"):
                return False

        return True
