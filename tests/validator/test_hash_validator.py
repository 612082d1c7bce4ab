"""
:Description: Tests the hash value format validator family.
"""

from __future__ import annotations

import hashlib
from typing import Final, Optional

import pytest

from hash_format_bench.types import HashAlgorithm
from hash_format_bench.validator.exceptions import InvalidHashLengthError
from hash_format_bench.validator.hash_validator import HashValidator, ValidatorConfig

# Empty-string MD5, in both letter cases.
_MD5_EMPTY_UPPER: Final[str] = "D41D8CD98F00B204E9800998ECF8427E"
_MD5_EMPTY_LOWER: Final[str] = "d41d8cd98f00b204e9800998ecf8427e"

# Inputs that every strategy must agree on, for a validator expecting 32 characters.
_EQUIVALENCE_INPUTS: Final[list[Optional[str]]] = [
    None,
    "",
    _MD5_EMPTY_UPPER,
    _MD5_EMPTY_LOWER,
    "d41D8cd98F00b204E9800998eCF8427e",
    _MD5_EMPTY_LOWER + "0",
    _MD5_EMPTY_LOWER[:-1],
    "g" + _MD5_EMPTY_LOWER[1:],
    _MD5_EMPTY_LOWER[:-1] + "G",
    _MD5_EMPTY_LOWER[:16] + "z" + _MD5_EMPTY_LOWER[17:],
    _MD5_EMPTY_LOWER[:15] + " " + _MD5_EMPTY_LOWER[16:],
    _MD5_EMPTY_LOWER[:10] + "١" + _MD5_EMPTY_LOWER[11:],
    "0x" + _MD5_EMPTY_LOWER[2:],
    "/" * 32,
    ":" * 32,
    "@" * 32,
    "`" * 32,
    "0" * 32,
    "F" * 32,
]


def _run_all_strategies(validator: HashValidator, s: Optional[str]) -> dict[str, bool]:
    """
    Runs every strategy of a validator against one input.

    :param validator: Validator under test.
    :param s: Input string.
    :returns: Result of every strategy, by strategy name.
    """
    return {name: validate(s) for name, validate in validator.strategies()}


def test_strategies_order() -> None:
    """
    Ensures that strategies are listed in the order the benchmark reports them.
    """
    assert [name for name, _ in HashValidator(32).strategies()] == [
        "ValidateWithRegex",
        "ValidateWithLinq",
        "ValidateWithForLoop1",
        "ValidateWithForLoop2",
        "ValidateWithBidirectionalForLoop",
        "ValidateWithForeachLoop1",
        "ValidateWithForeachLoop2",
    ]


@pytest.mark.parametrize("s", _EQUIVALENCE_INPUTS)
def test_strategies_agree(s: Optional[str]) -> None:
    """
    Validates that every strategy returns the same result for the same input.

    :param s: String to check against.
    """
    results: Final = _run_all_strategies(HashValidator(32), s)
    assert len(set(results.values())) == 1, results


@pytest.mark.parametrize(
    "s,expected",
    [
        # Valid strings
        (_MD5_EMPTY_UPPER, True),
        (_MD5_EMPTY_LOWER, True),
        ("d41D8cd98F00b204E9800998eCF8427e", True),
        # Too long
        (_MD5_EMPTY_LOWER + "e", False),
        # Too short
        (_MD5_EMPTY_LOWER[:-1], False),
        ("", False),
        # Invalid characters
        ("g" + _MD5_EMPTY_LOWER[1:], False),
        (_MD5_EMPTY_LOWER[:20] + "g" + _MD5_EMPTY_LOWER[21:], False),
        (_MD5_EMPTY_LOWER[:-1] + "g", False),
        ("00:42" + _MD5_EMPTY_LOWER[5:], False),
        # Missing
        (None, False),
    ],
)
def test_md5_scenarios(s: Optional[str], expected: bool) -> None:
    """
    Validates every strategy against known MD5-length inputs.

    :param s: String to check against.
    :param expected: Expected result of every strategy.
    """
    for name, result in _run_all_strategies(HashValidator(32), s).items():
        assert result == expected, name


@pytest.mark.parametrize("length", [0, 1, 16, 31, 33, 40, 64, 96, 128, 129])
def test_wrong_length_is_invalid(length: int) -> None:
    """
    Ensures that correctly-formed hex of any other length is rejected by an MD5 validator.

    :param length: Length of the hex string under test.
    """
    s: Final = ("0123456789abcdef" * 9)[:length]
    assert all(result is False for result in _run_all_strategies(HashValidator(32), s).values())


def test_non_string_input_is_invalid() -> None:
    """
    Ensures that strategies treat values that are not strings as missing, instead of raising.
    """
    validator: Final = HashValidator(32)
    for s in (b"d41d8cd98f00b204e9800998ecf8427e", 32, ["d"] * 32):
        assert not any(_run_all_strategies(validator, s).values())  # type: ignore[arg-type]


def test_zero_length_accepts_empty_string() -> None:
    """
    Validates the degenerate case of a validator that expects no characters at all.
    """
    validator: Final = HashValidator(0)
    assert all(_run_all_strategies(validator, "").values())
    assert not any(_run_all_strategies(validator, "0").values())
    assert not any(_run_all_strategies(validator, None).values())


@pytest.mark.parametrize("length", [1, 3, 5, 33])
def test_odd_lengths_check_middle_character(length: int) -> None:
    """
    Ensures that the middle character of an odd-length input is validated.

    :param length: Configured (odd) length.
    """
    validator: Final = HashValidator(length)
    valid: Final = "a" * length
    middle: Final = length // 2
    invalid: Final = valid[:middle] + "x" + valid[middle + 1 :]
    assert all(_run_all_strategies(validator, valid).values())
    assert not any(_run_all_strategies(validator, invalid).values())


@pytest.mark.parametrize("algo", list(HashAlgorithm))
def test_both_letter_cases_are_valid(algo: HashAlgorithm) -> None:
    """
    Validates that upper and lowercase renderings of a real digest are both accepted.

    :param algo: Target hash algorithm.
    """
    validator: Final = HashValidator.from_config(ValidatorConfig.from_algorithm(algo))
    lower: Final = hashlib.new(algo.hashlib_name, b"quick brown fox").hexdigest()
    for s in (lower, lower.upper()):
        assert all(_run_all_strategies(validator, s).values())


@pytest.mark.parametrize("s", _EQUIVALENCE_INPUTS)
def test_strategies_are_idempotent(s: Optional[str]) -> None:
    """
    Ensures that calling a strategy twice yields the same result.

    :param s: String to check against.
    """
    validator: Final = HashValidator(32)
    assert _run_all_strategies(validator, s) == _run_all_strategies(validator, s)


def test_pattern_is_compiled_per_instance() -> None:
    """
    Ensures that each validator owns a pattern that embeds its own length.
    """
    md5: Final = HashValidator(32)
    sha1: Final = HashValidator(40)
    assert md5.validation_pattern is not sha1.validation_pattern
    assert "{32}" in md5.validation_pattern.pattern
    assert "{40}" in sha1.validation_pattern.pattern
    assert md5.hash_value_length == 32


@pytest.mark.parametrize(
    "algo,expected",
    [
        (HashAlgorithm.MD5, 32),
        (HashAlgorithm.SHA1, 40),
        (HashAlgorithm.SHA256, 64),
        (HashAlgorithm.SHA384, 96),
        (HashAlgorithm.SHA512, 128),
    ],
)
def test_validator_config_from_algorithm(algo: HashAlgorithm, expected: int) -> None:
    """
    Validates the expected lengths of every supported algorithm.

    :param algo: Target hash algorithm.
    :param expected: Expected hex length.
    """
    assert ValidatorConfig.from_algorithm(algo).hash_value_length == expected


@pytest.mark.parametrize("length", [-1, -32, 32.0, "32", True])
def test_invalid_length_raises(length: object) -> None:
    """
    Ensures that a validator cannot be constructed with a length no hash value can have.

    :param length: Invalid length.
    """
    with pytest.raises(InvalidHashLengthError):
        HashValidator(length)  # type: ignore[arg-type]
    # Also usable as a standard `ValueError`.
    with pytest.raises(ValueError):
        ValidatorConfig(length)  # type: ignore[arg-type]
