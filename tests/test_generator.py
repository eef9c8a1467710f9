# Tests for the password generator
#
# Coverage:
#   - output length and alphabet for every single class and combinations
#   - boundary lengths 4 and 128, rejection of 3 / 129 / non-integers
#   - rejection of a policy with no character class
#   - no fixed seed: repeated calls differ

import string

import pytest

from api.errors import InvalidPolicy
from api.generator import (
    CHARSETS,
    DEFAULT_LENGTH,
    MAX_LENGTH,
    MIN_LENGTH,
    SYMBOLS,
    PasswordPolicy,
    build_alphabet,
    generate,
)

ONLY = {
    "include_uppercase": string.ascii_uppercase,
    "include_lowercase": string.ascii_lowercase,
    "include_digits": string.digits,
    "include_symbols": SYMBOLS,
}


def _policy(length=16, **overrides):
    flags = {flag: False for flag, _ in CHARSETS}
    flags.update(overrides)
    return PasswordPolicy(length=length, **flags)


# ── Alphabet ────────────────────────────────────────────────────────


def test_alphabet_follows_fixed_class_order():
    policy = PasswordPolicy()
    assert build_alphabet(policy) == (
        string.ascii_uppercase + string.ascii_lowercase + string.digits + SYMBOLS
    )


def test_alphabet_order_ignores_flag_order():
    policy = _policy(include_symbols=True, include_uppercase=True)
    assert build_alphabet(policy) == string.ascii_uppercase + SYMBOLS


def test_symbol_set():
    assert SYMBOLS == "!@#$%^&*()_+~`|}{[]:;?><,./-="


def test_default_policy():
    policy = PasswordPolicy()
    assert policy.length == DEFAULT_LENGTH
    assert all(getattr(policy, flag) for flag, _ in CHARSETS)


# ── Generation ──────────────────────────────────────────────────────


@pytest.mark.parametrize("flag", sorted(ONLY))
def test_single_class_uses_only_that_class(flag):
    password = generate(_policy(length=64, **{flag: True}))
    assert len(password) == 64
    assert set(password) <= set(ONLY[flag])


@pytest.mark.parametrize("length", [MIN_LENGTH, 5, 12, 64, MAX_LENGTH])
def test_length_is_exact(length):
    assert len(generate(PasswordPolicy(length=length))) == length


def test_alphanumeric_scenario():
    policy = PasswordPolicy(
        length=12,
        include_uppercase=True,
        include_lowercase=True,
        include_digits=True,
        include_symbols=False,
    )
    password = generate(policy)
    assert len(password) == 12
    assert set(password) <= set(string.ascii_letters + string.digits)


def test_all_classes_stay_within_union():
    alphabet = set(build_alphabet(PasswordPolicy()))
    for _ in range(20):
        assert set(generate(PasswordPolicy(length=MAX_LENGTH))) <= alphabet


def test_two_calls_differ():
    policy = PasswordPolicy(length=32)
    assert generate(policy) != generate(policy)


def test_many_calls_are_distinct():
    policy = PasswordPolicy(length=16)
    assert len({generate(policy) for _ in range(50)}) == 50


# ── Invalid policies ────────────────────────────────────────────────


@pytest.mark.parametrize("length", [MIN_LENGTH - 1, MAX_LENGTH + 1, 0, -4])
def test_length_out_of_range_fails(length):
    with pytest.raises(InvalidPolicy):
        generate(PasswordPolicy(length=length))


@pytest.mark.parametrize("length", [True, 12.0, "12", None])
def test_non_integer_length_fails(length):
    with pytest.raises(InvalidPolicy):
        generate(PasswordPolicy(length=length))


def test_no_class_selected_fails():
    with pytest.raises(InvalidPolicy, match="character class"):
        generate(_policy(length=16))


def test_invalid_policy_is_a_value_error():
    with pytest.raises(ValueError):
        _policy(length=16).validate()
