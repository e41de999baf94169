import random

import pytest

from simplebank.random_util import (
    ALPHABET,
    CURRENCIES,
    random_currency,
    random_int,
    random_money,
    random_owner,
    random_string,
)


def test_random_int_stays_within_bounds():
    values = [random_int(-3, 7) for _ in range(500)]
    assert all(-3 <= value <= 7 for value in values)


def test_random_int_reaches_both_ends():
    values = {random_int(0, 2) for _ in range(500)}
    assert values == {0, 1, 2}


def test_random_int_single_value_range():
    assert random_int(42, 42) == 42


def test_random_int_rejects_inverted_range():
    with pytest.raises(ValueError):
        random_int(5, 4)


@pytest.mark.parametrize("length", [0, 1, 6, 32])
def test_random_string_length_and_alphabet(length):
    text = random_string(length)
    assert len(text) == length
    assert set(text) <= set(ALPHABET)


def test_random_string_negative_length_is_empty():
    assert random_string(-2) == ""


def test_random_owner_has_four_letters():
    owner = random_owner()
    assert len(owner) == 4
    assert owner.isalpha() and owner.islower()


def test_random_money_range():
    amounts = [random_money() for _ in range(500)]
    assert all(0 <= amount <= 1000 for amount in amounts)


def test_random_currency_is_supported():
    assert random_currency() in ("EUR", "USD")


def test_random_currency_covers_all_currencies():
    random.seed(1234)
    seen = {random_currency() for _ in range(200)}
    assert seen == set(CURRENCIES)