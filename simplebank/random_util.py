"""Random values for accounts, owners and amounts."""

import random
import string

ALPHABET = string.ascii_lowercase
CURRENCIES = ("EUR", "USD")


def random_int(min_value, max_value):
    """Return a random integer between min_value and max_value, both included."""
    if max_value < min_value:
        raise ValueError(
            f"max_value ({max_value}) must not be less than min_value ({min_value})"
        )
    return random.randint(min_value, max_value)


def random_string(n):
    """Return a random string of n lowercase letters."""
    return "".join(random.choice(ALPHABET) for _ in range(n))


def random_owner():
    """Return a random owner name."""
    return random_string(4)


def random_money():
    """Return a random amount of money between 0 and 1000."""
    return random_int(0, 1000)


def random_currency():
    """Return a random supported currency code."""
    return random.choice(CURRENCIES)