import math

import pytest

from keysmith.analyzers.entropy import (
    character_classes,
    charset_pool_size,
    passphrase_entropy,
    password_entropy,
)


def test_password_entropy():
    assert password_entropy(16, 88) == pytest.approx(16 * math.log2(88))
    assert password_entropy(10, 2) == pytest.approx(10.0)


@pytest.mark.parametrize(("length", "size"), [(0, 94), (-1, 94), (8, 1), (8, 0)])
def test_degenerate_password_entropy_is_zero(length, size):
    assert password_entropy(length, size) == 0.0


def test_passphrase_entropy_with_and_without_number():
    assert passphrase_entropy(6, 384) == pytest.approx(6 * math.log2(384))
    assert passphrase_entropy(6, 384, 100) == pytest.approx(
        6 * math.log2(384) + math.log2(100)
    )


@pytest.mark.parametrize(
    ("password", "pool"),
    [
        ("", 0),
        ("abc", 26),
        ("ABC", 26),
        ("123", 10),
        ("!!!", 32),
        ("aB", 52),
        ("aB3", 62),
        ("aB3$", 94),
        ("pass word", 58),
    ],
)
def test_charset_pool_size(password, pool):
    assert charset_pool_size(password) == pool


def test_diverse_password_has_more_entropy_than_repeated():
    diverse = password_entropy(8, charset_pool_size("aB3$fG9@"))
    simple = password_entropy(8, charset_pool_size("aaaaaaaa"))
    assert diverse > simple


def test_non_ascii_letters_count_as_symbols():
    classes = character_classes("ÄÖÜäöü12")
    assert (classes.lower, classes.upper, classes.digit, classes.symbol) == (
        False, False, True, True
    )
    assert charset_pool_size("ÄÖÜäöü12") == 42
