"""
Entropy Calculator
===================

Combinatorial entropy of generated secrets and of arbitrary passwords.

For a secret drawn uniformly from ``N`` equally likely outcomes the
entropy is ``log2(N)`` bits:

* random password: ``N = alphabet_size ** length``
* passphrase:      ``N = word_list_size ** word_count * number_space``

References:
    - Shannon, C. E. (1948). A Mathematical Theory of Communication.
    - NIST SP 800-63B (2017), Appendix A -- Strength of Memorized Secrets.
"""

from __future__ import annotations

import math
import string
from typing import NamedTuple

# Class sizes used to estimate the pool an arbitrary password was drawn from
LOWERCASE_POOL = 26
UPPERCASE_POOL = 26
DIGIT_POOL = 10
SYMBOL_POOL = len(string.punctuation)


def password_entropy(length: int, alphabet_size: int) -> float:
    """Entropy in bits of *length* uniform draws from *alphabet_size* symbols.

    Returns 0.0 for a non-positive length or an alphabet of at most one
    symbol.
    """
    if length <= 0 or alphabet_size <= 1:
        return 0.0
    return length * math.log2(alphabet_size)


def passphrase_entropy(
    word_count: int,
    word_list_size: int,
    number_space: int = 1,
) -> float:
    """Entropy in bits of a passphrase with an optional appended number.

    Args:
        word_count: Number of words drawn with replacement.
        word_list_size: Size of the word list.
        number_space: Count of equally likely appended numbers (1 if none).
    """
    words = password_entropy(word_count, word_list_size)
    numbers = math.log2(number_space) if number_space > 1 else 0.0
    return words + numbers


class CharacterClasses(NamedTuple):
    """Which character classes occur in a password.

    Letters and digits are the ASCII ones; every other character,
    accented letters included, is a symbol.
    """

    lower: bool
    upper: bool
    digit: bool
    symbol: bool


def character_classes(password: str) -> CharacterClasses:
    """Classify the characters of *password* into the four pool classes."""
    lower = upper = digit = symbol = False
    for c in password:
        if c in string.ascii_lowercase:
            lower = True
        elif c in string.ascii_uppercase:
            upper = True
        elif c in string.digits:
            digit = True
        else:
            symbol = True
    return CharacterClasses(lower, upper, digit, symbol)


def charset_pool_size(password: str) -> int:
    """Sum of the class sizes present in *password*.

    Lowercase and uppercase letters count 26 each, digits 10, and any
    other character counts toward the 32-symbol punctuation class.
    """
    classes = character_classes(password)
    pool = 0
    if classes.lower:
        pool += LOWERCASE_POOL
    if classes.upper:
        pool += UPPERCASE_POOL
    if classes.digit:
        pool += DIGIT_POOL
    if classes.symbol:
        pool += SYMBOL_POOL
    return pool
