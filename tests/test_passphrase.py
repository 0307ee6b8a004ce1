import math
import re

import pytest

from conftest import ScriptedRandomSource, index_bytes
from keysmith.core.errors import ErrorKind, InvalidWordCountError
from keysmith.core.models import (
    Capitalization,
    MemorableTier,
    PassphraseOptions,
    Separator,
    Strength,
)
from keysmith.generators.passphrase import PassphraseGenerator, default_options
from keysmith.generators.wordlist import WORDLIST, WORDLIST_SIZE


def plain(word_count=5, separator=Separator.DASH, capitalize=Capitalization.NONE,
          include_numbers=False):
    return PassphraseOptions(
        word_count=word_count,
        separator=separator,
        capitalize=capitalize,
        include_numbers=include_numbers,
    )


@pytest.fixture
def generator():
    return PassphraseGenerator()


def test_word_list_is_fixed_and_unique():
    assert WORDLIST_SIZE == 384
    assert len(set(WORDLIST)) == 384
    assert all(w.isalpha() and w.islower() and 4 <= len(w) <= 8 for w in WORDLIST)


def test_dash_separated_word_count(generator):
    words = generator.generate(plain(5)).password.split("-")
    assert len(words) == 5
    assert all(w in WORDLIST for w in words)


def test_space_separator(generator):
    assert len(generator.generate(plain(4, Separator.SPACE)).password.split(" ")) == 4


def test_symbol_separator(generator):
    assert len(generator.generate(plain(4, Separator.SYMBOL)).password.split("_")) == 4


def test_no_separator_concatenates_words(generator):
    password = generator.generate(plain(4, Separator.NONE)).password
    assert not re.search(r"[\s\-_]", password)
    assert len(password) >= 16


def test_capitalize_first_only(generator):
    words = generator.generate(plain(4, capitalize=Capitalization.FIRST)).password.split("-")
    assert words[0][0].isupper()
    assert all(w.islower() for w in words[1:])


def test_capitalize_all(generator):
    words = generator.generate(plain(4, capitalize=Capitalization.ALL)).password.split("-")
    assert all(w[0].isupper() and w[1:].islower() for w in words)


def test_numbers_are_appended(generator):
    password = generator.generate(plain(5, include_numbers=True)).password
    assert re.fullmatch(r"[a-z]+(-[a-z]+){4}\d{1,2}", password)


def test_scripted_source_gives_reproducible_passphrase():
    script = index_bytes(0, 1, 2, 3) + [42]
    generator = PassphraseGenerator(ScriptedRandomSource(script))
    options = plain(4, capitalize=Capitalization.FIRST, include_numbers=True)
    expected = "-".join([WORDLIST[0].capitalize(), *WORDLIST[1:4]]) + "42"
    assert generator.generate(options).password == expected


def test_entropy_counts_words_and_number(generator):
    assert generator.generate(plain(5)).entropy == pytest.approx(5 * math.log2(384))
    with_number = generator.generate(plain(5, include_numbers=True))
    assert with_number.entropy == pytest.approx(5 * math.log2(384) + math.log2(100))
    assert with_number.word_space_size == 384
    assert with_number.alphabet_size is None


def test_five_words_fall_between_forty_and_fifty_bits(generator):
    assert 40 < generator.generate(plain(5)).entropy < 50


def test_strength_grows_with_word_count(generator):
    assert generator.generate(plain(4)).strength in (Strength.WEAK, Strength.MEDIUM)
    assert generator.generate(plain(7)).strength in (Strength.STRONG, Strength.VERY_STRONG)


@pytest.mark.parametrize("count", [4, 5, 6, 7, 8])
def test_valid_word_counts(generator, count):
    assert len(generator.generate(plain(count)).password.split("-")) == count


@pytest.mark.parametrize("count", [0, 2, 3, 9, 20])
def test_invalid_word_counts(count):
    source = ScriptedRandomSource([])
    with pytest.raises(InvalidWordCountError, match="Word count must be between 4 and 8") as info:
        PassphraseGenerator(source).generate(plain(count))
    assert info.value.kind is ErrorKind.INVALID_WORD_COUNT
    assert info.value.word_count == count
    assert (info.value.minimum, info.value.maximum) == (4, 8)
    assert source.consumed == 0


def test_passphrases_are_unique(generator):
    phrases = {generator.generate(plain(5)).password for _ in range(50)}
    assert len(phrases) > 45


def test_default_options():
    options = default_options()
    assert options.word_count == 5
    assert options.separator is Separator.DASH
    assert options.capitalize is Capitalization.FIRST
    assert options.include_numbers is True


@pytest.mark.parametrize(
    ("tier", "words", "min_length"),
    [("short", 4, 17), ("medium", 5, 21), ("long", 6, 25)],
)
def test_memorable_tiers(generator, tier, words, min_length):
    password = generator.generate_memorable(tier).password
    assert len(password) >= min_length
    assert re.fullmatch(r"([A-Z][a-z]+){%d}\d{1,2}" % words, password)


def test_memorable_accepts_enum(generator):
    result = generator.generate_memorable(MemorableTier.LONG)
    assert result.entropy == pytest.approx(6 * math.log2(384) + math.log2(100))


def test_memorable_rejects_unknown_tier(generator):
    with pytest.raises(ValueError):
        generator.generate_memorable("huge")
