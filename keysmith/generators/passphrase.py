"""
Passphrase Generator
=====================

Diceware-style passphrases: words drawn uniformly, with replacement,
from the fixed 384-word list, then capitalised, joined and optionally
suffixed with a random number in ``0..99``.

Entropy counts only the random choices (word indices and the number);
capitalisation and separators are fixed by the options and add nothing.

References:
    - Reinhold, A. G. (1995). The Diceware Passphrase Home Page.
    - Bonneau, J. & Schechter, S. (2014). Towards Reliable Storage of
      56-bit Secrets in Human Memory. USENIX Security.
"""

from __future__ import annotations

from typing import Optional

from keysmith.analyzers.entropy import passphrase_entropy
from keysmith.core.errors import InvalidWordCountError
from keysmith.core.models import (
    Capitalization,
    GeneratedResult,
    MemorableTier,
    PassphraseOptions,
    Separator,
    Strength,
)
from keysmith.generators.random_source import RandomSource, SecureRandomSource
from keysmith.generators.wordlist import WORDLIST, WORDLIST_SIZE

MIN_WORDS = 4
MAX_WORDS = 8

# Appended numbers are drawn from 0..99
NUMBER_SPACE = 100

_MEMORABLE_WORD_COUNTS: dict[MemorableTier, int] = {
    MemorableTier.SHORT: 4,
    MemorableTier.MEDIUM: 5,
    MemorableTier.LONG: 6,
}


def default_options() -> PassphraseOptions:
    """Recommended passphrase settings: 5 words, dash, first word capitalised, number."""
    return PassphraseOptions(
        word_count=5,
        separator=Separator.DASH,
        capitalize=Capitalization.FIRST,
        include_numbers=True,
    )


class PassphraseGenerator:
    """Generates word-based passphrases.

    Usage::

        generator = PassphraseGenerator()
        result = generator.generate(PassphraseOptions(word_count=6))
        memorable = generator.generate_memorable("medium")

    Args:
        source: Random source; defaults to the OS CSPRNG.
    """

    def __init__(self, source: Optional[RandomSource] = None) -> None:
        self._source = source or SecureRandomSource()

    def generate(self, options: Optional[PassphraseOptions] = None) -> GeneratedResult:
        """Generate one passphrase.

        Raises:
            InvalidWordCountError: If ``word_count`` is outside [4, 8].
            EntropyUnavailableError: If the random source fails.
        """
        options = options or default_options()
        if not MIN_WORDS <= options.word_count <= MAX_WORDS:
            raise InvalidWordCountError(options.word_count, MIN_WORDS, MAX_WORDS)

        words = [
            WORDLIST[self._source.next_index(WORDLIST_SIZE)]
            for _ in range(options.word_count)
        ]
        words = _capitalize(words, options.capitalize)
        phrase = options.separator.text.join(words)

        number_space = 1
        if options.include_numbers:
            phrase += str(self._source.next_index(NUMBER_SPACE))
            number_space = NUMBER_SPACE

        entropy = passphrase_entropy(options.word_count, WORDLIST_SIZE, number_space)
        return GeneratedResult(
            password=phrase,
            entropy=entropy,
            strength=Strength.from_entropy(entropy),
            word_space_size=WORDLIST_SIZE,
        )

    def generate_memorable(self, tier: MemorableTier | str) -> GeneratedResult:
        """Generate a passphrase from a fixed preset.

        ``short``/``medium``/``long`` select 4/5/6 words; every preset
        capitalises all words, uses no separator and appends a number.

        Raises:
            ValueError: If *tier* is not a known preset.
        """
        tier = MemorableTier(tier)
        return self.generate(
            PassphraseOptions(
                word_count=_MEMORABLE_WORD_COUNTS[tier],
                separator=Separator.NONE,
                capitalize=Capitalization.ALL,
                include_numbers=True,
            )
        )


def _capitalize(words: list[str], mode: Capitalization) -> list[str]:
    if mode is Capitalization.ALL:
        return [w[:1].upper() + w[1:] for w in words]
    if mode is Capitalization.FIRST and words:
        return [words[0][:1].upper() + words[0][1:], *words[1:]]
    return words
