"""
Password Generator
===================

Random passwords drawn character by character from the pool built by
:class:`~keysmith.generators.alphabet.AlphabetBuilder`. Every draw goes
through :meth:`RandomSource.next_index`, so characters are independent
and uniformly distributed (repeats allowed).
"""

from __future__ import annotations

from typing import Optional

from keysmith.analyzers.entropy import password_entropy
from keysmith.core.models import GeneratedResult, GenerationOptions, Strength
from keysmith.generators.alphabet import AlphabetBuilder
from keysmith.generators.random_source import RandomSource, SecureRandomSource


class PasswordGenerator:
    """Generates random passwords.

    Usage::

        generator = PasswordGenerator()
        result = generator.generate(GenerationOptions(length=20))
        print(result.password, f"{result.entropy:.1f} bits")

    Args:
        source: Random source; defaults to the OS CSPRNG.
        alphabet_builder: Pool builder; defaults to :class:`AlphabetBuilder`.
    """

    def __init__(
        self,
        source: Optional[RandomSource] = None,
        alphabet_builder: Optional[AlphabetBuilder] = None,
    ) -> None:
        self._source = source or SecureRandomSource()
        self._alphabet_builder = alphabet_builder or AlphabetBuilder()

    def generate(self, options: Optional[GenerationOptions] = None) -> GeneratedResult:
        """Generate one password.

        Raises:
            EmptyAlphabetError: If *options* select no characters.
            EntropyUnavailableError: If the random source fails.
        """
        options = options or GenerationOptions()
        alphabet = self._alphabet_builder.build(options)
        size = len(alphabet)

        chars = [alphabet[self._source.next_index(size)] for _ in range(options.length)]
        entropy = password_entropy(options.length, size)

        return GeneratedResult(
            password="".join(chars),
            entropy=entropy,
            strength=Strength.from_entropy(entropy),
            alphabet_size=size,
        )

    def generate_many(
        self,
        count: int,
        options: Optional[GenerationOptions] = None,
    ) -> list[GeneratedResult]:
        """Generate *count* independently drawn passwords.

        Raises:
            ValueError: If *count* is less than 1.
        """
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        return [self.generate(options) for _ in range(count)]
