"""
Keysmith Generators
====================

Secret generators built on a single uniform index sampler: random
character passwords and Diceware-style passphrases.
"""

from keysmith.generators.alphabet import AlphabetBuilder
from keysmith.generators.passphrase import PassphraseGenerator
from keysmith.generators.password import PasswordGenerator
from keysmith.generators.random_source import RandomSource, SecureRandomSource

__all__ = [
    "AlphabetBuilder",
    "PassphraseGenerator",
    "PasswordGenerator",
    "RandomSource",
    "SecureRandomSource",
]
