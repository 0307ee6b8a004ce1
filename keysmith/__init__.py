"""
Keysmith -- Password & Passphrase Generator / Strength Analyzer
================================================================

Generates random passwords and Diceware-style passphrases from the
operating system's CSPRNG with unbiased index sampling, and estimates
the strength of arbitrary passwords from entropy and common patterns.

The module-level functions delegate to a lazily created default
:class:`~keysmith.core.engine.KeysmithEngine`::

    import asyncio
    import keysmith

    keysmith.generate_password(keysmith.GenerationOptions(length=24))
    keysmith.generate_memorable_passphrase("medium")
    asyncio.run(keysmith.analyze_password_strength("Tr0ub4dor&3"))

Modules:
    - keysmith.core: Engine, data models and errors
    - keysmith.generators: Random source, alphabet, password and passphrase generators
    - keysmith.analyzers: Entropy, pattern detection, scoring, quick check, self-test
    - keysmith.output: Rich console output
    - keysmith.cli: Click-based command-line interface

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Reinhold, A. G. (1995). The Diceware Passphrase Home Page.
"""

from __future__ import annotations

from typing import Optional

from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import (
    CorpusUnavailableError,
    EmptyAlphabetError,
    EntropyUnavailableError,
    ErrorKind,
    InvalidWordCountError,
    KeysmithError,
)
from keysmith.core.models import (
    Capitalization,
    GeneratedResult,
    GenerationOptions,
    MemorableTier,
    MinimumRequirementsResult,
    PassphraseOptions,
    QuickCheckResult,
    Separator,
    Strength,
    StrengthFeedback,
    StrengthResult,
)
from keysmith.generators.passphrase import default_options

__version__ = "1.0.0"
__tool_name__ = "keysmith"

__all__ = [
    "KeysmithEngine",
    "Capitalization",
    "CorpusUnavailableError",
    "EmptyAlphabetError",
    "EntropyUnavailableError",
    "ErrorKind",
    "GeneratedResult",
    "GenerationOptions",
    "InvalidWordCountError",
    "KeysmithError",
    "MemorableTier",
    "MinimumRequirementsResult",
    "PassphraseOptions",
    "QuickCheckResult",
    "Separator",
    "Strength",
    "StrengthFeedback",
    "StrengthResult",
    "analyze_password_strength",
    "generate_memorable_passphrase",
    "generate_passphrase",
    "generate_password",
    "generate_passwords",
    "get_default_passphrase_options",
    "meets_minimum_requirements",
    "quick_strength_check",
]

_default_engine: Optional[KeysmithEngine] = None


def _engine() -> KeysmithEngine:
    global _default_engine
    if _default_engine is None:
        _default_engine = KeysmithEngine()
    return _default_engine


# ===================================================================== #
#  Generation
# ===================================================================== #


def generate_password(options: Optional[GenerationOptions] = None) -> GeneratedResult:
    """Generate a random password (16 characters, all classes by default)."""
    return _engine().generate_password(options)


def generate_passwords(
    count: int, options: Optional[GenerationOptions] = None
) -> list[GeneratedResult]:
    """Generate *count* independent random passwords."""
    return _engine().generate_passwords(count, options)


def generate_passphrase(options: Optional[PassphraseOptions] = None) -> GeneratedResult:
    """Generate a passphrase (5 words, dash, first word capitalised, number)."""
    return _engine().generate_passphrase(options)


def generate_memorable_passphrase(
    tier: MemorableTier | str = MemorableTier.MEDIUM,
) -> GeneratedResult:
    """Generate a passphrase from the ``short``, ``medium`` or ``long`` preset."""
    return _engine().generate_memorable_passphrase(tier)


def get_default_passphrase_options() -> PassphraseOptions:
    """Return the recommended passphrase options."""
    return default_options()


# ===================================================================== #
#  Analysis
# ===================================================================== #


async def analyze_password_strength(password: str) -> StrengthResult:
    """Full strength analysis; the pattern corpus loads on the first call."""
    return await _engine().analyze_password_strength(password)


def quick_strength_check(password: str) -> QuickCheckResult:
    """Low-latency strength estimate for feedback while typing."""
    return _engine().quick_strength_check(password)


def meets_minimum_requirements(password: str) -> MinimumRequirementsResult:
    """Check length >= 8 plus a lowercase letter, an uppercase letter and a digit."""
    return _engine().meets_minimum_requirements(password)
