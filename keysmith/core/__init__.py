"""
Keysmith Core Module
=====================

Contains the central engine, the data models and the error hierarchy
for the Keysmith generator and strength analyzer.
"""

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
    PatternCorpus,
    PatternReport,
    QuickCheckResult,
    Separator,
    Strength,
    StrengthFeedback,
    StrengthResult,
    UniformityReport,
    WeaknessKind,
)

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
    "PatternCorpus",
    "PatternReport",
    "QuickCheckResult",
    "Separator",
    "Strength",
    "StrengthFeedback",
    "StrengthResult",
    "UniformityReport",
    "WeaknessKind",
]
