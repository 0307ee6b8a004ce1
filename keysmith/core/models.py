"""
Keysmith Core Data Models
==========================

Pydantic models for the Keysmith generator and strength analyzer.
Option models describe generation requests; result models are frozen
once produced and are serialisable to JSON for the CLI output layer.

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines --
      Authentication and Lifecycle Management.
    - Reinhold, A. G. (1995). The Diceware Passphrase Home Page.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class Strength(str, enum.Enum):
    """Qualitative strength rating shared by generators and analyzers.

    Bands (applied to a 0-100 score):
      - ``< 40``  : weak
      - ``40-59`` : medium
      - ``60-79`` : strong
      - ``>= 80`` : very-strong
    """

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"
    VERY_STRONG = "very-strong"

    @classmethod
    def from_score(cls, score: float) -> Strength:
        """Derive the strength band from a 0-100 score."""
        if score >= 80:
            return cls.VERY_STRONG
        if score >= 60:
            return cls.STRONG
        if score >= 40:
            return cls.MEDIUM
        return cls.WEAK

    @classmethod
    def from_entropy(cls, entropy: float) -> Strength:
        """Classify generated secrets: entropy bits map 1:1 onto the bands."""
        return cls.from_score(min(entropy, 100.0))


class Separator(str, enum.Enum):
    """Word separator used when joining a passphrase."""

    DASH = "dash"
    SPACE = "space"
    SYMBOL = "symbol"
    NONE = "none"

    @property
    def text(self) -> str:
        """Literal string inserted between words."""
        return _SEPARATOR_TEXT[self]


_SEPARATOR_TEXT: dict[Separator, str] = {
    Separator.DASH: "-",
    Separator.SPACE: " ",
    Separator.SYMBOL: "_",
    Separator.NONE: "",
}


class Capitalization(str, enum.Enum):
    """Which passphrase words get an uppercase first letter."""

    NONE = "none"
    FIRST = "first"
    ALL = "all"


class MemorableTier(str, enum.Enum):
    """Preset passphrase sizes for :func:`generate_memorable_passphrase`."""

    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class WeaknessKind(str, enum.Enum):
    """Category of a weakness reported by the pattern detector."""

    EMPTY = "empty"
    TOO_SHORT = "too_short"
    COMMON = "common"
    KEYBOARD = "keyboard"
    DATE = "date"
    DIVERSITY = "diversity"
    REPEATED = "repeated"
    SEQUENTIAL = "sequential"


# ===================================================================== #
#  Generation Models
# ===================================================================== #


class GenerationOptions(BaseModel):
    """Options for random password generation.

    Attributes:
        length: Number of characters to draw (>= 1).
        include_uppercase: Include ``A-Z``.
        include_lowercase: Include ``a-z``.
        include_numbers: Include ``0-9``.
        include_symbols: Include the fixed symbol set.
        exclude_ambiguous: Drop visually confusable glyphs from the pool.
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(default=16, ge=1)
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_ambiguous: bool = False


class PassphraseOptions(BaseModel):
    """Options for Diceware-style passphrase generation.

    ``word_count`` is not range-checked here; the generator rejects values
    outside [4, 8] with :class:`~keysmith.core.errors.InvalidWordCountError`.
    """

    model_config = ConfigDict(frozen=True)

    word_count: int = 5
    separator: Separator = Separator.DASH
    capitalize: Capitalization = Capitalization.FIRST
    include_numbers: bool = True


class GeneratedResult(BaseModel):
    """A generated password or passphrase.

    Attributes:
        password: The generated secret.
        entropy: Entropy of the generation process in bits.
        strength: Strength band derived from the entropy.
        alphabet_size: Character pool size (password results).
        word_space_size: Word list size (passphrase results).
    """

    model_config = ConfigDict(frozen=True)

    password: str
    entropy: float = Field(ge=0.0)
    strength: Strength
    alphabet_size: Optional[int] = None
    word_space_size: Optional[int] = None


# ===================================================================== #
#  Analysis Models
# ===================================================================== #


class PatternCorpus(BaseModel):
    """Reference data used by the pattern detector.

    Attributes:
        common_passwords: Top common passwords, lowercase.
        keyboard_patterns: Keyboard-adjacent runs, lowercase.
    """

    model_config = ConfigDict(frozen=True)

    common_passwords: frozenset[str] = Field(default_factory=frozenset)
    keyboard_patterns: tuple[str, ...] = ()


class PatternReport(BaseModel):
    """Findings produced by :class:`~keysmith.analyzers.patterns.PatternDetector`."""

    model_config = ConfigDict(frozen=True)

    weaknesses: list[str] = Field(default_factory=list)
    kinds: list[WeaknessKind] = Field(default_factory=list)
    warning: Optional[str] = None


class StrengthFeedback(BaseModel):
    """Actionable feedback attached to a strength result."""

    model_config = ConfigDict(frozen=True)

    suggestions: list[str] = Field(default_factory=list)


class StrengthResult(BaseModel):
    """Complete strength analysis of one password.

    Attributes:
        score: Score from 0 to 100.
        strength: Strength band of the score.
        entropy: Estimated entropy in bits.
        crack_time: Human-readable crack time.
        crack_time_seconds: Estimated offline-attack time in seconds.
        weaknesses: Ordered human-readable findings.
        feedback: Improvement suggestions.
        warning: Set when the password is a top-100 common password.
    """

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    strength: Strength
    entropy: float = Field(ge=0.0)
    crack_time: str
    crack_time_seconds: float = Field(ge=0.0)
    weaknesses: list[str] = Field(default_factory=list)
    feedback: StrengthFeedback = Field(default_factory=StrengthFeedback)
    warning: Optional[str] = None


class QuickCheckResult(BaseModel):
    """Low-latency strength estimate for interactive feedback."""

    model_config = ConfigDict(frozen=True)

    score: int = Field(ge=0, le=100)
    strength: Strength
    feedback: str
    weaknesses: list[str] = Field(default_factory=list)


class MinimumRequirementsResult(BaseModel):
    """Outcome of the minimum password requirements check."""

    model_config = ConfigDict(frozen=True)

    meets: bool
    missing: list[str] = Field(default_factory=list)


class UniformityReport(BaseModel):
    """Chi-squared uniformity check of a random source.

    Attributes:
        bound: Exclusive upper bound sampled.
        samples: Number of draws.
        chi_squared: Pearson chi-squared statistic.
        p_value: Goodness-of-fit p-value against the uniform distribution.
        max_observed: Largest index drawn.
        passed: ``True`` when ``p_value >= alpha``.
    """

    model_config = ConfigDict(frozen=True)

    bound: int
    samples: int
    chi_squared: float
    p_value: float
    max_observed: int
    passed: bool
