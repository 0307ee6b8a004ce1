"""
Password Strength Scorer
=========================

Combines combinatorial entropy with the pattern detector's findings into
a 0-100 score, a strength band, a crack-time estimate and suggestions.

Scoring:

* Entropy is ``length * log2(pool)`` where *pool* is the sum of the class
  sizes the password actually uses.
* Base score is ``entropy * 100 / 128`` (128 bits of entropy scores 100).
* Each weakness kind subtracts a fixed penalty (see ``PENALTIES``).
* The result is clamped to [0, 100] and truncated to an int.

Crack time assumes an offline attacker exhausting ``2 ** entropy``
guesses at a fixed rate (``1e10`` guesses per second by default).

References:
    - NIST SP 800-63B (2017). Digital Identity Guidelines.
    - Bonneau, J. (2012). The Science of Guessing: Analyzing an
      Anonymized Corpus of 70 Million Passwords. IEEE S&P.
"""

from __future__ import annotations

from keysmith.analyzers.entropy import charset_pool_size, password_entropy
from keysmith.analyzers.patterns import PatternDetector
from keysmith.core.models import (
    Strength,
    StrengthFeedback,
    StrengthResult,
    WeaknessKind,
)

FULL_SCORE_BITS = 128.0
DEFAULT_GUESSES_PER_SECOND = 1e10

# Keeps 2 ** entropy inside the float range
_MAX_EXPONENT = 1000.0

PENALTIES: dict[WeaknessKind, int] = {
    WeaknessKind.EMPTY: 0,
    WeaknessKind.TOO_SHORT: 15,
    WeaknessKind.COMMON: 30,
    WeaknessKind.KEYBOARD: 15,
    WeaknessKind.DATE: 10,
    WeaknessKind.DIVERSITY: 10,
    WeaknessKind.REPEATED: 10,
    WeaknessKind.SEQUENTIAL: 10,
}

SUGGESTIONS: dict[WeaknessKind, str] = {
    WeaknessKind.EMPTY: "Enter a password to analyse.",
    WeaknessKind.TOO_SHORT: "Use at least 12 characters; length adds the most entropy.",
    WeaknessKind.COMMON: "Avoid common passwords and well-known words.",
    WeaknessKind.KEYBOARD: "Avoid keyboard runs such as 'qwerty' or '12345'.",
    WeaknessKind.DATE: "Avoid years and dates; they are among the first guesses.",
    WeaknessKind.DIVERSITY: "Mix uppercase, lowercase, numbers and symbols.",
    WeaknessKind.REPEATED: "Avoid repeating the same character several times.",
    WeaknessKind.SEQUENTIAL: "Avoid sequences such as 'abc' or '321'.",
}

_GENERAL_SUGGESTION = (
    "Looks good. Use a password manager so every account gets a unique password."
)

# (upper bound in seconds, divisor, unit)
_TIME_UNITS: list[tuple[float, float, str]] = [
    (60.0, 1.0, "second"),
    (3600.0, 60.0, "minute"),
    (86400.0, 3600.0, "hour"),
    (86400.0 * 30, 86400.0, "day"),
    (86400.0 * 365, 86400.0 * 30, "month"),
    (86400.0 * 365 * 100, 86400.0 * 365, "year"),
]


class StrengthScorer:
    """Scores passwords using entropy and detected patterns.

    Usage::

        scorer = StrengthScorer(PatternDetector(load_corpus()))
        result = scorer.score("Tr0ub4dor&3")
        print(result.strength.value, result.crack_time)

    Args:
        detector: Pattern detector holding the loaded corpus.
        guesses_per_second: Assumed offline attack rate.
    """

    def __init__(
        self,
        detector: PatternDetector,
        guesses_per_second: float = DEFAULT_GUESSES_PER_SECOND,
    ) -> None:
        if guesses_per_second <= 0:
            raise ValueError("guesses_per_second must be positive")
        self._detector = detector
        self._guesses_per_second = guesses_per_second

    def score(self, password: str) -> StrengthResult:
        """Analyse *password*. Never raises for empty or unusual input."""
        report = self._detector.detect(password)
        entropy = password_entropy(len(password), charset_pool_size(password))

        base = entropy * 100.0 / FULL_SCORE_BITS
        penalty = sum(PENALTIES[k] for k in report.kinds)
        score = int(max(0.0, min(100.0, base - penalty)))

        seconds = self.crack_time_seconds(entropy)
        return StrengthResult(
            score=score,
            strength=Strength.from_score(score),
            entropy=entropy,
            crack_time=format_crack_time(seconds),
            crack_time_seconds=seconds,
            weaknesses=list(report.weaknesses),
            feedback=StrengthFeedback(suggestions=_suggestions(report.kinds)),
            warning=report.warning,
        )

    def crack_time_seconds(self, entropy: float) -> float:
        """Seconds to exhaust ``2 ** entropy`` guesses at the configured rate."""
        return 2.0 ** min(entropy, _MAX_EXPONENT) / self._guesses_per_second


def format_crack_time(seconds: float) -> str:
    """Render a duration as ``instant``, ``N <unit>(s)`` or ``centuries``."""
    if seconds < 1.0:
        return "instant"
    for limit, divisor, unit in _TIME_UNITS:
        if seconds < limit:
            value = int(seconds // divisor)
            return f"{value} {unit}" + ("" if value == 1 else "s")
    return "centuries"


def _suggestions(kinds: list[WeaknessKind]) -> list[str]:
    if not kinds:
        return [_GENERAL_SUGGESTION]
    # dict.fromkeys deduplicates while keeping detection order
    return [SUGGESTIONS[k] for k in dict.fromkeys(kinds)]
