"""
Quick Strength Check
=====================

Latency-bounded strength estimate for feedback while the user types,
plus the minimum-requirements validator.

The quick check is a single O(length) pass: length points, character
class points and a fixed penalty when the password embeds one of a
handful of very common passwords. It deliberately skips the full
pattern corpus.
"""

from __future__ import annotations

from keysmith.analyzers.entropy import character_classes
from keysmith.analyzers.patterns import count_classes
from keysmith.core.models import MinimumRequirementsResult, QuickCheckResult, Strength

POINTS_PER_CHAR = 2.5
MAX_SCORED_LENGTH = 20
POINTS_PER_CLASS = 12.5
COMMON_PENALTY = 20

QUICK_COMMON: tuple[str, ...] = (
    "password",
    "123456",
    "qwerty",
    "letmein",
    "admin",
    "welcome",
    "abc123",
    "111111",
    "iloveyou",
    "monkey",
)

_FEEDBACK: dict[Strength, str] = {
    Strength.WEAK: "Weak: make it longer and mix character types.",
    Strength.MEDIUM: "Medium: add length or symbols to strengthen it.",
    Strength.STRONG: "Strong: a few more characters would make it excellent.",
    Strength.VERY_STRONG: "Very strong.",
}

REQUIREMENT_LENGTH = "At least 8 characters"
REQUIREMENT_LOWER = "One lowercase letter"
REQUIREMENT_UPPER = "One uppercase letter"
REQUIREMENT_DIGIT = "One number"


class QuickChecker:
    """Cheap strength estimate and minimum-requirements validator.

    Stateless; one instance can serve any number of callers.
    """

    def check(self, password: str) -> QuickCheckResult:
        """Score *password* without the full pattern engine."""
        if not password:
            return QuickCheckResult(
                score=0,
                strength=Strength.WEAK,
                feedback="Enter a password.",
                weaknesses=["Password is empty"],
            )

        weaknesses: list[str] = []
        length_points = min(len(password), MAX_SCORED_LENGTH) * POINTS_PER_CHAR
        if len(password) < 8:
            weaknesses.append("Too short")

        classes = count_classes(password)
        if classes < 4:
            weaknesses.append("Add more character types")

        lowered = password.lower()
        penalty = 0
        if any(word in lowered for word in QUICK_COMMON):
            penalty = COMMON_PENALTY
            weaknesses.append("Contains a common password")

        raw = length_points + classes * POINTS_PER_CLASS - penalty
        score = int(max(0.0, min(100.0, raw)))
        strength = Strength.from_score(score)
        return QuickCheckResult(
            score=score,
            strength=strength,
            feedback=_FEEDBACK[strength],
            weaknesses=weaknesses,
        )

    def meets_minimum_requirements(self, password: str) -> MinimumRequirementsResult:
        """Check length >= 8, a lowercase letter, an uppercase letter and a digit.

        Symbols are recommended but never required. Every unmet
        requirement is reported.
        """
        classes = character_classes(password)
        missing: list[str] = []
        if len(password) < 8:
            missing.append(REQUIREMENT_LENGTH)
        if not classes.lower:
            missing.append(REQUIREMENT_LOWER)
        if not classes.upper:
            missing.append(REQUIREMENT_UPPER)
        if not classes.digit:
            missing.append(REQUIREMENT_DIGIT)
        return MinimumRequirementsResult(meets=not missing, missing=missing)
