"""
Password Pattern Detector
==========================

Scans a password for the weaknesses attackers exploit first, in a fixed
order so that reports are stable:

1. Empty input (short-circuits every other check)
2. Length below 8 characters
3. Common passwords (top-100 list, exact or embedded)
4. Keyboard-adjacent runs (qwerty, asdf, 12345, ...)
5. Years 1900-2099
6. Fewer than three of the four character classes
7. Three or more identical characters in a row
8. Three or more characters whose code points step by +1 or -1

Dictionary and keyboard checks are case-insensitive; the character class
count is case-sensitive.

The reference lists live in ``keysmith/data/patterns.json`` and are
loaded into a :class:`~keysmith.core.models.PatternCorpus` by
:func:`load_corpus`.

References:
    - NIST SP 800-63B (2017), Section 5.1.1.2 -- Memorized Secret Verifiers.
    - Weir, M. et al. (2010). Testing Metrics for Password Creation
      Policies by Attacking Large Sets of Revealed Passwords. CCS.
    - Wheeler, D. L. (2016). zxcvbn: Low-Budget Password Strength
      Estimation. USENIX Security.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Optional

from keysmith.analyzers.entropy import character_classes
from keysmith.core.models import PatternCorpus, PatternReport, WeaknessKind

_DEFAULT_CORPUS_PATH: Path = Path(__file__).resolve().parent.parent / "data" / "patterns.json"

MIN_LENGTH = 8
MIN_CLASSES = 3

# Embedded common passwords only count when alphabetic and this long
_EMBEDDED_MIN_LENGTH = 5

_YEAR_RE = re.compile(r"(?:19|20)\d{2}")
_REPEAT_RE = re.compile(r"(.)\1{2,}")

WEAKNESS_TEXT: dict[WeaknessKind, str] = {
    WeaknessKind.EMPTY: "Password is empty",
    WeaknessKind.TOO_SHORT: f"Password is too short (minimum {MIN_LENGTH} characters)",
    WeaknessKind.COMMON: "Password contains a common pattern",
    WeaknessKind.KEYBOARD: "Password contains a keyboard pattern",
    WeaknessKind.DATE: "Password contains a year or date pattern",
    WeaknessKind.DIVERSITY: "Password lacks character diversity",
    WeaknessKind.REPEATED: "Password contains repeated characters",
    WeaknessKind.SEQUENTIAL: "Password contains sequential characters",
}

COMMON_PASSWORD_WARNING = "This is a top-100 common password"


def load_corpus(path: str | Path | None = None) -> PatternCorpus:
    """Load the pattern corpus from a JSON file.

    The file holds two arrays, ``common_passwords`` and
    ``keyboard_patterns``. Entries are lowercased on load.

    Args:
        path: Corpus file; defaults to the bundled ``patterns.json``.

    Raises:
        FileNotFoundError: If the corpus file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    corpus_path = Path(path) if path is not None else _DEFAULT_CORPUS_PATH
    with open(corpus_path, "r", encoding="utf-8") as fh:
        data = json.load(fh)

    return PatternCorpus(
        common_passwords=frozenset(p.lower() for p in data.get("common_passwords", [])),
        keyboard_patterns=tuple(p.lower() for p in data.get("keyboard_patterns", [])),
    )


class PatternDetector:
    """Detects weakening patterns in a password.

    Usage::

        detector = PatternDetector(load_corpus())
        report = detector.detect("qwerty2024")
        report.weaknesses
        # ['Password contains a keyboard pattern', ...]
    """

    def __init__(self, corpus: PatternCorpus) -> None:
        self._corpus = corpus
        self._embedded = tuple(
            p for p in corpus.common_passwords
            if p.isalpha() and len(p) >= _EMBEDDED_MIN_LENGTH
        )

    def detect(self, password: str) -> PatternReport:
        """Run every check and return the ordered findings."""
        if not password:
            return _report([WeaknessKind.EMPTY])

        kinds: list[WeaknessKind] = []
        warning: Optional[str] = None
        lowered = password.lower()

        if len(password) < MIN_LENGTH:
            kinds.append(WeaknessKind.TOO_SHORT)

        if lowered in self._corpus.common_passwords:
            warning = COMMON_PASSWORD_WARNING
            kinds.append(WeaknessKind.COMMON)
        elif any(word in lowered for word in self._embedded):
            kinds.append(WeaknessKind.COMMON)

        if any(p in lowered for p in self._corpus.keyboard_patterns):
            kinds.append(WeaknessKind.KEYBOARD)

        if _YEAR_RE.search(password):
            kinds.append(WeaknessKind.DATE)

        if count_classes(password) < MIN_CLASSES:
            kinds.append(WeaknessKind.DIVERSITY)

        if _REPEAT_RE.search(password):
            kinds.append(WeaknessKind.REPEATED)

        if has_sequence(password):
            kinds.append(WeaknessKind.SEQUENTIAL)

        return _report(kinds, warning)


def count_classes(password: str) -> int:
    """Number of classes present among lower, upper, digit and symbol."""
    return sum(character_classes(password))


def has_sequence(password: str, run: int = 3) -> bool:
    """``True`` if *run* consecutive characters step by +1 or -1 in code point.

    Catches ascending runs such as ``abc``/``123`` and descending runs
    such as ``cba``/``321``.
    """
    if len(password) < run:
        return False

    length = 1
    step = 0
    for prev, cur in zip(password, password[1:]):
        diff = ord(cur) - ord(prev)
        if diff in (1, -1) and (length == 1 or diff == step):
            length += 1
        elif diff in (1, -1):
            length = 2
        else:
            length = 1
        step = diff
        if length >= run:
            return True
    return False


def _report(kinds: list[WeaknessKind], warning: Optional[str] = None) -> PatternReport:
    return PatternReport(
        weaknesses=[WEAKNESS_TEXT[k] for k in kinds],
        kinds=kinds,
        warning=warning,
    )
