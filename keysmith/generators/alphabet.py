"""
Alphabet Builder
=================

Assembles the character pool for random password generation from the
category flags of :class:`~keysmith.core.models.GenerationOptions`.

The character-class tables are module-level constants; the builder only
reads them.
"""

from __future__ import annotations

import string

from keysmith.core.errors import EmptyAlphabetError
from keysmith.core.models import GenerationOptions

UPPERCASE: str = string.ascii_uppercase
LOWERCASE: str = string.ascii_lowercase
DIGITS: str = string.digits
SYMBOLS: str = "!@#$%^&*()_+-=[]{}|;:,.<>?"

# Glyphs easily confused with one another in common fonts
AMBIGUOUS: frozenset[str] = frozenset("Il1|O0o")


class AlphabetBuilder:
    """Builds an ordered, deduplicated character pool.

    Usage::

        alphabet = AlphabetBuilder().build(GenerationOptions(include_symbols=False))
        len(alphabet)  # 62
    """

    def build(self, options: GenerationOptions) -> str:
        """Return the character pool for *options*.

        Classes are appended in the order uppercase, lowercase, digits,
        symbols. Ambiguous glyphs are removed when requested.

        Raises:
            EmptyAlphabetError: If no class is enabled or exclusion empties
                the pool.
        """
        classes = [
            (options.include_uppercase, UPPERCASE),
            (options.include_lowercase, LOWERCASE),
            (options.include_numbers, DIGITS),
            (options.include_symbols, SYMBOLS),
        ]
        enabled = [chars for flag, chars in classes if flag]
        if not enabled:
            raise EmptyAlphabetError("no character class enabled")

        # dict preserves first-seen order while dropping duplicates
        pool = dict.fromkeys("".join(enabled))
        if options.exclude_ambiguous:
            pool = {c: None for c in pool if c not in AMBIGUOUS}

        if not pool:
            raise EmptyAlphabetError("ambiguous-character exclusion removed every character")
        return "".join(pool)
