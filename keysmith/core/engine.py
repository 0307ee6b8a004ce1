"""
Keysmith Engine
================

Central orchestrator for secret generation and strength analysis.
:class:`KeysmithEngine` wires the configuration, logger, random source
and pattern corpus to the individual generators and analyzers, and
exposes the public operations.

Architecture follows the Facade pattern (Gamma et al., 1994).

The pattern corpus is loaded lazily on the first strength analysis,
off the event loop, so :meth:`KeysmithEngine.analyze_password_strength`
is a coroutine. Concurrent first calls may both load the corpus; the
result is identical and immutable, so the last assignment wins harmlessly.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

import asyncio
from typing import Optional

from shared.config import KeysmithConfig
from shared.logger import KeysmithLogger

from keysmith.analyzers.patterns import PatternDetector, load_corpus
from keysmith.analyzers.quick_check import QuickChecker
from keysmith.analyzers.strength import StrengthScorer
from keysmith.analyzers.uniformity import UniformityChecker
from keysmith.core.errors import CorpusUnavailableError, KeysmithError
from keysmith.core.models import (
    GeneratedResult,
    GenerationOptions,
    MemorableTier,
    MinimumRequirementsResult,
    PassphraseOptions,
    PatternCorpus,
    QuickCheckResult,
    StrengthResult,
    UniformityReport,
)
from keysmith.generators.passphrase import PassphraseGenerator
from keysmith.generators.password import PasswordGenerator
from keysmith.generators.random_source import RandomSource, SecureRandomSource


class KeysmithEngine:
    """Orchestrates generation and analysis operations.

    Usage::

        engine = KeysmithEngine()
        result = engine.generate_password(GenerationOptions(length=24))
        phrase = engine.generate_memorable_passphrase("long")
        report = await engine.analyze_password_strength("hunter2")

    Args:
        config: Keysmith configuration; defaults to built-in defaults.
        source: Random source shared by both generators.
        logger: Logger; built from ``config.global_settings`` when omitted.
    """

    def __init__(
        self,
        config: Optional[KeysmithConfig] = None,
        source: Optional[RandomSource] = None,
        logger: Optional[KeysmithLogger] = None,
    ) -> None:
        self.config = config or KeysmithConfig()
        self.logger = logger or KeysmithLogger.from_config(
            "engine", self.config.global_settings
        )
        self.source = source or SecureRandomSource()

        self._password_generator = PasswordGenerator(self.source)
        self._passphrase_generator = PassphraseGenerator(self.source)
        self._quick_checker = QuickChecker()
        self._uniformity_checker = UniformityChecker()
        self._scorer: Optional[StrengthScorer] = None

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def generate_password(
        self, options: Optional[GenerationOptions] = None
    ) -> GeneratedResult:
        """Generate one random password.

        Raises:
            EmptyAlphabetError: If *options* select no characters.
            EntropyUnavailableError: If the secure random source fails.
        """
        with self.logger.operation("password"):
            result = self._guard(self._password_generator.generate, options)
            self.logger.info(
                "Generated password",
                length=len(result.password),
                alphabet_size=result.alphabet_size,
                entropy=round(result.entropy, 2),
            )
            return result

    def generate_passwords(
        self, count: int, options: Optional[GenerationOptions] = None
    ) -> list[GeneratedResult]:
        """Generate *count* independent random passwords."""
        with self.logger.operation("password_batch"):
            results = self._guard(self._password_generator.generate_many, count, options)
            self.logger.info("Generated password batch", count=len(results))
            return results

    def generate_passphrase(
        self, options: Optional[PassphraseOptions] = None
    ) -> GeneratedResult:
        """Generate one passphrase.

        Raises:
            InvalidWordCountError: If the word count is outside [4, 8].
            EntropyUnavailableError: If the secure random source fails.
        """
        with self.logger.operation("passphrase"):
            result = self._guard(self._passphrase_generator.generate, options)
            self.logger.info(
                "Generated passphrase",
                word_space_size=result.word_space_size,
                entropy=round(result.entropy, 2),
            )
            return result

    def generate_memorable_passphrase(
        self, tier: MemorableTier | str
    ) -> GeneratedResult:
        """Generate a passphrase from the ``short``/``medium``/``long`` presets."""
        with self.logger.operation("memorable"):
            result = self._guard(self._passphrase_generator.generate_memorable, tier)
            self.logger.info(
                "Generated memorable passphrase",
                tier=MemorableTier(tier).value,
                entropy=round(result.entropy, 2),
            )
            return result

    # ------------------------------------------------------------------ #
    #  Analysis
    # ------------------------------------------------------------------ #

    async def analyze_password_strength(self, password: str) -> StrengthResult:
        """Full strength analysis; awaits the corpus load on first use.

        Raises:
            CorpusUnavailableError: If the configured corpus file cannot be
                read or parsed.
        """
        scorer = await self._ensure_scorer()
        with self.logger.operation("analyze"):
            result = scorer.score(password)
            self.logger.debug(
                "Analysed password",
                length=len(password),
                score=result.score,
                weaknesses=len(result.weaknesses),
            )
            return result

    def quick_strength_check(self, password: str) -> QuickCheckResult:
        """Cheap strength estimate for real-time feedback (never suspends)."""
        return self._quick_checker.check(password)

    def meets_minimum_requirements(self, password: str) -> MinimumRequirementsResult:
        """Check the minimum length and character-class requirements."""
        return self._quick_checker.meets_minimum_requirements(password)

    def check_uniformity(
        self, bound: Optional[int] = None, samples: Optional[int] = None
    ) -> UniformityReport:
        """Chi-squared self-check of this engine's random source."""
        settings = self.config.analyzer
        bound = bound or settings.uniformity_bound
        samples = samples or settings.uniformity_samples
        with self.logger.operation("selftest"), self.logger.timed("uniformity check"):
            report = self._guard(self._uniformity_checker.check, self.source, bound, samples)
        if not report.passed:
            self.logger.warning(
                "Random source failed the uniformity check",
                bound=bound,
                p_value=report.p_value,
            )
        return report

    @property
    def corpus_loaded(self) -> bool:
        """Whether the pattern corpus has been loaded."""
        return self._scorer is not None

    # ------------------------------------------------------------------ #
    #  Private Helpers
    # ------------------------------------------------------------------ #

    async def _ensure_scorer(self) -> StrengthScorer:
        if self._scorer is None:
            corpus = await asyncio.to_thread(self._load_corpus)
            self._scorer = StrengthScorer(
                PatternDetector(corpus),
                guesses_per_second=self.config.analyzer.guesses_per_second,
            )
        return self._scorer

    def _load_corpus(self) -> PatternCorpus:
        path = self.config.analyzer.corpus_path
        with self.logger.timed("pattern corpus load"):
            try:
                corpus = load_corpus(path)
            except (OSError, ValueError) as exc:
                raise CorpusUnavailableError(str(path), str(exc)) from exc
        self.logger.info(
            "Loaded pattern corpus",
            source=path or "bundled",
            common_passwords=len(corpus.common_passwords),
            keyboard_patterns=len(corpus.keyboard_patterns),
        )
        return corpus

    def _guard(self, func, *args):
        """Call *func*, recording Keysmith errors at DEBUG before re-raising them.

        Callers report the error to the user; the log keeps the error kind.
        """
        try:
            return func(*args)
        except KeysmithError as exc:
            self.logger.debug("%s: %s", exc.kind.value, exc)
            raise
