"""
Sampler Uniformity Check
=========================

Statistical self-check of :meth:`RandomSource.next_index`: draws many
indices, bins them, and runs Pearson's chi-squared goodness-of-fit test
against the uniform distribution. A biased sampler (for example plain
modulo reduction with ``bound = 200`` over single bytes) fails quickly.

The null hypothesis (the sampler is uniform) is rejected when the
p-value falls below ``alpha`` (0.01, as in NIST SP 800-22).

References:
    - Pearson, K. (1900). On the criterion that a given system of
      deviations from the probable ... Philosophical Magazine, 50(302).
    - NIST SP 800-22 Rev. 1a (2010). A Statistical Test Suite for
      Random and Pseudorandom Number Generators.
"""

from __future__ import annotations

from keysmith.core.models import UniformityReport
from keysmith.generators.random_source import RandomSource
from shared.math_utils import chi_squared_test, index_histogram

DEFAULT_ALPHA = 0.01


class UniformityChecker:
    """Chi-squared uniformity test for a random source.

    Usage::

        report = UniformityChecker().check(SecureRandomSource(), bound=384)
        assert report.passed
    """

    def __init__(self, alpha: float = DEFAULT_ALPHA) -> None:
        self._alpha = alpha

    def check(
        self,
        source: RandomSource,
        bound: int,
        samples: int = 100_000,
    ) -> UniformityReport:
        """Sample ``source.next_index(bound)`` *samples* times and test the counts.

        Raises:
            ValueError: If *bound* < 2, *samples* < *bound*, or the source
                returns an index outside ``[0, bound)``.
        """
        if bound < 2:
            raise ValueError("bound must be >= 2 for a goodness-of-fit test")
        if samples < bound:
            raise ValueError("samples must be at least bound")

        draws = [source.next_index(bound) for _ in range(samples)]
        max_observed = max(draws)
        observed = index_histogram(draws, bound)
        chi2, p_value = chi_squared_test(observed)

        return UniformityReport(
            bound=bound,
            samples=samples,
            chi_squared=chi2,
            p_value=p_value,
            max_observed=max_observed,
            passed=p_value >= self._alpha,
        )
