"""
Keysmith Mathematical Utilities
================================

Statistics behind the sampler uniformity self-check: per-index
histograms, Pearson's chi-squared goodness-of-fit statistic and the
chi-squared survival function.

The survival function is the regularised upper incomplete gamma
``Q(dof/2, x/2)``, evaluated with a power series below ``a + 1`` and a
modified Lentz continued fraction above it, so SciPy is not required.

References:
    [1] Pearson, K. (1900). On the Criterion that a Given System of
        Deviations ... Philosophical Magazine, 50(302), 157-175.
    [2] Press, W. H. et al. (2007). Numerical Recipes (3rd ed.).
        Cambridge University Press, Section 6.2.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

IntArray = NDArray[np.integer]

_MAX_ITER = 1000
_EPS = 1e-15
_TINY = 1e-300


def index_histogram(samples: Sequence[int] | IntArray, bound: int) -> IntArray:
    """Count how often each index in ``[0, bound)`` was drawn.

    Raises:
        ValueError: If any sample lies outside ``[0, bound)``.
    """
    draws = np.asarray(samples, dtype=np.int64)
    if draws.size and (draws.min() < 0 or draws.max() >= bound):
        raise ValueError(f"Samples must lie in [0, {bound})")
    return np.bincount(draws, minlength=bound)


def chi_squared_test(
    observed: ArrayLike, expected: Optional[ArrayLike] = None
) -> tuple[float, float]:
    """Pearson's chi-squared goodness-of-fit test.

    .. math::

        \\chi^2 = \\sum_i \\frac{(O_i - E_i)^2}{E_i}

    with ``k - 1`` degrees of freedom for ``k`` bins.

    Args:
        observed: Observed counts per bin.
        expected: Expected counts per bin; defaults to the uniform
            expectation ``sum(observed) / k`` in every bin.

    Returns:
        ``(statistic, p_value)``.

    Raises:
        ValueError: If the shapes differ or an expected count is not positive.
    """
    obs = np.asarray(observed, dtype=np.float64)
    if expected is None:
        exp = np.full_like(obs, obs.sum() / max(obs.size, 1))
    else:
        exp = np.asarray(expected, dtype=np.float64)

    if obs.shape != exp.shape:
        raise ValueError("observed and expected must have the same shape")
    if np.any(exp <= 0):
        raise ValueError("expected counts must be positive")

    statistic = float(np.sum((obs - exp) ** 2 / exp))
    return statistic, chi2_survival(statistic, obs.size - 1)


def chi2_survival(statistic: float, dof: int) -> float:
    """``P(X >= statistic)`` for ``X`` chi-squared with *dof* degrees of freedom."""
    if dof < 1 or statistic <= 0.0:
        return 1.0

    a = dof / 2.0
    x = statistic / 2.0
    scale = math.exp(a * math.log(x) - x - math.lgamma(a))
    if x < a + 1.0:
        return max(0.0, 1.0 - scale * _lower_gamma_series(a, x))
    return scale * _upper_gamma_fraction(a, x)


def _lower_gamma_series(a: float, x: float) -> float:
    # sum_n x^n / (a (a+1) ... (a+n)); P(a, x) = scale * sum
    term = 1.0 / a
    total = term
    denom = a
    for _ in range(_MAX_ITER):
        denom += 1.0
        term *= x / denom
        total += term
        if term < total * _EPS:
            break
    return total


def _upper_gamma_fraction(a: float, x: float) -> float:
    # Q(a, x) = scale * fraction, evaluated with the modified Lentz method
    b = x + 1.0 - a
    c = 1.0 / _TINY
    d = 1.0 / b
    fraction = d
    for n in range(1, _MAX_ITER):
        coeff = n * (a - n)
        b += 2.0
        d = b + coeff * d
        if abs(d) < _TINY:
            d = _TINY
        c = b + coeff / c
        if abs(c) < _TINY:
            c = _TINY
        d = 1.0 / d
        step = c * d
        fraction *= step
        if abs(step - 1.0) < _EPS:
            break
    return fraction
