import secrets

import pytest

from keysmith.analyzers.uniformity import UniformityChecker
from keysmith.generators.random_source import RandomSource
from shared.math_utils import chi2_survival, chi_squared_test, index_histogram


class ModuloBiasedSource(RandomSource):
    """Plain ``byte % bound`` reduction, the bias rejection sampling removes."""

    def random_bytes(self, n: int) -> bytes:
        return secrets.token_bytes(n)

    def next_index(self, bound: int) -> int:
        return self.random_bytes(1)[0] % bound


def test_perfectly_uniform_source_passes(cycling_source):
    report = UniformityChecker().check(cycling_source, bound=384, samples=384 * 10)
    assert report.passed
    assert report.chi_squared == pytest.approx(0.0)
    assert report.p_value == pytest.approx(1.0)
    assert report.max_observed == 383


def test_modulo_bias_is_detected():
    report = UniformityChecker().check(ModuloBiasedSource(), bound=200, samples=40_000)
    assert not report.passed
    assert report.p_value < 1e-6


def test_invalid_arguments(cycling_source):
    checker = UniformityChecker()
    with pytest.raises(ValueError):
        checker.check(cycling_source, bound=1, samples=100)
    with pytest.raises(ValueError):
        checker.check(cycling_source, bound=100, samples=50)


def test_index_histogram_counts_every_bin():
    counts = index_histogram([0, 1, 1, 4], bound=6)
    assert counts.tolist() == [1, 2, 0, 0, 1, 0]


def test_index_histogram_rejects_out_of_range():
    with pytest.raises(ValueError):
        index_histogram([0, 6], bound=6)


def test_chi_squared_p_value():
    observed = [60.0 + 9.8, 60.0 - 9.8]
    chi2, p = chi_squared_test(observed)
    assert chi2 == pytest.approx(3.2013, rel=1e-3)
    assert 0.05 < p < 0.1


def test_chi_squared_matches_reference_critical_value():
    # 3.8415 is the 5% critical value for one degree of freedom
    chi2, p = chi_squared_test([70.73516, 49.26484], [60.0, 60.0])
    assert chi2 == pytest.approx(3.8415, rel=1e-3)
    assert p == pytest.approx(0.05, abs=1e-3)


def test_chi_squared_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        chi_squared_test([1.0, 2.0], [1.0])


def test_chi2_survival_edges():
    assert chi2_survival(0.0, 5) == 1.0
    assert chi2_survival(3.0, 0) == 1.0
    # median of chi-squared(2) is 2 ln 2
    assert chi2_survival(2 * 0.6931471805599453, 2) == pytest.approx(0.5)
    assert chi2_survival(1000.0, 10) < 1e-100
