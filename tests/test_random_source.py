import secrets

import pytest

from conftest import ScriptedRandomSource, index_bytes
from keysmith.core.errors import EntropyUnavailableError, ErrorKind
from keysmith.generators.random_source import SecureRandomSource, _byte_width
from keysmith.analyzers.uniformity import UniformityChecker
from shared.math_utils import index_histogram


def test_byte_width_is_smallest_covering_width():
    assert _byte_width(2) == 1
    assert _byte_width(256) == 1
    assert _byte_width(257) == 2
    assert _byte_width(384) == 2
    assert _byte_width(65537) == 3


def test_bound_one_consumes_no_bytes():
    source = ScriptedRandomSource([])
    assert source.next_index(1) == 0
    assert source.consumed == 0


def test_bound_below_one_is_rejected():
    with pytest.raises(ValueError):
        SecureRandomSource().next_index(0)


def test_draw_in_incomplete_slice_is_rejected():
    # bound 200 over one byte: limit is 200, so 250 must be redrawn
    source = ScriptedRandomSource([250, 201, 199])
    assert source.next_index(200) == 199
    assert source.consumed == 3


def test_accepted_draw_is_reduced_modulo_bound():
    # bound 26: limit is 9 * 26 = 234
    source = ScriptedRandomSource([233])
    assert source.next_index(26) == 233 % 26


def test_two_byte_sampling_for_word_list_bound():
    # bound 384: limit is 170 * 384 = 65280 (0xFF00)
    source = ScriptedRandomSource([0xFF, 0x00, 0x01, 0x80])
    assert source.next_index(384) == 0
    assert source.consumed == 4


def test_index_bytes_helper_round_trips_small_indices():
    source = ScriptedRandomSource(index_bytes(0, 5, 383))
    assert [source.next_index(384) for _ in range(3)] == [0, 5, 383]


def test_secure_source_stays_below_bound():
    source = SecureRandomSource()
    for bound in (2, 3, 7, 10, 100, 200, 384, 1000, 70000):
        assert all(0 <= source.next_index(bound) < bound for _ in range(200))


def test_secure_source_returns_requested_byte_count():
    assert len(SecureRandomSource().random_bytes(32)) == 32


def test_os_failure_surfaces_as_entropy_unavailable(monkeypatch):
    def broken(n):
        raise OSError("getrandom failed")

    monkeypatch.setattr(secrets, "token_bytes", broken)
    with pytest.raises(EntropyUnavailableError) as info:
        SecureRandomSource().next_index(10)
    assert info.value.kind is ErrorKind.ENTROPY_UNAVAILABLE
    assert isinstance(info.value.__cause__, OSError)


@pytest.mark.parametrize(
    ("bound", "per_bin"),
    [(3, 2000), (200, 200), (384, 200), (70000, 20)],
)
def test_secure_source_is_uniform_for_non_power_of_two_bounds(bound, per_bin):
    report = UniformityChecker(alpha=1e-6).check(
        SecureRandomSource(), bound, samples=bound * per_bin
    )
    assert report.max_observed < bound
    assert report.passed, f"p={report.p_value:.3g} for bound {bound}"


def test_full_byte_period_gives_equal_counts():
    # each byte value three times; 200..255 are rejected
    source = ScriptedRandomSource(list(range(256)) * 3)
    counts = index_histogram([source.next_index(200) for _ in range(600)], 200)
    assert counts.tolist() == [3] * 200
    assert source.consumed == 256 * 2 + 200


def test_full_two_byte_period_gives_equal_counts():
    # 65536 values over bound 384: limit 65280, each index 170 times
    script = [b for value in range(65536) for b in value.to_bytes(2, "big")]
    source = ScriptedRandomSource(script)
    counts = index_histogram([source.next_index(384) for _ in range(65280)], 384)
    assert set(counts.tolist()) == {170}
    assert source.consumed == 65280 * 2
