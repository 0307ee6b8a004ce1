"""
Secure Random Source
=====================

Unbiased integer sampling over a cryptographic byte stream.

:class:`RandomSource` turns raw bytes into uniformly distributed indices
with rejection sampling: draws that fall in the incomplete top slice of
the byte range are discarded, which removes the modulo bias a plain
``value % bound`` would introduce for bounds that do not divide ``256^k``.

Concrete sources only supply bytes. :class:`SecureRandomSource` reads the
operating system CSPRNG through :mod:`secrets`; tests inject scripted
sources to obtain reproducible vectors without touching the sampling
logic.

References:
    - Knuth, D. E. (1997). The Art of Computer Programming, Volume 2:
      Seminumerical Algorithms (3rd ed.), Section 3.4.1.
    - NIST SP 800-90A Rev. 1 (2015), Appendix A.5.1 (Simple Discard Method).
"""

from __future__ import annotations

import abc
import secrets

from keysmith.core.errors import EntropyUnavailableError


class RandomSource(abc.ABC):
    """Abstract byte source exposing unbiased :meth:`next_index`."""

    @abc.abstractmethod
    def random_bytes(self, n: int) -> bytes:
        """Return *n* random bytes."""

    def next_index(self, bound: int) -> int:
        """Return an integer uniformly distributed over ``[0, bound)``.

        Uses the smallest byte width ``k`` with ``256**k >= bound`` and
        rejects any draw ``>= floor(256**k / bound) * bound``.

        Args:
            bound: Exclusive upper bound (>= 1).

        Returns:
            Uniform index in ``[0, bound)``.

        Raises:
            ValueError: If *bound* is less than 1.
            EntropyUnavailableError: If the underlying source fails.
        """
        if bound < 1:
            raise ValueError(f"bound must be >= 1, got {bound}")
        if bound == 1:
            return 0

        width = _byte_width(bound)
        limit = (256 ** width // bound) * bound

        while True:
            value = int.from_bytes(self.random_bytes(width), "big")
            if value < limit:
                return value % bound


class SecureRandomSource(RandomSource):
    """Random source backed by the operating system CSPRNG.

    Failures of the OS generator surface as
    :class:`~keysmith.core.errors.EntropyUnavailableError`; there is no
    fallback to :mod:`random`.
    """

    def random_bytes(self, n: int) -> bytes:
        try:
            return secrets.token_bytes(n)
        except (OSError, NotImplementedError) as exc:
            raise EntropyUnavailableError(
                f"Secure random generator unavailable: {exc}"
            ) from exc


def _byte_width(bound: int) -> int:
    """Smallest number of bytes whose value range covers *bound* values."""
    width = 1
    while 256 ** width < bound:
        width += 1
    return width
