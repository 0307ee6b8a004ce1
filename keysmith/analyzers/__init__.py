"""
Keysmith Analyzers
===================

Strength analysis modules: entropy estimation, pattern detection, the
full scorer, the low-latency quick check and the sampler uniformity
self-check.
"""

from keysmith.analyzers.patterns import PatternDetector, load_corpus
from keysmith.analyzers.quick_check import QuickChecker
from keysmith.analyzers.strength import StrengthScorer
from keysmith.analyzers.uniformity import UniformityChecker

__all__ = [
    "PatternDetector",
    "QuickChecker",
    "StrengthScorer",
    "UniformityChecker",
    "load_corpus",
]
