"""
Keysmith Output Module
=======================

Console display for generation and analysis results.
"""

from keysmith.output.console import KeysmithConsoleOutput

__all__ = [
    "KeysmithConsoleOutput",
]
