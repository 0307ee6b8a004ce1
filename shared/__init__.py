"""
Keysmith Shared Module
======================

Configuration, logging, console and numerical helpers used by the
Keysmith generators, analyzers and command line.
"""

from shared.config import KeysmithConfig

__all__ = ["KeysmithConfig"]
