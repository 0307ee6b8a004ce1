"""
Keysmith Configuration Management
==================================

Centralized configuration for the Keysmith generator and analyzer using
Python dataclasses and TOML-based persistence.

Every section maps to one TOML table (``[global]``, ``[generator]``,
``[analyzer]``). Missing keys fall back to the dataclass defaults and
unknown keys are ignored, so older config files keep loading.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[no-redef]

if TYPE_CHECKING:
    from keysmith.core.models import GenerationOptions, PassphraseOptions


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "keysmith.toml"

_Section = TypeVar("_Section")


# ========================== Section Configs ================================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity and log destinations."""

    log_level: str = "WARNING"
    log_file: Optional[str] = None
    log_json: bool = False
    debug: bool = False


@dataclass(frozen=False, slots=True)
class GeneratorConfig:
    """Defaults for password and passphrase generation.

    These values seed the CLI options; the library entry points use the
    option models' own defaults unless a config is passed explicitly.
    """

    # Random password parameters
    length: int = 16
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True
    exclude_ambiguous: bool = False
    count: int = 1

    # Passphrase parameters
    word_count: int = 5
    separator: str = "dash"
    capitalize: str = "first"
    passphrase_numbers: bool = True

    def generation_options(self) -> GenerationOptions:
        """Build :class:`GenerationOptions` from this section."""
        from keysmith.core.models import GenerationOptions

        return GenerationOptions(
            length=self.length,
            include_uppercase=self.include_uppercase,
            include_lowercase=self.include_lowercase,
            include_numbers=self.include_numbers,
            include_symbols=self.include_symbols,
            exclude_ambiguous=self.exclude_ambiguous,
        )

    def passphrase_options(self) -> PassphraseOptions:
        """Build :class:`PassphraseOptions` from this section."""
        from keysmith.core.models import PassphraseOptions

        return PassphraseOptions(
            word_count=self.word_count,
            separator=self.separator,
            capitalize=self.capitalize,
            include_numbers=self.passphrase_numbers,
        )


@dataclass(frozen=False, slots=True)
class AnalyzerConfig:
    """Parameters for strength analysis and the sampler self-check.

    ``guesses_per_second`` models an offline attacker running a fast hash
    on commodity GPUs (roughly 10^10 guesses per second).
    """

    guesses_per_second: float = 1e10
    corpus_path: Optional[str] = None
    uniformity_samples: int = 100_000
    uniformity_bound: int = 384


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class KeysmithConfig:
    """Master configuration aggregating every section.

    Usage:
        >>> config = KeysmithConfig.load()                  # from default path
        >>> config = KeysmithConfig.load("custom.toml")     # from custom path
        >>> config.generator.length
        16
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    generator: GeneratorConfig = field(default_factory=GeneratorConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> KeysmithConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``keysmith.toml`` in the
        project root and falls back to pure defaults when it is absent.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`KeysmithConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            generator=cls._build_section(GeneratorConfig, raw.get("generator", {})),
            analyzer=cls._build_section(AnalyzerConfig, raw.get("analyzer", {})),
        )

    @staticmethod
    def _build_section(section: type[_Section], table: dict[str, Any]) -> _Section:
        declared = {f.name for f in fields(section)}  # type: ignore[arg-type]
        return section(**{key: table[key] for key in table.keys() & declared})
