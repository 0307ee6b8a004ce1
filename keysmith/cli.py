"""
Keysmith CLI
=============

Click-based command-line interface for the Keysmith generator and
strength analyzer.

Usage::

    python -m keysmith password --length 24 --count 3
    python -m keysmith passphrase --words 6 --separator space
    python -m keysmith memorable long
    python -m keysmith analyze "Tr0ub4dor&3"
    python -m keysmith quick "hunter2"
    python -m keysmith requirements "MyPassword123"
    python -m keysmith --output json selftest --bound 384

Option defaults for ``password`` and ``passphrase`` come from the
``[generator]`` table of the configuration file and can be overridden
on the command line.

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import asyncio
import json
from typing import Any, Optional, Sequence

import click
from pydantic import BaseModel, ValidationError

from shared.config import KeysmithConfig
from shared.console import KeysmithConsole

from keysmith import __version__
from keysmith.core.engine import KeysmithEngine
from keysmith.core.errors import KeysmithError
from keysmith.core.models import (
    Capitalization,
    GenerationOptions,
    MemorableTier,
    PassphraseOptions,
    Separator,
)
from keysmith.output.console import KeysmithConsoleOutput


# ===================================================================== #
#  CLI Group
# ===================================================================== #

def _default_map(config: KeysmithConfig) -> dict[str, dict[str, Any]]:
    """Map the ``[generator]`` and ``[analyzer]`` tables onto option defaults."""
    password_opts = config.generator.generation_options()
    phrase_opts = config.generator.passphrase_options()
    return {
        "password": {
            "length": password_opts.length,
            "count": config.generator.count,
            "uppercase": password_opts.include_uppercase,
            "lowercase": password_opts.include_lowercase,
            "numbers": password_opts.include_numbers,
            "symbols": password_opts.include_symbols,
            "exclude_ambiguous": password_opts.exclude_ambiguous,
        },
        "passphrase": {
            "words": phrase_opts.word_count,
            "separator": phrase_opts.separator.value,
            "capitalize": phrase_opts.capitalize.value,
            "numbers": phrase_opts.include_numbers,
        },
        "selftest": {
            "bound": config.analyzer.uniformity_bound,
            "samples": config.analyzer.uniformity_samples,
        },
    }


@click.group()
@click.version_option(__version__, prog_name="keysmith")
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a Keysmith configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Print only the results (no banner, tables or hints).",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    quiet: bool,
) -> None:
    """Keysmith -- password & passphrase generator and strength analyzer."""
    ctx.ensure_object(dict)

    keysmith_config = KeysmithConfig.load(config) if config else KeysmithConfig()
    try:
        ctx.default_map = _default_map(keysmith_config)
    except ValidationError as exc:
        raise click.BadParameter(
            f"invalid [generator] settings\n{exc}",
            param_hint="--config",
        ) from exc
    ctx.obj["config"] = keysmith_config
    ctx.obj["output_format"] = output

    console = KeysmithConsole(quiet=quiet or output == "json")
    ctx.obj["console"] = console
    ctx.obj["errors"] = KeysmithConsole(stderr=True)
    ctx.obj["engine"] = KeysmithEngine(keysmith_config)
    ctx.obj["display"] = KeysmithConsoleOutput(console)

    console.banner(version=__version__)


def _emit_json(payload: BaseModel | Sequence[BaseModel]) -> None:
    if isinstance(payload, BaseModel):
        data: Any = payload.model_dump(mode="json")
    else:
        data = [item.model_dump(mode="json") for item in payload]
    click.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _fail(ctx: click.Context, exc: KeysmithError) -> None:
    """Report a Keysmith error and exit with status 1."""
    ctx.obj["errors"].error(str(exc))
    ctx.exit(1)


# ===================================================================== #
#  Generation Subcommands
# ===================================================================== #

@cli.command()
@click.option("--length", "-l", type=click.IntRange(min=1), default=16,
              show_default=True, help="Number of characters.")
@click.option("--count", "-n", type=click.IntRange(min=1), default=1,
              show_default=True, help="Number of passwords to generate.")
@click.option("--uppercase/--no-uppercase", default=True, help="Include A-Z.")
@click.option("--lowercase/--no-lowercase", default=True, help="Include a-z.")
@click.option("--numbers/--no-numbers", default=True, help="Include 0-9.")
@click.option("--symbols/--no-symbols", default=True, help="Include symbols.")
@click.option("--exclude-ambiguous/--allow-ambiguous", default=False,
              help="Drop look-alike characters such as I, l, 1, O and 0.")
@click.pass_context
def password(
    ctx: click.Context,
    length: int,
    count: int,
    uppercase: bool,
    lowercase: bool,
    numbers: bool,
    symbols: bool,
    exclude_ambiguous: bool,
) -> None:
    """Generate random character passwords."""
    engine: KeysmithEngine = ctx.obj["engine"]
    display: KeysmithConsoleOutput = ctx.obj["display"]

    options = GenerationOptions(
        length=length,
        include_uppercase=uppercase,
        include_lowercase=lowercase,
        include_numbers=numbers,
        include_symbols=symbols,
        exclude_ambiguous=exclude_ambiguous,
    )
    try:
        results = engine.generate_passwords(count, options)
    except KeysmithError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        _emit_json(results)
    else:
        display.display_generated(
            results, title="Generated Passwords" if count > 1 else "Generated Password"
        )


@cli.command()
@click.option("--words", "-w", type=int, default=5, show_default=True,
              help="Number of words (4-8).")
@click.option("--separator", "-s",
              type=click.Choice([s.value for s in Separator]),
              default=Separator.DASH.value, show_default=True,
              help="Word separator.")
@click.option("--capitalize",
              type=click.Choice([c.value for c in Capitalization]),
              default=Capitalization.FIRST.value, show_default=True,
              help="Which words get an uppercase first letter.")
@click.option("--numbers/--no-numbers", default=True,
              help="Append a random number (0-99).")
@click.pass_context
def passphrase(
    ctx: click.Context,
    words: int,
    separator: str,
    capitalize: str,
    numbers: bool,
) -> None:
    """Generate a Diceware-style passphrase."""
    engine: KeysmithEngine = ctx.obj["engine"]
    display: KeysmithConsoleOutput = ctx.obj["display"]

    options = PassphraseOptions(
        word_count=words,
        separator=Separator(separator),
        capitalize=Capitalization(capitalize),
        include_numbers=numbers,
    )
    try:
        result = engine.generate_passphrase(options)
    except KeysmithError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        _emit_json(result)
    else:
        display.display_generated([result], title="Generated Passphrase")


@cli.command()
@click.argument("tier", type=click.Choice([t.value for t in MemorableTier]),
                default=MemorableTier.MEDIUM.value)
@click.pass_context
def memorable(ctx: click.Context, tier: str) -> None:
    """Generate a memorable passphrase: short (4), medium (5) or long (6 words)."""
    engine: KeysmithEngine = ctx.obj["engine"]
    display: KeysmithConsoleOutput = ctx.obj["display"]

    try:
        result = engine.generate_memorable_passphrase(tier)
    except KeysmithError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        _emit_json(result)
    else:
        display.display_generated([result], title="Memorable Passphrase")


# ===================================================================== #
#  Analysis Subcommands
# ===================================================================== #

@cli.command()
@click.argument("password")
@click.pass_context
def analyze(ctx: click.Context, password: str) -> None:
    """Full strength analysis: entropy, patterns, crack time and suggestions."""
    engine: KeysmithEngine = ctx.obj["engine"]
    display: KeysmithConsoleOutput = ctx.obj["display"]

    try:
        result = asyncio.run(engine.analyze_password_strength(password))
    except KeysmithError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        _emit_json(result)
    else:
        display.display_strength(result)


@cli.command()
@click.argument("password")
@click.pass_context
def quick(ctx: click.Context, password: str) -> None:
    """Fast strength estimate, as used for feedback while typing."""
    engine: KeysmithEngine = ctx.obj["engine"]
    result = engine.quick_strength_check(password)

    if ctx.obj["output_format"] == "json":
        _emit_json(result)
    else:
        ctx.obj["display"].display_quick(result)


@cli.command()
@click.argument("password")
@click.pass_context
def requirements(ctx: click.Context, password: str) -> None:
    """Check the minimum password requirements."""
    engine: KeysmithEngine = ctx.obj["engine"]
    result = engine.meets_minimum_requirements(password)

    if ctx.obj["output_format"] == "json":
        _emit_json(result)
    else:
        ctx.obj["display"].display_requirements(result)


@cli.command()
@click.option("--bound", "-b", type=click.IntRange(min=2), default=384,
              show_default=True, help="Exclusive upper bound to sample.")
@click.option("--samples", "-n", type=click.IntRange(min=2), default=100_000,
              show_default=True, help="Number of draws.")
@click.pass_context
def selftest(ctx: click.Context, bound: int, samples: int) -> None:
    """Chi-squared uniformity self-test of the secure random source."""
    engine: KeysmithEngine = ctx.obj["engine"]
    console: KeysmithConsole = ctx.obj["console"]

    if samples < bound:
        raise click.BadParameter("must be at least --bound", param_hint="--samples")

    try:
        with console.status(f"Sampling {samples:,} indices below {bound}..."):
            report = engine.check_uniformity(bound=bound, samples=samples)
    except KeysmithError as exc:
        _fail(ctx, exc)
        return

    if ctx.obj["output_format"] == "json":
        _emit_json(report)
    else:
        ctx.obj["display"].display_uniformity(report)

    if not report.passed:
        ctx.exit(1)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the Keysmith CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
