"""
Keysmith Console Output
========================

Rich-based console formatters for Keysmith results: generated secrets
with their entropy, the full strength report with a colour meter, the
quick check, minimum requirements and the uniformity self-check.

Uses the shared :class:`~shared.console.KeysmithConsole` for consistent
styling.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import KeysmithConsole
from keysmith.core.models import (
    GeneratedResult,
    MinimumRequirementsResult,
    QuickCheckResult,
    Strength,
    StrengthResult,
    UniformityReport,
)


# ===================================================================== #
#  Colour Maps
# ===================================================================== #

_STRENGTH_COLOURS: dict[Strength, str] = {
    Strength.WEAK: "bold red",
    Strength.MEDIUM: "bold yellow",
    Strength.STRONG: "bold green",
    Strength.VERY_STRONG: "bold bright_green",
}

_METER_WIDTH = 40


class KeysmithConsoleOutput:
    """Console output formatters for Keysmith results.

    Usage::

        output = KeysmithConsoleOutput(KeysmithConsole())
        output.display_generated([result])
        output.display_strength(strength_result)
    """

    def __init__(self, console: Optional[KeysmithConsole] = None) -> None:
        self.console = console or KeysmithConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Generation
    # ------------------------------------------------------------------ #

    def display_generated(
        self, results: Sequence[GeneratedResult], title: str = "Generated Password"
    ) -> None:
        """Print generated secrets, one per line, followed by a summary table.

        The secrets themselves are always printed, so ``--quiet`` output
        stays usable in shell pipelines.
        """
        self.console.section(title)
        for result in results:
            self.console.secret(result.password)

        if self.console.quiet or not results:
            return

        first = results[0]
        self.console.blank()
        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Entropy", f"{first.entropy:.2f} bits")
        tbl.add_row("Strength", self._strength_label(first.strength))
        if first.alphabet_size is not None:
            tbl.add_row("Character Pool", str(first.alphabet_size))
        if first.word_space_size is not None:
            tbl.add_row("Word List Size", str(first.word_space_size))
        if len(results) > 1:
            tbl.add_row("Count", str(len(results)))
        self._rich.print(tbl)

    # ------------------------------------------------------------------ #
    #  Strength Analysis
    # ------------------------------------------------------------------ #

    def display_strength(self, result: StrengthResult) -> None:
        """Display a full strength analysis with a visual meter."""
        self.console.section("Strength Analysis")

        self._rich.print(
            Panel(self._meter(result.score, result.strength),
                  title="Strength Meter", border_style="cyan")
        )

        if result.warning:
            self.console.warning(result.warning)

        tbl = Table(
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("Property", style="bold")
        tbl.add_column("Value")
        tbl.add_row("Entropy", f"{result.entropy:.2f} bits")
        tbl.add_row("Crack Time", result.crack_time)
        tbl.add_row("Crack Time (s)", f"{result.crack_time_seconds:.3e}")
        self._rich.print(tbl)

        if result.weaknesses:
            self._rich.print()
            self._rich.print("[bold]Weaknesses:[/bold]")
            for weakness in result.weaknesses:
                self._rich.print(f"  [yellow]⚠[/yellow] {weakness}")

        if result.feedback.suggestions:
            self._rich.print()
            self._rich.print("[bold]Suggestions:[/bold]")
            for suggestion in result.feedback.suggestions:
                self._rich.print(f"  [bright_cyan]•[/bright_cyan] {suggestion}")

    def display_quick(self, result: QuickCheckResult) -> None:
        """Display the quick strength estimate."""
        self.console.section("Quick Check")
        self._rich.print(self._meter(result.score, result.strength))
        self._rich.print(result.feedback)
        for weakness in result.weaknesses:
            self._rich.print(f"  [yellow]⚠[/yellow] {weakness}")

    def display_requirements(self, result: MinimumRequirementsResult) -> None:
        """Display the minimum requirements outcome."""
        self.console.section("Minimum Requirements")
        if result.meets:
            self.console.success("Password meets the minimum requirements")
            return
        self.console.warning("Password does not meet the minimum requirements")
        for item in result.missing:
            self._rich.print(f"  [red]✘[/red] {item}")

    # ------------------------------------------------------------------ #
    #  Self-test
    # ------------------------------------------------------------------ #

    def display_uniformity(self, report: UniformityReport) -> None:
        """Display the chi-squared uniformity self-check."""
        self.console.section("Random Source Self-Test")
        self.console.table(
            None,
            ["Property", "Value"],
            [
                ("Bound", report.bound),
                ("Samples", f"{report.samples:,}"),
                ("Chi-Squared", f"{report.chi_squared:.4f}"),
                ("p-value", f"{report.p_value:.6f}"),
                ("Max Index", report.max_observed),
            ],
            styles=["bold", ""],
        )

        if report.passed:
            self.console.success("Sampler output is consistent with a uniform distribution")
        else:
            self.console.error("Sampler output deviates from the uniform distribution")

    # ------------------------------------------------------------------ #
    #  Helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _strength_label(strength: Strength) -> Text:
        return Text(
            strength.value.replace("-", " ").upper(),
            style=_STRENGTH_COLOURS.get(strength, "white"),
        )

    def _meter(self, score: int, strength: Strength) -> Text:
        """Build a 0-100 colour bar followed by the strength label."""
        filled = max(0, min(_METER_WIDTH, int(score / 100 * _METER_WIDTH)))

        meter = Text()
        meter.append("Score: ", style="bold")
        meter.append(f"{score}/100  ")
        meter.append("[", style="dim")
        for i in range(_METER_WIDTH):
            if i >= filled:
                meter.append("░", style="dim")
            elif i < _METER_WIDTH * 0.40:
                meter.append("█", style="red")
            elif i < _METER_WIDTH * 0.60:
                meter.append("█", style="yellow")
            elif i < _METER_WIDTH * 0.80:
                meter.append("█", style="green")
            else:
                meter.append("█", style="bright_green")
        meter.append("]  ", style="dim")
        meter.append_text(self._strength_label(strength))
        return meter
