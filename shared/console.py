"""
Keysmith Console Interface
===========================

Rich-powered console abstraction providing the presentation layer for
the Keysmith command line.

The class wraps :class:`rich.console.Console` and adds convenience methods
for the banner, section headers, severity-coloured messages, tables and
a status spinner, all with consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from contextlib import contextmanager
from itertools import zip_longest
from typing import Any, Iterable, Iterator, Sequence

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.status import Status
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all Keysmith output
# ---------------------------------------------------------------------------
_KEYSMITH_THEME = Theme(
    {
        "keysmith.banner": "bold bright_cyan",
        "keysmith.section": "bold bright_magenta",
        "keysmith.success": "bold green",
        "keysmith.warning": "bold yellow",
        "keysmith.error": "bold red",
        "keysmith.info": "bold bright_blue",
        "keysmith.dim": "dim white",
        "keysmith.highlight": "bold bright_white",
        "keysmith.secret": "bold bright_green",
    }
)

_BANNER_ART = r"""
[bright_cyan]
  ██╗  ██╗███████╗██╗   ██╗███████╗███╗   ███╗██╗████████╗██╗  ██╗
  ██║ ██╔╝██╔════╝╚██╗ ██╔╝██╔════╝████╗ ████║██║╚══██╔══╝██║  ██║
  █████╔╝ █████╗   ╚████╔╝ ███████╗██╔████╔██║██║   ██║   ███████║
  ██╔═██╗ ██╔══╝    ╚██╔╝  ╚════██║██║╚██╔╝██║██║   ██║   ██╔══██║
  ██║  ██╗███████╗   ██║   ███████║██║ ╚═╝ ██║██║   ██║   ██║  ██║
  ╚═╝  ╚═╝╚══════╝   ╚═╝   ╚══════╝╚═╝     ╚═╝╚═╝   ╚═╝   ╚═╝  ╚═╝
[/bright_cyan]"""

_TAGLINE = "Password & Passphrase Generator / Strength Analyzer"


class KeysmithConsole:
    """Unified console interface for the Keysmith CLI.

    Usage::

        con = KeysmithConsole()
        con.banner()
        con.section("Generated Password")
        con.success("Done")

    Args:
        quiet:  Suppress decorative output (banner, sections, info messages).
                Results and errors are still printed.
        record: Enable Rich recording so tests can export what was printed.
        stderr: Write to standard error instead of standard output.
    """

    def __init__(
        self, *, quiet: bool = False, record: bool = False, stderr: bool = False
    ) -> None:
        self._quiet = quiet
        self._console = Console(
            theme=_KEYSMITH_THEME,
            record=record,
            highlight=False,
            stderr=stderr,
        )

    # ------------------------------------------------------------------ #
    #  Properties
    # ------------------------------------------------------------------ #

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    @property
    def quiet(self) -> bool:
        return self._quiet

    # ------------------------------------------------------------------ #
    #  Banner & sections
    # ------------------------------------------------------------------ #

    def banner(self, version: str = "1.0.0") -> None:
        """Display the Keysmith ASCII-art banner.

        Args:
            version: Version string shown beneath the logo.
        """
        if self._quiet:
            return
        subtitle = (
            f"[keysmith.highlight]{_TAGLINE}[/keysmith.highlight]\n"
            f"[keysmith.dim]Version: {version}[/keysmith.dim]"
        )
        panel = Panel(
            Align.center(Text.from_markup(_BANNER_ART + "\n" + subtitle)),
            border_style="bright_cyan",
            padding=(1, 2),
        )
        self._console.print(panel)

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        if self._quiet:
            return
        self._console.rule(
            f"  {title}  ",
            style="keysmith.section",
            characters="─",
        )
        self._console.print()

    # ------------------------------------------------------------------ #
    #  Message helpers (severity-coloured)
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        """Print a success message."""
        self._console.print(
            f"[keysmith.success][✔] SUCCESS:[/keysmith.success] {message}"
        )

    def warning(self, message: str) -> None:
        """Print a warning message."""
        self._console.print(
            f"[keysmith.warning][⚠] WARNING:[/keysmith.warning] {message}"
        )

    def error(self, message: str) -> None:
        """Print an error message. Errors are shown even in quiet mode."""
        self._console.print(
            f"[keysmith.error][✘] ERROR:[/keysmith.error] {message}"
        )

    def info(self, message: str) -> None:
        """Print an informational message (suppressed when quiet)."""
        if self._quiet:
            return
        self._console.print(
            f"[keysmith.info][ℹ] INFO:[/keysmith.info] {message}"
        )

    def secret(self, value: str) -> None:
        """Print a generated secret verbatim, without markup interpretation."""
        self._console.print(Text(value, style="keysmith.secret"))

    # ------------------------------------------------------------------ #
    #  Tables, spinner, spacing
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str | None,
        headers: Sequence[str],
        rows: Iterable[Sequence[Any]],
        *,
        styles: Sequence[str] = (),
    ) -> None:
        """Render *rows* under *headers*; cells that are not Rich text are stringified.

        *styles* gives per-column styles, aligned with *headers*.
        """
        tbl = Table(
            title=title,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        for header, style in zip_longest(headers, styles[: len(headers)], fillvalue=""):
            tbl.add_column(header, style=style)
        for row in rows:
            tbl.add_row(*(cell if isinstance(cell, Text) else str(cell) for cell in row))
        self._console.print(tbl)

    @contextmanager
    def status(self, message: str) -> Iterator[Status]:
        """Show a transient spinner while the block runs."""
        with self._console.status(
            Text(message, style="keysmith.info"),
            spinner="dots",
            spinner_style="bright_cyan",
        ) as spinner:
            yield spinner

    def blank(self, count: int = 1) -> None:
        self._console.print("\n" * (count - 1))

    def export_text(self) -> str:
        """Plain text of everything printed so far (requires ``record=True``)."""
        return self._console.export_text()
