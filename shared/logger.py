"""
Keysmith Structured Logger
===========================

Provides :class:`KeysmithLogger`, a :class:`logging.LoggerAdapter` bound
to one Keysmith component. Records go to a Rich handler on standard error
and, optionally, to a rotating log file as plain text or JSON lines.

Keyword arguments passed to the log methods become structured fields::

    log.info("Generated password", length=16, entropy=103.4)

Generated secrets and analysed passwords must never reach a log sink.
Every handler carries a :class:`_SecretMaskFilter` that replaces the
value of the sensitive fields ``password``, ``passphrase`` and ``secret``
before any formatter sees the record.

References:
    - Python logging cookbook, "Adding contextual information to your
      logging output". https://docs.python.org/3/howto/logging-cookbook.html
    - Rich library. https://github.com/Textualize/rich
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Iterator, MutableMapping

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

_RICH_THEME = Theme(
    {
        "logging.level.debug": "dim cyan",
        "logging.level.info": "bright_blue",
        "logging.level.warning": "bold yellow",
        "logging.level.error": "bold red",
        "logging.level.critical": "bold white on red",
    }
)

_PLAIN_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_PLAIN_DATEFMT = "%Y-%m-%dT%H:%M:%S%z"

SENSITIVE_FIELDS = frozenset({"password", "passphrase", "secret"})
MASK = "***"

# Keyword arguments understood by logging itself
_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})


# ========================== Filters & Formatters ===========================


class _SecretMaskFilter(logging.Filter):
    """Replace sensitive structured fields with :data:`MASK`."""

    def filter(self, record: logging.LogRecord) -> bool:
        fields = getattr(record, "keysmith_extra", None)
        if fields and SENSITIVE_FIELDS.intersection(fields):
            record.keysmith_extra = {
                name: MASK if name in SENSITIVE_FIELDS else value
                for name, value in fields.items()
            }
        return True


class _JSONLinesFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp``, ``level``, ``logger``, ``message``, then
    ``component`` and ``operation`` when bound, ``extra`` when structured
    fields were given and ``exc_info`` for exceptions.
    """

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": created.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in ("component", "operation"):
            value = getattr(record, name, None)
            if value is not None:
                entry[name] = value

        fields = getattr(record, "keysmith_extra", None)
        if fields:
            entry["extra"] = fields
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=False, default=str)


def _console_handler(level: int) -> logging.Handler:
    handler = RichHandler(
        console=Console(theme=_RICH_THEME, stderr=True),
        level=level,
        show_path=False,
        rich_tracebacks=True,
        markup=False,
    )
    handler.addFilter(_SecretMaskFilter())
    return handler


def _file_handler(
    path: Path, level: int, json_logs: bool, max_bytes: int, backup_count: int
) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(
        _JSONLinesFormatter() if json_logs
        else logging.Formatter(_PLAIN_FORMAT, datefmt=_PLAIN_DATEFMT)
    )
    handler.addFilter(_SecretMaskFilter())
    return handler


class _Stopwatch:
    """Elapsed wall-clock time since construction."""

    def __init__(self) -> None:
        self._start = time.perf_counter()

    @property
    def elapsed(self) -> float:
        return time.perf_counter() - self._start


# ========================== KeysmithLogger =================================


class KeysmithLogger(logging.LoggerAdapter):
    """Component-bound logger with structured fields and an operation scope.

    Usage::

        log = KeysmithLogger("engine", log_level="DEBUG")
        with log.operation("passphrase"):
            log.info("Generated passphrase", entropy=51.6)

    Args:
        component:       Component name; the logger is ``keysmith.<component>``.
        log_level:       Minimum severity name (DEBUG ... CRITICAL).
        log_file:        Rotating log file, or ``None`` for no file output.
        json_logs:       Write JSON lines instead of plain text to the file.
        max_bytes:       Rotation threshold of the log file (default 10 MiB).
        backup_count:    Rotated files to keep.
        console_output:  Attach the Rich handler on standard error.
    """

    def __init__(
        self,
        component: str,
        *,
        log_level: str = "WARNING",
        log_file: str | Path | None = None,
        json_logs: bool = False,
        max_bytes: int = 10 * 1024 * 1024,
        backup_count: int = 5,
        console_output: bool = True,
    ) -> None:
        logger = logging.getLogger(f"keysmith.{component}")
        super().__init__(logger, {"component": component})
        self._component = component
        self._operation: str | None = None

        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
        logger.setLevel(level)
        logger.propagate = False

        # Rebinding a component replaces its handlers
        for old in list(logger.handlers):
            logger.removeHandler(old)
            old.close()
        if console_output:
            logger.addHandler(_console_handler(level))
        if log_file is not None:
            logger.addHandler(
                _file_handler(Path(log_file), level, json_logs, max_bytes, backup_count)
            )

    @classmethod
    def from_config(cls, component: str, config: Any) -> KeysmithLogger:
        """Build a logger from a :class:`~shared.config.GlobalConfig`."""
        return cls(
            component,
            log_level="DEBUG" if config.debug else config.log_level,
            log_file=config.log_file,
            json_logs=config.log_json,
        )

    def process(
        self, msg: Any, kwargs: MutableMapping[str, Any]
    ) -> tuple[Any, MutableMapping[str, Any]]:
        """Move structured keyword fields into the record's ``extra``."""
        fields = {k: kwargs.pop(k) for k in list(kwargs) if k not in _LOGGING_KWARGS}
        extra = dict(kwargs.get("extra") or {})
        extra["component"] = self._component
        extra["operation"] = self._operation
        if fields:
            extra["keysmith_extra"] = fields
        kwargs["extra"] = extra
        return msg, kwargs

    @contextmanager
    def operation(self, name: str) -> Iterator[KeysmithLogger]:
        """Tag every record inside the block with ``operation=name``."""
        previous, self._operation = self._operation, name
        try:
            yield self
        finally:
            self._operation = previous

    @contextmanager
    def timed(self, label: str) -> Iterator[_Stopwatch]:
        """Log start and completion of *label* at DEBUG with elapsed seconds."""
        watch = _Stopwatch()
        self.debug("Started: %s", label)
        try:
            yield watch
        finally:
            self.debug("Completed: %s (%.3f sec)", label, watch.elapsed)
