"""Logging setup for the WRAPTEST CLI.

Two sinks hang off the root logger:

* a Rich console handler on **stderr** (stdout carries rewritten source), whose
  threshold follows ``-v``/``-q``;
* an optional "flight recorder": a `MemoryHandler` that keeps the last records
  at DEBUG and dumps them to a log file once something goes wrong, so a failed
  rewrite can be diagnosed after the fact without rerunning it with ``-vv``.

`configure_logging` wires both from a `LoggingOptions` and logs the startup
diagnostics.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from dataclasses import dataclass, field
from importlib.metadata import PackageNotFoundError, version
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from wraptest import __version__
from wraptest.config import MARKERS_ENV_VAR

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "wraptest"

# same choices as click-extra's --color / --no-color
ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a ``[package]`` prefix.

    Records from ``wraptest.*`` loggers get an empty prefix. The filter never
    drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "libcst._parser.entrypoints" -> "[libcst]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


@dataclass(frozen=True)
class LoggingOptions:  # pylint: disable=too-many-instance-attributes
    """Logging choices collected from the command line.

    Attributes:
        verbose: Number of ``-v`` flags.
        quiet: Number of ``-q`` flags.
        debug: Show timestamps, logger names and source paths on the console.
        log_path: Where the flight recorder dumps its buffer.
        flight_recorder: Whether the flight recorder is installed at all.
        capacity: Number of records the flight recorder keeps.
        force_flush: Dump the buffer on exit even when nothing went wrong.
        logger_levels: Minimum level per logger name.
    """

    verbose: int = 0
    quiet: int = 0
    debug: bool = False
    log_path: Path | None = None
    flight_recorder: bool = True
    capacity: int = 2000
    force_flush: bool = False
    logger_levels: dict[str, int] = field(default_factory=dict)

    @property
    def console_level(self) -> int:
        """WARNING moved one level per ``-v``/``-q``, clamped to DEBUG..CRITICAL."""
        level = logging.WARNING - 10 * self.verbose + 10 * self.quiet
        return max(logging.DEBUG, min(logging.CRITICAL, level))


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Return a Rich handler writing to stderr.

    Args:
        level: Console threshold; forced to DEBUG in debug mode.
        debug_mode: Add timestamps, logger names and clickable source paths.
        color: Let Rich pick a color system; False disables color.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Return a buffering handler that dumps into ``path`` on demand.

    The buffer is written out when it fills, when a record at ``flush_level``
    or above arrives, and on close if ``flush_on_close`` is set. ``path`` is
    truncated when the handler is created, so each run gets a fresh file.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8")
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def _libcst_version() -> str:
    try:
        return version("libcst")
    except PackageNotFoundError:  # pragma: no cover
        return "<unknown>"


def log_startup(
    logger: logging.Logger, options: LoggingOptions, handlers: list[logging.Handler]
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics.

    The diagnostics are mostly read from the flight-recorder file, where they
    are always present regardless of ``-v``/``-q``.
    """
    logger.info(
        "WRAPTEST %s - console=%s, flight-recorder=%s",
        __version__,
        logging.getLevelName(options.console_level),
        "ON" if options.flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("libcst: %s", _libcst_version())
    logger.debug("%s: %s", MARKERS_ENV_VAR, os.environ.get(MARKERS_ENV_VAR, "<unset>"))
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if options.flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            options.log_path,
            options.capacity,
            options.force_flush,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in options.logger_levels.items()}
        or "<none>",
    )


def configure_logging(
    options: LoggingOptions, color: bool = True
) -> list[logging.Handler]:
    """Install the console handler and flight recorder on the root logger.

    The root logger passes everything through; each handler applies its own
    threshold, and ``options.logger_levels`` narrows individual loggers for
    both of them.

    Returns:
        list[logging.Handler]: The installed handlers.
    """
    handlers: list[logging.Handler] = [
        config_console_handler(
            level=options.console_level, debug_mode=options.debug, color=color
        )
    ]
    if options.flight_recorder and options.log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=options.log_path,
                capacity=options.capacity,
                flush_on_close=options.force_flush,
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in options.logger_levels.items():
        logging.getLogger(name).setLevel(level)

    log_startup(logging.getLogger(__name__), options, handlers)
    return handlers
