"""WRAPTEST CLI entry point.

Defines the top-level ``wraptest`` command (via Click-Extra) and registers
its subcommands.

Currently available commands
- ``wraptest rewrite``: rewrite one module so its tests run inside wrappers.
- ``wraptest check``: validate annotated modules without rewriting them.

Notes
- The CLI version is sourced from `wraptest.__version__` and displayed
  automatically by Click-Extra (``--version``).
- Logging goes to stderr; stdout carries rewritten source only.

Examples
    $ wraptest --version
    $ wraptest rewrite tests/test_api.py -o build/test_api.py
    $ wraptest check tests/test_*.py
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from wraptest import __version__
from wraptest.logging import LoggingOptions, configure_logging

from .commands import check, rewrite
from .helpers import parse_log_level


HELP = """WRAPTEST command-line interface.

    Rewrites Python test modules so that every test function runs inside a
    shared wrapper, giving all tests of a module the same setup and teardown
    without repeating it in each test body.
    """


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each additional repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    is_flag=True,
    help="Enable debug mode (enables extra developer diagnostics beyond -vvv).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Path to log file (overrides default flight recorder path).",
    default=Path(user_log_dir("wraptest", appauthor=False, ensure_exists=True))
    / "latest.log",
    envvar="WRAPTEST_LOG_PATH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="WRAPTEST_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    is_flag=True,
    help=(
        "Enable the in-memory flight recorder. Keeps the last N log records "
        "(tunable via WRAPTEST_FLIGHT_RECORDER_CAPACITY) at DEBUG granularity "
        "(unaffected by -v/-q) and writes them to --log-path when a "
        "WARNING/ERROR occurs, or on clean exit if --force-flush is set."
    ),
    default=True,
    envvar="WRAPTEST_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    is_flag=True,
    help=(
        "Force-flush the flight recorder buffer to --log-path on program exit. "
        "Normally the buffer only dumps on WARNING/ERROR."
    ),
    default=False,
    envvar="WRAPTEST_FORCE_FLUSH",
    show_default=True,
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set MINIMUM LEVEL for specific LOGGERS (NAME=LEVEL). Applies to both "
        "console and flight-recorder. Repeatable (e.g. -L libcst=INFO) or via "
        "WRAPTEST_LOGGER_LEVELS (comma/space list)."
    ),
    default=("libcst=WARNING",),
    envvar="WRAPTEST_LOGGER_LEVELS",
    show_default=True,
    show_envvar=True,
)
@clickx.pass_context
def wraptest(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """WRAPTEST command-line interface."""
    options = LoggingOptions(
        verbose=verbose_count,
        quiet=quiet_count,
        debug=debug,
        log_path=log_path,
        flight_recorder=flight_recorder,
        capacity=flight_recorder_capacity,
        force_flush=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )
    # None (auto) or True both allow color
    configure_logging(options, color=ctx.color is not False)
    ctx.call_on_close(logging.shutdown)


wraptest.add_command(rewrite)
wraptest.add_command(check)
