"""Parsing of ``-L/--logger-level`` values.

Values arrive either as repeated options (``-L libcst=INFO -L wraptest=DEBUG``)
or as one comma/space separated string from ``WRAPTEST_LOGGER_LEVELS``. Both
end up as a ``{logger name: numeric level}`` mapping applied at startup.
"""

import logging
import re
from collections.abc import Iterable

import click

# libcst logs parser internals at DEBUG; keep it quiet unless asked
DEFAULT_LIB_LEVELS = {"libcst": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def normalize_items(value: str | Iterable[str]) -> list[str]:
    """Flatten option values into single items, splitting on commas and spaces.

    Example:
        ```py
        >>> normalize_items(("libcst=INFO, wraptest=DEBUG", "urllib3=ERROR"))
        ['libcst=INFO', 'wraptest=DEBUG', 'urllib3=ERROR']
        ```
    """
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def level_number(name: str) -> int:
    """Return the numeric level for a level name, in any case.

    Raises:
        ValueError: If ``name`` is not a standard logging level.
    """
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):  # unknown names come back as "Level <name>"
        raise ValueError(f"Invalid log level: {name}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | Iterable[str] | None,
) -> dict[str, int]:
    """Click callback turning NAME=LEVEL items into ``{name: level}``.

    `DEFAULT_LIB_LEVELS` is the starting point; later items override earlier
    ones for the same logger.

    Raises:
        click.BadParameter: If an item is not NAME=LEVEL or names no level.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in normalize_items(value or ()):
        name, sep, level_name = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        try:
            levels[name.strip()] = level_number(level_name)
        except ValueError as e:
            raise click.BadParameter(str(e)) from e
    return levels
