"""Parser for the wrap argument list.

The argument list is a comma-separated sequence of ``key = value`` pairs, for
example ``"wrapper = with_setup, async_wrapper = with_setup_async"``. Order
does not matter and a trailing comma is accepted. Values name functions that
must be in scope of the rewritten module; they are not resolved here.
"""

from __future__ import annotations

import keyword

from wraptest.domain.errors import InvalidArgumentError
from wraptest.domain.model import WrapConfig

RECOGNIZED_KEYS = ("wrapper", "async_wrapper")


def is_dotted_identifier(value: str) -> bool:
    """Return True if ``value`` is ``name`` or ``name.name...`` with no keywords."""
    parts = value.split(".")
    return all(part.isidentifier() and not keyword.iskeyword(part) for part in parts)


def parse_wrap_args(source: str) -> WrapConfig:
    """Parse a raw argument list into a `WrapConfig`.

    Args:
        source: The argument list, e.g. ``"wrapper = with_setup"``.

    Returns:
        WrapConfig: The parsed configuration.

    Raises:
        InvalidArgumentError: On an unknown, duplicate or malformed argument.
        MissingWrapperError: If neither ``wrapper`` nor ``async_wrapper`` is given.
    """
    values: dict[str, str] = {}
    for entry in source.split(","):
        if not (entry := entry.strip()):
            continue
        key, sep, value = (part.strip() for part in entry.partition("="))
        if key not in RECOGNIZED_KEYS:
            raise InvalidArgumentError(key, "unexpected argument name")
        if key in values:
            raise InvalidArgumentError(key, "specified more than once")
        if not sep:
            raise InvalidArgumentError(key, "expected 'key = value'")
        if not is_dotted_identifier(value):
            raise InvalidArgumentError(key, f"{value!r} is not an identifier")
        values[key] = value

    # WrapConfig itself rejects an empty configuration
    return WrapConfig(**values)
