"""Click callback for the repeatable ``--marker`` option."""

import click

from wraptest.config import InvalidMarkerError, get_test_markers

from .log_level_parser import normalize_items


def parse_markers(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> frozenset[str]:
    """Return the full marker allow-list: defaults, environment and ``value``.

    Raises:
        click.BadParameter: If a marker is not a dotted name.
    """
    try:
        return get_test_markers(normalize_items(value))
    except InvalidMarkerError as e:
        raise click.BadParameter(str(e)) from e
