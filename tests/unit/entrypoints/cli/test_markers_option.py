"""Unit tests for the ``--marker`` option callback."""

import types

import click
import pytest

from wraptest.config import DEFAULT_TEST_MARKERS
from wraptest.entrypoints.cli.helpers.markers import parse_markers


def test_no_value_gives_defaults():
    """Without --marker the defaults are returned."""
    assert parse_markers(types.SimpleNamespace(), None, ()) == DEFAULT_TEST_MARKERS


def test_values_are_added():
    """Repeated and comma separated values are all added."""
    out = parse_markers(types.SimpleNamespace(), None, ("pytest.mark.unit,a.b", "@c"))
    assert {"pytest.mark.unit", "a.b", "c"} <= out


def test_bad_marker_raises():
    """Invalid markers become click.BadParameter."""
    with pytest.raises(click.BadParameter):
        parse_markers(types.SimpleNamespace(), None, ("not-a-marker",))
