"""Fixtures for end-to-end CLI tests.

Provides a test-only `log-demo` command for the logging options, a CliRunner,
an isolated filesystem per test, and a helper that writes test modules into it.
"""

import logging
from pathlib import Path
from textwrap import dedent

import click
import pytest
from click.testing import CliRunner

from wraptest.entrypoints.cli.main import wraptest

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a project logger and a third-party one."""
    logger = logging.getLogger("wraptest.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the top-level group for one test."""
    wraptest.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        wraptest.commands.pop("log-demo", None)
        for section in getattr(wraptest, "_section_set", []):
            getattr(section, "commands", {}).pop("log-demo", None)


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside an isolated working directory."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def write_module(fs):
    """Write dedented module source to a file in the isolated filesystem."""

    def _write(name: str, source: str) -> Path:
        path = Path(name)
        path.write_text(dedent(source).lstrip("\n"), encoding="utf-8")
        return path

    return _write
