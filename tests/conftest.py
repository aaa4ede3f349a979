"""Global pytest fixtures for WRAPTEST."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from wraptest.adapters.syntax import LibCstBackend


@pytest.fixture(autouse=True)
def _no_marker_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's WRAPTEST_MARKERS from leaking into tests."""
    monkeypatch.delenv("WRAPTEST_MARKERS", raising=False)


@pytest.fixture
def backend() -> LibCstBackend:
    """Return the default syntax backend."""
    return LibCstBackend()


@pytest.fixture
def run_module() -> Callable[[str], dict[str, Any]]:
    """Execute module source and return its namespace.

    Example:
        ```py
        def test_something(run_module):
            ns = run_module(transform(SOURCE, "wrapper = with_setup"))
            assert ns["test_it"]() == 42
        ```
    """

    def _run(source: str) -> dict[str, Any]:
        namespace: dict[str, Any] = {"__name__": "wrapped_module"}
        exec(compile(source, "<wrapped>", "exec"), namespace)  # pylint: disable=exec-used
        return namespace

    return _run
