"""Sync/async classification of test functions.

A test is async exactly when it is declared with ``async def``; the marker it
carries plays no part. Async tests need an ``async_wrapper`` and sync tests
need a ``wrapper``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from wraptest.domain.errors import (
    AsyncWrapperMissingError,
    TargetError,
    WrapperMissingError,
)
from wraptest.domain.model import TestFunction, WrapConfig

logger = logging.getLogger(__name__)


def resolve_wrapper(test: TestFunction, config: WrapConfig) -> str:
    """Return the wrapper that ``test`` must be routed through.

    Raises:
        AsyncWrapperMissingError: ``test`` is async and no async wrapper is set.
        WrapperMissingError: ``test`` is sync and no wrapper is set.
    """
    if test.is_async:
        if config.async_wrapper is None:
            raise AsyncWrapperMissingError(test.name, position=test.position)
        return config.async_wrapper
    if config.wrapper is None:
        raise WrapperMissingError(test.name, position=test.position)
    return config.wrapper


def classify(
    tests: Iterable[TestFunction], config: WrapConfig
) -> tuple[list[tuple[TestFunction, str]], list[TargetError]]:
    """Resolve a wrapper for every test, collecting failures instead of stopping.

    Args:
        tests: The scanned test functions, in source order.
        config: The parsed wrap configuration.

    Returns:
        A pair ``(resolved, errors)``: the tests paired with their wrapper, and
        one error per test that could not be paired.
    """
    resolved: list[tuple[TestFunction, str]] = []
    errors: list[TargetError] = []
    for test in tests:
        try:
            wrapper = resolve_wrapper(test, config)
        except TargetError as e:
            logger.debug("Cannot wrap %s: %s", test.name, e)
            errors.append(e)
        else:
            logger.debug(
                "%s test %s -> %s",
                "async" if test.is_async else "sync",
                test.name,
                wrapper,
            )
            resolved.append((test, wrapper))
    return resolved, errors
