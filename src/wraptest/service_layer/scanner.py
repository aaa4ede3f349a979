"""Module scanner: find the test functions among a module's items."""

from __future__ import annotations

import logging
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from wraptest.domain.errors import AmbiguousTestMarkerError, TargetError
from wraptest.domain.model import OtherItem, TestFunction, Visibility

if TYPE_CHECKING:
    from wraptest.domain.model import ModuleItem
    from wraptest.interfaces.syntax import FunctionView, Item

logger = logging.getLogger(__name__)


@dataclass
class ScanResult:
    """Items of a module in source order, plus the per-test errors found."""

    items: list[ModuleItem] = field(default_factory=list)
    errors: list[TargetError] = field(default_factory=list)

    @property
    def tests(self) -> list[TestFunction]:
        """The items recognized as test functions."""
        return [item for item in self.items if isinstance(item, TestFunction)]


def _test_function(position: int, function: FunctionView, marker: str) -> TestFunction:
    return TestFunction(
        position=position,
        name=function.name,
        visibility=Visibility.of(function.name),
        type_params=function.type_params,
        attributes=function.attributes(),
        marker=marker,
        is_async=function.is_async,
        return_type=function.return_type,
        body=function.body,
        function=function,
    )


def scan_module(items: Sequence[Item], markers: Collection[str]) -> ScanResult:
    """Split ``items`` into test functions and pass-through items.

    A function with exactly one decorator whose path is in ``markers`` is a
    test. A function with several such decorators is recorded as an
    `AmbiguousTestMarkerError` and kept as an untouched item. Everything else
    passes through as `OtherItem`. Item order is preserved.

    Args:
        items: Top-level module items, in source order.
        markers: Recognized test-marker paths.

    Returns:
        ScanResult: The classified items and any ambiguity errors.
    """
    result = ScanResult()
    for position, item in enumerate(items):
        function = item.as_function()
        if function is None:
            result.items.append(OtherItem(position, item))
            continue

        found = [a.path for a in function.attributes() if a.path in markers]
        if not found:
            result.items.append(OtherItem(position, item))
        elif len(found) > 1:
            logger.debug("%s has %d test markers", function.name, len(found))
            result.errors.append(
                AmbiguousTestMarkerError(function.name, found, position=position)
            )
            result.items.append(OtherItem(position, item))
        else:
            logger.debug("Found test %s (@%s)", function.name, found[0])
            result.items.append(_test_function(position, function, found[0]))
    return result
