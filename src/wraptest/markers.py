"""Runtime side of the plain test marker.

Decorate a function with `test` (imported as ``from wraptest import test`` or
used as ``@wraptest.test``) to have the rewrite treat it as a synchronous or
asynchronous test. At runtime the decorator only tags the function.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

F = TypeVar("F", bound=Callable[..., object])

MARKER_ATTRIBUTE = "__wraptest_marker__"


def test(fn: F) -> F:
    """Mark ``fn`` as a test and return it unchanged."""
    setattr(fn, MARKER_ATTRIBUTE, True)
    return fn


test.__test__ = False  # type: ignore[attr-defined]  # keep pytest from collecting it
