"""Configuration utilities for WRAPTEST.

This module centralizes the recognized test markers and the environment
variables that extend them.
"""

import os
import re
from collections.abc import Iterable

from wraptest.domain.arguments import is_dotted_identifier

MARKERS_ENV_VAR = "WRAPTEST_MARKERS"  # pragma: no mutate
DIRECTIVE_PREFIX = "wraptest:"  # pragma: no mutate

# One plain marker and the async-runtime markers of the pytest plugins that
# run coroutine tests (pytest-asyncio, anyio, pytest-trio).
DEFAULT_TEST_MARKERS = frozenset(
    {
        "test",
        "wraptest.test",
        "pytest.mark.asyncio",
        "pytest.mark.anyio",
        "pytest.mark.trio",
    }
)


class InvalidMarkerError(Exception):
    """Raised when a configured test marker is not a dotted identifier path."""

    def __init__(self, marker: str) -> None:
        super().__init__(
            f"Invalid test marker {marker!r}: expected a dotted name such as "
            "'pytest.mark.asyncio'."
        )
        self.marker = marker


def split_markers(value: str) -> list[str]:
    """Split a comma/space separated marker list, dropping empty fragments."""
    return [s.lstrip("@") for s in re.split(r"[,\s]+", value) if s]


def get_test_markers(extra: Iterable[str] = ()) -> frozenset[str]:
    """Return the recognized test markers.

    Combines `DEFAULT_TEST_MARKERS`, the markers listed in the
    `WRAPTEST_MARKERS` environment variable, and ``extra``.

    Args:
        extra: Additional marker paths (e.g. from the command line). A
            leading ``@`` is ignored.

    Returns:
        frozenset[str]: The full allow-list.

    Raises:
        InvalidMarkerError: If any marker is not a dotted identifier path.
    """
    markers = set(DEFAULT_TEST_MARKERS)
    markers.update(split_markers(os.environ.get(MARKERS_ENV_VAR, "")))
    markers.update(marker.strip().lstrip("@") for marker in extra)
    for marker in markers:
        if not is_dotted_identifier(marker):
            raise InvalidMarkerError(marker)
    return frozenset(markers)
