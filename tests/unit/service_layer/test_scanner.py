"""Unit tests for wraptest.service_layer.scanner.scan_module."""

import pytest

from tests.helpers.source import dedent
from wraptest.config import DEFAULT_TEST_MARKERS
from wraptest.domain.errors import AmbiguousTestMarkerError
from wraptest.domain.model import OtherItem, TestFunction, Visibility
from wraptest.service_layer.scanner import scan_module

SOURCE = dedent(
    """
    import pytest
    from wraptest import test


    def helper():
        return 1


    @test
    def test_sync() -> int:
        return helper()


    @pytest.mark.asyncio
    async def test_async():
        pass


    @pytest.mark.parametrize("x", [1, 2])
    def test_undecorated_by_marker(x):
        pass


    @test
    def _private_check():
        pass
    """
)


@pytest.fixture
def scan(backend):
    """Scan SOURCE with the default markers."""
    return scan_module(backend.parse(SOURCE).items, DEFAULT_TEST_MARKERS)


def test_item_order_is_preserved(scan):
    """Items come back in source order with their positions."""
    assert [item.position for item in scan.items] == list(range(7))


def test_only_marked_functions_are_tests(scan):
    """Functions without a recognized marker pass through untouched."""
    assert [t.name for t in scan.tests] == ["test_sync", "test_async", "_private_check"]
    other = [item for item in scan.items if isinstance(item, OtherItem)]
    assert len(other) == 4
    assert scan.errors == []


def test_test_function_fields(scan):
    """A TestFunction keeps the function's signature pieces and decorators."""
    sync, async_, private = scan.tests
    assert isinstance(sync, TestFunction)
    assert sync.marker == "test"
    assert sync.is_async is False
    assert sync.return_type == "int"
    assert sync.visibility is Visibility.PUBLIC
    assert [a.source for a in sync.attributes] == ["test"]
    assert "return helper()" in sync.body

    assert async_.marker == "pytest.mark.asyncio"
    assert async_.is_async is True
    assert async_.return_type is None

    assert private.visibility is Visibility.PRIVATE


def test_two_markers_are_ambiguous(backend):
    """A function with two recognized markers is reported, not rewritten."""
    source = dedent(
        """
        @test
        @pytest.mark.asyncio
        async def test_both():
            pass
        """
    )
    scan = scan_module(backend.parse(source).items, DEFAULT_TEST_MARKERS)
    assert scan.tests == []
    (error,) = scan.errors
    assert isinstance(error, AmbiguousTestMarkerError)
    assert error.test_name == "test_both"
    assert error.markers == ("test", "pytest.mark.asyncio")
    assert isinstance(scan.items[0], OtherItem)


def test_same_marker_twice_is_ambiguous(backend):
    """Repeating one marker is also more than one marker."""
    source = "@test\n@test\ndef twice():\n    pass\n"
    scan = scan_module(backend.parse(source).items, DEFAULT_TEST_MARKERS)
    assert [e.test_name for e in scan.errors] == ["twice"]


def test_marker_set_is_open(backend):
    """Any dotted path can be added to the recognized markers."""
    source = "@pytest.mark.unit\ndef check():\n    pass\n"
    items = backend.parse(source).items
    assert scan_module(items, DEFAULT_TEST_MARKERS).tests == []
    scan = scan_module(items, DEFAULT_TEST_MARKERS | {"pytest.mark.unit"})
    assert [t.name for t in scan.tests] == ["check"]


def test_methods_in_classes_are_not_scanned(backend):
    """Only top-level functions are considered."""
    source = dedent(
        """
        class TestGroup:
            @test
            def test_method(self):
                pass
        """
    )
    scan = scan_module(backend.parse(source).items, DEFAULT_TEST_MARKERS)
    assert scan.tests == []
