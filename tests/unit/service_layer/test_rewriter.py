"""Unit tests for wraptest.service_layer.rewriter."""

from tests.helpers.source import dedent
from wraptest.config import DEFAULT_TEST_MARKERS
from wraptest.interfaces.syntax import Delegation
from wraptest.service_layer.rewriter import delegation_for, rewrite
from wraptest.service_layer.scanner import scan_module

SOURCE = dedent(
    """
    @test
    def test_sync(tmp_path) -> int:
        return 1


    @test
    async def test_async():
        return 2
    """
)


def _tests(backend):
    return scan_module(backend.parse(SOURCE).items, DEFAULT_TEST_MARKERS).tests


def test_delegation_for_sync_and_async(backend):
    """The thunk is named after the test and only async tests await."""
    sync, async_ = _tests(backend)
    assert delegation_for(sync, "setup") == Delegation("setup", "test_sync", False)
    assert delegation_for(async_, "setup_async") == Delegation(
        "setup_async", "test_async", True
    )


def test_rewrite_keeps_signature(backend):
    """The replacement keeps decorators, parameters and annotation."""
    sync, _ = _tests(backend)
    source = rewrite(sync, "setup").source()
    assert source.startswith("@test\ndef test_sync(tmp_path) -> int:\n")
    assert "    def test_sync():\n        nonlocal tmp_path\n        return 1\n" in source
    assert source.endswith("    return setup(test_sync)\n")


def test_rewrite_async(backend):
    """An async test awaits its wrapper around an async thunk."""
    _, async_ = _tests(backend)
    source = rewrite(async_, "setup_async").source()
    assert "@test\nasync def test_async():\n" in source
    assert "    async def test_async():\n        return 2\n" in source
    assert source.endswith("    return await setup_async(test_async)\n")
