"""Function rewriter: route a test's body through its wrapper.

A synchronous test::

    @test
    def answer() -> int:
        return 42

becomes::

    @test
    def answer() -> int:
        def answer():
            return 42
        return setup(answer)

An asynchronous test gets an ``async def`` thunk, so handing it to the wrapper
does not start the body, and the wrapper call is awaited::

    @pytest.mark.asyncio
    async def fetch():
        async def fetch():
            ...
        return await setup_async(fetch)

The thunk is named after the test so tracebacks point at the test's name. It
takes no arguments and closes over the test's parameters, so fixtures are
still requested by the outer signature. Generic parameters are left alone; the
wrapper has to accept whatever thunk it is given.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from wraptest.interfaces.syntax import Delegation

if TYPE_CHECKING:
    from wraptest.domain.model import TestFunction
    from wraptest.interfaces.syntax import Item

logger = logging.getLogger(__name__)


def delegation_for(test: TestFunction, wrapper: str) -> Delegation:
    """Describe how ``test`` hands its body to ``wrapper``."""
    return Delegation(wrapper=wrapper, thunk_name=test.name, awaited=test.is_async)


def rewrite(test: TestFunction, wrapper: str) -> Item:
    """Return the replacement item for ``test``.

    Args:
        test: A test function that passed classification.
        wrapper: The wrapper resolved for it.

    Returns:
        Item: The function with the same decorators, name and signature whose
        body calls ``wrapper`` with a thunk holding the original body.
    """
    delegation = delegation_for(test, wrapper)
    logger.debug(
        "Rewriting %s: %s%s(%s)",
        test.name,
        "await " if delegation.awaited else "",
        delegation.wrapper,
        delegation.thunk_name,
    )
    return test.function.delegate(delegation)
