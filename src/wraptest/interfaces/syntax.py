"""Interface for the syntax layer a transform runs on.

The transform only needs a small capability set from a parser: split a module
into ordered top-level items, look at an item's kind and decorators, view a
function item's signature pieces, build a delegating replacement for it, and
reassemble a module from items. Any parser/pretty-printer able to round-trip
source exactly can implement it.
"""

from __future__ import annotations

import abc
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

# pylint: disable=too-few-public-methods


class ItemKind(Enum):
    """Coarse classification of a top-level module item."""

    FUNCTION = "function"
    CLASS = "class"
    IMPORT = "import"
    STATEMENT = "statement"
    COMPOUND = "compound"


@dataclass(frozen=True)
class Attribute:
    """A decorator attached to an item.

    Attributes:
        path: Dotted name of the decorator (of the callee, for a decorator
            call such as ``@pytest.mark.asyncio(loop_scope="module")``), or
            ``None`` when the expression is not a dotted name.
        source: The decorator expression as written, without the ``@``.
    """

    path: str | None
    source: str


@dataclass(frozen=True)
class Delegation:
    """How a function body should hand over to a wrapper.

    Attributes:
        wrapper: Identifier (or dotted path) of the wrapper to call.
        thunk_name: Name of the nested zero-argument function holding the
            original body.
        awaited: When True the thunk is a coroutine function and the wrapper
            call is awaited.
    """

    wrapper: str
    thunk_name: str
    awaited: bool


class Item(abc.ABC):
    """One top-level item of a parsed module."""

    @abc.abstractmethod
    def kind(self) -> ItemKind:
        """Return the coarse kind of this item."""

    @abc.abstractmethod
    def attributes(self) -> tuple[Attribute, ...]:
        """Return the item's decorators in source order (empty if none)."""

    @abc.abstractmethod
    def as_function(self) -> FunctionView | None:
        """Return a function view when the item is a function definition."""

    @abc.abstractmethod
    def source(self) -> str:
        """Return the exact source text of the item."""


class FunctionView(abc.ABC):
    """Read access to a function item, plus the one rewrite it supports."""

    @property
    @abc.abstractmethod
    def name(self) -> str:
        """The function name."""

    @property
    @abc.abstractmethod
    def is_async(self) -> bool:
        """True for ``async def`` functions."""

    @property
    @abc.abstractmethod
    def type_params(self) -> str | None:
        """Source of the generic type parameter list, if any."""

    @property
    @abc.abstractmethod
    def return_type(self) -> str | None:
        """Source of the return annotation, if any."""

    @property
    @abc.abstractmethod
    def body(self) -> str:
        """Source of the function body."""

    @abc.abstractmethod
    def attributes(self) -> tuple[Attribute, ...]:
        """Return the function's decorators in source order."""

    @abc.abstractmethod
    def delegate(self, delegation: Delegation) -> Item:
        """Build a replacement item whose body delegates to a wrapper.

        The replacement keeps everything but the body. The original body is
        moved, unchanged, into a nested thunk named ``delegation.thunk_name``
        and the function returns the wrapper's result for that thunk.
        Inside the thunk the function's parameters stay bound to the enclosing
        scope, assignments included.
        """


class SyntaxTree(abc.ABC):
    """A parsed module: its ordered items and how to put them back together."""

    @property
    @abc.abstractmethod
    def items(self) -> Sequence[Item]:
        """Top-level items in source order."""

    @abc.abstractmethod
    def reassemble(self, items: Sequence[Item]) -> str:
        """Render a module made of ``items`` with this module's header and footer."""

    @abc.abstractmethod
    def module_comments(self) -> tuple[str, ...]:
        """Return the module's top-level full-line comments, in source order.

        Only comments starting in the first column between top-level items
        count. Comments trailing code or nested in a block are left out, and
        so is ``#`` text inside string literals.
        """


class SyntaxBackend(abc.ABC):
    """Contract for a parser able to produce a `SyntaxTree`."""

    @abc.abstractmethod
    def parse(self, source: str) -> SyntaxTree:
        """Parse module source.

        Raises:
            SyntaxParseError: If ``source`` is not valid Python.
        """


class SyntaxParseError(Exception):
    """Raised by a backend when module source cannot be parsed."""
