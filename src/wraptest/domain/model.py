"""Value objects describing a wrap configuration and a scanned module."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, TypeAlias

from wraptest.domain.errors import MissingWrapperError

if TYPE_CHECKING:
    from wraptest.interfaces.syntax import Attribute, FunctionView, Item


@dataclass(frozen=True)
class WrapConfig:
    """Which wrappers to route tests through.

    Raises:
        MissingWrapperError: If neither wrapper is set.
    """

    wrapper: str | None = None
    async_wrapper: str | None = None

    def __post_init__(self) -> None:
        if self.wrapper is None and self.async_wrapper is None:
            raise MissingWrapperError()


class Visibility(Enum):
    """Python visibility of a module-level name, by naming convention."""

    PUBLIC = "public"
    PRIVATE = "private"

    @classmethod
    def of(cls, name: str) -> Visibility:
        """Return PRIVATE for names with a leading underscore."""
        return cls.PRIVATE if name.startswith("_") else cls.PUBLIC


@dataclass(frozen=True)
class OtherItem:
    """An item emitted exactly as it was read."""

    position: int
    item: Item


@dataclass(frozen=True)
class TestFunction:  # pylint: disable=too-many-instance-attributes
    """A function carrying exactly one recognized test marker."""

    __test__ = False  # not a pytest test class

    position: int
    name: str
    visibility: Visibility
    type_params: str | None
    attributes: tuple[Attribute, ...]
    marker: str
    is_async: bool
    return_type: str | None
    body: str
    function: FunctionView = field(repr=False, compare=False)


ModuleItem: TypeAlias = "TestFunction | OtherItem"
