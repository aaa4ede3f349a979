"""Emitter: put the module back together."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from wraptest.domain.model import OtherItem

if TYPE_CHECKING:
    from wraptest.domain.model import ModuleItem
    from wraptest.interfaces.syntax import Item, SyntaxTree


def emit(
    tree: SyntaxTree, items: Sequence[ModuleItem], replacements: Mapping[int, Item]
) -> str:
    """Render ``items`` in order, substituting rewritten tests.

    Args:
        tree: The parsed module the items came from.
        items: Scanned items in source order.
        replacements: Rewritten functions keyed by item position.

    Returns:
        str: The module source. Pass-through items are byte-identical.
    """
    out: list[Item] = []
    for item in items:
        if isinstance(item, OtherItem):
            out.append(item.item)
        else:
            out.append(replacements[item.position])
    return tree.reassemble(out)
