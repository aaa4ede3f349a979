"""Module directives: how a module asks to be rewritten.

A module opts in with a top-level comment line::

    # wraptest: wrapper = with_setup, async_wrapper = with_setup_async

The text after ``wraptest:`` is the wrap argument list handed to `transform`.
Directives are read from the parsed module's comments, so a comment trailing
a statement, a comment indented inside a block and ``# wraptest:`` text inside
a string literal are all ignored.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection

from wraptest.config import DIRECTIVE_PREFIX
from wraptest.domain.errors import InvalidArgumentError
from wraptest.interfaces.syntax import SyntaxBackend, SyntaxTree

from .transform import parse_source, transform_tree

logger = logging.getLogger(__name__)

DIRECTIVE_PATTERN = re.compile(rf"#\s*{re.escape(DIRECTIVE_PREFIX)}(?P<args>.*)")


def directive_args(tree: SyntaxTree) -> str | None:
    """Return the argument list of the parsed module's directive, if any.

    Raises:
        InvalidArgumentError: If the module has more than one directive.
    """
    found = [
        match.group("args").strip()
        for comment in tree.module_comments()
        if (match := DIRECTIVE_PATTERN.fullmatch(comment))
    ]
    if len(found) > 1:
        raise InvalidArgumentError(
            DIRECTIVE_PREFIX.rstrip(":"), "more than one directive in module"
        )
    return found[0] if found else None


def find_directive(source: str, *, backend: SyntaxBackend | None = None) -> str | None:
    """Return the argument list of the module's directive, if it has one.

    Raises:
        ModuleSyntaxError: If ``source`` is not valid Python.
        InvalidArgumentError: If the module has more than one directive.
    """
    return directive_args(parse_source(source, backend))


def transform_annotated(
    source: str,
    *,
    markers: Collection[str] | None = None,
    backend: SyntaxBackend | None = None,
) -> str | None:
    """Rewrite ``source`` using its own directive.

    Returns:
        str | None: The rewritten source, or None when the module has no
        directive and so is not subject to the rewrite.
    """
    tree = parse_source(source, backend)
    if (args := directive_args(tree)) is None:
        logger.debug("No %s directive; module left alone", DIRECTIVE_PREFIX)
        return None
    return transform_tree(tree, args, markers=markers)
