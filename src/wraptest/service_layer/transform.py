"""Transform entry point.

`transform` is the library call a build step, code generator or linter uses to
rewrite a module: it parses the wrap configuration, scans the module, checks
every test against the configuration, rewrites the tests and reassembles the
module. It does no I/O and keeps no state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from wraptest.adapters.syntax import LibCstBackend
from wraptest.config import get_test_markers
from wraptest.domain.arguments import parse_wrap_args
from wraptest.domain.classifier import classify
from wraptest.domain.errors import ModuleSyntaxError, TargetErrorGroup
from wraptest.domain.model import WrapConfig
from wraptest.interfaces.syntax import SyntaxBackend, SyntaxParseError, SyntaxTree

from .emitter import emit
from .rewriter import rewrite
from .scanner import scan_module

logger = logging.getLogger(__name__)


def parse_source(module_source: str, backend: SyntaxBackend | None = None) -> SyntaxTree:
    """Parse ``module_source``, with libcst unless another backend is given.

    Raises:
        ModuleSyntaxError: If ``module_source`` is not valid Python.
    """
    backend = backend or LibCstBackend()
    try:
        return backend.parse(module_source)
    except SyntaxParseError as e:
        raise ModuleSyntaxError(str(e)) from e


def transform_tree(
    tree: SyntaxTree,
    config: str | WrapConfig,
    *,
    markers: Collection[str] | None = None,
) -> str:
    """Rewrite the tests of an already parsed module. See `transform`."""
    if not isinstance(config, WrapConfig):
        config = parse_wrap_args(config)
    allowed = get_test_markers(markers or ())

    scan = scan_module(tree.items, allowed)
    resolved, classify_errors = classify(scan.tests, config)

    if errors := scan.errors + classify_errors:
        # scan errors come first in the list but not necessarily in the module
        errors.sort(key=lambda e: e.position)
        raise TargetErrorGroup(errors)

    replacements = {test.position: rewrite(test, wrapper) for test, wrapper in resolved}
    logger.info(
        "Wrapped %d test function(s) among %d module item(s)",
        len(replacements),
        len(scan.items),
    )
    return emit(tree, scan.items, replacements)


def transform(
    module_source: str,
    config: str | WrapConfig,
    *,
    markers: Collection[str] | None = None,
    backend: SyntaxBackend | None = None,
) -> str:
    """Rewrite every test function in ``module_source`` to run inside its wrapper.

    Args:
        module_source: Source of the module to rewrite.
        config: The wrap argument list (``"wrapper = with_setup"``) or an
            already built `WrapConfig`.
        markers: Extra test-marker paths, recognized on top of the defaults
            and ``WRAPTEST_MARKERS`` (see `wraptest.config.get_test_markers`).
        backend: Syntax backend to parse with. Defaults to libcst.

    Returns:
        str: The rewritten module source.

    Raises:
        MissingWrapperError: If the configuration names no wrapper.
        InvalidArgumentError: If the configuration has a bad argument.
        InvalidMarkerError: If one of ``markers`` is not a dotted name.
        ModuleSyntaxError: If ``module_source`` is not valid Python.
        TargetErrorGroup: With every test that has ambiguous markers or no
            matching wrapper.
    """
    if not isinstance(config, WrapConfig):
        config = parse_wrap_args(config)
    return transform_tree(parse_source(module_source, backend), config, markers=markers)
