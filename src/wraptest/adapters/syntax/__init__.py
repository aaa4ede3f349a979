"""Syntax backends implementing `wraptest.interfaces.syntax`."""

from .libcst_tree import LibCstBackend

__all__ = ["LibCstBackend"]
