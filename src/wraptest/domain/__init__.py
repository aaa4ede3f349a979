"""Domain layer for WRAPTEST.

Contains the rules of the rewrite: the wrap configuration and its parser, the
records produced by scanning a module, the sync/async classification policy,
and the error hierarchy. This package performs no parsing of Python source.

Dependency rule: do not import from `wraptest.adapters` or `wraptest.entrypoints`.
"""
