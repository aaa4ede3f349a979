"""Adapters (infrastructure) for WRAPTEST.

Provide concrete implementations of the syntax interfaces on top of a real
parser and code generator.

Dependency rule: may import `wraptest.interfaces`; the domain must not import
this package.
"""
