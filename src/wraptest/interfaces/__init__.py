"""Interfaces (application boundary) for WRAPTEST.

Defines the framework-free syntax contract the transform is written against:
ABCs for a parsed module, its items and function views, plus the small value
objects they exchange. Concrete syntax-tree libraries stay out of this package.

Dependency rule: this package is independent; do not import from any
`wraptest.*` modules. It may be imported by `wraptest.domain`,
`wraptest.service_layer` and `wraptest.adapters`.
"""
