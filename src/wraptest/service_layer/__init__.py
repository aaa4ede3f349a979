"""Service layer for WRAPTEST.

Orchestrates a transform pass: scan the parsed module, classify its tests,
rewrite them, and reassemble the module source.
"""
