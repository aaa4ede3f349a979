"""Entrypoints (inbound adapters) for WRAPTEST.

Expose the transform to the outside world as a command-line build step. Parse
and validate inputs, call the service layer, and present results.

Dependency rule: may import `wraptest.service_layer`; avoid importing
`wraptest.adapters` directly.
"""
