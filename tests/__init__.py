"""WRAPTEST test suite.

Folder taxonomy
- unit/   : Isolated, fast checks of a single module/class/function.
- e2e/    : The ``wraptest`` command line driven through Click's CliRunner.

General guidance
- Keep unit fast and deterministic (no real I/O).
- Behavioral checks execute rewritten source with ``exec`` rather than
  comparing text only.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
"""
