"""isogrid test suite.

Folder taxonomy
- unit/  : Isolated, fast checks of a single module/class/function.
- e2e/   : The ``isogrid`` CLI driven through click's CliRunner.

General guidance
- Keep unit tests fast and deterministic; build a fresh settings provider per
  test instead of relying on process-wide state.
- Property-based tests live with the layer they exercise and use
  @pytest.mark.property.
- Markers: unit, e2e, property
"""
