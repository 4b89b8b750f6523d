"""kubeoptic TUI Screens.

Domain Structure:
    - browser/ - Context, namespace and workload lists plus the log viewer
    - logs/    - Log viewer presenter and line rendering
    - mixins/  - Reusable screen mixins

Subpackages are imported directly, e.g.
``from kubeoptic.screens.browser import BrowserScreen``.
"""
