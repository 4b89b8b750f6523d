"""Log viewer presenter and line rendering."""
