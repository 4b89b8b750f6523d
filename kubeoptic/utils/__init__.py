"""Utility functions for kubeoptic TUI."""

from kubeoptic.utils.log_export import export_filename, write_log_export

__all__ = [
    "export_filename",
    "write_log_export",
]
