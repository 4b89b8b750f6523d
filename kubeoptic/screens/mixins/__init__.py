"""Screen mixins package for kubeoptic TUI."""

from kubeoptic.screens.mixins.worker_mixin import (
    DataLoaded,
    WorkerMixin,
)

__all__ = [
    "DataLoaded",
    "WorkerMixin",
]
