"""Panel widgets for the resource hierarchy."""

from kubeoptic.widgets.panels.resource_list import ResourceList

__all__ = [
    "ResourceList",
]
