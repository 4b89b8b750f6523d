"""Core cluster resource models."""

from kubeoptic.models.core.resource_info import (
    ContextInfo,
    NamespaceInfo,
    SelectionState,
    WorkloadInfo,
)

__all__ = [
    "ContextInfo",
    "NamespaceInfo",
    "SelectionState",
    "WorkloadInfo",
]
