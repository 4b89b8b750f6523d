"""Controllers module for kubeoptic TUI.

This module provides the cluster access interfaces and their kubectl-backed
implementation.
"""

from __future__ import annotations

# Base classes
from kubeoptic.controllers.base import (
    BaseController,
    ClusterCommandError,
    ClusterError,
    KubeconfigError,
    LogStream,
    LogStreamOpenError,
    LogStreamReadError,
)

# Cluster domain
from kubeoptic.controllers.cluster import KubectlController, KubectlLogStream

__all__ = [
    # Base
    "BaseController",
    "ClusterCommandError",
    "ClusterError",
    "KubeconfigError",
    # Cluster domain
    "KubectlController",
    "KubectlLogStream",
    "LogStream",
    "LogStreamOpenError",
    "LogStreamReadError",
]
