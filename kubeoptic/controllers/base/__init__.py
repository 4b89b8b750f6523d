"""Base controller interfaces and cluster exceptions."""

from kubeoptic.controllers.base.base_controller import (
    BaseController,
    ClusterCommandError,
    ClusterError,
    KubeconfigError,
    LogStream,
    LogStreamOpenError,
    LogStreamReadError,
)

__all__ = [
    "BaseController",
    "ClusterCommandError",
    "ClusterError",
    "KubeconfigError",
    "LogStream",
    "LogStreamOpenError",
    "LogStreamReadError",
]
