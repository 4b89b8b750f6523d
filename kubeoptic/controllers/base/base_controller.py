"""Base controller interfaces for kubeoptic.

Screens depend only on ``BaseController`` and ``LogStream``; the kubectl
implementation lives in ``controllers.cluster``. All methods are coroutines so
they can run inside Textual workers without blocking the UI.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from kubeoptic.models.core import ContextInfo, NamespaceInfo, WorkloadInfo

logger = logging.getLogger(__name__)


# ============================================================================
# Exceptions
# ============================================================================


class ClusterError(Exception):
    """Base exception for cluster access failures."""


class ClusterCommandError(ClusterError):
    """A kubectl invocation failed or timed out."""

    def __init__(self, message: str, *, command: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.command = command


class KubeconfigError(ClusterError):
    """The kubeconfig file is missing or malformed."""


class LogStreamOpenError(ClusterError):
    """A log stream could not be opened (workload not found, unavailable)."""


class LogStreamReadError(ClusterError):
    """A transient failure while reading an open log stream."""


# ============================================================================
# Interfaces
# ============================================================================


class LogStream(ABC):
    """An open, readable log source for a single workload."""

    @abstractmethod
    async def read_chunk(self, timeout: float) -> str | None:
        """Read the next chunk of text.

        Returns:
            A non-empty chunk, or None at end of stream.

        Raises:
            LogStreamReadError: Transient read failure; the caller may retry.
            TimeoutError: No data arrived within ``timeout`` seconds.
        """
        ...

    @abstractmethod
    async def close(self) -> None:
        """Release the underlying resource. Safe to call more than once."""
        ...


class BaseController(ABC):
    """Resource listing and log access for one cluster context."""

    def __init__(self, context: str | None = None) -> None:
        self.context = context

    def use_context(self, context: str | None) -> None:
        """Point subsequent calls at another kubeconfig context."""
        if context != self.context:
            logger.debug("Switching controller context to %s", context)
        self.context = context

    @abstractmethod
    async def list_contexts(self) -> list[ContextInfo]:
        ...

    @abstractmethod
    async def list_namespaces(self) -> list[NamespaceInfo]:
        ...

    @abstractmethod
    async def list_workloads(self, namespace: str) -> list[WorkloadInfo]:
        ...

    @abstractmethod
    async def open_log_stream(self, workload: WorkloadInfo) -> LogStream:
        """Open a follow-mode log stream for ``workload``.

        Raises:
            LogStreamOpenError: The stream cannot be opened.
        """
        ...
