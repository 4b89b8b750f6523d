"""Cluster resource models browsed by the navigation screens."""

from pydantic import BaseModel

from kubeoptic.constants.enums import NamespaceStatus, WorkloadStatus


class ContextInfo(BaseModel):
    """One kubeconfig context."""

    name: str
    cluster: str = ""
    user: str = ""
    namespace: str | None = None
    is_current: bool = False


class NamespaceInfo(BaseModel):
    """One namespace of the selected context."""

    name: str
    status: NamespaceStatus = NamespaceStatus.UNKNOWN


class WorkloadInfo(BaseModel):
    """A running unit whose logs can be tailed."""

    name: str
    namespace: str
    status: WorkloadStatus = WorkloadStatus.UNKNOWN
    container: str | None = None
    labels: dict[str, str] = {}

    @property
    def identity(self) -> str:
        """Stable ``namespace/name`` identity used by log sources."""
        return f"{self.namespace}/{self.name}"


class SelectionState(BaseModel):
    """Current selection along the context -> namespace -> workload path."""

    context: str | None = None
    namespace: str | None = None
    workload: WorkloadInfo | None = None

    def select_context(self, name: str) -> None:
        """Select a context, clearing everything below it."""
        self.context = name
        self.namespace = None
        self.workload = None

    def select_namespace(self, name: str) -> None:
        """Select a namespace, clearing the workload below it."""
        self.namespace = name
        self.workload = None
