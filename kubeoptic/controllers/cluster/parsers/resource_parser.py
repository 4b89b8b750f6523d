"""Resource parser for cluster controller - parses kubectl JSON into models."""

from __future__ import annotations

import logging
from typing import Any

from kubeoptic.constants.enums import NamespaceStatus, WorkloadStatus
from kubeoptic.models.core import NamespaceInfo, WorkloadInfo

logger = logging.getLogger(__name__)


class ResourceParser:
    """Parses ``kubectl get -o json`` list payloads."""

    @staticmethod
    def _items(payload: dict[str, Any]) -> list[dict[str, Any]]:
        items = payload.get("items") or []
        return [item for item in items if isinstance(item, dict)]

    @staticmethod
    def _coerce_status(enum_type: Any, raw: Any) -> Any:
        try:
            return enum_type(raw)
        except ValueError:
            return enum_type.UNKNOWN

    def parse_namespaces(self, payload: dict[str, Any]) -> list[NamespaceInfo]:
        """Parse a namespace list, sorted by name."""
        namespaces = []
        for item in self._items(payload):
            name = item.get("metadata", {}).get("name")
            if not name:
                continue
            phase = item.get("status", {}).get("phase")
            namespaces.append(
                NamespaceInfo(
                    name=name,
                    status=self._coerce_status(NamespaceStatus, phase),
                )
            )
        namespaces.sort(key=lambda namespace: namespace.name)
        return namespaces

    def parse_workloads(
        self,
        payload: dict[str, Any],
        namespace: str,
    ) -> list[WorkloadInfo]:
        """Parse a pod list into workloads, sorted by name.

        The first declared container is used when the pod has several.
        """
        workloads = []
        for item in self._items(payload):
            metadata = item.get("metadata", {})
            name = metadata.get("name")
            if not name:
                continue
            containers = item.get("spec", {}).get("containers") or []
            container = containers[0].get("name") if containers else None
            phase = item.get("status", {}).get("phase")
            workloads.append(
                WorkloadInfo(
                    name=name,
                    namespace=metadata.get("namespace") or namespace,
                    status=self._coerce_status(WorkloadStatus, phase),
                    container=container,
                    labels=metadata.get("labels") or {},
                )
            )
        workloads.sort(key=lambda workload: workload.name)
        return workloads
