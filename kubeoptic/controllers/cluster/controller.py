"""Cluster controller backed by the ``kubectl`` CLI.

Contexts come straight from the kubeconfig file; namespaces and workloads are
listed with ``kubectl get -o json`` in a worker thread; logs are streamed from
a ``kubectl logs -f`` subprocess.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import subprocess
from pathlib import Path
from typing import Any

from kubeoptic.constants.timeouts import CLUSTER_REQUEST_TIMEOUT, KUBECTL_COMMAND_TIMEOUT
from kubeoptic.controllers.base import (
    BaseController,
    ClusterCommandError,
    LogStreamOpenError,
)
from kubeoptic.controllers.cluster.log_stream import KubectlLogStream
from kubeoptic.controllers.cluster.parsers import (
    KubeconfigParser,
    ResourceParser,
    discover_kubeconfig,
)
from kubeoptic.models.core import ContextInfo, NamespaceInfo, WorkloadInfo

logger = logging.getLogger(__name__)


class KubectlController(BaseController):
    """Lists resources and opens log streams through ``kubectl``."""

    _CONNECTION_ERROR_TOKENS = (
        "unable to connect to the server",
        "you must be logged in",
        "context deadline exceeded",
        "timed out",
        "certificate",
        "no such host",
        "forbidden",
        "unauthorized",
    )

    def __init__(
        self,
        context: str | None = None,
        kubeconfig: str | os.PathLike[str] | None = None,
        kubectl: str = "kubectl",
    ) -> None:
        super().__init__(context)
        self.kubeconfig = str(kubeconfig) if kubeconfig else None
        self.kubectl = kubectl
        self._kubeconfig_parser = KubeconfigParser()
        self._resource_parser = ResourceParser()

    # ------------------------------------------------------------------
    # kubectl plumbing
    # ------------------------------------------------------------------

    def _base_command(self) -> list[str]:
        cmd = [self.kubectl]
        if self.kubeconfig:
            cmd.extend(["--kubeconfig", self.kubeconfig])
        if self.context:
            cmd.extend(["--context", self.context])
        return cmd

    @classmethod
    def _summarize_error(cls, stderr: str) -> str:
        """Extract a concise, user-facing error from kubectl output."""
        lines = [line.strip() for line in stderr.splitlines() if line.strip()]
        if not lines:
            return "kubectl command failed"
        selected = lines[-1]
        for line in reversed(lines):
            lower_line = line.lower()
            if line.startswith("error:") or any(
                token in lower_line for token in cls._CONNECTION_ERROR_TOKENS
            ):
                selected = line
                break
        cleaned = selected.removeprefix("error:").strip()
        if len(cleaned) > 160:
            return f"{cleaned[:157].rstrip()}..."
        return cleaned or "kubectl command failed"

    def _run_kubectl_sync(
        self,
        args: tuple[str, ...],
        timeout: int = KUBECTL_COMMAND_TIMEOUT,
    ) -> str:
        """Run a kubectl command synchronously (thread-safe wrapper target)."""
        cmd = [*self._base_command(), *args]
        try:
            result = subprocess.run(
                cmd, capture_output=True, text=True, timeout=timeout
            )
        except subprocess.TimeoutExpired as exc:
            raise ClusterCommandError(
                f"kubectl timed out after {timeout}s", command=tuple(cmd)
            ) from exc
        except OSError as exc:
            raise ClusterCommandError(
                f"cannot run kubectl: {exc}", command=tuple(cmd)
            ) from exc
        if result.returncode != 0:
            raise ClusterCommandError(
                self._summarize_error(result.stderr or ""), command=tuple(cmd)
            )
        return result.stdout

    async def _run_kubectl(self, args: tuple[str, ...]) -> str:
        return await asyncio.to_thread(self._run_kubectl_sync, args)

    async def _get_json(self, *args: str) -> dict[str, Any]:
        output = await self._run_kubectl(
            ("get", *args, "-o", "json", f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}")
        )
        try:
            payload = json.loads(output)
        except json.JSONDecodeError as exc:
            raise ClusterCommandError(f"invalid JSON from kubectl get {args[0]}") from exc
        return payload if isinstance(payload, dict) else {}

    # ------------------------------------------------------------------
    # BaseController
    # ------------------------------------------------------------------

    def resolve_kubeconfig(self) -> Path:
        """Return the kubeconfig path in use, discovering it when unset."""
        return discover_kubeconfig(self.kubeconfig)

    async def list_contexts(self) -> list[ContextInfo]:
        path = self.resolve_kubeconfig()
        contexts = await asyncio.to_thread(self._kubeconfig_parser.read_contexts, path)
        logger.debug("Loaded %d contexts from %s", len(contexts), path)
        return contexts

    async def list_namespaces(self) -> list[NamespaceInfo]:
        payload = await self._get_json("namespaces")
        return self._resource_parser.parse_namespaces(payload)

    async def list_workloads(self, namespace: str) -> list[WorkloadInfo]:
        payload = await self._get_json("pods", "--namespace", namespace)
        return self._resource_parser.parse_workloads(payload, namespace)

    async def open_log_stream(self, workload: WorkloadInfo) -> KubectlLogStream:
        try:
            await self._run_kubectl(
                ("get", "pod", workload.name, "--namespace", workload.namespace, "-o", "name")
            )
        except ClusterCommandError as exc:
            raise LogStreamOpenError(f"{workload.identity}: {exc}") from exc

        cmd = [
            *self._base_command(),
            "logs",
            "--follow",
            "--timestamps",
            workload.name,
            "--namespace",
            workload.namespace,
        ]
        if workload.container:
            cmd.extend(["--container", workload.container])
        return await KubectlLogStream.spawn(cmd, workload.identity)


__all__ = [
    "KubectlController",
]
