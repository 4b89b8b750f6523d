"""Shared fixtures: an in-memory controller and log stream for pilot tests."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from pathlib import Path

import pytest

from kubeoptic.app import KubeopticApp
from kubeoptic.constants.enums import WorkloadStatus
from kubeoptic.controllers.base import (
    BaseController,
    LogStream,
    LogStreamOpenError,
)
from kubeoptic.models.core import ContextInfo, NamespaceInfo, WorkloadInfo


class FakeLogStream(LogStream):
    """Replays queued chunks, then waits until closed or finished."""

    def __init__(self, chunks: Iterable[str] = (), *, finish: bool = False) -> None:
        self._queue: asyncio.Queue[str | None] = asyncio.Queue()
        for chunk in chunks:
            self._queue.put_nowait(chunk)
        if finish:
            self._queue.put_nowait(None)
        self.closed = False
        self.reads = 0

    def feed(self, chunk: str) -> None:
        self._queue.put_nowait(chunk)

    def finish(self) -> None:
        self._queue.put_nowait(None)

    async def read_chunk(self, timeout: float) -> str | None:
        if self.closed:
            return None
        self.reads += 1
        return await asyncio.wait_for(self._queue.get(), timeout)

    async def close(self) -> None:
        self.closed = True


class FakeController(BaseController):
    """Serves fixed contexts, namespaces and workloads."""

    def __init__(
        self,
        *,
        contexts: list[ContextInfo] | None = None,
        namespaces: list[NamespaceInfo] | None = None,
        workloads: dict[str, list[WorkloadInfo]] | None = None,
        stream: LogStream | None = None,
    ) -> None:
        super().__init__()
        self.contexts = contexts if contexts is not None else [
            ContextInfo(name="dev", cluster="dev-cluster", is_current=True),
            ContextInfo(name="prod", cluster="prod-cluster"),
        ]
        self.namespaces = namespaces if namespaces is not None else [
            NamespaceInfo(name="default"),
            NamespaceInfo(name="payments"),
        ]
        self.workloads = workloads if workloads is not None else {
            "default": [
                WorkloadInfo(name="api-7f9c", namespace="default", status=WorkloadStatus.RUNNING),
                WorkloadInfo(name="worker-5d2b", namespace="default", status=WorkloadStatus.PENDING),
            ],
        }
        self.stream = stream
        self.opened: list[WorkloadInfo] = []
        self.open_gate: asyncio.Event | None = None

    async def list_contexts(self) -> list[ContextInfo]:
        return list(self.contexts)

    async def list_namespaces(self) -> list[NamespaceInfo]:
        return list(self.namespaces)

    async def list_workloads(self, namespace: str) -> list[WorkloadInfo]:
        return list(self.workloads.get(namespace, []))

    async def open_log_stream(self, workload: WorkloadInfo) -> LogStream:
        self.opened.append(workload)
        if self.open_gate is not None:
            await self.open_gate.wait()
        if self.stream is None:
            raise LogStreamOpenError(f"{workload.identity}: pod not found")
        return self.stream


@pytest.fixture
def fake_stream() -> FakeLogStream:
    return FakeLogStream()


@pytest.fixture
def fake_controller(fake_stream: FakeLogStream) -> FakeController:
    return FakeController(stream=fake_stream)


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.json"


@pytest.fixture
def app(fake_controller: FakeController, settings_path: Path) -> KubeopticApp:
    """Application wired to the fake controller with an isolated settings file."""
    return KubeopticApp(controller=fake_controller, settings_path=settings_path)
