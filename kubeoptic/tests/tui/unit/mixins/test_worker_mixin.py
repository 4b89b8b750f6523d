"""Tests for WorkerMixin - group-scoped worker start, cancel and loading state."""

from __future__ import annotations

import asyncio
from unittest.mock import MagicMock, patch

import pytest
from textual.app import App, ComposeResult
from textual.screen import Screen
from textual.widgets import Static
from textual.worker import Worker

from kubeoptic.screens.mixins.worker_mixin import DataLoaded, WorkerMixin

# =============================================================================
# Test Fixtures
# =============================================================================


class MockScreenWithWorkerMixin(WorkerMixin, Screen):
    """Mock screen that uses WorkerMixin."""

    def __init__(self) -> None:
        super().__init__()
        self.received: list[DataLoaded] = []
        self.release = asyncio.Event()

    def compose(self) -> ComposeResult:
        yield Static("worker screen")

    async def _quick_worker(self) -> None:
        await asyncio.sleep(0)
        self.post_message(DataLoaded(["a", "b"], duration_ms=1.0))

    async def _blocking_worker(self) -> None:
        await self.release.wait()

    def on_data_loaded(self, message: DataLoaded) -> None:
        self.received.append(message)


class WorkerApp(App[None]):
    def __init__(self, screen: Screen) -> None:
        super().__init__()
        self._test_screen = screen

    def on_mount(self) -> None:
        self.push_screen(self._test_screen)


# =============================================================================
# Unit Tests
# =============================================================================


class TestDataLoadedMessage:
    """Test DataLoaded message functionality."""

    def test_default_duration(self) -> None:
        """Test DataLoaded with default duration."""
        msg = DataLoaded({"test": "data"})
        assert msg.data == {"test": "data"}
        assert msg.duration_ms == 0.0

    def test_custom_duration(self) -> None:
        """Test DataLoaded with custom duration."""
        msg = DataLoaded([1, 2, 3], duration_ms=150.5)
        assert msg.duration_ms == 150.5


class TestWorkerMixinMethods:
    """Test WorkerMixin methods without a running app."""

    def test_start_worker_passes_group(self) -> None:
        """Test that start_worker forwards group and error policy."""
        screen = MockScreenWithWorkerMixin()
        mock_worker = MagicMock(spec=Worker)

        with patch.object(screen, "run_worker", return_value=mock_worker) as mock_run, patch.object(
            screen, "cancel_workers"
        ) as mock_cancel:
            worker = screen.start_worker(
                screen._quick_worker, name="load", group="log-stream"
            )

        assert worker is mock_worker
        mock_cancel.assert_called_once_with("log-stream")
        mock_run.assert_called_once_with(
            screen._quick_worker,
            name="load",
            group="log-stream",
            exclusive=True,
            thread=False,
            exit_on_error=False,
        )

    def test_non_exclusive_does_not_cancel(self) -> None:
        """Test start_worker with exclusive=False keeps sibling workers."""
        screen = MockScreenWithWorkerMixin()

        with patch.object(screen, "run_worker"), patch.object(
            screen, "cancel_workers"
        ) as mock_cancel:
            screen.start_worker(screen._quick_worker, exclusive=False, group="log-close")

        mock_cancel.assert_not_called()

    def test_loading_flag_only_for_list_group(self) -> None:
        """Test that only list loads drive is_loading."""
        screen = MockScreenWithWorkerMixin()

        with patch.object(screen, "run_worker"), patch.object(screen, "cancel_workers"):
            screen.start_worker(screen._quick_worker, group="log-stream")
            assert screen.is_loading is False
            screen.start_worker(screen._quick_worker, group="lists")
            assert screen.is_loading is True

    def test_cancel_workers_no_active_app(self) -> None:
        """Test that cancel_workers handles no active app gracefully."""
        MockScreenWithWorkerMixin().cancel_workers("lists")


class TestWorkerMixinRuntime:
    """Test WorkerMixin inside a running app."""

    @pytest.mark.asyncio
    async def test_worker_posts_result(self) -> None:
        """Test that a worker result reaches the screen as a message."""
        screen = MockScreenWithWorkerMixin()
        async with WorkerApp(screen).run_test() as pilot:
            await pilot.pause()
            screen.start_worker(screen._quick_worker, name="load", group="lists")
            await pilot.app.workers.wait_for_complete()
            await pilot.pause()
            assert [message.data for message in screen.received] == [["a", "b"]]
            assert screen.is_loading is False

    @pytest.mark.asyncio
    async def test_exclusive_cancels_same_group_only(self) -> None:
        """Test that a new worker cancels its own group and nothing else."""
        screen = MockScreenWithWorkerMixin()
        async with WorkerApp(screen).run_test() as pilot:
            await pilot.pause()
            first = screen.start_worker(screen._blocking_worker, group="lists")
            other = screen.start_worker(screen._blocking_worker, group="log-stream")
            await pilot.pause()
            screen.start_worker(screen._blocking_worker, group="lists")
            await pilot.pause()
            assert first.is_cancelled is True
            assert other.is_cancelled is False
            screen.cancel_workers()
            await pilot.pause()
            assert other.is_cancelled is True
