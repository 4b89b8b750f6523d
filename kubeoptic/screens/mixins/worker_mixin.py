"""WorkerMixin - Worker lifecycle management for deferred units of work.

Every blocking or slow operation (kubectl calls, log stream opens and reads,
log export) runs as a Textual worker started through ``start_worker``. The
worker posts exactly one message back to the screen when it is done; the
screen never awaits a worker directly.

Workers are grouped so that starting a new list load cancels only the
previous list load, and stopping a log stream cancels only its in-flight read.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from contextlib import suppress
from typing import Any

from textual._context import NoActiveAppError
from textual.message import Message
from textual.reactive import reactive
from textual.worker import Worker, WorkerState

logger = logging.getLogger(__name__)


# ============================================================================
# Base Message Classes for Worker Communication
# ============================================================================


class DataLoaded(Message):
    """Base message indicating successful data load.

    Attributes:
        data: The loaded data payload
        duration_ms: Time taken to load data in milliseconds
    """

    def __init__(self, data: Any, duration_ms: float = 0.0) -> None:
        super().__init__()
        self.data = data
        self.duration_ms = duration_ms


# ============================================================================
# WorkerMixin Base Class
# ============================================================================


class WorkerMixin:
    """Mixin providing standardized Worker lifecycle management.

    - `start_worker()`: worker creation with group-scoped cancellation
    - `cancel_workers()`: cancel every worker, or only those of one group
    - `on_worker_state_changed()`: bookkeeping for `is_loading` and timing

    Usage:
        ```python
        class MyScreen(WorkerMixin, Screen):
            def on_mount(self) -> None:
                self.start_worker(self._load, name="load", group="lists")

            async def _load(self) -> None:
                items = await controller.list_contexts()
                self.post_message(ContextsLoaded(items))
        ```
    """

    is_loading = reactive(False)
    loading_duration_ms = reactive(0.0, init=False)

    # Groups whose workers drive `is_loading`; long-lived stream reads do not.
    LOADING_GROUPS: frozenset[str] = frozenset({"lists"})

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._load_start_time: float | None = None
        self._active_worker_name: str | None = None

    def start_worker(
        self,
        worker_func: Callable[..., Awaitable[Any]] | Callable[..., Any],
        *,
        exclusive: bool = True,
        thread: bool = False,
        name: str | None = None,
        group: str = "default",
        exit_on_error: bool = False,
    ) -> Worker[Any]:
        """Start a worker.

        Args:
            worker_func: Coroutine function (or plain callable when
                ``thread=True``) to run.
            exclusive: If True, cancel other workers of the same group first.
            thread: Run in a thread; only for blocking file I/O.
            name: Worker name used in log records.
            group: Worker group, the unit of cancellation.
            exit_on_error: If False, errors don't crash the app.

        Returns:
            The Worker instance
        """
        if exclusive:
            self.cancel_workers(group)

        if group in self.LOADING_GROUPS:
            self._load_start_time = time.monotonic()
            self._active_worker_name = name
            self.is_loading = True

        return self.run_worker(  # type: ignore[attr-defined]
            worker_func,
            name=name,
            group=group,
            exclusive=exclusive,
            thread=thread,
            exit_on_error=exit_on_error,
        )

    def cancel_workers(self, group: str | None = None) -> None:
        """Cancel running workers, optionally only those in ``group``."""
        with suppress(NoActiveAppError):
            if group is None:
                self.workers.cancel_all()  # type: ignore[attr-defined]
            else:
                self.workers.cancel_group(self, group)  # type: ignore[attr-defined]

    def on_unmount(self) -> None:
        """Cancel all workers when the screen is unmounted."""
        self.cancel_workers()

    def on_worker_state_changed(self, event: Worker.StateChanged) -> None:
        """Log worker completion and clear the loading flag."""
        if event.state not in (
            WorkerState.SUCCESS,
            WorkerState.CANCELLED,
            WorkerState.ERROR,
        ):
            return

        duration_ms = 0.0
        if (
            event.worker.group in self.LOADING_GROUPS
            and self._load_start_time is not None
        ):
            duration_ms = (time.monotonic() - self._load_start_time) * 1000
            self.loading_duration_ms = duration_ms
            self._load_start_time = None
            self.is_loading = False

        if event.state == WorkerState.CANCELLED:
            logger.debug(f"Worker '{event.worker.name}' was cancelled ({duration_ms:.2f}ms)")
        elif event.state == WorkerState.ERROR:
            logger.error(f"Worker '{event.worker.name}' error: {event.worker.error} ({duration_ms:.2f}ms)")
        else:
            logger.debug(f"Worker '{event.worker.name}' completed successfully ({duration_ms:.2f}ms)")


__all__ = [
    "DataLoaded",
    "WorkerMixin",
]
