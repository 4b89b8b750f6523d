"""Browser screen - contexts, namespaces, workloads and the live log viewer.

A single Textual screen hosts every panel. Navigation between the logical
screens (Context, Namespace, Workload, Log) only changes which panels are
shown and which one owns input; ``NavigationState`` is the source of truth
and the widgets mirror it.

Input flow: ``on_key`` hands each key to the ``EventRouter``. Messages the
router emits are posted back onto this screen and handled by the ``on_*``
methods below; forwarded keys go to the focused panel. Cluster calls and log
reads run as workers and report back with exactly one message each.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import suppress
from typing import Any, Final

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.css.query import NoMatches, WrongType
from textual.events import Key, Resize
from textual.screen import Screen as TextualScreen

from kubeoptic.constants.enums import Action, Panel, Screen, WorkloadStatus
from kubeoptic.constants.values import NO_WORKLOAD_SELECTED
from kubeoptic.controllers.base import (
    BaseController,
    ClusterError,
    LogStream,
    LogStreamReadError,
)
from kubeoptic.messages import (
    ContextsLoaded,
    ErrorRaised,
    FocusChanged,
    HelpToggled,
    LogChunk,
    LogStreamOpened,
    LogStreamOpenFailed,
    NamespacesLoaded,
    QuitRequested,
    RefreshRequested,
    SaveLogs,
    ScreenChanged,
    SearchCancelled,
    SearchConfirmed,
    SearchNavigate,
    SearchStarted,
    SelectionConfirmed,
    ToggleFollow,
    ToggleTimestamps,
    ToggleWrap,
    WorkloadsLoaded,
)
from kubeoptic.models.core import ContextInfo, NamespaceInfo, WorkloadInfo
from kubeoptic.models.state.app_settings import AppSettings
from kubeoptic.navigation import EventRouter, NavigationState
from kubeoptic.screens.browser.config import (
    CONTEXT_PANEL_ID,
    ERROR_OVERLAY_ID,
    EXPORT_WORKER_GROUP,
    HELP_PANEL_ID,
    LIST_PANELS,
    LIST_ROW_ID,
    LIST_WORKER_GROUP,
    LOG_CLOSE_WORKER_GROUP,
    LOG_OPEN_WORKER_GROUP,
    LOG_PANEL_ID,
    LOG_STREAM_WORKER_GROUP,
    NAMESPACE_PANEL_ID,
    PANEL_TITLES,
    PANEL_WIDGET_IDS,
    SCREEN_LIST_PANEL,
    SEARCH_BAR_ID,
    STATUS_BAR_ID,
    VISIBLE_PANELS,
    WORKLOAD_PANEL_ID,
)
from kubeoptic.screens.browser.presenter import (
    LOAD_CONTEXTS,
    BrowserPresenter,
    SelectionMissingError,
)
from kubeoptic.screens.logs.presenter import (
    LogViewerPresenter,
    StreamStep,
    WorkloadSelectionError,
)
from kubeoptic.screens.mixins.worker_mixin import DataLoaded, WorkerMixin
from kubeoptic.utils.log_export import write_log_export
from kubeoptic.widgets import (
    BrowserPanel,
    ErrorOverlay,
    HelpPanel,
    LogDisplay,
    ResourceList,
    SearchBar,
    StatusBar,
)

logger = logging.getLogger(__name__)

_WORKLOAD_STATUS_STYLES: Final[dict[WorkloadStatus, str]] = {
    WorkloadStatus.RUNNING: "green",
    WorkloadStatus.PENDING: "yellow",
    WorkloadStatus.FAILED: "red",
    WorkloadStatus.SUCCEEDED: "dim",
    WorkloadStatus.UNKNOWN: "dim",
}

_SAVE_CONTEXT: Final = "saving logs"


def _context_label(item: ContextInfo) -> Text:
    text = Text(item.name, style="bold" if item.is_current else "")
    if item.is_current:
        text.append(" *", style="green")
    return text


def _namespace_label(item: NamespaceInfo) -> Text:
    return Text(item.name)


def _workload_label(item: WorkloadInfo) -> Text:
    text = Text(item.name)
    text.append(f"  {item.status.value}", style=_WORKLOAD_STATUS_STYLES[item.status])
    return text


class BrowserScreen(WorkerMixin, TextualScreen):
    """Hierarchy browser and log viewer."""

    CSS_PATH = "../../css/screens/browser_screen.tcss"

    def __init__(self, controller: BaseController, settings: AppSettings) -> None:
        super().__init__()
        self.settings = settings
        self.navigation = NavigationState()
        self.router = EventRouter(self.navigation, settings.keymap)
        self.presenter = BrowserPresenter(
            controller,
            default_namespace=settings.default_namespace,
        )
        self.log_presenter = LogViewerPresenter(
            follow=settings.follow,
            wrap=settings.wrap,
            show_timestamps=settings.show_timestamps,
        )
        self._filter_before_search: str | None = None

    def compose(self) -> ComposeResult:
        with Horizontal(id=LIST_ROW_ID):
            yield ResourceList(
                Panel.CONTEXT,
                PANEL_TITLES[Panel.CONTEXT],
                label=_context_label,
                id=CONTEXT_PANEL_ID,
            )
            yield ResourceList(
                Panel.NAMESPACE,
                PANEL_TITLES[Panel.NAMESPACE],
                label=_namespace_label,
                id=NAMESPACE_PANEL_ID,
            )
            yield ResourceList(
                Panel.WORKLOAD,
                PANEL_TITLES[Panel.WORKLOAD],
                label=_workload_label,
                id=WORKLOAD_PANEL_ID,
            )
        yield LogDisplay(self.log_presenter, id=LOG_PANEL_ID)
        yield SearchBar(id=SEARCH_BAR_ID)
        yield StatusBar(id=STATUS_BAR_ID)
        yield HelpPanel(self.settings.keymap, id=HELP_PANEL_ID)
        yield ErrorOverlay(id=ERROR_OVERLAY_ID)

    def on_mount(self) -> None:
        self.log_display.border_title = PANEL_TITLES[Panel.LOG]
        self._sync_layout()
        self.post_message(RefreshRequested(Screen.CONTEXT))

    async def on_unmount(self) -> None:
        step = self.log_presenter.stop_stream()
        if step.close is not None:
            await step.close.close()

    # ========================================================================
    # Widget access
    # ========================================================================

    @property
    def log_display(self) -> LogDisplay:
        return self.query_one(f"#{LOG_PANEL_ID}", LogDisplay)

    @property
    def search_bar(self) -> SearchBar:
        return self.query_one(f"#{SEARCH_BAR_ID}", SearchBar)

    @property
    def status_bar(self) -> StatusBar:
        return self.query_one(f"#{STATUS_BAR_ID}", StatusBar)

    @property
    def help_panel(self) -> HelpPanel:
        return self.query_one(f"#{HELP_PANEL_ID}", HelpPanel)

    @property
    def error_overlay(self) -> ErrorOverlay:
        return self.query_one(f"#{ERROR_OVERLAY_ID}", ErrorOverlay)

    def list_panel(self, panel: Panel) -> ResourceList:
        return self.query_one(f"#{PANEL_WIDGET_IDS[panel]}", ResourceList)

    def _panel_widget(self, panel: Panel) -> BrowserPanel | None:
        if panel in LIST_PANELS:
            return self.list_panel(panel)
        if panel is Panel.LOG:
            return self.log_display
        if panel is Panel.SEARCH:
            return self.search_bar
        return None

    # ========================================================================
    # Input
    # ========================================================================

    def on_key(self, event: Key) -> None:
        event.stop()
        event.prevent_default()

        # A visible error swallows the key that dismisses it.
        if self.error_overlay.dismiss():
            return

        result = self.router.route_key(event.key, event.character)
        if result.forward_to_focused:
            self._forward(result.action, event.key, event.character)
        for message in result.messages:
            self.post_message(message)

    def _forward(self, action: Action | None, key: str, character: str | None) -> None:
        focused = self.navigation.focused
        if action is Action.CONFIRM and focused in LIST_PANELS:
            # Confirm on a panel other than the screen's own re-selects at that level.
            self._reselect(focused)
            return
        widget = self._panel_widget(focused)
        if widget is None or not widget.handle_action(action, key, character):
            logger.debug("Unhandled %s on %s panel", key, focused.value)

    def _reselect(self, panel: Panel) -> None:
        item = self.list_panel(panel).selected_item
        if item is None:
            return
        stale = self.presenter.select(panel, item)
        for stale_panel in stale:
            self.list_panel(stale_panel).clear_items()
        if stale:
            self._load_list(self._screen_for_panel(stale[0]))
        self._refresh_status()

    @staticmethod
    def _screen_for_panel(panel: Panel) -> Screen:
        return next(screen for screen, owner in SCREEN_LIST_PANEL.items() if owner is panel)

    def on_resize(self, _: Resize) -> None:
        self.call_after_refresh(self._update_viewport_height)

    def _update_viewport_height(self) -> None:
        with suppress(NoMatches, WrongType):
            log_display = self.log_display
            self.log_presenter.set_viewport_height(log_display.scrollable_content_region.height)
            log_display.sync_viewport()

    # ========================================================================
    # Navigation messages
    # ========================================================================

    def on_selection_confirmed(self, message: SelectionConfirmed) -> None:
        item = self.list_panel(message.panel).selected_item
        if item is None:
            logger.debug("Confirm on empty %s panel", message.panel.value)
            stale_panels = self.presenter.deselect(message.panel)
        else:
            stale_panels = self.presenter.select(message.panel, item)
        for stale_panel in stale_panels:
            self.list_panel(stale_panel).clear_items()

    def on_refresh_requested(self, message: RefreshRequested) -> None:
        if message.screen is Screen.LOG:
            self._start_log_stream()
        else:
            self._load_list(message.screen)

    def on_screen_changed(self, message: ScreenChanged) -> None:
        logger.debug("Screen %s -> %s", message.previous.value, message.current.value)
        if message.previous is Screen.LOG and message.current is not Screen.LOG:
            self._stop_log_stream()
        self._sync_layout()
        if message.current is Screen.LOG:
            self.call_after_refresh(self._update_viewport_height)

    def on_focus_changed(self, _: FocusChanged) -> None:
        self._sync_focus()
        self._refresh_status()

    def on_help_toggled(self, message: HelpToggled) -> None:
        self.help_panel.display = message.visible

    async def on_quit_requested(self, _: QuitRequested) -> None:
        step = self.log_presenter.stop_stream()
        if step.close is not None:
            await step.close.close()
        self.app.exit()

    # ========================================================================
    # Search messages
    # ========================================================================

    def on_search_started(self, _: SearchStarted) -> None:
        if self.navigation.current is Screen.LOG:
            self.log_presenter.begin_search()
            self.search_bar.set_value(self.log_presenter.search.query)
        else:
            panel = self.list_panel(self.navigation.canonical_panel)
            self._filter_before_search = panel.filter_text
            self.search_bar.set_value(panel.filter_text)
        self._sync_search_bar()

    def on_search_bar_changed(self, message: SearchBar.Changed) -> None:
        self._apply_query(message.value)

    def on_search_bar_history_recall(self, message: SearchBar.HistoryRecall) -> None:
        if self.navigation.current is not Screen.LOG:
            return
        query = self.log_presenter.recall_history(message.step)
        if query is None:
            return
        self.search_bar.set_value(query)
        self.log_display.render_all()
        self._sync_search_bar()

    def on_search_confirmed(self, _: SearchConfirmed) -> None:
        if self.navigation.current is Screen.LOG:
            self.log_presenter.confirm_search()
        self._filter_before_search = None
        self._sync_search_bar()

    def on_search_cancelled(self, _: SearchCancelled) -> None:
        if self.navigation.current is Screen.LOG:
            if self.log_presenter.cancel_search():
                self.log_display.render_all()
            self.search_bar.set_value(self.log_presenter.search.query)
        elif self._filter_before_search is not None:
            self.list_panel(self.navigation.canonical_panel).set_filter(self._filter_before_search)
            self.search_bar.set_value(self._filter_before_search)
        self._filter_before_search = None
        self._sync_search_bar()

    def on_search_navigate(self, message: SearchNavigate) -> None:
        if self.log_presenter.navigate_match(message.direction) is None:
            return
        self.log_display.sync_viewport()
        self._sync_search_bar()

    def _apply_query(self, query: str) -> None:
        if self.navigation.current is Screen.LOG:
            if self.log_presenter.set_query(query):
                self.log_display.render_all()
        else:
            self.list_panel(self.navigation.canonical_panel).set_filter(query)
        self._sync_search_bar()

    # ========================================================================
    # Log viewer messages
    # ========================================================================

    def on_toggle_follow(self, _: ToggleFollow) -> None:
        self.log_presenter.toggle_follow()
        self.log_display.sync_viewport()
        self._refresh_status()

    def on_toggle_wrap(self, _: ToggleWrap) -> None:
        self.log_presenter.toggle_wrap()
        self.log_display.render_all()
        self._refresh_status()

    def on_toggle_timestamps(self, _: ToggleTimestamps) -> None:
        self.log_presenter.toggle_timestamps()
        self.log_display.render_all()

    def on_save_logs(self, _: SaveLogs) -> None:
        workload = self.log_presenter.workload
        if workload is None:
            self.post_message(
                ErrorRaised(WorkloadSelectionError(NO_WORKLOAD_SELECTED), _SAVE_CONTEXT)
            )
            return
        lines = self.log_presenter.export_lines()
        export_path = self.settings.export_path

        async def save() -> None:
            try:
                path = await asyncio.to_thread(
                    write_log_export,
                    lines,
                    export_path,
                    namespace=workload.namespace,
                    workload=workload.name,
                )
            except OSError as exc:
                self.post_message(ErrorRaised(exc, _SAVE_CONTEXT))
                return
            self.notify(f"Saved {len(lines)} lines to {path}", severity="information")

        self.start_worker(save, name="save-logs", group=EXPORT_WORKER_GROUP)

    # ========================================================================
    # Data loading
    # ========================================================================

    def _load_list(self, screen: Screen) -> None:
        async def load() -> None:
            try:
                message = await self.presenter.load(screen)
            except (ClusterError, SelectionMissingError) as exc:
                self.post_message(ErrorRaised(exc, LOAD_CONTEXTS[screen]))
                return
            self.post_message(message)

        self.start_worker(load, name=f"load-{screen.value}", group=LIST_WORKER_GROUP)

    def _populate(self, panel: Panel, message: DataLoaded) -> None:
        items: list[Any] = message.data
        logger.debug(
            "Loaded %d %s items in %.1fms", len(items), panel.value, message.duration_ms
        )
        self.list_panel(panel).set_items(
            items,
            select=self.presenter.preferred_selection(panel, items),
        )
        self._refresh_status()

    def on_contexts_loaded(self, message: ContextsLoaded) -> None:
        self._populate(Panel.CONTEXT, message)

    def on_namespaces_loaded(self, message: NamespacesLoaded) -> None:
        self._populate(Panel.NAMESPACE, message)

    def on_workloads_loaded(self, message: WorkloadsLoaded) -> None:
        self._populate(Panel.WORKLOAD, message)

    def watch_is_loading(self, loading: bool) -> None:
        with suppress(NoMatches, WrongType):
            self.status_bar.update_status(loading=loading)

    # ========================================================================
    # Log streaming
    # ========================================================================

    def _start_log_stream(self) -> None:
        self.cancel_workers(LOG_STREAM_WORKER_GROUP)
        self._run_step(self.log_presenter.start_stream(self.presenter.workload))
        self.search_bar.set_value("")
        self.log_display.render_all()
        self._sync_search_bar()

    def _stop_log_stream(self) -> None:
        self.cancel_workers(LOG_STREAM_WORKER_GROUP)
        self._run_step(self.log_presenter.stop_stream())

    def _run_step(self, step: StreamStep) -> None:
        """Schedule the deferred work a presenter step asks for."""
        if step.close is not None:
            self._close_stream(step.close)
        if step.error is not None:
            self.post_message(ErrorRaised(step.error, step.context))
        if step.open_stream and self.log_presenter.workload is not None:
            self._open_stream(step.stream_id, self.log_presenter.workload)
        if step.read_next and self.log_presenter.stream is not None:
            self._read_next(step.stream_id, self.log_presenter.stream)
        if step.render:
            self.log_display.render_new()
            self._sync_search_bar()
        self._refresh_status()

    def _open_stream(self, stream_id: int, workload: WorkloadInfo) -> None:
        """Open the stream in a worker that is never cancelled.

        A superseded open still reports back; the presenter sees the stale
        generation and hands the stream back for closing.
        """
        controller = self.presenter.controller

        async def open_stream() -> None:
            try:
                stream = await controller.open_log_stream(workload)
            except ClusterError as exc:
                self.post_message(LogStreamOpenFailed(stream_id, exc))
                return
            if not self.post_message(LogStreamOpened(stream_id, stream)):
                logger.debug("Screen closed before stream %d attached", stream_id)
                await stream.close()

        self.start_worker(
            open_stream,
            name=f"log-open-{stream_id}",
            group=LOG_OPEN_WORKER_GROUP,
            exclusive=False,
        )

    def _read_next(self, stream_id: int, stream: LogStream) -> None:
        timeout = self.settings.stream_read_timeout

        async def read() -> None:
            try:
                data = await stream.read_chunk(timeout)
            except (asyncio.TimeoutError, TimeoutError):
                self.post_message(
                    LogChunk(
                        stream_id,
                        error=LogStreamReadError(f"no output within {timeout:g}s"),
                    )
                )
                return
            except ClusterError as exc:
                self.post_message(LogChunk(stream_id, error=exc))
                return
            if data is None:
                self.post_message(LogChunk(stream_id, eof=True))
            else:
                self.post_message(LogChunk(stream_id, data))

        self.start_worker(read, name=f"log-read-{stream_id}", group=LOG_STREAM_WORKER_GROUP)

    def _close_stream(self, stream: LogStream) -> None:
        self.start_worker(
            stream.close,
            name="log-close",
            group=LOG_CLOSE_WORKER_GROUP,
            exclusive=False,
        )

    def on_log_stream_opened(self, message: LogStreamOpened) -> None:
        self._run_step(self.log_presenter.stream_opened(message.stream_id, message.stream))

    def on_log_stream_open_failed(self, message: LogStreamOpenFailed) -> None:
        self._run_step(self.log_presenter.stream_open_failed(message.stream_id, message.error))

    def on_log_chunk(self, message: LogChunk) -> None:
        self._run_step(
            self.log_presenter.handle_chunk(
                message.stream_id,
                message.data,
                eof=message.eof,
                error=message.error,
            )
        )

    # ========================================================================
    # Errors
    # ========================================================================

    def on_error_raised(self, message: ErrorRaised) -> None:
        logger.warning("%s", message.text)
        self.error_overlay.show_error(message.text)

    # ========================================================================
    # Mirroring navigation state
    # ========================================================================

    def _sync_layout(self) -> None:
        current = self.navigation.current
        visible = VISIBLE_PANELS[current]
        self.query_one(f"#{LIST_ROW_ID}", Horizontal).display = current is not Screen.LOG
        for panel in LIST_PANELS:
            self.list_panel(panel).display = panel in visible
        self.log_display.display = current is Screen.LOG
        self._sync_focus()
        self._sync_search_bar()
        self._refresh_status()

    def _sync_focus(self) -> None:
        focused = self.navigation.focused
        for panel in (*LIST_PANELS, Panel.LOG, Panel.SEARCH):
            widget = self._panel_widget(panel)
            if widget is not None:
                widget.set_focused(panel is focused)

    def _sync_search_bar(self) -> None:
        search_bar = self.search_bar
        if self.navigation.current is Screen.LOG:
            search = self.log_presenter.search
            active_query = search.query
            if not search.query:
                counter = ""
            elif search.matches:
                counter = f"{search.cursor + 1}/{len(search.matches)}"
            else:
                counter = "no matches"
        else:
            panel = self.list_panel(self.navigation.canonical_panel)
            active_query = panel.filter_text
            counter = f"{panel.option_count}/{len(panel.items)}" if active_query else ""
        search_bar.set_counter(counter)
        search_bar.display = self.navigation.search_active or bool(active_query)

    def _refresh_status(self) -> None:
        with suppress(NoMatches, WrongType):
            if self.navigation.current is Screen.LOG:
                detail = self.log_presenter.status_text()
            else:
                detail = self.presenter.detail_text()
            self.status_bar.update_status(
                breadcrumb=self.navigation.breadcrumb,
                focus_name=self.navigation.focus_component_name,
                detail=detail,
                loading=self.is_loading,
            )


__all__ = [
    "BrowserScreen",
]
