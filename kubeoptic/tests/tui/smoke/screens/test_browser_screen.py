"""Smoke tests for BrowserScreen - drill-down, log streaming, search and errors.

The app runs against the in-memory controller from conftest; log chunks are
fed through ``FakeLogStream``.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable

import pytest
from textual.pilot import Pilot

from kubeoptic.app import KubeopticApp
from kubeoptic.constants.enums import Panel, Screen, StreamState
from kubeoptic.screens.browser import BrowserScreen
from kubeoptic.widgets import ErrorOverlay, HelpPanel, SearchBar


async def _wait_for(pilot: Pilot, predicate: Callable[[], bool], timeout: float = 3.0) -> None:
    """Pause the pilot until ``predicate`` holds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met before timeout")
        await pilot.pause(0.02)


def _screen(app: KubeopticApp) -> BrowserScreen:
    screen = app.screen
    assert isinstance(screen, BrowserScreen)
    return screen


async def _open_logs(pilot: Pilot, app: KubeopticApp) -> BrowserScreen:
    """Drill from contexts down to the first workload's logs."""
    await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
    screen = _screen(app)
    for panel in (Panel.CONTEXT, Panel.NAMESPACE, Panel.WORKLOAD):
        await _wait_for(pilot, lambda panel=panel: screen.list_panel(panel).option_count > 0)
        await pilot.press("enter")
    await _wait_for(pilot, lambda: screen.navigation.current is Screen.LOG)
    return screen


@pytest.mark.smoke
class TestBrowserDrillDown:
    """Test drilling through contexts, namespaces and workloads."""

    @pytest.mark.asyncio
    async def test_contexts_load_on_start(self, app: KubeopticApp) -> None:
        """Test that contexts are listed with the current one highlighted."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
            screen = _screen(app)
            contexts = screen.list_panel(Panel.CONTEXT)
            await _wait_for(pilot, lambda: contexts.option_count == 2)
            assert contexts.selected_item.name == "dev"
            assert screen.navigation.current is Screen.CONTEXT
            assert screen.list_panel(Panel.NAMESPACE).display is False

    @pytest.mark.asyncio
    async def test_enter_drills_down(self, app: KubeopticApp) -> None:
        """Test that enter moves Context -> Namespace -> Workload."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
            screen = _screen(app)
            await _wait_for(pilot, lambda: screen.list_panel(Panel.CONTEXT).option_count == 2)

            await pilot.press("enter")
            namespaces = screen.list_panel(Panel.NAMESPACE)
            await _wait_for(pilot, lambda: namespaces.option_count == 2)
            assert screen.navigation.current is Screen.NAMESPACE
            assert screen.presenter.selection.context == "dev"
            assert namespaces.selected_item.name == "default"

            await pilot.press("enter")
            workloads = screen.list_panel(Panel.WORKLOAD)
            await _wait_for(pilot, lambda: workloads.option_count == 2)
            assert screen.navigation.current is Screen.WORKLOAD
            assert screen.navigation.breadcrumb.count(">") == 2

    @pytest.mark.asyncio
    async def test_escape_goes_back(self, app: KubeopticApp) -> None:
        """Test that escape returns to the previous screen."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
            screen = _screen(app)
            await _wait_for(pilot, lambda: screen.list_panel(Panel.CONTEXT).option_count == 2)
            await pilot.press("enter")
            await _wait_for(pilot, lambda: screen.navigation.current is Screen.NAMESPACE)
            await pilot.press("escape")
            await _wait_for(pilot, lambda: screen.navigation.current is Screen.CONTEXT)
            assert screen.list_panel(Panel.NAMESPACE).display is False

    @pytest.mark.asyncio
    async def test_tab_cycles_visible_panels(self, app: KubeopticApp) -> None:
        """Test that tab moves focus between the visible list panels."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
            screen = _screen(app)
            await _wait_for(pilot, lambda: screen.list_panel(Panel.CONTEXT).option_count == 2)
            await pilot.press("enter")
            await _wait_for(pilot, lambda: screen.navigation.current is Screen.NAMESPACE)
            assert screen.navigation.focused is Panel.NAMESPACE
            await pilot.press("tab")
            await pilot.pause()
            assert screen.navigation.focused is Panel.CONTEXT
            assert screen.list_panel(Panel.CONTEXT).has_class("-focused-panel")

    @pytest.mark.asyncio
    async def test_list_search_filters(self, app: KubeopticApp) -> None:
        """Test that search on a list screen filters its panel."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
            screen = _screen(app)
            contexts = screen.list_panel(Panel.CONTEXT)
            await _wait_for(pilot, lambda: contexts.option_count == 2)
            await pilot.press("/", "p", "r")
            await pilot.pause()
            assert contexts.option_count == 1
            assert screen.query_one(SearchBar).display is True
            await pilot.press("escape")
            await pilot.pause()
            assert contexts.option_count == 2


@pytest.mark.smoke
class TestBrowserLogViewer:
    """Test the log viewer screen."""

    @pytest.mark.asyncio
    async def test_stream_shows_lines(
        self,
        app: KubeopticApp,
        fake_controller,
        fake_stream,
    ) -> None:
        """Test that fed chunks land in the buffer."""
        fake_stream.feed("ERROR boom\nhello\n")
        async with app.run_test(size=(120, 40)) as pilot:
            screen = await _open_logs(pilot, app)
            await _wait_for(pilot, lambda: len(screen.log_presenter.buffer) == 2)
            assert fake_controller.opened[0].name == "api-7f9c"
            assert screen.log_presenter.state is StreamState.STREAMING

            fake_stream.feed("third\n")
            await _wait_for(pilot, lambda: len(screen.log_presenter.buffer) == 3)

    @pytest.mark.asyncio
    async def test_search_filters_log(self, app: KubeopticApp, fake_stream) -> None:
        """Test that a live query filters the displayed lines."""
        fake_stream.feed("ERROR boom\nhello\nboom again\n")
        async with app.run_test(size=(120, 40)) as pilot:
            screen = await _open_logs(pilot, app)
            await _wait_for(pilot, lambda: len(screen.log_presenter.buffer) == 3)
            await pilot.press("/", "b", "o", "o", "m")
            await pilot.pause()
            presenter = screen.log_presenter
            assert presenter.search.query == "boom"
            assert [line.text for line in presenter.display_lines] == ["ERROR boom", "boom again"]
            await pilot.press("enter")
            await pilot.pause()
            assert screen.navigation.search_active is False
            assert presenter.search.history[-1] == "boom"

    @pytest.mark.asyncio
    async def test_follow_toggle(self, app: KubeopticApp) -> None:
        """Test that f toggles follow mode."""
        async with app.run_test(size=(120, 40)) as pilot:
            screen = await _open_logs(pilot, app)
            assert screen.log_presenter.follow is True
            await pilot.press("f")
            await pilot.pause()
            assert screen.log_presenter.follow is False

    @pytest.mark.asyncio
    async def test_back_stops_stream(self, app: KubeopticApp, fake_stream) -> None:
        """Test that leaving the log screen closes the stream."""
        async with app.run_test(size=(120, 40)) as pilot:
            screen = await _open_logs(pilot, app)
            await _wait_for(pilot, lambda: screen.log_presenter.stream is not None)
            await pilot.press("escape")
            await _wait_for(pilot, lambda: fake_stream.closed)
            assert screen.navigation.current is Screen.WORKLOAD
            assert screen.log_presenter.state is StreamState.IDLE

    @pytest.mark.asyncio
    async def test_back_during_open_closes_late_stream(
        self,
        app: KubeopticApp,
        fake_controller,
        fake_stream,
    ) -> None:
        """Test that a stream finishing its open after the user left is closed."""
        fake_controller.open_gate = asyncio.Event()
        async with app.run_test(size=(120, 40)) as pilot:
            screen = await _open_logs(pilot, app)
            await _wait_for(pilot, lambda: len(fake_controller.opened) == 1)
            await pilot.press("escape")
            await _wait_for(pilot, lambda: screen.navigation.current is Screen.WORKLOAD)

            fake_controller.open_gate.set()
            await _wait_for(pilot, lambda: fake_stream.closed)
            assert screen.log_presenter.stream is None
            assert fake_stream.reads == 0

    @pytest.mark.asyncio
    async def test_confirm_without_workload_reports_error(
        self,
        app: KubeopticApp,
        fake_controller,
    ) -> None:
        """Test that confirming a filtered-out workload list does not reopen the old pod."""
        async with app.run_test(size=(120, 40)) as pilot:
            screen = await _open_logs(pilot, app)
            await _wait_for(pilot, lambda: len(fake_controller.opened) == 1)
            await pilot.press("escape")
            await _wait_for(pilot, lambda: screen.navigation.current is Screen.WORKLOAD)

            await pilot.press("/", "z", "z", "z", "enter")
            await pilot.pause()
            assert screen.list_panel(Panel.WORKLOAD).selected_item is None

            await pilot.press("enter")
            overlay = screen.query_one(ErrorOverlay)
            await _wait_for(pilot, lambda: overlay.is_showing)
            assert "no workload selected" in overlay.message
            assert screen.presenter.workload is None
            assert len(fake_controller.opened) == 1

    @pytest.mark.asyncio
    async def test_open_failure_shows_error(self, app: KubeopticApp, fake_controller) -> None:
        """Test that a failed open is shown and dismissed by the next key."""
        fake_controller.stream = None
        async with app.run_test(size=(120, 40)) as pilot:
            screen = await _open_logs(pilot, app)
            overlay = screen.query_one(ErrorOverlay)
            await _wait_for(pilot, lambda: overlay.is_showing)
            assert "pod not found" in overlay.message
            assert screen.log_presenter.state is StreamState.ERRORED

            await pilot.press("f")
            await pilot.pause()
            assert overlay.is_showing is False
            # The dismissing key is not acted on.
            assert screen.log_presenter.follow is True


@pytest.mark.smoke
class TestBrowserGlobalKeys:
    """Test help and quit."""

    @pytest.mark.asyncio
    async def test_help_toggles(self, app: KubeopticApp) -> None:
        """Test that ? shows and hides the help panel."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
            help_panel = app.screen.query_one(HelpPanel)
            await pilot.press("?")
            await pilot.pause()
            assert help_panel.display is True
            await pilot.press("?")
            await pilot.pause()
            assert help_panel.display is False

    @pytest.mark.asyncio
    async def test_q_quits(self, app: KubeopticApp) -> None:
        """Test that q exits the app."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
            await pilot.press("q")
            await pilot.pause()
        assert app.return_code == 0

    @pytest.mark.asyncio
    async def test_q_types_while_searching(self, app: KubeopticApp) -> None:
        """Test that q is search text while search entry is active."""
        async with app.run_test(size=(120, 40)) as pilot:
            await _wait_for(pilot, lambda: isinstance(app.screen, BrowserScreen))
            await pilot.press("/", "q")
            await pilot.pause()
            screen = _screen(app)
            assert screen.search_bar.value == "q"
            assert app.is_running
