"""Unit tests for the browser screen widgets."""

from __future__ import annotations

import pytest
from rich.console import Console
from textual.app import App, ComposeResult

from kubeoptic.constants.enums import Action, Panel
from kubeoptic.constants.limits import SEARCH_INPUT_CHAR_LIMIT
from kubeoptic.keyboard import KeyMap
from kubeoptic.models.core import NamespaceInfo
from kubeoptic.widgets import ErrorOverlay, ResourceList, SearchBar, StatusBar
from kubeoptic.widgets.feedback.help_panel import build_help_table

NAMESPACES = [
    NamespaceInfo(name="default"),
    NamespaceInfo(name="kube-system"),
    NamespaceInfo(name="payments"),
]


class WidgetHarness(App[None]):
    """Mounts one instance of each widget under test."""

    def compose(self) -> ComposeResult:
        yield ResourceList(Panel.NAMESPACE, "Namespaces", id="list")
        yield SearchBar(id="search")
        yield StatusBar(id="status")
        yield ErrorOverlay(id="error")


class TestResourceList:
    """Test ResourceList items, filtering and scrolling."""

    @pytest.mark.asyncio
    async def test_set_items_selects_preferred(self) -> None:
        """Test that the named item is highlighted."""
        async with WidgetHarness().run_test() as pilot:
            panel = pilot.app.query_one("#list", ResourceList)
            panel.set_items(NAMESPACES, select="payments")
            assert panel.selected_item == NAMESPACES[2]

    @pytest.mark.asyncio
    async def test_filter_is_case_insensitive(self) -> None:
        """Test that the filter keeps matching names only."""
        async with WidgetHarness().run_test() as pilot:
            panel = pilot.app.query_one("#list", ResourceList)
            panel.set_items(NAMESPACES)
            panel.set_filter("KUBE")
            assert panel.option_count == 1
            assert panel.selected_item == NAMESPACES[1]
            panel.set_filter("")
            assert panel.option_count == 3
            assert panel.selected_item == NAMESPACES[1]

    @pytest.mark.asyncio
    async def test_empty_list(self) -> None:
        """Test that an empty list has no selection."""
        async with WidgetHarness().run_test() as pilot:
            panel = pilot.app.query_one("#list", ResourceList)
            panel.clear_items()
            assert panel.selected_item is None

    @pytest.mark.asyncio
    async def test_scroll_actions(self) -> None:
        """Test that scroll actions move the highlight and others are ignored."""
        async with WidgetHarness().run_test() as pilot:
            panel = pilot.app.query_one("#list", ResourceList)
            panel.set_items(NAMESPACES)
            assert panel.handle_action(Action.SCROLL_DOWN, "down", None) is True
            assert panel.selected_item == NAMESPACES[1]
            assert panel.handle_action(Action.END, "end", None) is True
            assert panel.selected_item == NAMESPACES[2]
            assert panel.handle_action(None, "x", "x") is False


class TestSearchBar:
    """Test SearchBar draft editing."""

    @pytest.mark.asyncio
    async def test_edit(self) -> None:
        """Test typing, backspace and clearing."""
        async with WidgetHarness().run_test() as pilot:
            bar = pilot.app.query_one("#search", SearchBar)
            assert bar.edit("e", "e") is True
            assert bar.edit("r", "r") is True
            assert bar.value == "er"
            assert bar.edit("backspace", None) is True
            assert bar.value == "e"
            assert bar.edit("ctrl+u", None) is True
            assert bar.value == ""
            assert bar.edit("backspace", None) is False

    @pytest.mark.asyncio
    async def test_non_printable_ignored(self) -> None:
        """Test that control keys do not edit the draft."""
        async with WidgetHarness().run_test() as pilot:
            bar = pilot.app.query_one("#search", SearchBar)
            assert bar.edit("tab", "\t") is False
            assert bar.value == ""

    @pytest.mark.asyncio
    async def test_char_limit(self) -> None:
        """Test that the draft is capped."""
        async with WidgetHarness().run_test() as pilot:
            bar = pilot.app.query_one("#search", SearchBar)
            bar.set_value("x" * (SEARCH_INPUT_CHAR_LIMIT + 5))
            assert len(bar.value) == SEARCH_INPUT_CHAR_LIMIT
            assert bar.edit("y", "y") is False


class TestStatusBar:
    """Test StatusBar rendering."""

    @pytest.mark.asyncio
    async def test_render_status(self) -> None:
        """Test breadcrumb, focus and detail in the status line."""
        async with WidgetHarness().run_test() as pilot:
            status = pilot.app.query_one("#status", StatusBar)
            status.update_status(
                breadcrumb="Contexts > Namespaces",
                focus_name="Namespaces",
                detail="ctx: dev",
                loading=True,
            )
            plain = status.render_status().plain
            assert plain.startswith("Contexts > Namespaces")
            assert "[Namespaces]" in plain
            assert "loading..." in plain
            assert "ctx: dev" in plain
            assert status.has_class("-loading")


class TestErrorOverlay:
    """Test ErrorOverlay show/dismiss."""

    @pytest.mark.asyncio
    async def test_show_and_dismiss(self) -> None:
        """Test that dismiss reports whether the overlay was showing."""
        async with WidgetHarness().run_test() as pilot:
            overlay = pilot.app.query_one("#error", ErrorOverlay)
            assert overlay.is_showing is False
            overlay.show_error("pod not found")
            assert overlay.is_showing is True
            assert overlay.message == "pod not found"
            assert overlay.dismiss() is True
            assert overlay.is_showing is False
            assert overlay.dismiss() is False


class TestHelpTable:
    """Test build_help_table."""

    def test_lists_bound_keys(self) -> None:
        """Test that the table shows keys from the key map."""
        console = Console(width=100, record=True)
        console.print(build_help_table(KeyMap()))
        output = console.export_text()
        assert "Toggle follow" in output
        assert "s / ctrl+s" in output
        assert "Quit" in output
