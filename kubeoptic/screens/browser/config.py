"""Browser screen configuration - widget IDs, panel layout and worker groups."""

from __future__ import annotations

from typing import Final

from kubeoptic.constants.enums import Panel, Screen

# =============================================================================
# Widget IDs
# =============================================================================

CONTEXT_PANEL_ID: Final = "context-panel"
NAMESPACE_PANEL_ID: Final = "namespace-panel"
WORKLOAD_PANEL_ID: Final = "workload-panel"
LOG_PANEL_ID: Final = "log-panel"
SEARCH_BAR_ID: Final = "search-bar"
STATUS_BAR_ID: Final = "status-bar"
HELP_PANEL_ID: Final = "help-panel"
ERROR_OVERLAY_ID: Final = "error-overlay"
LIST_ROW_ID: Final = "list-row"

PANEL_WIDGET_IDS: Final[dict[Panel, str]] = {
    Panel.CONTEXT: CONTEXT_PANEL_ID,
    Panel.NAMESPACE: NAMESPACE_PANEL_ID,
    Panel.WORKLOAD: WORKLOAD_PANEL_ID,
    Panel.LOG: LOG_PANEL_ID,
    Panel.SEARCH: SEARCH_BAR_ID,
    Panel.STATUS_BAR: STATUS_BAR_ID,
}

PANEL_TITLES: Final[dict[Panel, str]] = {
    Panel.CONTEXT: "Contexts",
    Panel.NAMESPACE: "Namespaces",
    Panel.WORKLOAD: "Workloads",
    Panel.LOG: "Logs",
}

LIST_PANELS: Final[tuple[Panel, ...]] = (
    Panel.CONTEXT,
    Panel.NAMESPACE,
    Panel.WORKLOAD,
)

# Panels shown on each screen, left to right.
VISIBLE_PANELS: Final[dict[Screen, tuple[Panel, ...]]] = {
    Screen.CONTEXT: (Panel.CONTEXT,),
    Screen.NAMESPACE: (Panel.CONTEXT, Panel.NAMESPACE),
    Screen.WORKLOAD: (Panel.CONTEXT, Panel.NAMESPACE, Panel.WORKLOAD),
    Screen.LOG: (Panel.LOG,),
}

# Which list a screen loads on refresh.
SCREEN_LIST_PANEL: Final[dict[Screen, Panel]] = {
    Screen.CONTEXT: Panel.CONTEXT,
    Screen.NAMESPACE: Panel.NAMESPACE,
    Screen.WORKLOAD: Panel.WORKLOAD,
}

# =============================================================================
# Worker groups
# =============================================================================

LIST_WORKER_GROUP: Final = "lists"
LOG_STREAM_WORKER_GROUP: Final = "log-stream"
LOG_OPEN_WORKER_GROUP: Final = "log-open"
LOG_CLOSE_WORKER_GROUP: Final = "log-close"
EXPORT_WORKER_GROUP: Final = "export"

__all__ = [
    "CONTEXT_PANEL_ID",
    "ERROR_OVERLAY_ID",
    "EXPORT_WORKER_GROUP",
    "HELP_PANEL_ID",
    "LIST_PANELS",
    "LIST_ROW_ID",
    "LIST_WORKER_GROUP",
    "LOG_CLOSE_WORKER_GROUP",
    "LOG_OPEN_WORKER_GROUP",
    "LOG_PANEL_ID",
    "LOG_STREAM_WORKER_GROUP",
    "NAMESPACE_PANEL_ID",
    "PANEL_TITLES",
    "PANEL_WIDGET_IDS",
    "SCREEN_LIST_PANEL",
    "SEARCH_BAR_ID",
    "STATUS_BAR_ID",
    "VISIBLE_PANELS",
    "WORKLOAD_PANEL_ID",
]
