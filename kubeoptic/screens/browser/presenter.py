"""Browser screen presenter - selection along the resource hierarchy and list loading."""

from __future__ import annotations

import logging
import time
from typing import Any, Final

from kubeoptic.constants.enums import Panel, Screen
from kubeoptic.controllers.base import BaseController
from kubeoptic.messages import ContextsLoaded, NamespacesLoaded, WorkloadsLoaded
from kubeoptic.models.core import (
    ContextInfo,
    NamespaceInfo,
    SelectionState,
    WorkloadInfo,
)
from kubeoptic.screens.mixins.worker_mixin import DataLoaded

logger = logging.getLogger(__name__)

LOAD_CONTEXTS: Final[dict[Screen, str]] = {
    Screen.CONTEXT: "loading contexts",
    Screen.NAMESPACE: "loading namespaces",
    Screen.WORKLOAD: "loading workloads",
}


class SelectionMissingError(ValueError):
    """A list was requested before its parent was selected."""


class BrowserPresenter:
    """Presenter for BrowserScreen selection and list data."""

    def __init__(
        self,
        controller: BaseController,
        *,
        default_namespace: str | None = None,
    ) -> None:
        self.controller = controller
        self.selection = SelectionState()
        self.default_namespace = default_namespace

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, panel: Panel, item: Any) -> tuple[Panel, ...]:
        """Record ``item`` as the selection for ``panel``.

        Returns:
            The list panels below ``panel`` whose contents are now stale.
        """
        if panel is Panel.CONTEXT and isinstance(item, ContextInfo):
            if item.name != self.selection.context:
                logger.info("Selected context %s", item.name)
            self.selection.select_context(item.name)
            self.controller.use_context(item.name)
            return (Panel.NAMESPACE, Panel.WORKLOAD)
        if panel is Panel.NAMESPACE and isinstance(item, NamespaceInfo):
            self.selection.select_namespace(item.name)
            return (Panel.WORKLOAD,)
        if panel is Panel.WORKLOAD and isinstance(item, WorkloadInfo):
            self.selection.workload = item
            return ()
        logger.debug("Ignoring selection of %r on %s panel", item, panel.value)
        return ()

    def deselect(self, panel: Panel) -> tuple[Panel, ...]:
        """Drop the selection for ``panel`` and everything below it.

        Used when a confirm lands on a panel with no highlighted row, so the
        next screen reports the missing selection instead of reusing an old one.

        Returns:
            The list panels below ``panel`` whose contents are now stale.
        """
        if panel is Panel.CONTEXT:
            self.selection = SelectionState()
            return (Panel.NAMESPACE, Panel.WORKLOAD)
        if panel is Panel.NAMESPACE:
            self.selection.namespace = None
            self.selection.workload = None
            return (Panel.WORKLOAD,)
        if panel is Panel.WORKLOAD:
            self.selection.workload = None
        return ()

    def preferred_selection(self, panel: Panel, items: list[Any]) -> str | None:
        """Name of the item to highlight after a list loads."""
        if panel is Panel.CONTEXT:
            chosen = self.selection.context or self.controller.context
            if chosen is None:
                current = next((item for item in items if item.is_current), None)
                chosen = current.name if current is not None else None
            return chosen
        if panel is Panel.NAMESPACE:
            return self.selection.namespace or self.default_namespace
        if panel is Panel.WORKLOAD and self.selection.workload is not None:
            return self.selection.workload.name
        return None

    @property
    def workload(self) -> WorkloadInfo | None:
        return self.selection.workload

    def detail_text(self) -> str:
        parts = []
        if self.selection.context:
            parts.append(f"ctx: {self.selection.context}")
        if self.selection.namespace:
            parts.append(f"ns: {self.selection.namespace}")
        if self.selection.workload is not None:
            parts.append(f"pod: {self.selection.workload.name}")
        return " | ".join(parts)

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load(self, screen: Screen) -> DataLoaded:
        """Fetch the list backing ``screen`` and wrap it in its loaded message.

        Raises:
            SelectionMissingError: The parent of the requested list is not selected.
            ClusterError: The controller failed.
        """
        start = time.monotonic()
        if screen is Screen.CONTEXT:
            contexts = await self.controller.list_contexts()
            return ContextsLoaded(contexts, self._elapsed_ms(start))
        if screen is Screen.NAMESPACE:
            if self.selection.context is None:
                raise SelectionMissingError("no context selected")
            namespaces = await self.controller.list_namespaces()
            return NamespacesLoaded(namespaces, self._elapsed_ms(start))
        if screen is Screen.WORKLOAD:
            if self.selection.namespace is None:
                raise SelectionMissingError("no namespace selected")
            workloads = await self.controller.list_workloads(self.selection.namespace)
            return WorkloadsLoaded(workloads, self._elapsed_ms(start))
        raise ValueError(f"Screen {screen.value} has no list to load")

    @staticmethod
    def _elapsed_ms(start: float) -> float:
        return (time.monotonic() - start) * 1000


__all__ = [
    "LOAD_CONTEXTS",
    "BrowserPresenter",
    "SelectionMissingError",
]
