"""Kubeconfig discovery and parsing."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from kubeoptic.controllers.base import KubeconfigError
from kubeoptic.models.core import ContextInfo

logger = logging.getLogger(__name__)

KUBECONFIG_ENV_VAR = "KUBECONFIG"
DEFAULT_KUBECONFIG = Path("~/.kube/config")


def discover_kubeconfig(explicit: str | os.PathLike[str] | None = None) -> Path:
    """Return the kubeconfig file to use.

    Lookup order: ``explicit`` path, the first existing entry of
    ``$KUBECONFIG``, then ``~/.kube/config``.

    Raises:
        KubeconfigError: No candidate exists.
    """
    if explicit:
        path = Path(explicit).expanduser()
        if path.is_file():
            return path
        raise KubeconfigError(f"kubeconfig not found: {path}")

    for entry in os.environ.get(KUBECONFIG_ENV_VAR, "").split(os.pathsep):
        if entry.strip():
            path = Path(entry.strip()).expanduser()
            if path.is_file():
                return path

    path = DEFAULT_KUBECONFIG.expanduser()
    if path.is_file():
        return path
    raise KubeconfigError("no kubeconfig found")


class KubeconfigParser:
    """Parses kubeconfig YAML into context models."""

    def load(self, path: Path) -> dict[str, Any]:
        """Read and parse a kubeconfig file.

        Raises:
            KubeconfigError: The file is unreadable or not a YAML mapping.
        """
        try:
            with path.open(encoding="utf-8") as handle:
                parsed = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as exc:
            raise KubeconfigError(f"failed to read kubeconfig {path}: {exc}") from exc
        if parsed is None:
            return {}
        if not isinstance(parsed, dict):
            raise KubeconfigError(f"kubeconfig {path} is not a mapping")
        return parsed

    def parse_contexts(self, config: dict[str, Any]) -> list[ContextInfo]:
        """Extract contexts, sorted by name, with the current one flagged."""
        current = config.get("current-context") or ""
        contexts: list[ContextInfo] = []
        for entry in config.get("contexts") or []:
            if not isinstance(entry, dict) or not entry.get("name"):
                logger.debug("Skipping malformed kubeconfig context entry: %r", entry)
                continue
            details = entry.get("context") or {}
            contexts.append(
                ContextInfo(
                    name=str(entry["name"]),
                    cluster=str(details.get("cluster", "")),
                    user=str(details.get("user", "")),
                    namespace=details.get("namespace"),
                    is_current=entry["name"] == current,
                )
            )
        contexts.sort(key=lambda context: context.name)
        return contexts

    def read_contexts(self, path: Path) -> list[ContextInfo]:
        return self.parse_contexts(self.load(path))
