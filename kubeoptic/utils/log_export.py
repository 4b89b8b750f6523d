"""Saving displayed log lines to disk."""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9._-]+")
EXPORT_TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"


def _safe_component(value: str) -> str:
    return _UNSAFE_CHARS_RE.sub("_", value).strip("_") or "unknown"


def export_filename(namespace: str, workload: str, when: datetime) -> str:
    """``<namespace>_<workload>_<YYYYmmdd-HHMMSS>.log`` with unsafe characters replaced."""
    return (
        f"{_safe_component(namespace)}_{_safe_component(workload)}_"
        f"{when.strftime(EXPORT_TIMESTAMP_FORMAT)}.log"
    )


def write_log_export(
    lines: Sequence[str],
    export_dir: str | Path,
    *,
    namespace: str,
    workload: str,
    when: datetime | None = None,
) -> Path:
    """Write ``lines`` to a new file under ``export_dir`` and return its path.

    Raises:
        OSError: The directory or file cannot be written.
    """
    directory = Path(export_dir).expanduser()
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / export_filename(namespace, workload, when or datetime.now())
    content = "\n".join(lines)
    if lines:
        content += "\n"
    path.write_text(content, encoding="utf-8")
    logger.info("Saved %d log lines to %s", len(lines), path)
    return path


__all__ = [
    "export_filename",
    "write_log_export",
]
