"""Command-line entry point: ``python -m kubeoptic`` or ``kubeoptic``."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence
from pathlib import Path

from textual.logging import TextualHandler

from kubeoptic.app import KubeopticApp


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kubeoptic",
        description="Browse cluster contexts, namespaces and workloads and tail their logs",
    )
    parser.add_argument(
        "--kubeconfig",
        type=Path,
        default=None,
        help="Path to a kubeconfig file (defaults to $KUBECONFIG or ~/.kube/config)",
    )
    parser.add_argument("--context", default=None, help="Context to preselect")
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings file (defaults to $KUBEOPTIC_CONFIG or ~/.config/kubeoptic/settings.json)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Level for records sent to the Textual devtools console",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> None:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, handlers=[TextualHandler()])
    app = KubeopticApp(
        kubeconfig=args.kubeconfig,
        context=args.context,
        settings_path=args.settings,
    )
    app.run()


if __name__ == "__main__":
    main()
