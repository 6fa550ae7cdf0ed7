"""Command-line front door for pykilo.

Parses CLI options, merges them with the persisted config, and sets up
logging. Then dispatches into the interactive editor runtime.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import __version__
from .app import EditorOptions, run_editor
from .config import (
    load_clear_on_exit,
    load_config,
    load_filler,
    load_log_file,
    load_style_name,
    load_welcome_message,
)
from .logs import configure_logging, resolve_log_file, resolve_log_level

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pykilo",
        description="View the first line of a file in a raw-mode terminal editor.",
    )
    parser.add_argument("path", nargs="?", default=None, help="File to open. Omit to start empty.")
    parser.add_argument("--style", default=None, help="Pygments style name for syntax colouring.")
    parser.add_argument("--no-color", action="store_true", help="Disable syntax colouring.")
    parser.add_argument("--log-file", type=Path, default=None, help="Append debug logs to this file.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main() -> None:
    """Parse CLI arguments and launch the editor.

    Returns normally (exit status 0) after the user quits. Terminal setup
    failures surface as ``SystemExit`` with a message, which exits non-zero.
    """
    args = build_parser().parse_args()
    config = load_config()

    configure_logging(resolve_log_file(args.log_file, load_log_file(config)), resolve_log_level())
    logger.info("pykilo %s starting, path=%s", __version__, args.path)

    options = EditorOptions(
        path=Path(args.path) if args.path else None,
        style=args.style or load_style_name(config),
        no_color=args.no_color,
        filler=load_filler(config),
        welcome_message=load_welcome_message(config),
        clear_on_exit=load_clear_on_exit(config),
    )
    run_editor(options)


if __name__ == "__main__":
    main()
