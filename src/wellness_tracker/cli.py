"""CLI para lanzar el tracker de bienestar."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from wellness_tracker.app import run_app
from wellness_tracker.config import DEFAULT_TITLE, LOG_LEVELS, AppConfig


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed argparse namespace.
    """
    parser = argparse.ArgumentParser(
        description="Fitness, meals, hydration and mood trackers."
    )
    parser.add_argument(
        "--fullscreen",
        action="store_true",
        help="Start in fullscreen (Esc leaves fullscreen).",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging level (default: WARNING).",
    )
    parser.add_argument(
        "--title",
        default=DEFAULT_TITLE,
        help=f"Window and top bar title (default: {DEFAULT_TITLE!r}).",
    )
    return parser.parse_args(argv)


def config_from_args(ns: argparse.Namespace) -> AppConfig:
    return AppConfig(
        title=ns.title.strip() or DEFAULT_TITLE,
        fullscreen=ns.fullscreen,
        log_level=ns.log_level,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the app.

    Returns:
        Exit code (0 on success).
    """
    config = config_from_args(parse_args(argv))
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run_app(config)
