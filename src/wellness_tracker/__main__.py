"""Punto de entrada: ``python -m wellness_tracker``."""

from __future__ import annotations

import sys

from wellness_tracker.cli import main as cli_main


def main() -> int:
    """Launch the wellness tracker, reporting a missing GUI toolkit."""
    try:
        return cli_main()
    except ImportError as exc:
        print(
            f"Wellness Tracker necesita Kivy para abrir la ventana: {exc}",
            file=sys.stderr,
        )
        print("Instalalo con: pip install kivy", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
