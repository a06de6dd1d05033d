"""Configuracion de ejecucion de la app."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TITLE = "Health & Wellness Tracker"
LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class AppConfig:
    """Runtime options; nothing here is persisted."""

    title: str = DEFAULT_TITLE
    fullscreen: bool = False
    log_level: str = "WARNING"
