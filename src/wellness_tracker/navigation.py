"""Navegacion entre la pantalla principal y los trackers."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from wellness_tracker.model import Page
from wellness_tracker.store import Store
from wellness_tracker.trackers import TRACKERS

log = logging.getLogger(__name__)


def create_tracker_store(page: Page) -> Store[Any] | None:
    """Build a fresh store for a tracker page, or None for HOME."""
    definition = TRACKERS.get(page)
    if definition is None:
        return None
    return Store(definition.initial(), definition.reducer)


class Navigator:
    """Current page plus the store of the tracker being shown.

    Leaving a tracker page discards its store, so revisiting a tracker always
    starts from its initial state.
    """

    def __init__(self) -> None:
        self._page = Page.HOME
        self._tracker: Store[Any] | None = None
        self._listeners: list[Callable[[Navigator], None]] = []

    @property
    def current_page(self) -> Page:
        return self._page

    @property
    def tracker(self) -> Store[Any] | None:
        return self._tracker

    def go_to(self, page: Page | str) -> Page:
        """Show ``page`` from any source page.

        Raises:
            ValueError: If ``page`` is not a known page.
        """
        target = Page(page)
        if target is self._page:
            return target
        log.debug("navigate %s -> %s", self._page.value, target.value)
        self._page = target
        self._tracker = create_tracker_store(target)
        for listener in list(self._listeners):
            listener(self)
        return target

    def go_home(self) -> Page:
        return self.go_to(Page.HOME)

    def subscribe(self, listener: Callable[[Navigator], None]) -> Callable[[], None]:
        """Register a callback run after every page change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
