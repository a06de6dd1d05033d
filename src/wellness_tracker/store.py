"""Contenedor de estado con reducer y callbacks de render."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

S = TypeVar("S")

log = logging.getLogger(__name__)


class Store(Generic[S]):
    """Holds one tracker state and replaces it on every dispatched action."""

    def __init__(self, initial: S, reducer: Callable[[S, object], S]) -> None:
        self._state = initial
        self._reducer = reducer
        self._listeners: list[Callable[[S], None]] = []

    @property
    def state(self) -> S:
        return self._state

    def dispatch(self, action: object) -> S:
        """Run the reducer, store the result and notify subscribers.

        Raises:
            TypeError: If the reducer does not handle ``action``.
        """
        self._state = self._reducer(self._state, action)
        log.debug("dispatch %r -> %r", action, self._state)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    def subscribe(self, listener: Callable[[S], None]) -> Callable[[], None]:
        """Register a render callback; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
