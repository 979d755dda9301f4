"""ObservableStore — ordered items plus synchronous listener fan-out.

INVARIANT: Listeners receive an immutable snapshot (a tuple), never the
live item list. Mutation completes before any listener runs.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Listener = Callable[[tuple[T, ...]], None]

logger = logging.getLogger(__name__)


class ObservableStore(Generic[T]):
    """Append-only sequence of items that notifies listeners on every change.

    Items keep insertion order. Listeners are called synchronously, in
    subscription order, after each mutation. There is no unsubscribe and
    no duplicate detection: subscribing the same callable twice gets it
    called twice per change.
    """

    def __init__(self) -> None:
        self._items: list[T] = []
        self._listeners: list[Listener[T]] = []

    def subscribe(self, listener: Listener[T]) -> None:
        """Register *listener* for every future mutation."""
        self._listeners.append(listener)

    def add(self, item: T) -> None:
        """Append *item*, then notify every listener with a fresh snapshot."""
        self._items.append(item)
        self._notify()

    def snapshot(self) -> tuple[T, ...]:
        """Return an immutable copy of the current items."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _notify(self) -> None:
        snapshot = self.snapshot()
        # Listeners subscribed during this fan-out first fire on the next change.
        listeners = list(self._listeners)
        logger.debug("Notifying %d listener(s) of %d item(s)", len(listeners), len(snapshot))
        for listener in listeners:
            listener(snapshot)
