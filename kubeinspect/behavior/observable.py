"""Reactive value cells used by detail behaviors.

Subscribers are bound to a ``NavigationScope`` and dropped when it is
cancelled. Updates are delivered in emission order: an update issued while
subscribers are still handling a previous value is queued and delivered once
that value has reached every subscriber.
"""

from __future__ import annotations

import logging
from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from kubeinspect.inspector.scope import NavigationScope

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Observable(Generic[T]):
    """A single value with change notification."""

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[Callable[[T], None]] = []
        self._pending: deque[T] = deque()
        self._emitting = False

    @property
    def value(self) -> T:
        return self._value

    def update(self, value: T) -> None:
        """Set a new value and notify subscribers."""
        self._pending.append(value)
        if self._emitting:
            return
        self._emitting = True
        try:
            while self._pending:
                self._value = self._pending.popleft()
                for callback in list(self._subscribers):
                    if callback in self._subscribers:
                        callback(self._value)
        except Exception:
            if self._pending:
                logger.warning(f"Dropping {len(self._pending)} queued update(s) after a subscriber failed")
                self._pending.clear()
            raise
        finally:
            self._emitting = False

    def subscribe(
        self,
        scope: NavigationScope | None,
        callback: Callable[[T], None],
        *,
        immediate: bool = True,
    ) -> Callable[[], None]:
        """Call ``callback`` on every change while ``scope`` is running.

        Args:
            scope: Scope bounding the subscription; None for no bound.
            callback: Receives each new value.
            immediate: Also call ``callback`` with the current value now.

        Returns:
            A function that removes the subscription.
        """

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        if scope is not None and scope.cancelled:
            logger.debug(f"Not subscribing on cancelled scope {scope.name!r}")
            return unsubscribe

        self._subscribers.append(callback)
        if scope is not None:
            scope.on_cancel(unsubscribe)
        if immediate:
            callback(self._value)
        return unsubscribe

    def __len__(self) -> int:
        return len(self._subscribers)


__all__ = [
    "Observable",
]
