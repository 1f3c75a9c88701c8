"""Cancellable lifetime scopes for pushed inspector views.

Every pushed view owns a ``NavigationScope`` derived from the scope of the
view it was pushed from. Cancelling a scope cancels its descendants, the
asyncio tasks spawned in it, and runs its cancel callbacks (which is how
observable subscriptions bound to a view are dropped).
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from kubeinspect.errors import NavigationError

logger = logging.getLogger(__name__)


def _current_task() -> asyncio.Task[Any] | None:
    try:
        return asyncio.current_task()
    except RuntimeError:
        return None


class NavigationScope:
    """Node of a cancellation tree; ``Running`` until ``cancel()``."""

    def __init__(self, parent: NavigationScope | None = None, *, name: str = "root") -> None:
        self.name = name
        self.parent = parent
        self._children: list[NavigationScope] = []
        self._tasks: set[asyncio.Task[Any]] = set()
        self._callbacks: list[Callable[[], None]] = []
        self._cancelled = False
        if parent is not None:
            parent._adopt(self)

    def _adopt(self, child: NavigationScope) -> None:
        if self._cancelled:
            child._cancelled = True
            return
        self._children.append(child)

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def children(self) -> list[NavigationScope]:
        return list(self._children)

    @property
    def tasks(self) -> set[asyncio.Task[Any]]:
        return set(self._tasks)

    def child(self, name: str = "") -> NavigationScope:
        """Create a scope that is cancelled together with this one."""
        return NavigationScope(self, name=name or f"{self.name}/{len(self._children)}")

    def is_descendant_of(self, other: NavigationScope) -> bool:
        scope = self.parent
        while scope is not None:
            if scope is other:
                return True
            scope = scope.parent
        return False

    def on_cancel(self, callback: Callable[[], None]) -> None:
        """Run ``callback`` when the scope is cancelled (immediately if it already is)."""
        if self._cancelled:
            callback()
            return
        self._callbacks.append(callback)

    def spawn(
        self,
        coro: Coroutine[Any, Any, Any],
        *,
        name: str | None = None,
    ) -> asyncio.Task[Any]:
        """Run ``coro`` as a task owned by this scope.

        Raises:
            NavigationError: If the scope is already cancelled.
        """
        if self._cancelled:
            coro.close()
            raise NavigationError(f"Scope {self.name!r} is cancelled")
        task = asyncio.get_running_loop().create_task(coro, name=name or self.name)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def cancel(self) -> None:
        """Cancel this scope, then its descendants. Idempotent."""
        if self._cancelled:
            return
        self._cancelled = True
        logger.debug(f"Cancelling scope {self.name!r}")

        current = _current_task()
        for task in list(self._tasks):
            # A task cancelling its own scope finishes normally.
            if task is not current:
                task.cancel()
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            callback()
        children, self._children = self._children, []
        for child in children:
            child.cancel()
        if self.parent is not None and self in self.parent._children:
            self.parent._children.remove(self)

    def __repr__(self) -> str:
        state = "cancelled" if self._cancelled else "running"
        return f"<NavigationScope {self.name!r} {state}>"


__all__ = [
    "NavigationScope",
]
