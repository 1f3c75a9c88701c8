"""Tests for cancellable navigation scopes."""

from __future__ import annotations

import asyncio

import pytest

from kubeinspect.errors import NavigationError
from kubeinspect.inspector.scope import NavigationScope


class TestNavigationScope:
    """Tests for NavigationScope."""

    def test_cancel_propagates_to_descendants(self) -> None:
        root = NavigationScope()
        child = root.child("child")
        grandchild = child.child("grandchild")
        child.cancel()
        assert child.cancelled is True
        assert grandchild.cancelled is True
        assert root.cancelled is False
        assert child not in root.children

    def test_child_of_cancelled_scope_starts_cancelled(self) -> None:
        root = NavigationScope()
        root.cancel()
        assert root.child().cancelled is True

    def test_cancel_is_idempotent(self) -> None:
        calls: list[str] = []
        scope = NavigationScope()
        scope.on_cancel(lambda: calls.append("cancelled"))
        scope.cancel()
        scope.cancel()
        assert calls == ["cancelled"]

    def test_on_cancel_after_cancellation_runs_immediately(self) -> None:
        calls: list[str] = []
        scope = NavigationScope()
        scope.cancel()
        scope.on_cancel(lambda: calls.append("late"))
        assert calls == ["late"]

    def test_is_descendant_of(self) -> None:
        root = NavigationScope()
        child = root.child()
        grandchild = child.child()
        assert grandchild.is_descendant_of(root)
        assert not root.is_descendant_of(child)

    def test_default_child_names(self) -> None:
        root = NavigationScope(name="root")
        assert root.child().name == "root/0"

    @pytest.mark.asyncio
    async def test_cancel_cancels_spawned_tasks(self) -> None:
        scope = NavigationScope()
        started = asyncio.Event()

        async def wait_forever() -> None:
            started.set()
            await asyncio.Event().wait()

        task = scope.spawn(wait_forever(), name="waiter")
        await started.wait()
        assert task in scope.tasks
        scope.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    @pytest.mark.asyncio
    async def test_finished_tasks_are_forgotten(self) -> None:
        scope = NavigationScope()

        async def done() -> int:
            return 1

        task = scope.spawn(done())
        assert await task == 1
        await asyncio.sleep(0)
        assert scope.tasks == set()

    @pytest.mark.asyncio
    async def test_spawn_on_cancelled_scope_raises(self) -> None:
        scope = NavigationScope()
        scope.cancel()

        async def never() -> None:
            return None

        with pytest.raises(NavigationError):
            scope.spawn(never())
