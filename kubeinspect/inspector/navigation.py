"""Navigation stack of inspector views.

The controller owns a stack whose bottom is the root view. Following a
reference resolves it asynchronously in a child scope of the originating
view, then pushes a new view seeded with the resolved object; following an
already-known object pushes synchronously. Popping a view cancels its scope,
which discards any resolution still in flight under it. Work started from
the root view runs under a per-selection scope that a reset cancels, so a
change of root selection drops resolutions begun for the previous object.

The toolkit side implements ``NavigationHost`` to show and hide views.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from kubeinspect.errors import NavigationError
from kubeinspect.inspector.augmentation import AugmentationRegistry, default_registry
from kubeinspect.inspector.scope import NavigationScope
from kubeinspect.inspector.view import InspectorView
from kubeinspect.models.property import PropertyNode, object_identity
from kubeinspect.models.state.settings import InspectorSettings

if TYPE_CHECKING:
    from kubeinspect.behavior.detail_behavior import DetailBehavior

logger = logging.getLogger(__name__)


class NavigationHost(Protocol):
    """Toolkit callbacks driven by the navigation controller."""

    def show_view(self, view: InspectorView) -> None: ...

    def hide_view(self, view: InspectorView) -> None: ...

    def open_logs(self, view: InspectorView, pod: Mapping[str, Any], container: Mapping[str, Any]) -> None: ...

    def copy_to_clipboard(self, text: str) -> None: ...


class NullNavigationHost:
    """Host that displays nothing; used headless and in tests."""

    def show_view(self, view: InspectorView) -> None:
        pass

    def hide_view(self, view: InspectorView) -> None:
        pass

    def open_logs(self, view: InspectorView, pod: Mapping[str, Any], container: Mapping[str, Any]) -> None:
        logger.debug(f"No host to show logs of {container.get('name')!r}")

    def copy_to_clipboard(self, text: str) -> None:
        logger.debug("No host clipboard available")


class NavigationController:
    """Stack of inspector views with scoped, cancellable pushes.

    Args:
        root_behavior: Behavior of the root view.
        host: Toolkit host; defaults to a no-op host.
        registry: Augmentation registry shared by all views.
        settings: Inspector settings.
        scope: Root scope; a fresh one is created when omitted.
    """

    def __init__(
        self,
        root_behavior: DetailBehavior,
        *,
        host: NavigationHost | None = None,
        registry: AugmentationRegistry | None = None,
        settings: InspectorSettings | None = None,
        scope: NavigationScope | None = None,
    ) -> None:
        self.settings = settings or InspectorSettings()
        self.registry = registry if registry is not None else default_registry()
        self.host: NavigationHost = host or NullNavigationHost()
        self._root_scope = scope or NavigationScope(name="root")
        self._stack: list[InspectorView] = [self._create_view(root_behavior, self._root_scope)]
        self._selection_scope = self._root_scope.child(name="root/selection")
        self._root_identity = object_identity(root_behavior.selected_object.value)
        root_behavior.selected_object.subscribe(
            self._root_scope, self._on_root_selection_changed, immediate=False
        )
        self.host.show_view(self.root)

    # ------------------------------------------------------------------
    # Stack accessors
    # ------------------------------------------------------------------

    @property
    def views(self) -> list[InspectorView]:
        return list(self._stack)

    @property
    def root(self) -> InspectorView:
        return self._stack[0]

    @property
    def top(self) -> InspectorView:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def scope(self) -> NavigationScope:
        return self._root_scope

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def push_reference(
        self,
        node: PropertyNode,
        origin: InspectorView | None = None,
    ) -> asyncio.Task[InspectorView | None] | None:
        """Resolve ``node.reference`` in the background and push the result.

        Returns immediately. Failures are logged and leave the stack
        untouched; results arriving after the originating view was popped
        are discarded.

        Args:
            node: Node carrying a reference.
            origin: View the node was activated in; defaults to the top view.

        Returns:
            The resolution task, or None when the origin is no longer active.

        Raises:
            NavigationError: If the node has no reference.
        """
        if node.reference is None:
            raise NavigationError(f"Property {node.name!r} has no reference to follow")
        origin = origin or self.top
        if not origin.active:
            logger.debug(f"Ignoring reference {node.name!r} from popped view {origin.title!r}")
            return None

        parent = self._scope_for(origin)
        scope = parent.child(name=f"{parent.name}/{node.name}")
        return scope.spawn(self._resolve_and_push(node, origin, scope), name=f"resolve {node.name}")

    def push_object(
        self,
        obj: Mapping[str, Any],
        origin: InspectorView | None = None,
    ) -> InspectorView | None:
        """Push a view for an object that is already at hand."""
        origin = origin or self.top
        if not origin.active:
            logger.debug(f"Ignoring push from popped view {origin.title!r}")
            return None
        return self._push(obj, origin, self._scope_for(origin).child())

    def pop(self) -> InspectorView | None:
        """Remove the top view and cancel its scope. The root view stays."""
        if len(self._stack) <= 1:
            return None
        view = self._stack.pop()
        view.close()
        self.host.hide_view(view)
        logger.debug(f"Popped {view.title!r}, depth now {self.depth}")
        return view

    def reset(self) -> list[InspectorView]:
        """Pop every view above the root and cancel resolutions started from it."""
        popped = []
        while (view := self.pop()) is not None:
            popped.append(view)
        self._selection_scope.cancel()
        if not self._root_scope.cancelled:
            self._selection_scope = self._root_scope.child(name="root/selection")
        return popped

    def close(self) -> None:
        """Tear the whole stack down, including the root scope."""
        self.reset()
        self.root.close()

    def open_logs(
        self,
        pod: Mapping[str, Any],
        container: Mapping[str, Any],
        origin: InspectorView | None = None,
    ) -> None:
        self.host.open_logs(origin or self.top, pod, container)

    def copy_to_clipboard(self, text: str) -> None:
        self.host.copy_to_clipboard(text)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _scope_for(self, origin: InspectorView) -> NavigationScope:
        # Work started from the root view belongs to the current root selection.
        if origin is self.root:
            return self._selection_scope
        return origin.scope

    def _create_view(self, behavior: DetailBehavior, scope: NavigationScope) -> InspectorView:
        return InspectorView(
            behavior,
            scope,
            self,
            registry=self.registry,
            settings=self.settings,
        )

    async def _resolve_and_push(
        self,
        node: PropertyNode,
        origin: InspectorView,
        scope: NavigationScope,
    ) -> InspectorView | None:
        assert node.reference is not None
        try:
            obj = await node.reference.resolve(scope, origin.behavior.cluster)
        except asyncio.CancelledError:
            logger.debug(f"Resolution of {node.name!r} cancelled")
            raise
        except Exception as e:
            if scope.cancelled:
                logger.debug(f"Discarding failed resolution of {node.name!r} from a popped view")
                return None
            logger.warning(f"Failed to resolve reference {node.name!r}: {e}")
            scope.cancel()
            return None

        if scope.cancelled:
            logger.debug(f"Discarding resolution of {node.name!r} from a popped view")
            return None
        if obj is None:
            logger.warning(f"Reference {node.name!r} resolved to nothing")
            scope.cancel()
            return None
        return self._push(obj, origin, scope)

    def _push(
        self,
        obj: Mapping[str, Any],
        origin: InspectorView,
        scope: NavigationScope,
    ) -> InspectorView | None:
        if len(self._stack) >= self.settings.max_navigation_depth:
            logger.warning(
                f"Navigation depth limit ({self.settings.max_navigation_depth}) reached, not pushing"
            )
            scope.cancel()
            return None

        identity = object_identity(obj)
        if identity is not None and any(
            object_identity(view.selected_object) == identity for view in self._stack
        ):
            logger.warning(f"{identity[0]} {identity[2]!r} is already open, not pushing it again")
            scope.cancel()
            return None

        behavior = origin.behavior.new_detail_behavior(scope)
        behavior.selected_object.update(obj)
        view = self._create_view(behavior, scope)
        self._stack.append(view)
        self.host.show_view(view)
        logger.debug(f"Pushed {view.title!r}, depth now {self.depth}")
        return view

    def _on_root_selection_changed(self, obj: Mapping[str, Any] | None) -> None:
        identity = object_identity(obj)
        if identity == self._root_identity:
            return
        self._root_identity = identity
        self.reset()


__all__ = [
    "NavigationController",
    "NavigationHost",
    "NullNavigationHost",
]
