"""Level-based rendering of property trees into render elements.

The layout policy is fixed by nesting level:

- Level 0: titled ``Section``; children render at level 1.
- Level 1: a group renders as a collapsible ``ExpanderRow`` whose state is
  read from and written to the ``ExpansionStore``; children render at level 2.
  A non-group node falls through to level-2 behavior.
- Level 2: titled ``ActionRow``. Groups lay their children out inline as
  level-3 pairs; values show as selectable text capped to a fixed number of
  lines, followed by a copy action or, for references, a "go to" indicator.
- Level 3: terminal ``InlinePair``.

Level-1 and level-2 rows are then augmented through the registry, and finally
each node's ``render_hook`` (if any) is invoked with the finished element.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from functools import partial
from typing import Any

from kubeinspect.constants import MAX_PROPERTY_LEVEL
from kubeinspect.inspector.augmentation import (
    AugmentationRegistry,
    AugmentContext,
    NullNavigator,
    RowNavigator,
    default_registry,
)
from kubeinspect.inspector.elements import (
    ActionRow,
    CopyAction,
    ExpanderRow,
    GoNextIndicator,
    InlinePair,
    RenderElement,
    Section,
)
from kubeinspect.inspector.expansion import ExpansionKey, ExpansionStore
from kubeinspect.models.property import PropertyNode, kind_of, object_identity
from kubeinspect.models.state.settings import InspectorSettings
from kubeinspect.utils.resource_gvr import resource_gvr

logger = logging.getLogger(__name__)


class PropertyTreeRenderer:
    """Turn ``PropertyNode`` trees into render elements for one view.

    Args:
        expansion: Expansion store of the owning view.
        navigator: Receiver of row actions (references, copies, drill-downs).
        registry: Augmentation registry; defaults to the built-in one.
        settings: Inspector settings.
    """

    def __init__(
        self,
        expansion: ExpansionStore,
        *,
        navigator: RowNavigator | None = None,
        registry: AugmentationRegistry | None = None,
        settings: InspectorSettings | None = None,
    ) -> None:
        self.expansion = expansion
        self.navigator: RowNavigator = navigator or NullNavigator()
        self.registry = registry if registry is not None else default_registry()
        self.settings = settings or InspectorSettings()
        self.root: Mapping[str, Any] | None = None

    def render_all(
        self,
        properties: Sequence[PropertyNode],
        root: Mapping[str, Any] | None,
    ) -> list[Section]:
        """Render every top-level node of ``root``'s property tree, in order."""
        self.root = root
        return [self.render(prop, 0, ()) for prop in properties]  # type: ignore[misc]

    def render(self, node: PropertyNode, level: int = 0, path: tuple[str, ...] = ()) -> RenderElement:
        """Render one node at ``level``.

        Args:
            node: Node to render.
            level: Nesting level, 0 through 3.
            path: Names of the node's ancestors.

        Returns:
            The constructed element.

        Raises:
            ValueError: If ``level`` is outside 0..3.
        """
        if level < 0 or level > MAX_PROPERTY_LEVEL:
            raise ValueError(f"Property level must be between 0 and {MAX_PROPERTY_LEVEL}, got {level}")

        if level == 0:
            element: RenderElement = self._render_section(node, path)
        elif level == 1 and node.is_group:
            element = self._render_expander(node, path)
            self._augment(element, node)
        elif level <= 2:
            element = self._render_action_row(node, path)
            self._augment(element, node)
        else:
            element = self._render_pair(node)

        if node.render_hook is not None:
            node.render_hook(element)
        return element

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------

    def _render_section(self, node: PropertyNode, path: tuple[str, ...]) -> Section:
        section = Section(title=node.name)
        child_path = (*path, node.name)
        for child in node.children:
            section.add(self.render(child, 1, child_path))
        return section

    def _render_expander(self, node: PropertyNode, path: tuple[str, ...]) -> ExpanderRow:
        key = self.expansion_key(path, node.name, 1)
        row = ExpanderRow(
            title=node.name,
            key=key,
            expanded=self.expansion.get(key, self.settings.default_expanded),
            sensitive=bool(node.children),
            on_toggle=partial(self.expansion.set, key),
        )
        child_path = (*path, node.name)
        for child in node.children:
            row.add_row(self.render(child, 2, child_path))
        return row

    def _render_action_row(self, node: PropertyNode, path: tuple[str, ...]) -> ActionRow:
        row = ActionRow(title=node.name, css_classes={"property"})
        if node.is_group:
            child_path = (*path, node.name)
            for child in node.children:
                row.add_inline(self.render(child, MAX_PROPERTY_LEVEL, child_path))  # type: ignore[arg-type]
            return row

        row.subtitle = node.value
        row.subtitle_lines = self.settings.max_subtitle_lines
        if node.reference is None:
            row.add_suffix(CopyAction(text=node.value, on_copy=self.navigator.copy_to_clipboard))
        else:
            row.add_suffix(GoNextIndicator())
            row.set_activatable(partial(self.navigator.push_reference, node))
        return row

    def _render_pair(self, node: PropertyNode) -> InlinePair:
        if node.children:
            logger.warning(
                f"Property {node.name!r} is at the deepest level but has "
                f"{len(node.children)} children; they are not rendered"
            )
        return InlinePair(name=node.name, value=node.value)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def expansion_key(self, path: tuple[str, ...], name: str, level: int) -> ExpansionKey:
        """Structural key of a row: root resource, root identity, path and level."""
        return ExpansionKey(
            resource=resource_gvr(self.root),
            identity="/".join(object_identity(self.root) or ()),
            path=(*path, name),
            level=level,
        )

    def _augment(self, row: RenderElement, node: PropertyNode) -> None:
        if self.root is None or node.object is None:
            return
        context = AugmentContext(root=self.root, navigator=self.navigator, settings=self.settings)
        for mutation in self.registry.augment(kind_of(self.root), node, context):
            mutation.apply(row)


__all__ = [
    "PropertyTreeRenderer",
]
