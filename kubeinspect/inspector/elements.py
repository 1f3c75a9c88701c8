"""Toolkit-independent render tree produced by the property renderer.

The renderer builds these elements; a toolkit adapter (see
``kubeinspect.widgets.property_rows``) turns them into widgets and feeds user
interaction back through ``activate()``, ``set_expanded()`` and ``click()``.

Containers expose their insertion points as named slots (``prefixes``,
``suffixes``, ``rows``, ``inline``) so augmentations never have to walk a
widget hierarchy to find where to add content.

Elements compare by identity so they can be tracked in sets and dicts.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from kubeinspect.inspector.expansion import ExpansionKey
    from kubeinspect.inspector.utilization import UtilizationSample

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class RenderElement:
    """Base class for all render tree nodes."""

    def children(self) -> Sequence[RenderElement]:
        """Direct child elements, in display order."""
        return ()


# ============================================================================
# Affordances
# ============================================================================


@dataclass(eq=False)
class StatusIcon(RenderElement):
    """Ready / not-ready indicator."""

    ready: bool = False


@dataclass(eq=False)
class GoNextIndicator(RenderElement):
    """Visual "go to" hint on activatable rows."""


@dataclass(eq=False)
class CopyAction(RenderElement):
    """Copy-to-clipboard button for a row's value."""

    text: str = ""
    on_copy: Callable[[str], Any] | None = None

    def click(self) -> None:
        if self.on_copy is not None:
            self.on_copy(self.text)


@dataclass(eq=False)
class UtilizationBar(RenderElement):
    """Level bar showing resource usage against a request or limit."""

    label: str = ""
    sample: UtilizationSample | None = None

    @property
    def value(self) -> float:
        """Clamped fill in [0, 1]."""
        return self.sample.fill_fraction if self.sample else 0.0

    @property
    def tooltip(self) -> str:
        """Unclamped percentage, e.g. ``"117% Memory"``."""
        return self.sample.tooltip(self.label) if self.sample else ""

    @property
    def offsets(self) -> dict[str, float]:
        """Named bar offsets where the warning and error bands start."""
        if self.sample is None:
            return {}
        return {
            "warning": self.sample.warning_threshold,
            "error": self.sample.error_threshold,
        }


# ============================================================================
# Rows
# ============================================================================


@dataclass(eq=False)
class InlinePair(RenderElement):
    """Compact ``name: value`` pair (level 3)."""

    name: str = ""
    value: str = ""


@dataclass(eq=False)
class Row(RenderElement):
    """Common base for titled rows with prefix and suffix slots."""

    title: str = ""
    prefixes: list[RenderElement] = field(default_factory=list)
    suffixes: list[RenderElement] = field(default_factory=list)
    activatable: bool = False
    on_activate: Callable[[], Any] | None = None
    css_classes: set[str] = field(default_factory=set)

    def add_prefix(self, element: RenderElement) -> None:
        self.prefixes.append(element)

    def add_suffix(self, element: RenderElement) -> None:
        self.suffixes.append(element)

    def set_activatable(self, callback: Callable[[], Any]) -> None:
        self.activatable = True
        self.on_activate = callback

    def activate(self) -> Any:
        """Run the activation callback; inert for non-activatable rows."""
        if not self.activatable or self.on_activate is None:
            logger.debug(f"Ignoring activation of inert row {self.title!r}")
            return None
        return self.on_activate()

    def children(self) -> Sequence[RenderElement]:
        return [*self.prefixes, *self.suffixes]


@dataclass(eq=False)
class ActionRow(Row):
    """Titled row (level 2) showing a value or an inline group of pairs."""

    subtitle: str = ""
    subtitle_lines: int = 0
    subtitle_selectable: bool = True
    inline: list[InlinePair] = field(default_factory=list)

    def add_inline(self, pair: InlinePair) -> None:
        self.inline.append(pair)

    def set_activatable(self, callback: Callable[[], Any]) -> None:
        super().set_activatable(callback)
        self.subtitle_selectable = False

    def children(self) -> Sequence[RenderElement]:
        return [*self.prefixes, *self.inline, *self.suffixes]


@dataclass(eq=False)
class ExpanderRow(Row):
    """Collapsible row (level 1) whose state lives in the expansion store."""

    key: ExpansionKey | None = None
    expanded: bool = False
    sensitive: bool = True
    rows: list[RenderElement] = field(default_factory=list)
    on_toggle: Callable[[bool], Any] | None = None

    def add_row(self, row: RenderElement) -> None:
        self.rows.append(row)

    def set_expanded(self, expanded: bool) -> None:
        """Record a user expand/collapse and write it back to the store."""
        self.expanded = expanded
        if self.on_toggle is not None:
            self.on_toggle(expanded)

    def children(self) -> Sequence[RenderElement]:
        return [*self.prefixes, *self.rows, *self.suffixes]


@dataclass(eq=False)
class Section(RenderElement):
    """Titled section container (level 0)."""

    title: str = ""
    rows: list[RenderElement] = field(default_factory=list)

    def add(self, row: RenderElement) -> None:
        self.rows.append(row)

    def children(self) -> Sequence[RenderElement]:
        return list(self.rows)


# ============================================================================
# Page
# ============================================================================

PageListener = Callable[[list[Section], list[Section]], None]


class PropertyPage:
    """Ordered list of top-level sections shown by one inspector view.

    Listeners are called with ``(removed, added)`` after every replacement.
    """

    def __init__(self) -> None:
        self._sections: list[Section] = []
        self._listeners: list[PageListener] = []

    @property
    def sections(self) -> list[Section]:
        return list(self._sections)

    def replace(self, sections: Sequence[Section]) -> tuple[list[Section], list[Section]]:
        """Remove every current section, then attach ``sections`` in order."""
        removed = list(self._sections)
        self._sections.clear()
        added = list(sections)
        self._sections.extend(added)
        for listener in list(self._listeners):
            listener(removed, added)
        return removed, added

    def subscribe(self, listener: PageListener) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def __len__(self) -> int:
        return len(self._sections)


def iter_elements(element: RenderElement) -> Iterator[RenderElement]:
    """Yield ``element`` and all of its descendants, depth first."""
    yield element
    for child in element.children():
        yield from iter_elements(child)


__all__ = [
    "ActionRow",
    "CopyAction",
    "ExpanderRow",
    "GoNextIndicator",
    "InlinePair",
    "PageListener",
    "PropertyPage",
    "RenderElement",
    "Row",
    "Section",
    "StatusIcon",
    "UtilizationBar",
    "iter_elements",
]
