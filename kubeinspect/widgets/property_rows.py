"""Textual widgets for inspector render elements.

``build_widget()`` maps each render element to a widget. Widgets keep a
reference to their element and feed interaction back into it: clicking or
pressing enter on an activatable row calls ``activate()``, toggling a
collapsible row calls ``set_expanded()``, and the copy button calls
``click()``.
"""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.events import Click
from textual.widget import Widget
from textual.widgets import Button, Collapsible, ProgressBar, Static

from kubeinspect.inspector.elements import (
    ActionRow,
    CopyAction,
    ExpanderRow,
    GoNextIndicator,
    InlinePair,
    RenderElement,
    Section,
    StatusIcon,
    UtilizationBar,
)

# ============================================================================
# Affordances
# ============================================================================


class StatusIconWidget(Static):
    """Ready / not-ready dot."""

    DEFAULT_CSS = """
    StatusIconWidget {
        width: 2;
        height: 1;
    }
    StatusIconWidget.status-ready {
        color: $success;
    }
    StatusIconWidget.status-not-ready {
        color: $error;
    }
    """

    def __init__(self, element: StatusIcon) -> None:
        super().__init__(
            "●",
            classes="status-icon status-ready" if element.ready else "status-icon status-not-ready",
        )
        self.element = element
        self.tooltip = "Ready" if element.ready else "Not ready"


class UtilizationBarWidget(Vertical):
    """Compact usage bar with a percentage tooltip."""

    DEFAULT_CSS = """
    UtilizationBarWidget {
        width: 12;
        height: 2;
    }
    UtilizationBarWidget .bar-label {
        color: $text-muted;
        height: 1;
    }
    UtilizationBarWidget.severity-warning Bar > .bar--bar {
        color: $warning;
    }
    UtilizationBarWidget.severity-error Bar > .bar--bar {
        color: $error;
    }
    """

    def __init__(self, element: UtilizationBar) -> None:
        severity = element.sample.severity if element.sample else None
        super().__init__(classes=f"utilization-bar severity-{severity.value if severity else 'none'}")
        self.element = element
        self.tooltip = element.tooltip

    def compose(self) -> ComposeResult:
        yield Static(self.element.label, classes="bar-label")
        yield ProgressBar(total=1.0, show_eta=False, show_percentage=False)

    def on_mount(self) -> None:
        self.query_one(ProgressBar).update(progress=self.element.value)


class CopyButton(Button):
    """Copies the row's value."""

    DEFAULT_CSS = """
    CopyButton {
        min-width: 6;
        height: 1;
        border: none;
    }
    """

    def __init__(self, element: CopyAction) -> None:
        super().__init__("copy", classes="copy-button")
        self.element = element
        self.tooltip = "Copy value"

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.element.click()

    def on_click(self, event: Click) -> None:
        # Keep the click from activating the surrounding row.
        event.stop()


class GoNextWidget(Static):
    DEFAULT_CSS = """
    GoNextWidget {
        width: 2;
        color: $text-muted;
    }
    """

    def __init__(self, element: GoNextIndicator) -> None:
        super().__init__("›", classes="go-next")
        self.element = element


# ============================================================================
# Rows
# ============================================================================


def _inline_text(pairs: list[InlinePair]) -> Text:
    text = Text()
    for index, pair in enumerate(pairs):
        if index:
            text.append("   ")
        text.append(f"{pair.name}: ", style="dim")
        text.append(pair.value, style="bold")
    return text


def _capped(value: str, lines: int) -> str:
    if lines <= 0:
        return value
    split = value.splitlines()
    if len(split) <= lines:
        return value
    return "\n".join([*split[:lines - 1], split[lines - 1] + " …"])


class ActionRowWidget(Horizontal):
    """Titled row with a value (or inline pairs) and trailing affordances."""

    DEFAULT_CSS = """
    ActionRowWidget {
        height: auto;
        padding: 0 1;
        border-bottom: solid $panel;
    }
    ActionRowWidget.activatable:hover, ActionRowWidget.activatable:focus {
        background: $boost;
    }
    ActionRowWidget .row-body {
        width: 1fr;
        height: auto;
    }
    ActionRowWidget .row-title {
        text-style: bold;
    }
    ActionRowWidget .row-subtitle {
        color: $text-muted;
        overflow: hidden;
    }
    """

    BINDINGS = [Binding("enter", "activate_row", "Open", show=False)]

    def __init__(self, element: ActionRow) -> None:
        super().__init__(classes=" ".join(["action-row", *sorted(element.css_classes)]))
        self.element = element
        if element.activatable:
            self.add_class("activatable")
            self.can_focus = True

    def compose(self) -> ComposeResult:
        yield from (build_widget(prefix) for prefix in self.element.prefixes)
        with Vertical(classes="row-body"):
            yield Static(self.element.title, markup=False, classes="row-title")
            if self.element.inline:
                yield Static(_inline_text(self.element.inline), classes="row-inline")
            elif self.element.subtitle:
                subtitle = Static(
                    _capped(self.element.subtitle, self.element.subtitle_lines),
                    markup=False,
                    classes="row-subtitle",
                )
                if self.element.subtitle_lines:
                    subtitle.styles.max_height = self.element.subtitle_lines
                yield subtitle
        yield from (build_widget(suffix) for suffix in self.element.suffixes)

    def on_click(self, event: Click) -> None:
        if self.element.activatable:
            event.stop()
            self.element.activate()

    def action_activate_row(self) -> None:
        self.element.activate()


class ExpanderRowWidget(Horizontal):
    """Collapsible row whose toggles are written back to the expansion store."""

    DEFAULT_CSS = """
    ExpanderRowWidget {
        height: auto;
    }
    ExpanderRowWidget > Collapsible {
        width: 1fr;
    }
    """

    def __init__(self, element: ExpanderRow) -> None:
        super().__init__(classes="expander-row")
        self.element = element
        self._collapsible = Collapsible(
            *(build_widget(row) for row in element.rows),
            title=element.title,
            collapsed=not element.expanded,
        )
        self._collapsible.disabled = not element.sensitive

    def compose(self) -> ComposeResult:
        yield from (build_widget(prefix) for prefix in self.element.prefixes)
        yield self._collapsible
        yield from (build_widget(suffix) for suffix in self.element.suffixes)

    def on_collapsible_expanded(self, event: Collapsible.Expanded) -> None:
        if event.collapsible is self._collapsible:
            event.stop()
            self.element.set_expanded(True)

    def on_collapsible_collapsed(self, event: Collapsible.Collapsed) -> None:
        if event.collapsible is self._collapsible:
            event.stop()
            self.element.set_expanded(False)


class InlinePairWidget(Static):
    def __init__(self, element: InlinePair) -> None:
        super().__init__(_inline_text([element]), classes="inline-pair")
        self.element = element


class SectionWidget(Vertical):
    """Titled group of rows."""

    DEFAULT_CSS = """
    SectionWidget {
        height: auto;
        margin-bottom: 1;
    }
    SectionWidget > .section-title {
        text-style: bold;
        color: $accent;
        padding: 0 1;
    }
    """

    def __init__(self, element: Section) -> None:
        super().__init__(classes="property-section")
        self.element = element

    def compose(self) -> ComposeResult:
        yield Static(self.element.title, markup=False, classes="section-title")
        yield from (build_widget(row) for row in self.element.rows)


_WIDGETS: dict[type[RenderElement], type[Widget]] = {
    Section: SectionWidget,
    ExpanderRow: ExpanderRowWidget,
    ActionRow: ActionRowWidget,
    InlinePair: InlinePairWidget,
    StatusIcon: StatusIconWidget,
    UtilizationBar: UtilizationBarWidget,
    CopyAction: CopyButton,
    GoNextIndicator: GoNextWidget,
}


def build_widget(element: RenderElement) -> Widget:
    """Create the widget for one render element.

    Raises:
        TypeError: For element types without a widget.
    """
    widget_class = _WIDGETS.get(type(element))
    if widget_class is None:
        raise TypeError(f"No widget for render element {type(element).__name__}")
    return widget_class(element)  # type: ignore[call-arg]


__all__ = [
    "ActionRowWidget",
    "CopyButton",
    "ExpanderRowWidget",
    "GoNextWidget",
    "InlinePairWidget",
    "SectionWidget",
    "StatusIconWidget",
    "UtilizationBarWidget",
    "build_widget",
]
