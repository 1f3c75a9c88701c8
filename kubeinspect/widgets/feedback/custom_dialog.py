"""Confirmation dialog for destructive inspector actions.

Dialogs are modal screens and manage their own lifecycle. The width follows
the message up to the terminal width.

CSS Classes: widget-custom-dialog
"""

from collections.abc import Callable
from contextlib import suppress

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.events import Resize
from textual.screen import ModalScreen
from textual.widgets import Button, Static

_DIALOG_MIN_WIDTH = 36
_DIALOG_SIDE_MARGIN = 6
_DIALOG_CONTENT_PADDING = 8


def _max_line_width(*values: str) -> int:
    width = 0
    for value in values:
        for line in value.splitlines() or [""]:
            width = max(width, len(line))
    return width


def _fit_dialog_width(dialog: ModalScreen, content_width: int) -> int:
    available_width = max(_DIALOG_MIN_WIDTH, dialog.app.size.width - _DIALOG_SIDE_MARGIN)
    return max(_DIALOG_MIN_WIDTH, min(content_width + _DIALOG_CONTENT_PADDING, available_width))


class CustomConfirmDialog(ModalScreen[bool]):
    """Confirmation dialog with OK/Cancel buttons. Dismisses with the answer."""

    DEFAULT_CSS = """
    CustomConfirmDialog {
        align: center middle;
    }
    CustomConfirmDialog .dialog-container {
        height: auto;
        padding: 1 2;
        border: round $warning;
        background: $surface;
    }
    CustomConfirmDialog .dialog-title {
        text-style: bold;
        margin-bottom: 1;
    }
    CustomConfirmDialog .dialog-buttons {
        height: auto;
        margin-top: 1;
        align-horizontal: right;
    }
    CustomConfirmDialog .dialog-btn {
        margin-left: 1;
    }
    """

    BINDINGS = [Binding("escape", "cancel", "Cancel", show=False)]

    _default_classes = "widget-custom-dialog"

    def __init__(
        self,
        message: str,
        title: str = "Confirm",
        on_confirm: Callable[[], None] | None = None,
    ) -> None:
        """Initialize the confirmation dialog.

        Args:
            message: Message to display.
            title: Dialog title.
            on_confirm: Callback when confirmed.
        """
        super().__init__()
        self._message = message
        self._title = title
        self._on_confirm = on_confirm

    def compose(self) -> ComposeResult:
        with Vertical(classes="dialog-container"):
            if self._title:
                yield Static(self._title, markup=False, classes="dialog-title")
            yield Static(self._message, markup=False, classes="dialog-message")
            with Horizontal(classes="dialog-buttons"):
                yield Button("OK", id="confirm-btn", variant="error", classes="dialog-btn confirm")
                yield Button("Cancel", id="cancel-btn", classes="dialog-btn cancel")

    def on_mount(self) -> None:
        self._apply_dynamic_layout()
        with suppress(NoMatches):
            self.query_one("#cancel-btn", Button).focus()

    def on_resize(self, _: Resize) -> None:
        self._apply_dynamic_layout()

    def _apply_dynamic_layout(self) -> None:
        content_width = max(
            _max_line_width(self._title, self._message),
            len("OK") + len("Cancel") + 9,
        )
        with suppress(NoMatches):
            container = self.query_one(".dialog-container", Vertical)
            container.styles.width = _fit_dialog_width(self, content_width)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        if event.button.id == "confirm-btn":
            self.dismiss(True)
            if self._on_confirm:
                self._on_confirm()
        else:
            self.dismiss(False)

    def action_cancel(self) -> None:
        self.dismiss(False)
