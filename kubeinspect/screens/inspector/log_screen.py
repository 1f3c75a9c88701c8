"""Modal screen showing the logs of one container."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import suppress
from typing import TYPE_CHECKING, Any

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import Static, TextArea

from kubeinspect.keyboard import LOG_SCREEN_BINDINGS

if TYPE_CHECKING:
    from kubeinspect.behavior.detail_behavior import DetailBehavior

logger = logging.getLogger(__name__)


class LogScreen(ModalScreen[None]):
    """Loads container logs in a worker and shows them read-only."""

    DEFAULT_CSS = """
    LogScreen {
        align: center middle;
    }
    LogScreen > .log-container {
        width: 90%;
        height: 80%;
        border: round $accent;
        background: $surface;
    }
    LogScreen .log-title {
        text-style: bold;
        padding: 0 1;
    }
    LogScreen .log-text {
        height: 1fr;
    }
    """

    BINDINGS = LOG_SCREEN_BINDINGS

    def __init__(
        self,
        behavior: DetailBehavior,
        pod: Mapping[str, Any],
        container: Mapping[str, Any],
    ) -> None:
        super().__init__()
        self.behavior = behavior
        self.pod = pod
        self.container = container

    @property
    def log_title(self) -> str:
        pod_name = (self.pod.get("metadata") or {}).get("name") or ""
        return f"Logs: {pod_name}/{self.container.get('name') or ''}"

    def compose(self) -> ComposeResult:
        with Vertical(classes="log-container"):
            yield Static(self.log_title, markup=False, classes="log-title")
            yield TextArea("Loading…", read_only=True, classes="log-text")

    def on_mount(self) -> None:
        self.run_worker(self._load_logs(), exclusive=True, group="logs")

    async def _load_logs(self) -> None:
        try:
            text = await self.behavior.fetch_logs(self.pod, self.container)
        except NotImplementedError:
            text = "Logs are not available for this source."
        except Exception as e:
            logger.warning(f"Failed to load logs for {self.log_title!r}: {e}")
            text = f"Failed to load logs: {e}"
        with suppress(NoMatches):
            self.query_one(".log-text", TextArea).load_text(text or "(no output)")

    def action_close(self) -> None:
        self.dismiss(None)


__all__ = [
    "LogScreen",
]
