"""Tests for render elements and the property page."""

from __future__ import annotations

from kubeinspect.inspector.elements import (
    ActionRow,
    CopyAction,
    ExpanderRow,
    InlinePair,
    PropertyPage,
    Section,
    StatusIcon,
    UtilizationBar,
    iter_elements,
)
from kubeinspect.inspector.utilization import utilization


class TestPropertyPage:
    """Tests for PropertyPage."""

    def test_replace_reports_removed_and_added(self) -> None:
        page = PropertyPage()
        first = [Section(title="A"), Section(title="B")]
        page.replace(first)
        changes: list[tuple[list[Section], list[Section]]] = []
        page.subscribe(lambda removed, added: changes.append((removed, added)))

        second = [Section(title="A")]
        removed, added = page.replace(second)
        assert removed == first
        assert added == second
        assert changes == [(first, second)]
        assert page.sections == second
        assert len(page) == 1

    def test_unsubscribe(self) -> None:
        page = PropertyPage()
        changes: list[int] = []
        unsubscribe = page.subscribe(lambda removed, added: changes.append(len(added)))
        unsubscribe()
        page.replace([Section(title="A")])
        assert changes == []


class TestRows:
    """Tests for row elements."""

    def test_expander_toggle_writes_back(self) -> None:
        toggles: list[bool] = []
        row = ExpanderRow(title="Labels", on_toggle=toggles.append)
        row.set_expanded(True)
        row.set_expanded(False)
        assert toggles == [True, False]
        assert row.expanded is False

    def test_copy_action(self) -> None:
        copied: list[str] = []
        CopyAction(text="nginx", on_copy=copied.append).click()
        assert copied == ["nginx"]

    def test_elements_compare_by_identity(self) -> None:
        assert Section(title="A") != Section(title="A")
        assert len({InlinePair(name="a"), InlinePair(name="a")}) == 2

    def test_iter_elements_walks_slots(self) -> None:
        icon = StatusIcon(ready=True)
        pair = InlinePair(name="http", value="80/TCP")
        inner = ActionRow(title="Ports", inline=[pair])
        outer = ExpanderRow(title="app", prefixes=[icon], rows=[inner])
        section = Section(title="Containers", rows=[outer])
        assert list(iter_elements(section)) == [section, outer, icon, inner, pair]

    def test_utilization_bar_without_sample(self) -> None:
        bar = UtilizationBar(label="CPU")
        assert bar.value == 0.0
        assert bar.tooltip == ""
        assert bar.offsets == {}

    def test_utilization_bar_with_sample(self) -> None:
        bar = UtilizationBar(label="CPU", sample=utilization(0.5, 1.0, None))
        assert bar.value == 0.5
        assert bar.tooltip == "50% CPU"
