"""Tests for level-based property tree rendering."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from kubeinspect.inspector.elements import (
    ActionRow,
    CopyAction,
    ExpanderRow,
    GoNextIndicator,
    InlinePair,
    RenderElement,
    Section,
    iter_elements,
)
from kubeinspect.inspector.expansion import ExpansionStore
from kubeinspect.inspector.renderer import PropertyTreeRenderer
from kubeinspect.models.property import ObjectReference, PropertyNode
from kubeinspect.models.state.settings import InspectorSettings

DEPLOYMENT: dict[str, Any] = {
    "apiVersion": "apps/v1",
    "kind": "Deployment",
    "metadata": {"name": "web", "namespace": "default", "uid": "dep-1"},
}


class RecordingNavigator:
    """Navigator double that records every row action."""

    def __init__(self) -> None:
        self.references: list[PropertyNode] = []
        self.objects: list[Mapping[str, Any]] = []
        self.logs: list[tuple[Mapping[str, Any], Mapping[str, Any]]] = []
        self.copies: list[str] = []

    def push_reference(self, node: PropertyNode) -> None:
        self.references.append(node)

    def push_object(self, obj: Mapping[str, Any]) -> None:
        self.objects.append(obj)

    def open_logs(self, pod: Mapping[str, Any], container: Mapping[str, Any]) -> None:
        self.logs.append((pod, container))

    def copy_to_clipboard(self, text: str) -> None:
        self.copies.append(text)


def _metadata_tree() -> list[PropertyNode]:
    return [
        PropertyNode(
            name="Metadata",
            children=[
                PropertyNode(name="Name", value="web"),
                PropertyNode(
                    name="Labels",
                    children=[PropertyNode(name="app", value="web"), PropertyNode(name="tier", value="front")],
                ),
            ],
        ),
        PropertyNode(name="Spec", children=[PropertyNode(name="Replicas", value="3")]),
    ]


def _renderer(**kwargs: Any) -> tuple[PropertyTreeRenderer, RecordingNavigator]:
    navigator = RecordingNavigator()
    renderer = PropertyTreeRenderer(ExpansionStore(), navigator=navigator, **kwargs)
    return renderer, navigator


class TestRenderLevels:
    """Tests for the per-level layout policy."""

    def test_sections_in_order(self) -> None:
        renderer, _ = _renderer()
        sections = renderer.render_all(_metadata_tree(), DEPLOYMENT)
        assert [section.title for section in sections] == ["Metadata", "Spec"]
        assert all(isinstance(section, Section) for section in sections)

    def test_level_one_group_is_expander(self) -> None:
        """Test level-1 groups render collapsible, collapsed by default."""
        renderer, _ = _renderer()
        metadata = renderer.render_all(_metadata_tree(), DEPLOYMENT)[0]
        labels = metadata.rows[1]
        assert isinstance(labels, ExpanderRow)
        assert labels.title == "Labels"
        assert labels.expanded is False
        assert labels.sensitive is True
        assert [row.title for row in labels.rows] == ["app", "tier"]  # type: ignore[attr-defined]

    def test_level_one_leaf_is_action_row(self) -> None:
        renderer, _ = _renderer()
        metadata = renderer.render_all(_metadata_tree(), DEPLOYMENT)[0]
        name = metadata.rows[0]
        assert isinstance(name, ActionRow)
        assert name.subtitle == "web"

    def test_empty_group_is_insensitive(self) -> None:
        """Test a group without children cannot be expanded."""
        renderer, _ = _renderer()
        tree = [PropertyNode(name="Metadata", children=[PropertyNode(name="Annotations", group=True)])]
        row = renderer.render_all(tree, DEPLOYMENT)[0].rows[0]
        assert isinstance(row, ExpanderRow)
        assert row.sensitive is False

    def test_level_two_group_lays_out_inline(self) -> None:
        """Test level-2 groups show their children as inline pairs."""
        renderer, _ = _renderer()
        tree = [
            PropertyNode(
                name="Containers",
                children=[
                    PropertyNode(
                        name="app",
                        children=[
                            PropertyNode(
                                name="Ports",
                                children=[
                                    PropertyNode(name="http", value="8080/TCP"),
                                    PropertyNode(name="metrics", value="9090/TCP"),
                                ],
                            )
                        ],
                    )
                ],
            )
        ]
        container = renderer.render_all(tree, DEPLOYMENT)[0].rows[0]
        assert isinstance(container, ExpanderRow)
        ports = container.rows[0]
        assert isinstance(ports, ActionRow)
        assert [(pair.name, pair.value) for pair in ports.inline] == [
            ("http", "8080/TCP"),
            ("metrics", "9090/TCP"),
        ]
        assert ports.suffixes == []

    def test_level_three_children_are_ignored(self) -> None:
        """Test nothing renders below the deepest level."""
        renderer, _ = _renderer()
        deep = PropertyNode(name="deep", value="x", children=[PropertyNode(name="deeper", value="y")])
        element = renderer.render(deep, 3)
        assert isinstance(element, InlinePair)
        assert list(element.children()) == []

    def test_no_element_below_level_three(self) -> None:
        """Test a five-level tree still renders exactly four element levels."""
        renderer, _ = _renderer()
        tree = PropertyNode(
            name="L0",
            children=[
                PropertyNode(
                    name="L1",
                    children=[
                        PropertyNode(
                            name="L2",
                            children=[
                                PropertyNode(name="L3", children=[PropertyNode(name="L4", value="v")]),
                            ],
                        )
                    ],
                )
            ],
        )
        section = renderer.render(tree)
        pairs = [element for element in iter_elements(section) if isinstance(element, InlinePair)]
        assert [pair.name for pair in pairs] == ["L3"]

    @pytest.mark.parametrize("level", [-1, 4])
    def test_invalid_level_raises(self, level: int) -> None:
        renderer, _ = _renderer()
        with pytest.raises(ValueError):
            renderer.render(PropertyNode(name="x"), level)


class TestValueRows:
    """Tests for value rows and their affordances."""

    def test_subtitle_capped_to_setting(self) -> None:
        renderer, _ = _renderer()
        row = renderer.render(PropertyNode(name="Command", value="\n".join(["line"] * 12)), 2)
        assert isinstance(row, ActionRow)
        assert row.subtitle_lines == 5

    def test_subtitle_cap_follows_settings(self) -> None:
        renderer, _ = _renderer(settings=InspectorSettings(max_subtitle_lines=2))
        row = renderer.render(PropertyNode(name="Command", value="a\nb\nc"), 2)
        assert row.subtitle_lines == 2  # type: ignore[attr-defined]

    def test_plain_value_has_copy_action(self) -> None:
        renderer, navigator = _renderer()
        row = renderer.render(PropertyNode(name="Image", value="nginx:1.27"), 2)
        assert isinstance(row, ActionRow)
        assert row.activatable is False
        assert row.subtitle_selectable is True
        (copy,) = row.suffixes
        assert isinstance(copy, CopyAction)
        copy.click()
        assert navigator.copies == ["nginx:1.27"]

    def test_reference_value_is_activatable(self) -> None:
        """Test referenced values show a go indicator and push the reference."""
        renderer, navigator = _renderer()
        node = PropertyNode(name="Node", value="worker-1", reference=ObjectReference("Node", "worker-1"))
        row = renderer.render(node, 2)
        assert isinstance(row, ActionRow)
        assert row.activatable is True
        assert row.subtitle_selectable is False
        assert [type(suffix) for suffix in row.suffixes] == [GoNextIndicator]
        row.activate()
        assert navigator.references == [node]

    def test_inert_row_activation_does_nothing(self) -> None:
        renderer, navigator = _renderer()
        row = renderer.render(PropertyNode(name="Image", value="nginx"), 2)
        assert row.activate() is None  # type: ignore[attr-defined]
        assert navigator.references == []


class TestExpansionPersistence:
    """Tests for expansion state across rebuilds."""

    def test_expanded_row_survives_rebuild(self) -> None:
        renderer, _ = _renderer()
        labels = renderer.render_all(_metadata_tree(), DEPLOYMENT)[0].rows[1]
        assert isinstance(labels, ExpanderRow)
        labels.set_expanded(True)

        rebuilt = renderer.render_all(_metadata_tree(), DEPLOYMENT)[0].rows[1]
        assert isinstance(rebuilt, ExpanderRow)
        assert rebuilt is not labels
        assert rebuilt.expanded is True

        rebuilt.set_expanded(False)
        assert renderer.render_all(_metadata_tree(), DEPLOYMENT)[0].rows[1].expanded is False  # type: ignore[attr-defined]

    def test_other_root_does_not_share_state(self) -> None:
        renderer, _ = _renderer()
        renderer.render_all(_metadata_tree(), DEPLOYMENT)[0].rows[1].set_expanded(True)  # type: ignore[attr-defined]
        other = {**DEPLOYMENT, "metadata": {**DEPLOYMENT["metadata"], "uid": "dep-2"}}
        labels = renderer.render_all(_metadata_tree(), other)[0].rows[1]
        assert labels.expanded is False  # type: ignore[attr-defined]

    def test_roots_without_uid_do_not_share_state(self) -> None:
        """Test manifest objects lacking a uid are told apart by name."""
        renderer, _ = _renderer()
        first = {"apiVersion": "v1", "kind": "Pod", "metadata": {"name": "a", "namespace": "default"}}
        second = {"apiVersion": "v1", "kind": "Pod", "metadata": {"name": "b", "namespace": "default"}}
        renderer.render_all(_metadata_tree(), first)[0].rows[1].set_expanded(True)  # type: ignore[attr-defined]

        assert renderer.render_all(_metadata_tree(), second)[0].rows[1].expanded is False  # type: ignore[attr-defined]
        assert renderer.render_all(_metadata_tree(), first)[0].rows[1].expanded is True  # type: ignore[attr-defined]

    def test_default_expanded_setting(self) -> None:
        renderer, _ = _renderer(settings=InspectorSettings(default_expanded=True))
        labels = renderer.render_all(_metadata_tree(), DEPLOYMENT)[0].rows[1]
        assert labels.expanded is True  # type: ignore[attr-defined]

    def test_key_includes_position(self) -> None:
        renderer, _ = _renderer()
        labels = renderer.render_all(_metadata_tree(), DEPLOYMENT)[0].rows[1]
        assert labels.key is not None  # type: ignore[attr-defined]
        assert labels.key.path == ("Metadata", "Labels")  # type: ignore[attr-defined]
        assert labels.key.level == 1  # type: ignore[attr-defined]
        assert labels.key.identity == "Deployment/default/web/dep-1"  # type: ignore[attr-defined]


class TestRenderHook:
    """Tests for per-node render hooks."""

    def test_hook_receives_element(self) -> None:
        seen: list[RenderElement] = []
        renderer, _ = _renderer()
        renderer.render(PropertyNode(name="Status", value="Running", render_hook=seen.append), 2)
        assert len(seen) == 1
        assert isinstance(seen[0], ActionRow)

    def test_hook_can_mutate_element(self) -> None:
        def highlight(element: RenderElement) -> None:
            element.css_classes.add("highlight")  # type: ignore[attr-defined]

        renderer, _ = _renderer()
        row = renderer.render(PropertyNode(name="Phase", value="Failed", render_hook=highlight), 2)
        assert "highlight" in row.css_classes  # type: ignore[attr-defined]
