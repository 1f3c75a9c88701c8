"""Tests for the per-view expansion store."""

from __future__ import annotations

from kubeinspect.inspector.expansion import ExpansionKey, ExpansionStore


def _key(*path: str, level: int = 1) -> ExpansionKey:
    return ExpansionKey("apps/v1, Resource=deployments", "uid-1", path, level)


class TestExpansionKey:
    """Tests for ExpansionKey."""

    def test_structural_equality(self) -> None:
        """Test keys built from the same position are equal."""
        assert _key("Containers", "app") == _key("Containers", "app")
        assert hash(_key("Containers", "app")) == hash(_key("Containers", "app"))

    def test_level_and_path_distinguish_keys(self) -> None:
        assert _key("Containers", "app", level=1) != _key("Containers", "app", level=2)
        assert _key("Containers", "app") != _key("Init Containers", "app")

    def test_string_form(self) -> None:
        assert str(_key("Containers", "app")) == "apps/v1, Resource=deployments-uid-1-Containers/app-1"


class TestExpansionStore:
    """Tests for ExpansionStore."""

    def test_unknown_key_is_collapsed(self) -> None:
        store = ExpansionStore()
        assert store.get(_key("Metadata", "Labels")) is False
        assert _key("Metadata", "Labels") not in store

    def test_set_and_get(self) -> None:
        store = ExpansionStore()
        store.set(_key("Metadata", "Labels"), True)
        assert store.get(_key("Metadata", "Labels")) is True
        assert len(store) == 1

    def test_explicit_default(self) -> None:
        """Test an explicit default applies only to unknown keys."""
        store = ExpansionStore()
        store.set(_key("a"), False)
        assert store.get(_key("a"), default=True) is False
        assert store.get(_key("b"), default=True) is True

    def test_store_default(self) -> None:
        assert ExpansionStore(default=True).get(_key("a")) is True

    def test_clear(self) -> None:
        store = ExpansionStore()
        store.set(_key("a"), True)
        store.clear()
        assert len(store) == 0
