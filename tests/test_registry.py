"""Tests for the per-panel sibling registry."""

import pytest

from accordion.core.registry import (
    DETAILS_KEY,
    SUMMARY_KEY,
    PanelRegistry,
    RegistryEntry,
)


def test_missing_key_reads_as_none():
    registry = PanelRegistry()
    assert registry.get(SUMMARY_KEY) is None
    assert SUMMARY_KEY not in registry.entries


def test_last_writer_wins():
    registry = PanelRegistry()
    registry.set_ref_data(DETAILS_KEY, RegistryEntry("panel-a"))
    registry.set_ref_data(DETAILS_KEY, RegistryEntry("panel-b", expanded=True))

    assert len(registry.entries) == 1
    assert registry.get(DETAILS_KEY) == RegistryEntry("panel-b", expanded=True)


def test_entries_is_live_and_read_only():
    registry = PanelRegistry()
    view = registry.entries
    registry.set_ref_data(SUMMARY_KEY, RegistryEntry("summary-1"))

    assert view[SUMMARY_KEY].component_id == "summary-1"
    with pytest.raises(TypeError):
        view["other"] = RegistryEntry("x")  # type: ignore[index]


def test_snapshot_is_frozen_copy():
    registry = PanelRegistry()
    registry.set_ref_data(SUMMARY_KEY, RegistryEntry("summary-1"))
    snapshot = registry.snapshot()

    registry.remove(SUMMARY_KEY)

    assert SUMMARY_KEY in snapshot
    assert registry.get(SUMMARY_KEY) is None


def test_watchers_fire_only_on_change():
    registry = PanelRegistry()
    seen = []
    registry.watch(lambda snapshot: seen.append(dict(snapshot)))

    entry = RegistryEntry("summary-1", child_ids=("indicator-1", "label-1"))
    registry.set_ref_data(SUMMARY_KEY, entry)
    registry.set_ref_data(SUMMARY_KEY, RegistryEntry("summary-1", child_ids=("indicator-1", "label-1")))
    registry.remove("never-set")

    assert seen == [{SUMMARY_KEY: entry}]


def test_unwatch_stops_notifications():
    registry = PanelRegistry()
    seen = []
    sub = registry.watch(seen.append)
    sub.unsubscribe()
    sub.unsubscribe()

    registry.set_ref_data(DETAILS_KEY, RegistryEntry("panel-a"))

    assert seen == []


def test_last_child_id():
    assert RegistryEntry("s").last_child_id is None
    assert RegistryEntry("s", child_ids=("a", "b")).last_child_id == "b"
