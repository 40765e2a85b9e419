"""Tests for the status indicator's derived state."""

from types import MappingProxyType

from accordion.core.event_bus import CLOSE_EVENT, OPEN_EVENT, EventBus, PanelEvent
from accordion.core.indicator import (
    IndicatorState,
    ObservedEvent,
    StatusIndicator,
    derive_indicator_state,
)
from accordion.core.registry import (
    DETAILS_KEY,
    INDICATOR_KEY,
    SUMMARY_KEY,
    PanelRegistry,
    RegistryEntry,
)


def snap(**entries):
    return MappingProxyType(entries)


class TestDerive:
    """The pure derivation function."""

    def test_unknown_panel_keeps_previous(self):
        previous = IndicatorState(is_open=True)
        state = derive_indicator_state(previous, None, snap(), "indicator-1")
        assert state == IndicatorState(is_open=True, is_last=False)

    def test_collapsed_panel_is_closed(self):
        details = RegistryEntry("panel-1", expanded=False)
        last = ObservedEvent(OPEN_EVENT, "panel-1")
        state = derive_indicator_state(IndicatorState(True), last, snap(details=details), "i")
        assert not state.is_open

    def test_open_panel_without_event(self):
        details = RegistryEntry("panel-1", expanded=True)
        state = derive_indicator_state(IndicatorState(), None, snap(details=details), "i")
        assert state.is_open

    def test_close_event_wins_while_panel_still_open(self):
        details = RegistryEntry("panel-1", expanded=True)
        last = ObservedEvent(CLOSE_EVENT, "panel-1")
        state = derive_indicator_state(IndicatorState(True), last, snap(details=details), "i")
        assert not state.is_open

    def test_is_last(self):
        summary = RegistryEntry("summary-1", child_ids=("label-1", "indicator-1"))
        state = derive_indicator_state(IndicatorState(), None, snap(summary=summary), "indicator-1")
        assert state.is_last

        summary = RegistryEntry("summary-1", child_ids=("indicator-1", "label-1"))
        state = derive_indicator_state(IndicatorState(), None, snap(summary=summary), "indicator-1")
        assert not state.is_last


class TestStatusIndicator:
    """The indicator wired to a bus and a registry."""

    def test_attaches_before_panel_registers(self):
        bus = EventBus()
        registry = PanelRegistry()
        changes = []
        indicator = StatusIndicator(bus, registry, on_change=changes.append)

        indicator.attach()
        assert indicator.state == IndicatorState()
        assert registry.get(INDICATOR_KEY).component_id == indicator.indicator_id

        registry.set_ref_data(DETAILS_KEY, RegistryEntry("panel-1", expanded=True))
        assert indicator.is_open
        assert changes == [IndicatorState(is_open=True)]

    def test_follows_events_for_own_panel_only(self):
        bus = EventBus()
        registry = PanelRegistry()
        registry.set_ref_data(DETAILS_KEY, RegistryEntry("panel-1", expanded=True))
        indicator = StatusIndicator(bus, registry)
        indicator.attach()

        bus.publish(OPEN_EVENT, PanelEvent("panel-2"))
        assert indicator.is_open

        bus.publish(CLOSE_EVENT, PanelEvent("panel-1"))
        assert not indicator.is_open

    def test_recomputes_is_last_when_summary_changes(self):
        bus = EventBus()
        registry = PanelRegistry()
        indicator = StatusIndicator(bus, registry, indicator_id="indicator-x")
        indicator.attach()

        registry.set_ref_data(SUMMARY_KEY, RegistryEntry("s", child_ids=("label", "indicator-x")))
        assert indicator.is_last

        registry.set_ref_data(SUMMARY_KEY, RegistryEntry("s", child_ids=("indicator-x", "label")))
        assert not indicator.is_last

    def test_detach_is_idempotent(self):
        bus = EventBus()
        registry = PanelRegistry()
        indicator = StatusIndicator(bus, registry)
        indicator.attach()

        indicator.detach()
        indicator.detach()

        assert bus.subscriber_count(OPEN_EVENT) == 0
        assert bus.subscriber_count(CLOSE_EVENT) == 0
        assert registry.get(INDICATOR_KEY) is None

        registry.set_ref_data(DETAILS_KEY, RegistryEntry("panel-1", expanded=True))
        assert not indicator.is_open
