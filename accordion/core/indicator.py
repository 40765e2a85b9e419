"""
Status Indicator - derived open/last flags for a panel's status icon.

The flags are never stored as independent truth. They are a pure
function of the last bus event seen for the indicator's panel and the
current registry snapshot, re-evaluated whenever either changes.
"""

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .event_bus import CLOSE_EVENT, OPEN_EVENT, EventBus, PanelEvent
from .registry import (
    DETAILS_KEY,
    INDICATOR_KEY,
    SUMMARY_KEY,
    PanelRegistry,
    RegistryEntry,
    Snapshot,
)
from .subscription import Subscription, next_component_id

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IndicatorState:
    is_open: bool = False
    is_last: bool = False


@dataclass(frozen=True)
class ObservedEvent:
    """An ``open``/``close`` event for the indicator's own panel."""

    name: str
    panel_id: str


def derive_indicator_state(
    previous: IndicatorState,
    last_event: Optional[ObservedEvent],
    snapshot: Snapshot,
    indicator_id: str,
) -> IndicatorState:
    """Compute the indicator flags from their inputs.

    - ``is_open``: unknown panel -> previous value; panel reports collapsed
      -> False; otherwise the last event for this panel decides, or the
      panel's own state when no event was seen yet.
    - ``is_last``: this indicator is the last child of the summary row.
    """
    details = snapshot.get(DETAILS_KEY)
    if details is None:
        is_open = previous.is_open
    elif not details.expanded:
        is_open = False
    elif last_event is not None and last_event.panel_id == details.component_id:
        is_open = last_event.name == OPEN_EVENT
    else:
        is_open = True

    summary = snapshot.get(SUMMARY_KEY)
    is_last = summary is not None and summary.last_child_id == indicator_id

    return IndicatorState(is_open=is_open, is_last=is_last)


class StatusIndicator:
    """Keeps an ``IndicatorState`` current for one panel.

    ``on_change`` is called with the new state whenever it differs from
    the previous one.
    """

    def __init__(
        self,
        bus: EventBus,
        registry: PanelRegistry,
        *,
        indicator_id: Optional[str] = None,
        on_change: Optional[Callable[[IndicatorState], None]] = None,
    ) -> None:
        self.indicator_id = indicator_id or next_component_id("indicator")
        self._bus = bus
        self._registry = registry
        self._on_change = on_change
        self._state = IndicatorState()
        self._last_event: Optional[ObservedEvent] = None
        self._subscriptions: List[Subscription] = []

    @property
    def state(self) -> IndicatorState:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state.is_open

    @property
    def is_last(self) -> bool:
        return self._state.is_last

    @property
    def attached(self) -> bool:
        return bool(self._subscriptions)

    def attach(self) -> None:
        if self.attached:
            return
        self._subscriptions = [
            self._bus.subscribe(OPEN_EVENT, lambda event: self._on_event(OPEN_EVENT, event)),
            self._bus.subscribe(CLOSE_EVENT, lambda event: self._on_event(CLOSE_EVENT, event)),
            self._registry.watch(lambda snapshot: self._recompute()),
        ]
        self._registry.set_ref_data(INDICATOR_KEY, RegistryEntry(self.indicator_id))
        self._recompute()

    def detach(self) -> None:
        subscriptions, self._subscriptions = self._subscriptions, []
        for subscription in subscriptions:
            subscription.unsubscribe()
        if subscriptions:
            entry = self._registry.get(INDICATOR_KEY)
            if entry is not None and entry.component_id == self.indicator_id:
                self._registry.remove(INDICATOR_KEY)

    def _on_event(self, name: str, event: PanelEvent) -> None:
        details: Optional[RegistryEntry] = self._registry.get(DETAILS_KEY)
        if details is None or event.panel_id != details.component_id:
            return
        self._last_event = ObservedEvent(name, event.panel_id)
        self._recompute()

    def _recompute(self) -> None:
        state = derive_indicator_state(
            self._state, self._last_event, self._registry.snapshot(), self.indicator_id
        )
        if state == self._state:
            return
        self._state = state
        logger.debug(f"{self.indicator_id} -> open={state.is_open} last={state.is_last}")
        if self._on_change is not None:
            self._on_change(state)
