"""
Panel coordination core.

Headless building blocks of an accordion:

1. EventBus - publish/subscribe scoped to one accordion
2. ExclusivityCoordinator - optional one-open-panel-at-a-time policy
3. PanelRegistry - per-panel sibling discovery
4. PanelStateMachine - per-panel open/closed state
5. StatusIndicator - derived open/last flags for a panel's icon
6. AccordionContext - ties the above together for one accordion

Quick Start:
    from accordion.core import AccordionContext
    from accordion.config.models import AccordionConfig, PanelConfig

    ctx = AccordionContext(AccordionConfig(one_at_a_time=True))
    first = ctx.add_panel()
    second = ctx.add_panel(PanelConfig(start_open=True))
    ctx.report_toggle(first.panel_id, True)
    assert ctx.open_panel_ids() == [first.panel_id]
"""

from .context import AccordionContext
from .event_bus import CLOSE_EVENT, OPEN_EVENT, EventBus, PanelEvent
from .exclusivity import ExclusivityCoordinator
from .indicator import IndicatorState, StatusIndicator, derive_indicator_state
from .panel_state import PanelState, PanelStateMachine, ToggleControl
from .registry import (
    DETAILS_KEY,
    INDICATOR_KEY,
    SUMMARY_KEY,
    PanelRegistry,
    RegistryEntry,
)
from .subscription import Subscription, next_component_id

__all__ = [
    "AccordionContext",
    "CLOSE_EVENT",
    "OPEN_EVENT",
    "EventBus",
    "PanelEvent",
    "ExclusivityCoordinator",
    "IndicatorState",
    "StatusIndicator",
    "derive_indicator_state",
    "PanelState",
    "PanelStateMachine",
    "ToggleControl",
    "DETAILS_KEY",
    "INDICATOR_KEY",
    "SUMMARY_KEY",
    "PanelRegistry",
    "RegistryEntry",
    "Subscription",
    "next_component_id",
]
