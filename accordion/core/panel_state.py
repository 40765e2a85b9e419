"""
Panel State Machine - open/closed state of one panel.

The presentation layer owns the actual toggle control and reports what
the user did through ``report_toggle``. The machine turns accepted
transitions into ``open``/``close`` events on the accordion's bus.

Transitions imposed from outside (the one-at-a-time policy closing this
panel) go through ``force_close`` instead: the control is collapsed but
nothing is published. When the control echoes that collapse back as a
toggle signal, the machine is already closed and ignores it.
"""

import logging
from enum import Enum
from typing import Optional, Protocol

from .event_bus import CLOSE_EVENT, OPEN_EVENT, EventBus, PanelEvent
from .exclusivity import ExclusivityCoordinator
from .registry import DETAILS_KEY, PanelRegistry, RegistryEntry
from .subscription import Subscription, next_component_id

logger = logging.getLogger(__name__)


class PanelState(Enum):
    CLOSED = "closed"
    OPEN = "open"


class ToggleControl(Protocol):
    """The rendered expand/collapse control of a panel."""

    def set_expanded(self, expanded: bool) -> None: ...


class PanelStateMachine:
    """Per-panel state, alive for the duration of the panel's mount.

    Args:
        bus: The owning accordion's event bus
        coordinator: The owning accordion's exclusivity policy
        registry: This panel's sibling registry (a fresh one if omitted)
        start_open: Open the panel once, when it first mounts
        control: Optional toggle control to keep in sync
        panel_id: Identity override; generated when omitted
    """

    def __init__(
        self,
        bus: EventBus,
        coordinator: ExclusivityCoordinator,
        registry: Optional[PanelRegistry] = None,
        *,
        start_open: bool = False,
        control: Optional[ToggleControl] = None,
        panel_id: Optional[str] = None,
    ) -> None:
        self._panel_id = panel_id or next_component_id("panel")
        self._bus = bus
        self._coordinator = coordinator
        self.registry = registry if registry is not None else PanelRegistry()
        self.control = control
        self.start_open = start_open
        self.state = PanelState.CLOSED
        self._subscription: Optional[Subscription] = None
        self._start_open_applied = False

    @property
    def panel_id(self) -> str:
        return self._panel_id

    @property
    def is_open(self) -> bool:
        return self.state is PanelState.OPEN

    @property
    def is_mounted(self) -> bool:
        return self._subscription is not None

    # ==========================================================================
    # LIFECYCLE
    # ==========================================================================

    def mount(self) -> None:
        if self.is_mounted:
            return
        self._subscription = self._coordinator.attach(self)
        self._register()

        if self.start_open and not self._start_open_applied:
            self._start_open_applied = True
            logger.debug(f"{self.panel_id} starts open")
            self._set_state(PanelState.OPEN)
            if self.control is not None:
                self.control.set_expanded(True)
            self._bus.publish(OPEN_EVENT, PanelEvent(self.panel_id))

    def unmount(self) -> None:
        if self._subscription is None:
            return
        self._subscription.unsubscribe()
        self._subscription = None
        self.registry.remove(DETAILS_KEY)

    # ==========================================================================
    # TRANSITIONS
    # ==========================================================================

    def report_toggle(self, now_expanded: bool) -> None:
        """Native toggle signal from the control."""
        if not self.is_mounted:
            logger.debug(f"Ignoring toggle for unmounted panel {self.panel_id}")
            return

        new_state = PanelState.OPEN if now_expanded else PanelState.CLOSED
        if new_state is self.state:
            return

        logger.debug(f"TOGGLE {self.panel_id} -> {new_state.value}")
        self._set_state(new_state)
        event = OPEN_EVENT if now_expanded else CLOSE_EVENT
        self._bus.publish(event, PanelEvent(self.panel_id))

    def force_close(self) -> None:
        """Close without publishing; used by the one-at-a-time policy."""
        if not self.is_open:
            return
        self._set_state(PanelState.CLOSED)
        if self.control is not None:
            self.control.set_expanded(False)

    def _set_state(self, state: PanelState) -> None:
        self.state = state
        self._register()

    def _register(self) -> None:
        self.registry.set_ref_data(
            DETAILS_KEY,
            RegistryEntry(self.panel_id, handle=self.control, expanded=self.is_open),
        )

    def __repr__(self) -> str:
        return f"<PanelStateMachine {self.panel_id} {self.state.value}>"
