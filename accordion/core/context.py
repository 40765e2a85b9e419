"""
Accordion Context - the coordination state of one accordion instance.

Owns the event bus and exclusivity policy, and tracks the panels mounted
in the accordion. Presentation code talks to the core through this
object: it adds panels, forwards native toggles with ``report_toggle``
and attaches status indicators.
"""

import logging
from typing import Callable, Dict, List, Optional, Union

from ..config.models import AccordionConfig, PanelConfig
from .event_bus import EventBus
from .exclusivity import ExclusivityCoordinator
from .indicator import IndicatorState, StatusIndicator
from .panel_state import PanelStateMachine, ToggleControl
from .registry import PanelRegistry

logger = logging.getLogger(__name__)


class AccordionContext:
    """Shared by reference with every panel of one accordion."""

    def __init__(self, config: Optional[AccordionConfig] = None, name: str = "accordion") -> None:
        self.config = config or AccordionConfig()
        self.bus = EventBus(name)
        self.coordinator = ExclusivityCoordinator(self.bus, self.config.one_at_a_time)
        self._panels: Dict[str, PanelStateMachine] = {}

    @property
    def one_at_a_time(self) -> bool:
        return self.config.one_at_a_time

    @property
    def panels(self) -> List[PanelStateMachine]:
        """Mounted panels in mount order."""
        return list(self._panels.values())

    def panel(self, panel_id: str) -> Optional[PanelStateMachine]:
        return self._panels.get(panel_id)

    def open_panel_ids(self) -> List[str]:
        return [panel.panel_id for panel in self._panels.values() if panel.is_open]

    def add_panel(
        self,
        config: Optional[PanelConfig] = None,
        *,
        control: Optional[ToggleControl] = None,
        registry: Optional[PanelRegistry] = None,
        panel_id: Optional[str] = None,
    ) -> PanelStateMachine:
        """Create and mount a panel."""
        config = config or PanelConfig()
        panel = PanelStateMachine(
            self.bus,
            self.coordinator,
            registry,
            start_open=config.start_open,
            control=control,
            panel_id=panel_id,
        )
        if panel.panel_id in self._panels:
            logger.warning(f"[{self.bus.name}] replacing panel {panel.panel_id!r}")
            self.remove_panel(panel.panel_id)
        self._panels[panel.panel_id] = panel
        panel.mount()
        logger.debug(f"[{self.bus.name}] mounted {panel.panel_id} (start_open={config.start_open})")
        return panel

    def remove_panel(self, panel_id: str) -> None:
        panel = self._panels.pop(panel_id, None)
        if panel is not None:
            panel.unmount()

    def report_toggle(self, panel_id: str, now_expanded: bool) -> None:
        """Forward a native expand/collapse signal to its panel."""
        panel = self._panels.get(panel_id)
        if panel is None:
            logger.warning(f"[{self.bus.name}] toggle for unknown panel {panel_id!r} ignored")
            return
        panel.report_toggle(now_expanded)

    def create_indicator(
        self,
        panel: Union[str, PanelRegistry],
        *,
        indicator_id: Optional[str] = None,
        on_change: Optional[Callable[[IndicatorState], None]] = None,
    ) -> StatusIndicator:
        """Attach a status indicator to a panel (by id or by its registry).

        Passing the registry lets an indicator attach before its panel has
        mounted; it picks the panel up once the panel registers.
        """
        if isinstance(panel, PanelRegistry):
            registry = panel
        else:
            machine = self._panels.get(panel)
            if machine is None:
                # Unknown panel: the indicator waits on an empty registry
                logger.warning(f"[{self.bus.name}] indicator for unknown panel {panel!r}")
                registry = PanelRegistry()
            else:
                registry = machine.registry

        indicator = StatusIndicator(
            self.bus, registry, indicator_id=indicator_id, on_change=on_change
        )
        indicator.attach()
        return indicator

    def close(self) -> None:
        """Unmount every panel; the accordion is going away."""
        for panel_id in list(self._panels):
            self.remove_panel(panel_id)
        self.bus.clear()

    def states(self) -> Dict[str, bool]:
        """Panel id -> open, in mount order."""
        return {panel.panel_id: panel.is_open for panel in self._panels.values()}

