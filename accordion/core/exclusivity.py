"""One-at-a-time policy layered on the event bus."""

import logging
from typing import Protocol

from .event_bus import OPEN_EVENT, EventBus, PanelEvent
from .subscription import Subscription

logger = logging.getLogger(__name__)


class ClosablePanel(Protocol):
    """What the coordinator needs from a panel."""

    @property
    def panel_id(self) -> str: ...

    @property
    def is_open(self) -> bool: ...

    def force_close(self) -> None: ...


class ExclusivityCoordinator:
    """Keep only the most recently opened panel open.

    Every panel subscribes to ``open`` when it mounts. When another panel
    announces it opened, a panel that is currently open closes itself.
    The coordinator reacts to state and never publishes, so a forced
    close cannot feed back into the bus.
    """

    def __init__(self, bus: EventBus, one_at_a_time: bool) -> None:
        self._bus = bus
        self._one_at_a_time = one_at_a_time

    @property
    def one_at_a_time(self) -> bool:
        return self._one_at_a_time

    def attach(self, panel: ClosablePanel) -> Subscription:
        """Subscribe ``panel`` to ``open``; inert unless one-at-a-time."""

        def on_open(event: PanelEvent) -> None:
            if self._one_at_a_time and panel.is_open and event.panel_id != panel.panel_id:
                logger.debug(f"{panel.panel_id} force-closed by {event.panel_id}")
                panel.force_close()

        return self._bus.subscribe(OPEN_EVENT, on_open)
