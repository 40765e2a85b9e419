"""
Event Bus - publish/subscribe scoped to one accordion instance.

Each accordion owns exactly one bus and hands it to its panels and
indicators. Subscriptions are stored per event under a unique id, so
removing one never disturbs another registration, whatever order they
are cancelled in.

Publishing iterates over a snapshot of the subscribers taken when the
publish begins: a callback that subscribes or unsubscribes while the
event is being delivered only affects later publishes.
"""

import itertools
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict

from .subscription import Subscription

logger = logging.getLogger(__name__)

OPEN_EVENT = "open"
CLOSE_EVENT = "close"

Callback = Callable[[Any], None]


@dataclass(frozen=True)
class PanelEvent:
    """Payload of ``open`` and ``close``: the panel that raised it."""

    panel_id: str


class EventBus:
    """In-memory publish/subscribe registry."""

    def __init__(self, name: str = "accordion") -> None:
        self.name = name
        # event -> {subscription id -> callback}; dicts keep insertion order
        self._subscribers: Dict[str, Dict[int, Callback]] = {}
        self._ids = itertools.count(1)

    def subscribe(self, event: str, callback: Callback) -> Subscription:
        """Register ``callback`` for every future ``publish(event, ...)``."""
        sub_id = next(self._ids)
        self._subscribers.setdefault(event, {})[sub_id] = callback
        logger.debug(f"[{self.name}] subscribe #{sub_id} to {event!r}")

        def remove() -> None:
            callbacks = self._subscribers.get(event)
            if callbacks is None:
                return
            callbacks.pop(sub_id, None)
            if not callbacks:
                del self._subscribers[event]
            logger.debug(f"[{self.name}] unsubscribe #{sub_id} from {event!r}")

        return Subscription(remove, label=f"{event}#{sub_id}")

    def publish(self, event: str, data: Any = None) -> None:
        """Deliver ``data`` to everything subscribed to ``event`` right now."""
        callbacks = list(self._subscribers.get(event, {}).values())
        if not callbacks:
            return

        logger.debug(f"[{self.name}] publish {event!r} to {len(callbacks)} subscriber(s): {data!r}")
        for callback in callbacks:
            try:
                callback(data)
            except Exception as e:
                # One broken subscriber must not starve the others
                logger.error(f"[{self.name}] Error in subscriber callback for {event!r}: {e}")

    def subscriber_count(self, event: str) -> int:
        """Number of live subscriptions to ``event``."""
        return len(self._subscribers.get(event, {}))

    def clear(self) -> None:
        """Drop every subscription (the owning accordion is going away)."""
        self._subscribers.clear()
