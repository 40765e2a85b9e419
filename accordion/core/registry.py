"""
Panel registry - per-panel store for sibling discovery.

A panel's sub-components (the panel itself, its summary row, its status
indicator) register their role and identity here when they attach. Any
of them can then find out about the others without holding a reference:
the indicator learns its panel's id from the ``details`` entry and its
position in the row from the ``summary`` entry.

Entries may be missing because sub-components attach in no guaranteed
order. Readers treat a missing key as "not known yet" and re-derive when
a watcher reports a change.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .subscription import Subscription

logger = logging.getLogger(__name__)

DETAILS_KEY = "details"
SUMMARY_KEY = "summary"
INDICATOR_KEY = "indicator"


@dataclass(frozen=True)
class RegistryEntry:
    """What one sub-component publishes about itself.

    Attributes:
        component_id: Identity of the registering sub-component. For the
            ``details`` entry this is the panel id.
        handle: Opaque reference to the rendered element, if any
        child_ids: Ordered identities of rendered children (``summary``)
        expanded: Current open state (``details``)
    """

    component_id: str
    handle: Any = None
    child_ids: Tuple[str, ...] = ()
    expanded: bool = False

    @property
    def last_child_id(self) -> Optional[str]:
        return self.child_ids[-1] if self.child_ids else None


Snapshot = Mapping[str, RegistryEntry]
Watcher = Callable[[Snapshot], None]


class PanelRegistry:
    """Role-key -> entry map owned by a single panel."""

    def __init__(self) -> None:
        self._entries: Dict[str, RegistryEntry] = {}
        self._watchers: Dict[int, Watcher] = {}
        self._next_watcher = 0

    @property
    def entries(self) -> Snapshot:
        """Live read-only view of the entries."""
        return MappingProxyType(self._entries)

    def get(self, key: str) -> Optional[RegistryEntry]:
        return self._entries.get(key)

    def snapshot(self) -> Snapshot:
        """Immutable copy of the current entries."""
        return MappingProxyType(dict(self._entries))

    def set_ref_data(self, key: str, data: RegistryEntry) -> None:
        """Upsert ``key``; the last writer wins."""
        if self._entries.get(key) == data:
            return
        self._entries[key] = data
        self._notify()

    def remove(self, key: str) -> None:
        if self._entries.pop(key, None) is not None:
            self._notify()

    def watch(self, callback: Watcher) -> Subscription:
        """Call ``callback(snapshot)`` after every change."""
        watcher_id = self._next_watcher
        self._next_watcher += 1
        self._watchers[watcher_id] = callback
        return Subscription(
            lambda: self._watchers.pop(watcher_id, None),
            label=f"registry-watch#{watcher_id}",
        )

    def _notify(self) -> None:
        snapshot = self.snapshot()
        for watcher in list(self._watchers.values()):
            try:
                watcher(snapshot)
            except Exception as e:
                logger.error(f"Error in registry watcher: {e}")

    def __repr__(self) -> str:
        return f"<PanelRegistry {sorted(self._entries)}>"
