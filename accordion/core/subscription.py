"""Cancellation handles shared by the event bus and the panel registry."""

import itertools
from typing import Callable, Optional

# Process-wide counter behind every component identity
_component_ids = itertools.count(1)


def next_component_id(prefix: str = "component") -> str:
    """Return a process-unique identifier such as ``panel-7``.

    The result is a valid Textual widget id, so the presentation layer can
    use it directly as the DOM id of the widget it belongs to.
    """
    return f"{prefix}-{next(_component_ids)}"


class Subscription:
    """Handle returned by ``subscribe``/``watch``.

    ``unsubscribe()`` removes exactly the registration this handle was
    returned for. Calling it again is a no-op.
    """

    def __init__(self, remove: Callable[[], None], label: str = "") -> None:
        self._remove: Optional[Callable[[], None]] = remove
        self.label = label

    @property
    def active(self) -> bool:
        """Whether the registration is still in place."""
        return self._remove is not None

    def unsubscribe(self) -> None:
        remove, self._remove = self._remove, None
        if remove is not None:
            remove()

    def __repr__(self) -> str:
        state = "active" if self.active else "cancelled"
        return f"<Subscription {self.label or '?'} {state}>"
