"""
Textual widgets for the accordion.

The widgets are a thin presentation layer over ``accordion.core``:

- ``Accordion`` owns an ``AccordionContext`` and relays bus events as
  ``PanelOpened``/``PanelClosed`` messages.
- ``AccordionPanel`` is the toggle control. Its ``expanded`` reactive is
  the equivalent of a native "open" attribute; every change is reported
  to the panel's state machine as a native toggle signal.
- ``PanelSummary`` is the clickable header row. It registers the order of
  its children so the status icon can tell whether it sits last.
- ``StatusIcon`` renders the derived indicator state.

Example:
    class MyApp(App):
        def compose(self) -> ComposeResult:
            with Accordion(one_at_a_time=True, gap="1"):
                yield AccordionPanel(Static("hello"), title="First")
                yield AccordionPanel(Static("world"), title="Second", start_open=True)
"""

import logging
from typing import List, Optional, Tuple, Type, TypeVar

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.message import Message
from textual.reactive import reactive
from textual.widget import Widget
from textual.widgets import Label

from ..config.models import AccordionConfig, PanelConfig
from ..core.context import AccordionContext
from ..core.event_bus import CLOSE_EVENT, OPEN_EVENT, PanelEvent
from ..core.indicator import IndicatorState, StatusIndicator
from ..core.panel_state import PanelStateMachine
from ..core.registry import SUMMARY_KEY, PanelRegistry, RegistryEntry
from ..core.subscription import Subscription, next_component_id
from ..exceptions import PanelMountError
from .messages import PanelClosed, PanelOpened

logger = logging.getLogger(__name__)

OPEN_SYMBOL = "▼"
CLOSED_SYMBOL = "▲"

W = TypeVar("W", bound=Widget)


def _find_ancestor(widget: Widget, cls: Type[W]) -> Optional[W]:
    for node in widget.ancestors:
        if isinstance(node, cls):
            return node
    return None


class Accordion(Vertical):
    """Container of ``AccordionPanel`` widgets.

    Args:
        one_at_a_time: Opening a panel closes the others
        gap: Blank cells between panels

    Raises:
        ConfigurationError: if ``gap`` is not a non-negative integer
    """

    DEFAULT_CSS = """
    Accordion {
        height: auto;
    }
    """

    def __init__(
        self,
        *children: Widget,
        one_at_a_time: bool = False,
        gap: str = "0",
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(*children, name=name, id=id, classes=classes, disabled=disabled)
        self.config = AccordionConfig(one_at_a_time=one_at_a_time, layout_gap=gap)
        self.context = AccordionContext(self.config, name=id or "accordion")
        # Relay from construction so a start-open panel's event is not missed
        self._relays: List[Subscription] = [
            self.context.bus.subscribe(OPEN_EVENT, self._relay_open),
            self.context.bus.subscribe(CLOSE_EVENT, self._relay_close),
        ]

    @property
    def one_at_a_time(self) -> bool:
        return self.config.one_at_a_time

    def on_mount(self) -> None:
        panels = [child for child in self.children if isinstance(child, AccordionPanel)]
        gap = self.config.gap_cells
        for panel in panels[:-1]:
            panel.styles.margin = (0, 0, gap, 0)

    def on_unmount(self) -> None:
        for relay in self._relays:
            relay.unsubscribe()
        self._relays = []
        self.context.close()

    def _relay_open(self, event: PanelEvent) -> None:
        self.post_message(PanelOpened(event.panel_id))

    def _relay_close(self, event: PanelEvent) -> None:
        self.post_message(PanelClosed(event.panel_id))


class PanelBody(Vertical):
    """Content region, shown only while the panel is open."""

    DEFAULT_CSS = """
    PanelBody {
        height: auto;
        padding: 0 1;
    }
    """


class AccordionPanel(Vertical):
    """One collapsible panel.

    Args:
        *children: Widgets shown in the body while the panel is open
        title: Text of the summary row
        start_open: Open the panel when it mounts
        icon_last: Put the status icon after the title
    """

    DEFAULT_CSS = """
    AccordionPanel {
        height: auto;
    }

    AccordionPanel > PanelBody {
        display: none;
    }

    AccordionPanel.-open > PanelBody {
        display: block;
    }
    """

    expanded: reactive[bool] = reactive(False, init=False)

    class Toggled(Message):
        """Native toggle signal: the panel was expanded or collapsed."""

        def __init__(self, panel: "AccordionPanel", expanded: bool) -> None:
            super().__init__()
            self.panel = panel
            self.expanded = expanded

        @property
        def control(self) -> "AccordionPanel":
            return self.panel

    def __init__(
        self,
        *children: Widget,
        title: str = "",
        start_open: bool = False,
        icon_last: bool = False,
        name: Optional[str] = None,
        id: Optional[str] = None,
        classes: Optional[str] = None,
        disabled: bool = False,
    ) -> None:
        super().__init__(name=name, id=id, classes=classes, disabled=disabled)
        self._contents = list(children)
        self.heading = title
        self.config = PanelConfig(start_open=start_open)
        self.icon_last = icon_last
        self.registry = PanelRegistry()
        self.machine: Optional[PanelStateMachine] = None
        self._accordion_context: Optional[AccordionContext] = None

    @property
    def panel_id(self) -> Optional[str]:
        return self.machine.panel_id if self.machine is not None else None

    @property
    def is_open(self) -> bool:
        return self.machine is not None and self.machine.is_open

    def compose(self) -> ComposeResult:
        yield PanelSummary(self.heading, icon_last=self.icon_last)
        yield PanelBody(*self._contents)

    def on_mount(self) -> None:
        accordion = _find_ancestor(self, Accordion)
        if accordion is None:
            raise PanelMountError(widget=repr(self))
        self._accordion_context = accordion.context
        self.machine = self._accordion_context.add_panel(self.config, control=self, registry=self.registry)
        logger.debug(f"{self.id or self!r} bound to {self.machine.panel_id}")

    def on_unmount(self) -> None:
        if self._accordion_context is not None and self.machine is not None:
            self._accordion_context.remove_panel(self.machine.panel_id)

    def set_expanded(self, expanded: bool) -> None:
        self.expanded = expanded

    def toggle(self) -> None:
        self.expanded = not self.expanded

    def watch_expanded(self, expanded: bool) -> None:
        self.set_class(expanded, "-open")
        self.post_message(self.Toggled(self, expanded))

    def on_accordion_panel_toggled(self, event: Toggled) -> None:
        if event.panel is not self or self.machine is None:
            return
        # Report the live value; a queued signal may be stale by now
        self.machine.report_toggle(self.expanded)


class PanelSummary(Horizontal):
    """Clickable header row of a panel."""

    DEFAULT_CSS = """
    PanelSummary {
        height: auto;
        border: round $accent;
        padding: 0 1;
    }

    PanelSummary:focus {
        border: round $accent-lighten-2;
    }

    PanelSummary > .summary-label {
        width: 1fr;
    }
    """

    BINDINGS = [
        Binding("enter", "toggle", "Toggle", show=False),
        Binding("space", "toggle", "Toggle", show=False),
    ]

    can_focus = True

    def __init__(self, text: str, *, icon_last: bool = False, id: Optional[str] = None) -> None:
        super().__init__(id=id or next_component_id("summary"))
        self.text = text
        self.icon_last = icon_last
        self._child_ids: Tuple[str, ...] = ()

    def compose(self) -> ComposeResult:
        icon = StatusIcon()
        label = Label(self.text, id=next_component_id("summary-label"), classes="summary-label")
        children = (label, icon) if self.icon_last else (icon, label)
        self._child_ids = tuple(child.id for child in children if child.id)
        yield from children

    def on_mount(self) -> None:
        panel = self._panel()
        panel.registry.set_ref_data(
            SUMMARY_KEY, RegistryEntry(self.id or "", handle=self, child_ids=self._child_ids)
        )

    def on_unmount(self) -> None:
        panel = _find_ancestor(self, AccordionPanel)
        if panel is not None:
            panel.registry.remove(SUMMARY_KEY)

    def on_click(self) -> None:
        self._panel().toggle()

    def action_toggle(self) -> None:
        self._panel().toggle()

    def _panel(self) -> AccordionPanel:
        panel = _find_ancestor(self, AccordionPanel)
        if panel is None:
            raise PanelMountError("PanelSummary must be mounted inside an AccordionPanel")
        return panel


class StatusIcon(Widget):
    """Open/closed arrow; sits at the row's far end when it is last."""

    DEFAULT_CSS = """
    StatusIcon {
        width: 1;
        height: 1;
        margin: 0 1 0 0;
        color: $accent;
    }

    StatusIcon.-last {
        margin: 0 0 0 1;
    }
    """

    is_open: reactive[bool] = reactive(False)
    is_last: reactive[bool] = reactive(False)

    def __init__(self, *, id: Optional[str] = None, classes: Optional[str] = None) -> None:
        super().__init__(id=id or next_component_id("indicator"), classes=classes)
        self.indicator: Optional[StatusIndicator] = None

    def on_mount(self) -> None:
        panel = _find_ancestor(self, AccordionPanel)
        accordion = _find_ancestor(self, Accordion)
        if panel is None or accordion is None:
            raise PanelMountError("StatusIcon must be mounted inside an AccordionPanel")
        self.indicator = accordion.context.create_indicator(
            panel.registry, indicator_id=self.id, on_change=self._apply
        )
        self._apply(self.indicator.state)

    def on_unmount(self) -> None:
        if self.indicator is not None:
            self.indicator.detach()

    def _apply(self, state: IndicatorState) -> None:
        self.is_open = state.is_open
        self.is_last = state.is_last

    def watch_is_last(self, is_last: bool) -> None:
        self.set_class(is_last, "-last")

    def render(self) -> str:
        return OPEN_SYMBOL if self.is_open else CLOSED_SYMBOL
