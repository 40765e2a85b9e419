"""
Textual presentation layer for accordion.

Quick Start:
    from accordion.ui import Accordion, AccordionPanel

    class MyApp(App):
        def compose(self):
            with Accordion(one_at_a_time=True):
                yield AccordionPanel(Static("hello"), title="hi")

        def on_panel_opened(self, event: PanelOpened) -> None:
            self.notify(f"{event.panel_id} opened")
"""

from .messages import AccordionMessage, PanelClosed, PanelOpened
from .widgets import (
    Accordion,
    AccordionPanel,
    PanelBody,
    PanelSummary,
    StatusIcon,
)

__all__ = [
    "AccordionMessage",
    "PanelClosed",
    "PanelOpened",
    "Accordion",
    "AccordionPanel",
    "PanelBody",
    "PanelSummary",
    "StatusIcon",
]
