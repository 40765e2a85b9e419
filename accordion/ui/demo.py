#!/usr/bin/env python3
"""
Demo application: three panels in one accordion.

Run with:
    accordion demo

Or from the project root:
    python -m accordion.ui.demo
"""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header, RichLog, Static

from ..config.models import AccordionConfig
from ..utils.logging_utils import setup_tui_logging
from .messages import PanelClosed, PanelOpened
from .widgets import Accordion, AccordionPanel


class AccordionDemoApp(App[None]):
    """Three panels; the last starts open with its icon after the title."""

    TITLE = "Accordion"
    SUB_TITLE = "1-3 toggle panels, q to quit"

    CSS = """
    Screen {
        layout: vertical;
    }

    #demo-accordion {
        padding: 1 2;
    }

    #event-log {
        height: 1fr;
        border-top: solid $primary;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("1", "toggle_panel(0)", "Panel 1"),
        Binding("2", "toggle_panel(1)", "Panel 2"),
        Binding("3", "toggle_panel(2)", "Panel 3"),
        Binding("c", "clear_log", "Clear Log"),
    ]

    def __init__(
        self,
        config: Optional[AccordionConfig] = None,
        theme_name: Optional[str] = None,
    ) -> None:
        super().__init__()
        self.accordion_config = config or AccordionConfig(one_at_a_time=True, layout_gap="1")
        self._theme_name = theme_name

    def compose(self) -> ComposeResult:
        yield Header()
        with Accordion(
            one_at_a_time=self.accordion_config.one_at_a_time,
            gap=self.accordion_config.layout_gap,
            id="demo-accordion",
        ):
            yield AccordionPanel(Static("hello"), title="hi", id="demo-panel-1")
            yield AccordionPanel(Static("hello"), title="hi", id="demo-panel-2")
            yield AccordionPanel(
                Static("hello"), title="hi", start_open=True, icon_last=True, id="demo-panel-3"
            )
        yield RichLog(id="event-log", markup=True)
        yield Footer()

    def on_mount(self) -> None:
        if self._theme_name and self._theme_name in self.available_themes:
            self.theme = self._theme_name
        mode = "one at a time" if self.accordion_config.one_at_a_time else "independent"
        self._log(f"[dim]accordion ready ({mode})[/dim]")

    def on_panel_opened(self, event: PanelOpened) -> None:
        self._log(f"[green]open[/green]  {event.panel_id}")

    def on_panel_closed(self, event: PanelClosed) -> None:
        self._log(f"[yellow]close[/yellow] {event.panel_id}")

    def action_toggle_panel(self, index: int) -> None:
        panels = list(self.query(AccordionPanel))
        if 0 <= index < len(panels):
            panels[index].toggle()

    def action_clear_log(self) -> None:
        self.query_one("#event-log", RichLog).clear()

    def _log(self, line: str) -> None:
        self.query_one("#event-log", RichLog).write(line)


def run_demo(
    config: Optional[AccordionConfig] = None,
    theme: Optional[str] = None,
    verbose: bool = False,
) -> None:
    """Run the demo app until the user quits."""
    logger = setup_tui_logging(__name__, verbose=verbose)
    logger.info(f"Starting accordion demo with {config}")
    AccordionDemoApp(config, theme_name=theme).run()


if __name__ == "__main__":
    run_demo()
