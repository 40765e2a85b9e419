"""
Accordion Messages - bus events surfaced as Textual messages.

The ``Accordion`` widget relays every ``open``/``close`` event on its bus
as a message, so host apps can react with ordinary ``on_...`` handlers
instead of subscribing to the bus themselves.

Message Categories:
- Panel state: PanelOpened, PanelClosed
"""

from textual.message import Message


class AccordionMessage(Message):
    """
    Base class for accordion messages.

    Attributes:
        panel_id: Id of the panel the event is about
    """

    def __init__(self, panel_id: str) -> None:
        super().__init__()
        self.panel_id = panel_id

    def __repr__(self) -> str:
        return f"{type(self).__name__}(panel_id={self.panel_id!r})"


class PanelOpened(AccordionMessage):
    """A panel reported it was expanded."""


class PanelClosed(AccordionMessage):
    """A panel reported it was collapsed by the user.

    Panels closed by the one-at-a-time policy do not produce this message.
    """
