"""Construction-time settings for accordions and panels."""

from dataclasses import dataclass

from ..exceptions import ConfigurationError
from .constants import DEFAULT_LAYOUT_GAP, DEFAULT_ONE_AT_A_TIME


def parse_gap(layout_gap: str) -> int:
    """Convert a layout gap string to a number of blank cells.

    Raises:
        ConfigurationError: if the gap is not a non-negative integer
    """
    text = str(layout_gap).strip()
    if not text.isdecimal() or not text.isascii():
        raise ConfigurationError(
            "Layout gap must be a non-negative number of cells", layout_gap=layout_gap
        )
    return int(text)


@dataclass(frozen=True)
class AccordionConfig:
    """Settings fixed for the lifetime of one accordion.

    Attributes:
        one_at_a_time: Opening a panel closes every other open panel
        layout_gap: Blank cells between panels, e.g. ``"1"``
    """

    one_at_a_time: bool = DEFAULT_ONE_AT_A_TIME
    layout_gap: str = DEFAULT_LAYOUT_GAP

    def __post_init__(self) -> None:
        parse_gap(self.layout_gap)

    @property
    def gap_cells(self) -> int:
        return parse_gap(self.layout_gap)


@dataclass(frozen=True)
class PanelConfig:
    """Settings for a single panel."""

    start_open: bool = False
