"""Custom exception hierarchy for accordion.

The coordination core never raises for the programmer-error conditions
it can resolve locally (unknown events, missing registry entries, double
unsubscribe, toggles for unknown panels). Exceptions are reserved for
misconfiguration detected at construction or mount time.

Exception Hierarchy:
    AccordionError (base)
    ├── ConfigurationError - invalid accordion/panel settings
    └── PanelMountError - a widget mounted outside its required ancestor

Usage:
    from accordion.exceptions import ConfigurationError

    raise ConfigurationError("Invalid layout gap", layout_gap="8px")
"""

from typing import Any


class AccordionError(Exception):
    """Base exception for all accordion errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., ids, values)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class ConfigurationError(AccordionError):
    """Accordion or panel settings are invalid."""

    def __init__(self, message: str = "Invalid accordion configuration", **context: Any) -> None:
        super().__init__(message, **context)


class PanelMountError(AccordionError):
    """A panel sub-component was mounted outside its accordion or panel."""

    def __init__(
        self,
        message: str = "Widget must be mounted inside an Accordion",
        **context: Any,
    ) -> None:
        super().__init__(message, **context)
