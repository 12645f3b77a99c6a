"""Construction-time errors for the handler chain."""

from __future__ import annotations


class ChainConfigurationError(ValueError):
    """Raised when a handler chain is assembled incorrectly."""
