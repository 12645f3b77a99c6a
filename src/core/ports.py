"""Ports (interfaces) used by the chain manager.

The manager never prints; it hands every terminal outcome to a renderer so
the core can be reused with different output boundaries.
"""

from __future__ import annotations

from typing import Protocol

from core.models import Outcome


class OutcomeRenderer(Protocol):
    """Output operations required by the chain manager."""

    def render(self, outcome: Outcome) -> None:
        ...
