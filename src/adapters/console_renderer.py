"""Console output adapter.

Formats each outcome as a single line and prints it through a rich console.
"""

from __future__ import annotations

from typing import Optional

from rich.console import Console

from adapters.outcome_formatting import format_outcome
from core.config import OutputConfig
from core.models import Outcome


class ConsoleRenderer:
    """Renderer adapter that prints one line per outcome."""

    def __init__(self, console: Console, mode: str = "markup") -> None:
        self._console = console
        self._mode = mode

    @classmethod
    def from_config(cls, config: OutputConfig, console: Optional[Console] = None) -> "ConsoleRenderer":
        if console is None:
            console = Console(no_color=not config.color, highlight=False)
        return cls(console, mode=config.format)

    def render(self, outcome: Outcome) -> None:
        """Print the formatted outcome."""

        line = format_outcome(outcome, self._mode)
        if self._mode == "markup":
            # Icons are literal characters; emoji codes in message text stay as typed.
            self._console.print(line, emoji=False, soft_wrap=True)
        else:
            # Plain and JSON lines must reach the output untouched.
            self._console.print(line, markup=False, emoji=False, highlight=False, soft_wrap=True)
