"""Handler chain assembly and dispatch.

This module is integration-agnostic. It only relies on the renderer port for
output, so the same chain can feed a console, a log, or a test double.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterable, List, Optional, Tuple

from core.config import ChainConfig
from core.errors import ChainConfigurationError
from core.handlers import BeaconHandler, MessageHandler, PayloadHandler, TelemetryHandler
from core.models import Malformed, Matched, Outcome, Unrecognized
from core.ports import OutcomeRenderer

LOGGER = logging.getLogger(__name__)


@dataclass
class DispatchSummary:
    """Per-run counters reported after a batch of messages."""

    matched: int = 0
    unrecognized: int = 0
    malformed: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        return self.matched + self.unrecognized + self.malformed + self.failed


def build_default_chain(config: Optional[ChainConfig] = None) -> List[MessageHandler]:
    """Return fresh handlers in the default priority order.

    The three built-in grammars are disjoint, so any order classifies the
    same messages. A handler with a looser grammar must go after every
    handler whose messages it could absorb.
    """

    config = config or ChainConfig()
    return [
        PayloadHandler(strict=config.payload_policy == "strict"),
        BeaconHandler(),
        TelemetryHandler(),
    ]


class ChainManager:
    """Owns the handler sequence, feeds messages to its head and reports outcomes."""

    def __init__(
        self,
        renderer: OutcomeRenderer,
        handlers: Optional[Iterable[MessageHandler]] = None,
    ) -> None:
        self._renderer = renderer
        self._handlers: Tuple[MessageHandler, ...] = ()
        if handlers is not None:
            self.register(handlers)

    @property
    def order(self) -> Tuple[str, ...]:
        return tuple(handler.name for handler in self._handlers)

    def register(self, handlers: Iterable[MessageHandler]) -> None:
        """Link handlers in the given priority order.

        The chain is built once; every check runs before any link is set so a
        rejected sequence leaves the handlers untouched.
        """

        if self._handlers:
            raise ChainConfigurationError("Handler chain is already registered")

        sequence = list(handlers)
        if not sequence:
            raise ChainConfigurationError("Handler chain needs at least one handler")

        seen_ids: set[int] = set()
        seen_names: set[str] = set()
        for handler in sequence:
            if id(handler) in seen_ids:
                raise ChainConfigurationError(f"Handler registered twice: {handler!r}")
            if handler.name in seen_names:
                raise ChainConfigurationError(f"Duplicate handler name: {handler.name}")
            if handler.chained or handler.successor is not None:
                raise ChainConfigurationError(f"Handler already belongs to a chain: {handler!r}")
            seen_ids.add(id(handler))
            seen_names.add(handler.name)

        for current, following in zip(sequence, sequence[1:]):
            current.successor = following
        for handler in sequence:
            handler.chained = True

        self._handlers = tuple(sequence)
        LOGGER.info("Handler chain registered: %s", " -> ".join(self.order))

    def classify(self, message: str) -> Outcome:
        """Walk the chain for one message without rendering the result."""

        if not self._handlers:
            raise ChainConfigurationError("No handlers registered")
        return self._handlers[0].attempt(message)

    def dispatch(self, message: str) -> None:
        """Classify one message and render its terminal outcome."""

        self._report(self.classify(message))

    def dispatch_all(self, messages: Iterable[str]) -> DispatchSummary:
        """Dispatch messages in order; one message failing never stops the rest."""

        summary = DispatchSummary()
        for message in messages:
            try:
                outcome = self.classify(message)
                self._report(outcome)
            except ChainConfigurationError:
                raise
            except Exception:
                LOGGER.exception("Error while processing message: %r", message)
                summary.failed += 1
                continue

            if isinstance(outcome, Matched):
                summary.matched += 1
            elif isinstance(outcome, Malformed):
                summary.malformed += 1
            elif isinstance(outcome, Unrecognized):
                summary.unrecognized += 1
        return summary

    def _report(self, outcome: Outcome) -> None:
        if isinstance(outcome, Matched):
            LOGGER.info("Message matched by %s", outcome.handler)
        elif isinstance(outcome, Malformed):
            LOGGER.warning("Malformed %s message: %s", outcome.format.value, outcome.reason)
        else:
            LOGGER.warning("No handler recognized message: %r", outcome.message)
        self._renderer.render(outcome)
