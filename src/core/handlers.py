"""Message handlers (core domain).

Each handler owns one message grammar. A handler either recognizes the
message and returns an outcome, or hands the message to its successor. The
successor link is set by the chain manager when the chain is assembled.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
import json
import logging
import re
from decimal import Decimal
from typing import Optional

from core.models import (
    BeaconRecord,
    Malformed,
    Matched,
    MessageFormat,
    Outcome,
    PayloadRecord,
    TelemetryRecord,
    Unrecognized,
)

LOGGER = logging.getLogger(__name__)

TELEMETRY_PATTERN = re.compile(
    r"SOL:(?P<sol>\d+)"
    r"TEM:(?P<temperature>\d+\.\d{1,2})"
    r"HUM:(?P<humidity>\d+\.\d{1,2})"
    r"WND:(?P<wind_speed>\d{1,3}\.\d{1,2})",
    re.ASCII,
)

BEACON_PATTERN = re.compile(
    r"VYYR\s{1,4}(?P<probe_id>\d)\s{1,4}(?P<distance>\d+\.\d{1,3})\s+",
    re.ASCII,
)


class MessageHandler(ABC):
    """One link of the handler chain."""

    name: str = ""
    format: MessageFormat

    def __init__(self) -> None:
        self.successor: Optional[MessageHandler] = None
        # Set once by the chain manager that owns this handler.
        self.chained = False

    def attempt(self, message: str) -> Outcome:
        """Return this handler's outcome, or the successor's when it declines.

        A malformed outcome ends the walk: a message whose envelope belongs to
        this format is never offered to unrelated handlers.
        """

        outcome = self.match(message)
        if outcome is not None:
            return outcome
        if self.successor is None:
            return Unrecognized(message)
        LOGGER.debug("%s declined message, delegating to %s", self.name, self.successor.name)
        return self.successor.attempt(message)

    @abstractmethod
    def match(self, message: str) -> Optional[Outcome]:
        """Return Matched or Malformed for this format, None if not this format."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class TelemetryHandler(MessageHandler):
    """Rover telemetry frames: SOL:<day>TEM:<t>HUM:<h>WND:<w>.

    The pattern is anchored at the start of the message and trailing text is
    ignored. A partial prefix is simply not a match.
    """

    name = "telemetry"
    format = MessageFormat.TELEMETRY

    def match(self, message: str) -> Optional[Outcome]:
        found = TELEMETRY_PATTERN.match(message)
        if not found:
            return None
        record = TelemetryRecord(
            sol=int(found["sol"]),
            temperature=Decimal(found["temperature"]),
            humidity=Decimal(found["humidity"]),
            wind_speed=Decimal(found["wind_speed"]),
        )
        return Matched(message=message, record=record, handler=self.name)


class PayloadHandler(MessageHandler):
    """Mission control JSON payloads of the form {"message": "<text>"}.

    Text that is not a JSON object is left to the successor. For a decoded
    object without a string "message" field, strict mode reports the payload
    as malformed while lenient mode delegates it like any other miss.
    Unknown keys are ignored.
    """

    name = "payload"
    format = MessageFormat.PAYLOAD

    def __init__(self, strict: bool = True) -> None:
        super().__init__()
        self.strict = strict

    def match(self, message: str) -> Optional[Outcome]:
        try:
            decoded = json.loads(message)
        except (ValueError, RecursionError):
            # Nesting beyond the decoder's depth limit is not a payload either.
            return None
        if not isinstance(decoded, dict):
            return None

        text = decoded.get("message")
        if isinstance(text, str):
            return Matched(message=message, record=PayloadRecord(message=text), handler=self.name)

        if not self.strict:
            return None
        if "message" not in decoded:
            reason = "missing 'message' field"
        else:
            reason = f"'message' must be a string, got {type(text).__name__}"
        return Malformed(message=message, format=self.format, reason=reason)


class BeaconHandler(MessageHandler):
    """Probe beacons: VYYR <id> <distance> followed by ignored fields."""

    name = "beacon"
    format = MessageFormat.BEACON

    def match(self, message: str) -> Optional[Outcome]:
        found = BEACON_PATTERN.match(message)
        if not found:
            return None
        record = BeaconRecord(
            probe_id=int(found["probe_id"]),
            distance=Decimal(found["distance"]),
        )
        return Matched(message=message, record=record, handler=self.name)
