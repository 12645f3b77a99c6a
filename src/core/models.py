"""Core domain models.

Parsed records and dispatch outcomes are plain frozen dataclasses so they can
be shared between the core and the adapters without any framework types.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from decimal import Decimal
from enum import Enum
from typing import Any, Union


class MessageFormat(str, Enum):
    """Message formats recognized by the handler chain."""

    TELEMETRY = "telemetry"
    PAYLOAD = "payload"
    BEACON = "beacon"

    @property
    def mission(self) -> str:
        return _MISSIONS[self]


_MISSIONS = {
    MessageFormat.TELEMETRY: "Perseverance",
    MessageFormat.PAYLOAD: "Orion",
    MessageFormat.BEACON: "Voyager",
}


@dataclass(frozen=True)
class TelemetryRecord:
    """Rover surface telemetry frame."""

    sol: int
    temperature: Decimal
    humidity: Decimal
    wind_speed: Decimal

    format = MessageFormat.TELEMETRY


@dataclass(frozen=True)
class PayloadRecord:
    """Mission control payload with a single text field."""

    message: str

    format = MessageFormat.PAYLOAD


@dataclass(frozen=True)
class BeaconRecord:
    """Probe beacon; distance is in millions of kilometers."""

    probe_id: int
    distance: Decimal

    format = MessageFormat.BEACON


ParsedRecord = Union[TelemetryRecord, PayloadRecord, BeaconRecord]


def _jsonable(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(frozen=True)
class Matched:
    """A handler recognized the message and produced a record."""

    message: str
    record: ParsedRecord
    handler: str

    kind = "matched"

    @property
    def format(self) -> MessageFormat:
        return self.record.format

    def to_dict(self) -> dict[str, Any]:
        fields = {key: _jsonable(value) for key, value in asdict(self.record).items()}
        return {
            "kind": self.kind,
            "format": self.format.value,
            "handler": self.handler,
            "message": self.message,
            "record": fields,
        }


@dataclass(frozen=True)
class Unrecognized:
    """No handler in the chain recognized the message."""

    message: str

    kind = "unrecognized"

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "message": self.message}


@dataclass(frozen=True)
class Malformed:
    """The message has a known envelope but invalid content."""

    message: str
    format: MessageFormat
    reason: str

    kind = "malformed"

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind,
            "format": self.format.value,
            "message": self.message,
            "reason": self.reason,
        }


Outcome = Union[Matched, Unrecognized, Malformed]
