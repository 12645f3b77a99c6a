"""Shared outcome formatting helpers.

Keeping formatting here prevents drift between renderers and keeps the two
failure notices distinct regardless of output mode.
"""

from __future__ import annotations

import json

from rich.markup import escape

from core.models import (
    BeaconRecord,
    Malformed,
    Matched,
    Outcome,
    PayloadRecord,
    TelemetryRecord,
    Unrecognized,
)

UNRECOGNIZED_NOTICE = "No registered handler recognized this message"
MALFORMED_NOTICE = "Recognized format but malformed content"

_MARKUP_ICONS = {
    "telemetry": "🤖",
    "payload": "🚀",
    "beacon": "🛸",
}


def describe_record(record) -> str:
    """Return the format-specific sentence for a parsed record."""

    if isinstance(record, TelemetryRecord):
        return (
            f"{record.format.mission}. Mission day {record.sol}. "
            f"{record.temperature}° on the surface, humidity {record.humidity}, "
            f"wind {record.wind_speed}"
        )
    if isinstance(record, PayloadRecord):
        return f"{record.format.mission}: {record.message}"
    if isinstance(record, BeaconRecord):
        return (
            f"{record.format.mission} probe {record.probe_id} is "
            f"{record.distance} million kilometers away"
        )
    raise TypeError(f"Unsupported record type: {type(record).__name__}")


def _format_text(outcome: Outcome) -> str:
    if isinstance(outcome, Matched):
        return describe_record(outcome.record)
    if isinstance(outcome, Malformed):
        return (
            f"{MALFORMED_NOTICE} ({outcome.format.value}, {outcome.format.mission}): "
            f"{outcome.reason} | {outcome.message}"
        )
    if isinstance(outcome, Unrecognized):
        return f"{UNRECOGNIZED_NOTICE}: {outcome.message}"
    raise TypeError(f"Unsupported outcome type: {type(outcome).__name__}")


def _format_markup(outcome: Outcome) -> str:
    """Create the rich console markup line.

    Message text comes from the outside world, so everything not produced
    here is escaped before it reaches the markup parser.
    """

    if isinstance(outcome, Matched):
        icon = _MARKUP_ICONS[outcome.format.value]
        return f"{icon} [bold green]{escape(describe_record(outcome.record))}[/]"
    if isinstance(outcome, Malformed):
        return (
            f"⚠️  [bold yellow]{MALFORMED_NOTICE}[/] "
            f"[dim]({outcome.format.value}, {outcome.format.mission})[/] "
            f"{escape(outcome.reason)} [dim]|[/] {escape(outcome.message)}"
        )
    if isinstance(outcome, Unrecognized):
        return f"🚨 [bold red]{UNRECOGNIZED_NOTICE}[/] [dim]|[/] {escape(outcome.message)}"
    raise TypeError(f"Unsupported outcome type: {type(outcome).__name__}")


def _format_json(outcome: Outcome) -> str:
    return json.dumps(outcome.to_dict(), ensure_ascii=False)


def format_outcome(outcome: Outcome, mode: str) -> str:
    """Return the outcome formatted for the requested mode."""

    if mode == "text":
        return _format_text(outcome)
    if mode == "markup":
        return _format_markup(outcome)
    if mode == "json":
        return _format_json(outcome)
    raise ValueError(f"Unsupported output format: {mode}")
