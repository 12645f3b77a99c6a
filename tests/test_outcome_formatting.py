from __future__ import annotations

import io
import json
from decimal import Decimal

import pytest
from rich.console import Console

from adapters.console_renderer import ConsoleRenderer
from adapters.outcome_formatting import MALFORMED_NOTICE, UNRECOGNIZED_NOTICE, format_outcome
from core.models import (
    BeaconRecord,
    Malformed,
    Matched,
    MessageFormat,
    PayloadRecord,
    TelemetryRecord,
    Unrecognized,
)


def _telemetry() -> Matched:
    record = TelemetryRecord(
        sol=668,
        temperature=Decimal("12.5"),
        humidity=Decimal("4.0"),
        wind_speed=Decimal("35.92"),
    )
    return Matched(message="SOL:668TEM:12.5HUM:4.0WND:35.92", record=record, handler="telemetry")


def _malformed() -> Malformed:
    return Malformed(
        message='{ "message": 123 }',
        format=MessageFormat.PAYLOAD,
        reason="'message' must be a string, got int",
    )


def test_text_mode_phrasing_per_format() -> None:
    assert format_outcome(_telemetry(), "text").startswith("Perseverance. Mission day 668. 12.5°")

    beacon = Matched(
        message="VYYR 2 4013225.909 0",
        record=BeaconRecord(probe_id=2, distance=Decimal("4013225.909")),
        handler="beacon",
    )
    assert format_outcome(beacon, "text") == "Voyager probe 2 is 4013225.909 million kilometers away"

    payload = Matched(message='{"message": "hi"}', record=PayloadRecord(message="hi"), handler="payload")
    assert format_outcome(payload, "text") == "Orion: hi"


def test_failure_notices_are_distinct() -> None:
    unrecognized = format_outcome(Unrecognized("---FAKE---"), "text")
    malformed = format_outcome(_malformed(), "text")

    assert UNRECOGNIZED_NOTICE in unrecognized
    assert MALFORMED_NOTICE not in unrecognized
    assert MALFORMED_NOTICE in malformed
    assert UNRECOGNIZED_NOTICE not in malformed
    assert "payload" in malformed
    assert '{ "message": 123 }' in malformed


def test_markup_mode_escapes_message_text() -> None:
    line = format_outcome(Unrecognized("[bold]not markup[/bold]"), "markup")
    assert "\\[bold]" in line


def test_json_mode_serializes_records() -> None:
    data = json.loads(format_outcome(_telemetry(), "json"))
    assert data["kind"] == "matched"
    assert data["format"] == "telemetry"
    assert data["handler"] == "telemetry"
    assert data["record"] == {
        "sol": 668,
        "temperature": "12.5",
        "humidity": "4.0",
        "wind_speed": "35.92",
    }

    data = json.loads(format_outcome(_malformed(), "json"))
    assert data["kind"] == "malformed"
    assert data["format"] == "payload"


def test_unknown_mode_raises() -> None:
    with pytest.raises(ValueError):
        format_outcome(Unrecognized("x"), "html")


def test_console_renderer_prints_one_line_per_outcome() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    renderer = ConsoleRenderer(console, mode="text")

    renderer.render(_telemetry())
    renderer.render(Unrecognized("[red]:rocket:"))

    lines = buffer.getvalue().splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Perseverance")
    assert lines[1] == f"{UNRECOGNIZED_NOTICE}: [red]:rocket:"


def test_console_renderer_markup_mode_strips_styles() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    ConsoleRenderer(console, mode="markup").render(Unrecognized("[bold]raw[/bold]"))

    output = buffer.getvalue()
    assert UNRECOGNIZED_NOTICE in output
    assert "[bold]raw[/bold]" in output


def test_console_renderer_markup_mode_keeps_emoji_codes() -> None:
    buffer = io.StringIO()
    console = Console(file=buffer, width=200, color_system=None)
    payload = Matched(
        message='{"message": "status :rocket: ok"}',
        record=PayloadRecord(message="status :rocket: ok"),
        handler="payload",
    )

    ConsoleRenderer(console, mode="markup").render(payload)

    assert "Orion: status :rocket: ok" in buffer.getvalue()
