"""Line-delimited message input.

Messages arrive one per line. The source is either the built-in sample, a
UTF-8 text file, or stdin.
"""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, List

# Two probe beacons, an unknown message, a mission control payload and a
# rover telemetry frame.
SAMPLE_MESSAGES = """\
VYYR    1   3456123.234 0   0   0   1
VYYR    2   4013225.909 0   0   0   1
---FAKE MESSAGE---FAKE MESSAGE---
{ "message": "Testing the chain of responsibility" }
SOL:668TEM:12.5HUM:4.0WND:35.92
"""

STDIN_PATH = "-"


def split_messages(text: str) -> List[str]:
    """Split raw text into messages, skipping blank lines."""

    return [line for line in text.splitlines() if line.strip()]


def read_messages(path: str) -> List[str]:
    """Read messages from a file path, or from stdin when path is "-"."""

    if path == STDIN_PATH:
        return split_messages(sys.stdin.read())
    with open(path, "r", encoding="utf-8") as handle:
        return split_messages(handle.read())


def iter_sources(paths: Iterable[str]) -> Iterator[str]:
    """Yield messages from each path in order; no paths means the sample."""

    paths = list(paths)
    if not paths:
        yield from split_messages(SAMPLE_MESSAGES)
        return
    for path in paths:
        yield from read_messages(path)
