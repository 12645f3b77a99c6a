"""Core configuration dataclasses.

We keep config parsing outside the core, but these dataclasses define the
shape the core expects so adapters and app layers can build safely.
"""

from __future__ import annotations

from dataclasses import dataclass

PAYLOAD_POLICIES = ("strict", "lenient")
OUTPUT_FORMATS = ("markup", "text", "json")


@dataclass(frozen=True)
class ChainConfig:
    """Settings for the default handler chain.

    payload_policy controls how the JSON payload handler treats a decoded
    object that does not fit the payload schema:
    - "strict": report it as malformed
    - "lenient": hand it to the next handler
    """

    payload_policy: str = "strict"

    def __post_init__(self) -> None:
        if self.payload_policy not in PAYLOAD_POLICIES:
            raise ValueError(f"Unsupported payload policy: {self.payload_policy}")


@dataclass(frozen=True)
class OutputConfig:
    """Rendering settings consumed by the output adapters."""

    format: str = "markup"
    color: bool = True

    def __post_init__(self) -> None:
        if self.format not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {self.format}")
