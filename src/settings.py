"""Static configuration for mission relay.

All user-editable settings (payload policy, output, logging) live in a
single JSON file for quick edits without touching Python. The file path can
be overridden with MISSION_RELAY_CONFIG, which may also come from a .env file.
"""

import json
import os

from dotenv import load_dotenv

from core.config import ChainConfig, OutputConfig

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

load_dotenv()

# Settings are loaded from config.json at the project root unless overridden.
CONFIG_PATH = os.getenv("MISSION_RELAY_CONFIG", os.path.join(PROJECT_ROOT, "config.json"))


def _load_json_config(path: str) -> dict:
    """Load config.json with a flat, user-friendly schema."""

    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as handle:
        return json.load(handle)


def build_chain_config(config: dict) -> ChainConfig:
    """Build the core chain settings; unknown policies fail at load time."""

    return ChainConfig(payload_policy=str(config.get("payload_policy", "strict")))


def build_output_config(config: dict) -> OutputConfig:
    output = config.get("output", {})
    return OutputConfig(
        format=str(output.get("format", "markup")),
        color=bool(output.get("color", True)),
    )


_CONFIG = _load_json_config(CONFIG_PATH)

# Payload policy for the JSON handler:
# - "strict": a JSON object without a string "message" is malformed
# - "lenient": such objects are passed down the chain
CHAIN = build_chain_config(_CONFIG)

# Output mode for the console renderer: "markup", "text", or "json".
OUTPUT = build_output_config(_CONFIG)

# Logging configuration (optional).
LOGGING = _CONFIG.get("logging", {})
