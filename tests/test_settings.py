from __future__ import annotations

import pytest

import settings
from core.config import ChainConfig, OutputConfig


def test_defaults_when_keys_are_missing() -> None:
    assert settings.build_chain_config({}) == ChainConfig(payload_policy="strict")
    assert settings.build_output_config({}) == OutputConfig(format="markup", color=True)


def test_values_are_read_from_config() -> None:
    config = {"payload_policy": "lenient", "output": {"format": "json", "color": False}}
    assert settings.build_chain_config(config).payload_policy == "lenient"
    assert settings.build_output_config(config) == OutputConfig(format="json", color=False)


def test_invalid_values_fail_at_load_time() -> None:
    with pytest.raises(ValueError):
        settings.build_chain_config({"payload_policy": "sometimes"})
    with pytest.raises(ValueError):
        settings.build_output_config({"output": {"format": "html"}})


def test_missing_config_file_raises(tmp_path) -> None:
    with pytest.raises(FileNotFoundError):
        settings._load_json_config(str(tmp_path / "missing.json"))


def test_project_config_is_loaded() -> None:
    assert isinstance(settings.CHAIN, ChainConfig)
    assert isinstance(settings.OUTPUT, OutputConfig)
