"""Tests for settings configuration loading."""

from __future__ import annotations

from textwrap import dedent

import pytest
from pydantic import ValidationError

from asset_input.constants import SYMBOL_PRIORITY_LIST
from asset_input.settings import AssetInputSettings


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep developer config files and env vars out of the tests."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    for name in [
        "ASSET_INPUT_CONFIG",
        "ASSET_INPUT_LOG_LEVEL",
        "ASSET_INPUT_SYMBOL_PRIORITY",
        "ASSET_INPUT_BASE_ASSET_SYMBOL",
        "ASSET_INPUT_SHOW_MAX_BUTTON",
        "ASSET_INPUT_ASSETS_FILE",
    ]:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = AssetInputSettings()

    assert settings.symbol_priority == list(SYMBOL_PRIORITY_LIST)
    assert settings.base_asset_symbol == "ETH"
    assert settings.show_max_button is True
    assert settings.assets_file is None
    assert settings.log_level == "INFO"


def test_loads_toml_table(tmp_path, monkeypatch):
    config_path = tmp_path / "custom.toml"
    config_path.write_text(
        dedent(
            """
            [asset_input]
            symbol_priority = ["USDC", "DAI"]
            base_asset_symbol = "MATIC"
            show_max_button = false
            """
        ).strip()
    )
    monkeypatch.setenv("ASSET_INPUT_CONFIG", str(config_path))

    settings = AssetInputSettings()

    assert settings.symbol_priority == ["USDC", "DAI"]
    assert settings.base_asset_symbol == "MATIC"
    assert settings.show_max_button is False
    assert dict(settings.priority_table) == {"USDC": 2, "DAI": 1}


def test_finds_local_config_file(tmp_path):
    (tmp_path / "asset-input.toml").write_text('base_asset_symbol = "AVAX"\n')

    settings = AssetInputSettings()

    assert settings.base_asset_symbol == "AVAX"


def test_env_overrides_config_file(tmp_path, monkeypatch):
    (tmp_path / "asset-input.toml").write_text('base_asset_symbol = "AVAX"\n')
    monkeypatch.setenv("ASSET_INPUT_BASE_ASSET_SYMBOL", "BNB")

    settings = AssetInputSettings()

    assert settings.base_asset_symbol == "BNB"


def test_init_kwargs_override_env(monkeypatch):
    monkeypatch.setenv("ASSET_INPUT_LOG_LEVEL", "WARNING")

    settings = AssetInputSettings(log_level="debug")

    assert settings.log_level == "DEBUG"


def test_symbol_priority_from_env(monkeypatch):
    monkeypatch.setenv("ASSET_INPUT_SYMBOL_PRIORITY", '[" WBTC ", "DAI"]')

    settings = AssetInputSettings()

    assert settings.symbol_priority == ["WBTC", "DAI"]


def test_symbol_priority_rejects_duplicates():
    with pytest.raises(ValidationError, match="duplicate"):
        AssetInputSettings(symbol_priority=["DAI", "USDC", "DAI"])


def test_symbol_priority_rejects_blank_entries():
    with pytest.raises(ValidationError, match="non-empty"):
        AssetInputSettings(symbol_priority=["DAI", " "])


def test_missing_explicit_config_file_is_ignored(tmp_path, monkeypatch):
    monkeypatch.setenv("ASSET_INPUT_CONFIG", str(tmp_path / "missing.toml"))

    settings = AssetInputSettings()

    assert settings.base_asset_symbol == "ETH"
