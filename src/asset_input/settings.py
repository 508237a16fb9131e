"""Settings module with unified configuration precedence: CLI > ENV > CONFIG FILE."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

from .constants import (
    DEFAULT_BASE_ASSET_SYMBOL,
    SYMBOL_PRIORITY_LIST,
    build_symbol_priority,
)

load_dotenv()

CONFIG_ENV_VAR = "ASSET_INPUT_CONFIG"


class TomlConfigSource(PydanticBaseSettingsSource):
    """Lowest-precedence source reading a TOML file.

    The file may hold settings at the top level or under an ``[asset_input]``
    table.
    """

    def __init__(self, settings_cls: type[BaseSettings], path: Path | None):
        super().__init__(settings_cls)
        self._path = path

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return None, "", False

    def _resolve_path(self) -> Path | None:
        if self._path is not None:
            return self._path if self._path.exists() else None

        local_config = Path("asset-input.toml")
        user_config = Path.home() / ".config" / "asset-input" / "config.toml"
        if local_config.exists():
            return local_config
        if user_config.exists():
            return user_config
        return None

    def __call__(self) -> dict[str, Any]:
        path = self._resolve_path()
        if path is None:
            return {}

        with path.open("rb") as f:
            data = tomllib.load(f)
        body = data.get("asset_input", data)
        if not isinstance(body, dict):
            return {}
        return body


class AssetInputSettings(BaseSettings):
    """Single source of truth for configuration. Values may come from:
    - CLI (init kwargs)
    - ENV / .env (prefixed with ASSET_INPUT_)
    - Config file (TOML), lowest precedence
    """

    # --- ranking ---
    symbol_priority: list[str] = Field(
        default_factory=lambda: list(SYMBOL_PRIORITY_LIST),
        description="Symbols listed first when no search term is active, highest priority first.",
    )

    # --- max amount ---
    base_asset_symbol: str = DEFAULT_BASE_ASSET_SYMBOL
    show_max_button: bool = True

    # --- input ---
    assets_file: Path | None = None

    # --- logging ---
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="ASSET_INPUT_",
        env_file=".env",
        extra="ignore",
    )

    @field_validator("symbol_priority")
    @classmethod
    def validate_symbol_priority(cls, v: list[str]) -> list[str]:
        """Strip symbols and reject blanks or duplicates."""
        symbols = [symbol.strip() for symbol in v]
        if any(not symbol for symbol in symbols):
            raise ValueError("symbol_priority entries must be non-empty")
        duplicates = sorted({s for s in symbols if symbols.count(s) > 1})
        if duplicates:
            raise ValueError(
                f"symbol_priority contains duplicate symbols: {', '.join(duplicates)}"
            )
        return symbols

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.upper()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Custom config-file source with explicit precedence: CLI > ENV > FILE."""
        env_cfg = os.environ.get(CONFIG_ENV_VAR)
        cfg_path = Path(env_cfg) if env_cfg else None

        return (
            init_settings,  # CLI (highest)
            env_settings,  # ENV
            dotenv_settings,  # .env
            TomlConfigSource(settings_cls, cfg_path),  # CONFIG (lowest)
        )

    @property
    def priority_table(self) -> Mapping[str, int]:
        """Read-only symbol rank table built from ``symbol_priority``."""
        return build_symbol_priority(self.symbol_priority)
