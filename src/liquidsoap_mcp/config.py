"""Configuration loading.

Settings are loaded in priority order (highest first):
  1. Environment variables  (LIQUIDSOAP_MCP__CACHE__TTL_SECONDS=600)
  2. liquidsoap-mcp.yaml    (searched in cwd, then platform config dir)
  3. Hardcoded defaults

The config file is optional. The Liquidsoap version and documentation host
are fixed in ``liquidsoap_mcp.sections`` and are not configurable.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, Field
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

CONFIG_FILE_NAME = "liquidsoap-mcp.yaml"


def _find_config_file() -> str | None:
    """Return the path of the first liquidsoap-mcp.yaml found, or None."""
    candidates = [
        Path(CONFIG_FILE_NAME),
        Path(platformdirs.user_config_dir("liquidsoap-mcp")) / CONFIG_FILE_NAME,
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class CacheSettings(BaseModel):
    ttl_seconds: int = Field(default=3600, gt=0)


class FetcherSettings(BaseModel):
    # None disables the client timeout entirely
    timeout_seconds: float | None = None
    user_agent: str = "liquidsoap-mcp/1.0"


class SearchSettings(BaseModel):
    max_results: int = Field(default=10, ge=1)
    context_lines: int = Field(default=2, ge=0)


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: LIQUIDSOAP_MCP__LOGGING__LEVEL=DEBUG
        env_prefix="LIQUIDSOAP_MCP__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    cache: CacheSettings = CacheSettings()
    fetcher: FetcherSettings = FetcherSettings()
    search: SearchSettings = SearchSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )
