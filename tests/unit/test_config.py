"""Unit tests for configuration loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import platformdirs
import pytest
from pydantic import ValidationError

from liquidsoap_mcp.config import CONFIG_FILE_NAME, CacheSettings, Settings, _find_config_file

if TYPE_CHECKING:
    from pathlib import Path


class TestDefaults:
    def test_cache_ttl_one_hour(self) -> None:
        assert CacheSettings().ttl_seconds == 3600

    def test_settings_defaults(self) -> None:
        settings = Settings()
        assert settings.fetcher.timeout_seconds is None
        assert settings.search.max_results == 10
        assert settings.search.context_lines == 2
        assert settings.logging.level == "INFO"
        assert settings.logging.format == "json"

    def test_ttl_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            CacheSettings(ttl_seconds=0)


class TestEnvironmentOverrides:
    def test_nested_env_var(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LIQUIDSOAP_MCP__CACHE__TTL_SECONDS", "60")
        monkeypatch.setenv("LIQUIDSOAP_MCP__LOGGING__FORMAT", "text")
        settings = Settings()
        assert settings.cache.ttl_seconds == 60
        assert settings.logging.format == "text"

    def test_invalid_log_level_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LIQUIDSOAP_MCP__LOGGING__LEVEL", "LOUD")
        with pytest.raises(ValidationError):
            Settings()


class TestConfigFileDiscovery:
    def test_cwd_file_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / CONFIG_FILE_NAME).write_text("cache:\n  ttl_seconds: 10\n", encoding="utf-8")
        assert _find_config_file() == CONFIG_FILE_NAME

    def test_platform_config_dir_searched(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        config_dir = tmp_path / "config"
        config_dir.mkdir()
        (config_dir / CONFIG_FILE_NAME).write_text("", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(platformdirs, "user_config_dir", lambda _app: str(config_dir))
        assert _find_config_file() == str(config_dir / CONFIG_FILE_NAME)

    def test_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(platformdirs, "user_config_dir", lambda _app: str(tmp_path / "none"))
        assert _find_config_file() is None
