"""Unit tests for config settings loaders."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import ClassVar

import pytest

from hermes_trace.config.settings import DotenvSettingsLoader, EnvSettingsLoader, Settings
from hermes_trace.config.validation import ConfigError, MissingRequiredSettingError


# ---------------------------------------------------------------------------
# Concrete settings classes used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    ratio: float = 0.5
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    api_url: str


@dataclass
class StrictSettings(Settings):
    _prefix: ClassVar[str] = "STRICT"

    port: int = 1

    def _validate(self) -> None:
        if self.port <= 0:
            raise ValueError("port must be positive")


_APP_VARS = ("APP_HOST", "APP_PORT", "APP_RATIO", "APP_DEBUG", "APP_ALLOWED_ORIGINS")


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (*_APP_VARS, "REQ_API_URL", "STRICT_PORT"):
        monkeypatch.delenv(key, raising=False)


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        assert EnvSettingsLoader().load(AppSettings).host == "example.com"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "9000")
        assert EnvSettingsLoader().load(AppSettings).port == 9000

    def test_loads_float(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_RATIO", "0.25")
        assert EnvSettingsLoader().load(AppSettings).ratio == 0.25

    def test_loads_bool_true(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for truthy in ("true", "True", "1", "yes", "on"):
            monkeypatch.setenv("APP_DEBUG", truthy)
            assert EnvSettingsLoader().load(AppSettings).debug is True

    def test_loads_bool_false(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for falsy in ("false", "False", "0", "no", "off"):
            monkeypatch.setenv("APP_DEBUG", falsy)
            assert EnvSettingsLoader().load(AppSettings).debug is False

    def test_loads_list_from_postponed_annotation(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_ALLOWED_ORIGINS", "http://a.com, http://b.com,")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings == AppSettings()

    def test_missing_required_setting(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader().load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_API_URL"

    def test_required_setting_present(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("REQ_API_URL", "https://logs.example.com")
        assert EnvSettingsLoader().load(RequiredSettings).api_url == "https://logs.example.com"

    def test_bad_int_raises_value_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_PORT", "not-a-number")
        with pytest.raises(ValueError):
            EnvSettingsLoader().load(AppSettings)

    def test_validation_failure_wrapped_in_config_error(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STRICT_PORT", "0")
        with pytest.raises(ConfigError) as exc_info:
            EnvSettingsLoader().load(StrictSettings)
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestDotenvSettingsLoader:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        pytest.importorskip("dotenv")
        env_file = tmp_path / ".env"
        env_file.write_text("APP_HOST=from-dotenv\nAPP_PORT=7000\n")
        # registered so monkeypatch removes the values dotenv writes
        monkeypatch.setenv("APP_HOST", "from-env")
        monkeypatch.setenv("APP_PORT", "1")

        settings = DotenvSettingsLoader(str(env_file), override=True).load(AppSettings)
        assert settings.host == "from-dotenv"
        assert settings.port == 7000

    def test_existing_env_wins_without_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        pytest.importorskip("dotenv")
        env_file = tmp_path / ".env"
        env_file.write_text("APP_HOST=from-dotenv\n")
        monkeypatch.setenv("APP_HOST", "from-env")

        assert DotenvSettingsLoader(str(env_file)).load(AppSettings).host == "from-env"
