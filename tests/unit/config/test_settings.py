"""Unit tests for config settings & validation."""

from dataclasses import dataclass
from typing import ClassVar

import pytest

from insight_logs.config import (
    DEFAULT_LOG_TTL,
    ConfigError,
    EnvSettingsLoader,
    InsightSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


@dataclass
class RequiredSettings:
    env_prefix: ClassVar[str] = "REQ"

    token: str


# ---------------------------------------------------------------------------
# InsightSettings defaults
# ---------------------------------------------------------------------------


class TestInsightSettingsDefaults:
    def test_defaults(self) -> None:
        settings = InsightSettings()
        assert settings.redis_url == "redis://localhost:6379/0"
        assert settings.key_prefix == "insight"
        assert settings.log_ttl == DEFAULT_LOG_TTL == 604800
        assert settings.log_record_ttl is None

    def test_rejects_non_positive_ttl(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            InsightSettings(log_ttl=0)
        assert exc_info.value.setting_name == "log_ttl"

    def test_rejects_negative_record_ttl(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            InsightSettings(log_record_ttl=-1)

    def test_zero_record_ttl_is_allowed(self) -> None:
        assert InsightSettings(log_record_ttl=0).log_record_ttl == 0

    def test_rejects_empty_prefix(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            InsightSettings(key_prefix="")


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSIGHT_REDIS_URL", "redis://cache:6379/3")
        settings = EnvSettingsLoader().load(InsightSettings)
        assert settings.redis_url == "redis://cache:6379/3"

    def test_loads_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSIGHT_LOG_TTL", "3600")
        settings = EnvSettingsLoader().load(InsightSettings)
        assert settings.log_ttl == 3600

    def test_loads_optional_int(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSIGHT_LOG_RECORD_TTL", "120")
        settings = EnvSettingsLoader().load(InsightSettings)
        assert settings.log_record_ttl == 120

    def test_blank_optional_int_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INSIGHT_LOG_RECORD_TTL", "")
        settings = EnvSettingsLoader().load(InsightSettings)
        assert settings.log_record_ttl is None

    def test_missing_env_uses_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("INSIGHT_REDIS_URL", "INSIGHT_KEY_PREFIX", "INSIGHT_LOG_TTL", "INSIGHT_LOG_RECORD_TTL"):
            monkeypatch.delenv(name, raising=False)
        assert EnvSettingsLoader().load(InsightSettings) == InsightSettings()

    def test_explicit_environ_mapping(self) -> None:
        settings = EnvSettingsLoader({"INSIGHT_KEY_PREFIX": "stats"}).load(InsightSettings)
        assert settings.key_prefix == "stats"

    def test_unparseable_int_raises_invalid_value(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"INSIGHT_LOG_TTL": "a week"}).load(InsightSettings)
        assert exc_info.value.setting_name == "INSIGHT_LOG_TTL"

    def test_validation_error_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"INSIGHT_LOG_TTL": "-5"}).load(InsightSettings)

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(RequiredSettings)
        assert exc_info.value.setting_name == "REQ_TOKEN"

    def test_missing_required_is_config_error(self) -> None:
        with pytest.raises(ConfigError):
            EnvSettingsLoader({}).load(RequiredSettings)

    def test_bool_and_float_coercion(self) -> None:
        @dataclass
        class Tuning:
            env_prefix: ClassVar[str] = "TUNE"

            enabled: bool = False
            ratio: float = 0.5

        settings = EnvSettingsLoader({"TUNE_ENABLED": "yes", "TUNE_RATIO": "0.25"}).load(Tuning)
        assert settings.enabled is True
        assert settings.ratio == 0.25
