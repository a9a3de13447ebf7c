"""Unit tests for SearchSettings and EnvSettingsLoader."""

from __future__ import annotations

import pytest

from mp_search.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    SearchSettings,
)


class TestSearchSettings:
    def test_defaults(self) -> None:
        s = SearchSettings()
        assert s.max_limit == 1000
        assert s.default_limit == 0

    def test_negative_max_limit_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchSettings(max_limit=-1)
        err = exc_info.value
        assert err.setting_name == "max_limit"
        assert err.env_key == "SEARCH_MAX_LIMIT"
        assert err.detail["value"] == -1
        assert "SEARCH_MAX_LIMIT" in err.message

    def test_default_above_max_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            SearchSettings(max_limit=10, default_limit=20)

    def test_default_unrestricted_without_max(self) -> None:
        assert SearchSettings(max_limit=0, default_limit=5000).default_limit == 5000

    def test_env_key(self) -> None:
        assert SearchSettings.env_key("default_limit") == "SEARCH_DEFAULT_LIMIT"

    def test_default_above_max_names_both(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            SearchSettings(max_limit=10, default_limit=20)
        assert exc_info.value.setting_name == "default_limit"
        assert "max_limit (10)" in exc_info.value.reason

    def test_errors_are_config_errors(self) -> None:
        with pytest.raises(ConfigError):
            SearchSettings(default_limit=-5)


class TestEnvSettingsLoader:
    def test_loads_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCH_MAX_LIMIT", "250")
        monkeypatch.setenv("SEARCH_DEFAULT_LIMIT", "25")
        s = EnvSettingsLoader().load(SearchSettings)
        assert s.max_limit == 250
        assert s.default_limit == 25

    def test_missing_vars_use_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SEARCH_MAX_LIMIT", raising=False)
        monkeypatch.delenv("SEARCH_DEFAULT_LIMIT", raising=False)
        assert EnvSettingsLoader().load(SearchSettings) == SearchSettings()

    def test_explicit_environ_mapping(self) -> None:
        s = EnvSettingsLoader({"SEARCH_DEFAULT_LIMIT": "50"}).load(SearchSettings)
        assert s.default_limit == 50

    def test_non_integer_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"SEARCH_MAX_LIMIT": "lots"}).load(SearchSettings)
        err = exc_info.value
        assert err.setting_name == "max_limit"
        assert err.env_key == "SEARCH_MAX_LIMIT"
        assert err.value == "lots"

    def test_semantic_error_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"SEARCH_MAX_LIMIT": "-1"}).load(SearchSettings)
