"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- load_config() precedence: kwargs > env > YAML > defaults
- Validation errors surfacing as ConfigError
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from featuregate.config.loader import GLOBAL_CONFIG_PATH, _load_yaml, load_config
from featuregate.config.models import FeatureGateConfig
from featuregate.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep ambient FEATUREGATE__ variables out of these tests."""
    for key in list(os.environ):
        if key.upper().startswith("FEATUREGATE__"):
            monkeypatch.delenv(key)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("supply:\n  submit_command: run\n")
        assert _load_yaml(yaml_file) == {"supply": {"submit_command": "run"}}

    def test_returns_empty_for_yaml_null(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "null.yaml"
        yaml_file.write_text("null\n")
        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_global_path_is_under_user_config(self) -> None:
        assert GLOBAL_CONFIG_PATH.parts[-2:] == ("featuregate", "config.yaml")

    def test_defaults_when_file_missing(self, tmp_path: Path) -> None:
        config = load_config(tmp_path / "missing.yaml")

        assert isinstance(config, FeatureGateConfig)
        assert config.logging.level == "INFO"
        assert config.supply.scratch_dir is None
        assert config.supply.feature_keyword == "Feature:"
        assert config.supply.scenario_keyword == "Scenario:"
        assert config.supply.submit_command == "go"

    def test_yaml_values_applied(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text(f"supply:\n  scratch_dir: {tmp_path}\n  quit_command: exit\n")

        config = load_config(yaml_file)

        assert config.supply.scratch_dir == str(tmp_path)
        assert config.supply.quit_command == "exit"
        assert config.supply.resolved_scratch_dir() == tmp_path

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: WARNING\n")
        monkeypatch.setenv("FEATUREGATE__LOGGING__LEVEL", "DEBUG")

        config = load_config(yaml_file)

        assert config.logging.level == "DEBUG"

    def test_kwargs_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("FEATUREGATE__LOGGING__LEVEL", "DEBUG")

        config = load_config(tmp_path / "missing.yaml", logging={"level": "ERROR"})

        assert config.logging.level == "ERROR"

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("supply:\n  scenario_keyword: Scenario\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(yaml_file)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "scenario_keyword" in exc_info.value.details["field"]
