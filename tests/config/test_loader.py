"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence: defaults < global < repo < env < kwargs
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from testpoint.config.loader import _deep_merge, _load_yaml, load_config
from testpoint.config.models import RunnerConfig, TestPointConfig
from testpoint.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def _isolated_global_config(tmp_path: Path):
    """Point the global config at a path that does not exist."""
    with patch("testpoint.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "no-global.yaml"):
        yield


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("runner:\n  pack: ruby.minitest\n")

        assert _load_yaml(yaml_file) == {"runner": {"pack": "ruby.minitest"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_on_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("runner: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)

        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_on_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_nested_dicts_merge(self) -> None:
        base = {"runner": {"ruby": "ruby", "bundler": "auto"}}
        override = {"runner": {"bundler": "never"}}

        assert _deep_merge(base, override) == {"runner": {"ruby": "ruby", "bundler": "never"}}

    def test_does_not_mutate_base(self) -> None:
        base = {"a": 1}
        _deep_merge(base, {"a": 2})

        assert base == {"a": 1}

    def test_non_dict_override_replaces(self) -> None:
        assert _deep_merge({"a": {"b": 1}}, {"a": [1]}) == {"a": [1]}


class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_defaults_without_any_files(self, tmp_path: Path) -> None:
        config = load_config(tmp_path)

        assert isinstance(config, TestPointConfig)
        assert config.runner.pack == "auto"
        assert config.runner.ruby == "ruby"
        assert config.runner.load_path == ["lib", "test"]
        assert config.logging.level == "WARNING"

    def test_repo_yaml_applies(self, tmp_path: Path) -> None:
        (tmp_path / ".testpoint.yaml").write_text(
            "runner:\n  pack: ruby.minitest\n  load_path: [test]\n"
        )

        config = load_config(tmp_path)

        assert config.runner.pack == "ruby.minitest"
        assert config.runner.load_path == ["test"]

    def test_repo_yaml_overrides_global(self, tmp_path: Path) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text("runner:\n  ruby: ruby3.3\n  bundler: never\n")
        (tmp_path / ".testpoint.yaml").write_text("runner:\n  bundler: always\n")

        with patch("testpoint.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(tmp_path)

        assert config.runner.ruby == "ruby3.3"
        assert config.runner.bundler == "always"

    def test_env_overrides_yaml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / ".testpoint.yaml").write_text("logging:\n  level: INFO\n")
        monkeypatch.setenv("TESTPOINT__LOGGING__LEVEL", "DEBUG")

        config = load_config(tmp_path)

        assert config.logging.level == "DEBUG"

    def test_kwargs_override_everything(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("TESTPOINT__RUNNER__PACK", "ruby.minitest")

        config = load_config(tmp_path, runner=RunnerConfig(pack="ruby.testunit"))

        assert config.runner.pack == "ruby.testunit"

    def test_invalid_value_raises_config_error(self, tmp_path: Path) -> None:
        (tmp_path / ".testpoint.yaml").write_text("runner:\n  pack: ruby.rspec\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "runner" in exc_info.value.details["field"]


class TestModels:
    """Validation rules on the config models."""

    def test_relative_log_destination_rejected(self) -> None:
        from pydantic import ValidationError

        from testpoint.config.models import LogOutputConfig

        with pytest.raises(ValidationError):
            LogOutputConfig(destination="relative/path.log")

    def test_empty_ruby_rejected(self) -> None:
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            RunnerConfig(ruby="  ")


class TestSettingsClass:
    def test_module_settings_reads_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from testpoint.config import TestPointSettings

        monkeypatch.setenv("TESTPOINT__RUNNER__BUNDLER", "never")

        assert TestPointSettings().runner.bundler == "never"


class TestExplicitConfigFile:
    def test_explicit_file_replaces_repo_file(self, tmp_path: Path) -> None:
        (tmp_path / ".testpoint.yaml").write_text("runner:\n  ruby: ruby-repo\n")
        explicit = tmp_path / "ci.yaml"
        explicit.write_text("runner:\n  bundler: always\n")

        config = load_config(tmp_path, config_file=explicit)

        assert config.runner.bundler == "always"
        assert config.runner.ruby == "ruby"

    def test_missing_explicit_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path, config_file=tmp_path / "missing.yaml")

        assert exc_info.value.code == ErrorCode.CONFIG_FILE_NOT_FOUND
