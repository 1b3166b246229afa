"""
Unit tests for the Kickstart configuration system.
"""

from pathlib import Path

import pytest
import yaml

from kickstart.config import (
    Config,
    ConfigurationError,
    apply_env_overrides,
    deep_merge,
    load_config,
    load_yaml_file,
)
from kickstart.config.loader import _parse_env_value
from kickstart.config.merger import set_nested_value
from kickstart.storage.paths import (
    find_project_config,
    get_global_config_path,
    get_kickstart_home,
    get_log_path,
)


# =============================================================================
# Schema Tests
# =============================================================================


class TestConfigSchema:
    def test_default_config_is_valid(self):
        config = Config()
        assert config.wizard.back_keys == ["left", "backspace"]
        assert config.wizard.keyboard_shortcuts is True
        assert config.wizard.default_package_manager is None
        assert config.ui.color is True
        assert config.logging.level == "WARNING"
        assert config.logging.file is None

    def test_config_from_dict(self, sample_config):
        config = Config.model_validate(sample_config)
        assert config.wizard.back_keys == ["left"]
        assert config.wizard.show_logo is False
        assert config.wizard.default_package_manager == "yarn"
        assert config.logging.level == "INFO"

    def test_back_keys_from_string(self):
        config = Config.model_validate({"wizard": {"back_keys": "left, escape"}})
        assert config.wizard.back_keys == ["left", "escape"]

    def test_unknown_back_key_rejected(self):
        with pytest.raises(Exception, match="lefty"):  # Pydantic ValidationError
            Config.model_validate({"wizard": {"back_keys": "lefty, backspace"}})

    def test_back_key_names(self):
        config = Config.model_validate({"wizard": {"back_keys": ["escape", "c-b", "space", "h"]}})
        assert config.wizard.back_keys == ["escape", "c-b", "space", "h"]

    def test_invalid_values_rejected(self):
        with pytest.raises(Exception):  # Pydantic ValidationError
            Config.model_validate({"wizard": {"default_package_manager": "pnpm"}})

    def test_extra_keys_allowed(self):
        config = Config.model_validate({"ui": {"theme": "dark"}})
        assert config.ui.color is True


# =============================================================================
# Merger Tests
# =============================================================================


class TestMerger:
    def test_deep_merge_nested(self):
        base = {"wizard": {"show_logo": True, "back_keys": ["left"]}}
        override = {"wizard": {"show_logo": False}}

        assert deep_merge(base, override) == {
            "wizard": {"show_logo": False, "back_keys": ["left"]}
        }

    def test_deep_merge_lists_replace(self):
        result = deep_merge({"keys": ["a", "b"]}, {"keys": ["c"]})
        assert result == {"keys": ["c"]}

    def test_deep_merge_none_removes(self):
        result = deep_merge({"a": 1, "b": 2}, {"a": None})
        assert result == {"b": 2}

    def test_deep_merge_does_not_mutate(self):
        base = {"a": {"b": 1}}
        deep_merge(base, {"a": {"b": 2}})
        assert base == {"a": {"b": 1}}

    def test_set_nested_value_creates_path(self):
        assert set_nested_value({}, "wizard.show_logo", False) == {
            "wizard": {"show_logo": False}
        }


# =============================================================================
# Environment Override Tests
# =============================================================================


class TestEnvOverrides:
    def test_section_and_key(self):
        config = apply_env_overrides(
            {}, {"KICKSTART_WIZARD_SHOW_LOGO": "false", "KICKSTART_LOGGING_LEVEL": "debug"}
        )
        assert config == {"wizard": {"show_logo": False}, "logging": {"level": "debug"}}

    def test_multi_word_key(self):
        config = apply_env_overrides({}, {"KICKSTART_WIZARD_BACK_KEYS": "left,escape"})
        assert config == {"wizard": {"back_keys": ["left", "escape"]}}

    def test_ignores_home_and_other_variables(self):
        config = apply_env_overrides(
            {}, {"KICKSTART_HOME": "/tmp/x", "HOME": "/root", "KICKSTART_UI": "x"}
        )
        assert config == {}

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("true", True),
            ("YES", True),
            ("off", False),
            ("42", 42),
            ("-1", -1),
            ("a, b", ["a", "b"]),
            ("yarn", "yarn"),
        ],
    )
    def test_parse_env_value(self, raw, expected):
        assert _parse_env_value(raw) == expected


# =============================================================================
# Loader Tests
# =============================================================================


class TestLoader:
    def test_load_yaml_missing_file(self, temp_dir: Path):
        assert load_yaml_file(temp_dir / "missing.yaml") == {}

    def test_load_yaml_empty_file(self, temp_dir: Path):
        path = temp_dir / "empty.yaml"
        path.write_text("")
        assert load_yaml_file(path) == {}

    def test_load_yaml_invalid(self, temp_dir: Path):
        path = temp_dir / "bad.yaml"
        path.write_text("wizard: [unclosed")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_yaml_file(path)

    def test_load_yaml_not_a_mapping(self, temp_dir: Path):
        path = temp_dir / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError):
            load_yaml_file(path)

    def test_defaults_without_files(self, temp_dir: Path):
        config = load_config(project_path=temp_dir)
        assert config == Config()

    def test_layering(self, kickstart_home: Path, temp_dir: Path, monkeypatch):
        get_global_config_path().write_text(
            yaml.safe_dump({"wizard": {"show_logo": False, "default_package_manager": "npm"}})
        )
        project = temp_dir / "app" / "src"
        project.mkdir(parents=True)
        (temp_dir / "app" / ".kickstart.yaml").write_text(
            yaml.safe_dump({"wizard": {"default_package_manager": "yarn"}})
        )
        monkeypatch.setenv("KICKSTART_UI_COLOR", "false")

        config = load_config(project_path=project)

        assert config.wizard.show_logo is False
        assert config.wizard.default_package_manager == "yarn"
        assert config.ui.color is False

    def test_skip_project_and_env(self, temp_dir: Path, monkeypatch):
        (temp_dir / ".kickstart.yaml").write_text(yaml.safe_dump({"ui": {"color": False}}))
        monkeypatch.setenv("KICKSTART_WIZARD_SHOW_LOGO", "false")

        config = load_config(project_path=temp_dir, skip_project=True, skip_env=True)

        assert config.ui.color is True
        assert config.wizard.show_logo is True

    def test_unknown_back_key_from_env(self, temp_dir: Path, monkeypatch):
        monkeypatch.setenv("KICKSTART_WIZARD_BACK_KEYS", "lefty,backspace")
        with pytest.raises(ConfigurationError, match="lefty"):
            load_config(project_path=temp_dir)

    def test_validation_error(self, temp_dir: Path, monkeypatch):
        monkeypatch.setenv("KICKSTART_LOGGING_LEVEL", "loud")
        with pytest.raises(ConfigurationError, match="validation failed"):
            load_config(project_path=temp_dir)


class TestPaths:
    def test_home_from_env(self, kickstart_home: Path):
        assert get_kickstart_home() == kickstart_home.resolve()
        assert get_global_config_path() == kickstart_home.resolve() / "config.yaml"
        assert get_log_path().name == "kickstart.log"

    def test_find_project_config_walks_up(self, temp_dir: Path):
        nested = temp_dir / "a" / "b"
        nested.mkdir(parents=True)
        (temp_dir / ".kickstart.yaml").write_text("{}")

        assert find_project_config(nested) == (temp_dir / ".kickstart.yaml").resolve()
