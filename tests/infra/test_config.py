"""
Tests for config.py.

Tests key functionality including:
- Defaults and validation
- YAML loading
- Environment variable overrides
"""

import pytest

from cmdinfra.config import CliConfig, LoggingSettings, _env_key_to_path, load_config
from cmdinfra.constants import MAX_CONFIG_SIZE_BYTES
from cmdinfra.errors import ConfigError

# =============================================================================
# Test models
# =============================================================================


@pytest.mark.unit
class TestCliConfig:
    """Test CliConfig and LoggingSettings models."""

    def test_defaults(self):
        config = CliConfig()

        assert config.prog is None
        assert config.default_command == "help"
        assert config.logging == LoggingSettings(level="warning", colors=True)

    def test_level_is_normalized(self):
        assert LoggingSettings(level="DEBUG").level == "debug"

    def test_rejects_unknown_level(self):
        with pytest.raises(ValueError) as exc_info:
            LoggingSettings(level="loud")

        assert "Invalid log level 'loud'" in str(exc_info.value)

    def test_rejects_unknown_keys(self):
        with pytest.raises(ValueError):
            CliConfig(progname="x")


# =============================================================================
# Test load_config
# =============================================================================


@pytest.mark.unit
class TestLoadConfig:
    """Test load_config function."""

    def test_no_file_gives_defaults(self, clean_env):
        assert load_config() == CliConfig()

    def test_loads_yaml(self, temp_dir, clean_env):
        path = temp_dir / "cli.yaml"
        path.write_text(
            "prog: tool\n"
            "default_command: greet\n"
            "logging:\n"
            "  level: info\n"
            "  colors: false\n"
        )

        config = load_config(path)

        assert config.prog == "tool"
        assert config.default_command == "greet"
        assert config.logging.level == "info"
        assert config.logging.colors is False

    def test_empty_file_gives_defaults(self, temp_dir, clean_env):
        path = temp_dir / "cli.yaml"
        path.write_text("")

        assert load_config(str(path)) == CliConfig()

    def test_missing_file_raises(self, temp_dir, clean_env):
        with pytest.raises(ConfigError) as exc_info:
            load_config(temp_dir / "missing.yaml")

        assert "not found" in str(exc_info.value)

    def test_malformed_yaml_raises(self, temp_dir, clean_env):
        path = temp_dir / "cli.yaml"
        path.write_text("logging: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert "cannot parse" in str(exc_info.value)

    def test_non_mapping_raises(self, temp_dir, clean_env):
        path = temp_dir / "cli.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            load_config(path)

    def test_oversized_file_raises(self, temp_dir, clean_env):
        path = temp_dir / "cli.yaml"
        path.write_text("#" * (MAX_CONFIG_SIZE_BYTES + 1))

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert "exceeding maximum size" in str(exc_info.value)

    def test_invalid_values_raise_config_error(self, temp_dir, clean_env):
        path = temp_dir / "cli.yaml"
        path.write_text("logging:\n  level: loud\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path)

        assert str(exc_info.value).startswith("Configuration error:")


# =============================================================================
# Test environment overrides
# =============================================================================


@pytest.mark.unit
class TestEnvOverrides:
    """Test CMDINFRA_* environment variable overrides."""

    @pytest.mark.parametrize(
        "key,expected",
        [
            ("CMDINFRA_LOGGING_LEVEL", ["logging", "level"]),
            ("CMDINFRA_DEFAULT_COMMAND", ["default_command"]),
            ("CMDINFRA_PROG", ["prog"]),
        ],
    )
    def test_env_key_to_path(self, key, expected):
        assert _env_key_to_path(key, "CMDINFRA_") == expected

    def test_overrides_defaults(self, clean_env):
        clean_env.setenv("CMDINFRA_LOGGING_LEVEL", "debug")
        clean_env.setenv("CMDINFRA_LOGGING_COLORS", "false")
        clean_env.setenv("CMDINFRA_DEFAULT_COMMAND", "greet")

        config = load_config()

        assert config.logging.level == "debug"
        assert config.logging.colors is False
        assert config.default_command == "greet"

    def test_overrides_file_values(self, temp_dir, clean_env):
        path = temp_dir / "cli.yaml"
        path.write_text("logging:\n  level: info\n")
        clean_env.setenv("CMDINFRA_LOGGING_LEVEL", "error")

        assert load_config(path).logging.level == "error"

    def test_overrides_can_be_disabled(self, clean_env):
        clean_env.setenv("CMDINFRA_LOGGING_LEVEL", "debug")

        assert load_config(enable_env_overrides=False).logging.level == "warning"

    def test_custom_prefix(self, clean_env):
        clean_env.setenv("MYTOOL_PROG", "mytool")

        assert load_config(env_prefix="MYTOOL_").prog == "mytool"
