"""Tests for configuration loading."""

import logging

import pytest
from flashdeck.core.config import Config, SessionConfig, load_config, save_config
from flashdeck.core.exceptions import ConfigError


class TestConfig:
    """Tests for the Config dataclass."""

    def test_defaults(self):
        config = Config()
        assert config.session == SessionConfig()
        assert config.encoding is None
        assert config.log_level == "WARNING"
        assert config.log_level_value == logging.WARNING

    def test_verbose_forces_debug(self):
        config = Config(log_level="ERROR", verbose=True)
        assert config.log_level_value == logging.DEBUG

    def test_from_dict(self):
        config = Config.from_dict({
            "session": {"import_path": "in.txt", "export_path": "out.txt", "seed": 3},
            "encoding": "utf-8",
            "log_level": "info",
        })
        assert config.session.import_path == "in.txt"
        assert config.session.export_path == "out.txt"
        assert config.session.seed == 3
        assert config.encoding == "utf-8"
        assert config.log_level == "INFO"

    def test_from_dict_empty_session(self):
        """Test a session key with no values falls back to defaults."""
        config = Config.from_dict({"session": None})
        assert config.session == SessionConfig()

    def test_bad_log_level(self):
        with pytest.raises(ConfigError) as exc_info:
            Config.from_dict({"log_level": "LOUD"})
        assert exc_info.value.config_key == "log_level"

    def test_bad_seed(self):
        with pytest.raises(ConfigError):
            Config.from_dict({"session": {"seed": "abc"}})

    def test_to_dict_round_trip(self):
        config = Config(session=SessionConfig(import_path="a.txt", seed=9), encoding="latin-1")
        assert Config.from_dict(config.to_dict()) == config


class TestLoadConfig:
    """Tests for reading config files."""

    def test_load_explicit_path(self, tmp_path):
        path = tmp_path / "flashdeck.yaml"
        path.write_text("session:\n  export_path: saved.txt\nlog_level: DEBUG\n")
        config = load_config(str(path))
        assert config.session.export_path == "saved.txt"
        assert config.log_level == "DEBUG"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("session: [unclosed\n")
        with pytest.raises(ConfigError) as exc_info:
            load_config(str(path))
        assert "Invalid YAML" in str(exc_info.value)

    def test_not_a_mapping(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigError):
            load_config(str(path))

    def test_defaults_when_missing(self, tmp_path, monkeypatch):
        """Test defaults are used when no config file exists anywhere."""
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("HOME", str(tmp_path))
        assert load_config() == Config()

    def test_save_and_load(self, tmp_path):
        config = Config(session=SessionConfig(import_path="deck.txt", export_path="deck.txt"))
        path = tmp_path / "nested" / "config.yaml"
        save_config(config, str(path))
        assert load_config(str(path)) == config
