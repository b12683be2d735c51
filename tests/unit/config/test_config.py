"""Tests for Config Pydantic Settings and logging setup."""

import logging
from pathlib import Path

import pytest

from pagebundle.config import Config, LoggingConfig, configure_logging, read_config_file
from pagebundle.domain.shared.error import ConfigurationError


class TestConfig:
    def test_defaults(self) -> None:
        config = Config()

        assert config.database.url == "sqlite+aiosqlite:///:memory:"
        assert config.database.echo is False
        assert config.logging.level == "INFO"

    def test_nested_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PAGEBUNDLE_DATABASE__URL", "sqlite+aiosqlite:///pages.db")
        monkeypatch.setenv("PAGEBUNDLE_DATABASE__ECHO", "true")

        config = Config()

        assert config.database.url == "sqlite+aiosqlite:///pages.db"
        assert config.database.echo is True

    def test_yaml_config_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: WARNING\n")
        monkeypatch.setenv("PAGEBUNDLE_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.logging.level == "WARNING"

    def test_env_beats_yaml(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: WARNING\n")
        monkeypatch.setenv("PAGEBUNDLE_CONFIG_FILE", str(config_file))
        monkeypatch.setenv("PAGEBUNDLE_LOGGING__LEVEL", "ERROR")

        config = Config()

        assert config.logging.level == "ERROR"

    def test_missing_yaml_file_is_ignored(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.setenv("PAGEBUNDLE_CONFIG_FILE", str(tmp_path / "absent.yaml"))

        assert Config().logging.level == "INFO"

    def test_unknown_yaml_sections_are_ignored(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 80\ndatabase:\n  echo: true\n")
        monkeypatch.setenv("PAGEBUNDLE_CONFIG_FILE", str(config_file))

        config = Config()

        assert config.database.echo is True

    def test_yaml_must_be_a_mapping(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- database\n- logging\n")
        monkeypatch.setenv("PAGEBUNDLE_CONFIG_FILE", str(config_file))

        with pytest.raises(ConfigurationError, match="top level must be a mapping"):
            Config()


class TestReadConfigFile:
    def test_no_path(self) -> None:
        assert read_config_file(None) == {}

    def test_empty_file(self, tmp_path: Path) -> None:
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert read_config_file(str(config_file)) == {}


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def _restore_root_logger(self):
        root = logging.getLogger()
        level, handlers = root.level, root.handlers[:]
        yield
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in handlers:
            root.addHandler(handler)
        root.setLevel(level)

    def test_stream_handler_by_default(self) -> None:
        configure_logging(LoggingConfig(level="WARNING"))

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.StreamHandler)

    def test_file_handler_when_log_file_set(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        log_file = tmp_path / "logs" / "pagebundle.log"
        monkeypatch.setenv("PAGEBUNDLE_LOG_FILE", str(log_file))

        configure_logging(LoggingConfig(level="DEBUG"))

        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], logging.FileHandler)
        assert log_file.parent.is_dir()

    def test_repeated_calls_do_not_duplicate_handlers(self) -> None:
        configure_logging(LoggingConfig())
        configure_logging(LoggingConfig())

        assert len(logging.getLogger().handlers) == 1
