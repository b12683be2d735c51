"""Settings for pagebundle and the logging setup derived from them.

Sources, strongest first: ``Config(...)`` arguments, ``PAGEBUNDLE_*``
environment variables, ``.env``, the YAML file named by
``PAGEBUNDLE_CONFIG_FILE``, file secrets.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from pagebundle.domain.shared.error import ConfigurationError

ENV_PREFIX = "PAGEBUNDLE_"
CONFIG_FILE_ENV = f"{ENV_PREFIX}CONFIG_FILE"
LOG_FILE_ENV = f"{ENV_PREFIX}LOG_FILE"

# Third-party loggers held at WARNING whatever the root level
QUIET_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncio")


def read_config_file(path: str | None) -> dict[str, Any]:
    """Parse a YAML config file into a dict; a missing path or file yields ``{}``."""
    if not path:
        return {}
    config_path = Path(path).expanduser()
    if not config_path.is_file():
        return {}

    data = yaml.safe_load(config_path.read_text())
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{config_path}: top level must be a mapping")
    return data


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Top-level sections of the YAML file that match fields of the settings class.

    Unknown sections are dropped rather than failing the whole config.
    """

    def __init__(self, settings_cls: type[BaseSettings]) -> None:
        super().__init__(settings_cls)
        data = read_config_file(os.environ.get(CONFIG_FILE_ENV))
        self._sections = {k: v for k, v in data.items() if k in settings_cls.model_fields}

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._sections.get(field_name), field_name, False

    def __call__(self) -> dict[str, Any]:
        return dict(self._sections)


class DatabaseConfig(BaseModel):
    url: str = "sqlite+aiosqlite:///:memory:"
    echo: bool = False


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"
    date_format: str = "%Y-%m-%d %H:%M:%S"

    @property
    def file(self) -> str | None:
        """Log file path; read from the environment so daemons can redirect output."""
        return os.environ.get(LOG_FILE_ENV)


class Config(BaseSettings):
    database: DatabaseConfig = DatabaseConfig()
    logging: LoggingConfig = LoggingConfig()

    model_config = {
        "env_prefix": ENV_PREFIX,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_nested_delimiter": "__",  # PAGEBUNDLE_DATABASE__URL -> database.url
    }

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # YAML sits below .env and above file secrets
        yaml_settings = YamlConfigSettingsSource(settings_cls)
        return init_settings, env_settings, dotenv_settings, yaml_settings, file_secret_settings


def _log_handler(config: LoggingConfig) -> logging.Handler:
    if not config.file:
        return logging.StreamHandler(sys.stderr)
    log_path = Path(config.file).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(log_path)


def configure_logging(config: LoggingConfig) -> None:
    """Route all logging through a single handler on the root logger.

    Safe to call repeatedly: previously installed root handlers are replaced.
    """
    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)

    handler = _log_handler(config)
    handler.setFormatter(logging.Formatter(config.format, datefmt=config.date_format))
    root.addHandler(handler)
    root.setLevel(config.level)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "Logging configured: level=%s, file=%s", config.level, config.file
    )
