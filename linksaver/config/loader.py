import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from linksaver.config.models import AppConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "LINKSAVER_CONFIG_PATH"
DB_PATH_ENV = "LINKSAVER_DB_PATH"
DATA_DIR_ENV = "LINKSAVER_DATA_DIR"


def load_config(path: Path | None = None) -> AppConfig:
    """
    Load and validate the YAML config.

    A missing file yields defaults. Raises ValueError if the YAML or the
    schema is invalid. Environment overrides are applied last.
    """
    if path is None:
        path = Path(os.environ.get(CONFIG_PATH_ENV, "config.yaml"))

    if path.exists():
        with open(path) as f:
            content = f.read()
        try:
            data = yaml.safe_load(content) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax in config file: {e}") from e

        try:
            config = AppConfig.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Config validation failed:\n{e}") from e
    else:
        logger.info(f"No config at {path}, using defaults")
        config = AppConfig()

    return apply_env_overrides(config)


def apply_env_overrides(config: AppConfig) -> AppConfig:
    storage = config.storage
    if DB_PATH_ENV in os.environ:
        storage = storage.model_copy(update={"db_path": os.environ[DB_PATH_ENV]})
    if DATA_DIR_ENV in os.environ:
        storage = storage.model_copy(update={"data_dir": os.environ[DATA_DIR_ENV]})
    return config.model_copy(update={"storage": storage})


def configure_logging(config: AppConfig) -> None:
    logging.basicConfig(
        level=getattr(logging, config.logging.level.upper(), logging.INFO),
        format=config.logging.format,
    )
