"""Configuration loading for the factory generator.

Configuration lives in a YAML (or JSON) file, by default ``factorygen.yaml`` in
the project root::

    factory-generator:
      namespace:
        model: app.models
      ignored_columns: [id]
    database:
      default: sqlite
      connections:
        sqlite: {driver: sqlite, database: database/app.sqlite}

Values are looked up with dotted keys, e.g.
``config.get("factory-generator.namespace.model")``.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError

from .database import DatabaseConfig
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "factorygen.yaml"


def load_config_file(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Load configuration from JSON or YAML file."""
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            if config_file.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Could not parse {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration root must be a mapping: {config_path}")
    return data


class ConfigRepository:
    """Read-only view over nested configuration values."""

    def __init__(self, items: Optional[Dict[str, Any]] = None):
        self._items = items or {}

    @classmethod
    def from_file(cls, config_path: Union[str, Path]) -> "ConfigRepository":
        logger.debug(f"Loading configuration from {config_path}")
        return cls(load_config_file(config_path))

    def get(self, key: str, default: Any = None) -> Any:
        """Return the value at a dotted ``key``, or ``default`` if any part is missing."""
        value: Any = self._items
        for segment in key.split("."):
            if not isinstance(value, dict) or segment not in value:
                return default
            value = value[segment]
        return value


class Settings(BaseModel):
    """Validated ``factory-generator`` settings."""

    namespace_model: str = Field(default="app.models", description="Module generated factories import models from")
    ignored_columns: List[str] = Field(default_factory=list, description="Columns left out of generated factories")
    type_overrides: Dict[str, str] = Field(
        default_factory=dict, description="Extra type family to Faker provider mappings"
    )

    @classmethod
    def from_repository(cls, config: ConfigRepository) -> "Settings":
        values = {
            "namespace_model": config.get("factory-generator.namespace.model"),
            "ignored_columns": config.get("factory-generator.ignored_columns"),
            "type_overrides": config.get("factory-generator.type_overrides"),
        }
        try:
            return cls(**{k: v for k, v in values.items() if v is not None})
        except ValidationError as e:
            raise ConfigurationError(f"Invalid factory-generator settings: {e}") from e


def resolve_connection_config(config: ConfigRepository, name: Optional[str] = None,
                              base_path: Optional[Path] = None) -> DatabaseConfig:
    """Build the :class:`DatabaseConfig` for a named (or the default) connection.

    Relative SQLite database paths are resolved against ``base_path``.
    """
    name = name or config.get("database.default")
    if not name:
        raise ConfigurationError("No connection given and no database.default configured")

    connection = config.get(f"database.connections.{name}")
    if not isinstance(connection, dict):
        raise ConfigurationError(f"Database connection [{name}] not configured.")

    try:
        db_config = DatabaseConfig(**connection)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings for connection [{name}]: {e}") from e

    if db_config.driver == "sqlite" and base_path is not None and db_config.database:
        database = Path(db_config.database)
        if db_config.database != ":memory:" and not database.is_absolute():
            db_config.database = str(Path(base_path) / database)

    logger.debug(f"Resolved connection [{name}] using {db_config.driver} driver")
    return db_config
