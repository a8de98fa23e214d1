"""Database connection and management utilities."""

import logging
from typing import Dict, Any, Optional
from sqlalchemy import create_engine, Engine, text
from sqlalchemy.exc import SQLAlchemyError
from pydantic import BaseModel, Field, ValidationInfo, field_validator


logger = logging.getLogger(__name__)

DEFAULT_PORTS = {"mysql": 3306, "postgresql": 5432}


class DatabaseConfig(BaseModel):
    """Configuration model for a named database connection."""

    driver: str = Field(default="mysql", description="Database driver")
    host: str = Field(default="localhost", description="Database host")
    port: Optional[int] = Field(default=None, description="Database port (None = driver default)")
    database: str = Field(default="", description="Database name, or file path for SQLite")
    username: str = Field(default="", description="Database username")
    password: str = Field(default="", description="Database password")
    charset: str = Field(default="utf8mb4", description="Character set")

    @field_validator("driver")
    @classmethod
    def validate_driver(cls, v):
        supported_drivers = ["mysql", "sqlite", "postgresql"]
        if v not in supported_drivers:
            raise ValueError(f"Unsupported driver: {v}. Supported: {supported_drivers}")
        return v

    @field_validator("port")
    @classmethod
    def validate_port(cls, v, info: ValidationInfo):
        # SQLite doesn't use ports
        if v is None or info.data.get("driver") == "sqlite":
            return v
        if not 1 <= v <= 65535:
            raise ValueError("Port must be between 1 and 65535")
        return v


class DatabaseConnection:
    """Owns the SQLAlchemy engine for one generation run."""

    def __init__(self, config: DatabaseConfig):
        """Initialize database connection with configuration."""
        self.config = config
        self._engine: Optional[Engine] = None

    def connect(self) -> None:
        """Establish connection to the database."""
        try:
            connection_url = self._build_connection_url()
            if self.config.driver == "sqlite":
                logger.info(f"Connecting to sqlite database at {self.config.database}")
            else:
                logger.info(f"Connecting to {self.config.driver} database at "
                            f"{self.config.host}:{self._port()}")

            self._engine = create_engine(
                connection_url,
                echo=False,
                pool_pre_ping=True,
                connect_args=self._get_connect_args(),
            )

            # Test connection
            with self._engine.connect() as conn:
                conn.execute(text("SELECT 1"))
                logger.info("Database connection established successfully")

        except SQLAlchemyError as e:
            logger.error(f"Failed to connect to database: {e}")
            raise ConnectionError(f"Database connection failed: {e}")

    def _port(self) -> Optional[int]:
        return self.config.port or DEFAULT_PORTS.get(self.config.driver)

    def _build_connection_url(self) -> str:
        """Build SQLAlchemy connection URL from config."""
        if self.config.driver == "mysql":
            driver_name = "mysql+pymysql"
        elif self.config.driver == "postgresql":
            driver_name = "postgresql+psycopg2"
        elif self.config.driver == "sqlite":
            return f"sqlite:///{self.config.database}"
        else:
            raise ValueError(f"Unsupported driver: {self.config.driver}")

        base_url = f"{driver_name}://{self.config.username}:{self.config.password}@{self.config.host}:{self._port()}"
        return f"{base_url}/{self.config.database}"

    def _get_connect_args(self) -> Dict[str, Any]:
        """Get driver-specific connection arguments."""
        if self.config.driver == "mysql":
            return {"charset": self.config.charset}
        return {}

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine."""
        if self._engine is None:
            raise RuntimeError("Database not connected. Call connect() first.")
        return self._engine

    @property
    def dialect_name(self) -> str:
        """Dialect name reported by the driver, e.g. ``mysql`` or ``sqlite``."""
        return self.engine.dialect.name

    def execute_query(self, query: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """Execute a raw SQL query and return results."""
        logger.debug(f"Executing: {query}")
        try:
            with self.engine.connect() as conn:
                result = conn.execute(text(query), params or {})
                return result.fetchall()
        except SQLAlchemyError as e:
            logger.error(f"Query execution failed: {e}")
            raise

    def close(self) -> None:
        """Close database connection and cleanup resources."""
        if self._engine:
            self._engine.dispose()
            self._engine = None
            logger.info("Database connection closed")

    def quote_identifier(self, identifier: str) -> str:
        """Quote table or column name properly based on database type."""
        if self.config.driver == "mysql":
            return "`" + identifier.replace("`", "``") + "`"
        return '"' + identifier.replace('"', '""') + '"'

    def __enter__(self):
        """Context manager entry."""
        self.connect()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Context manager exit."""
        self.close()
