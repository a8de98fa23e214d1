"""Data models shared by the introspection, rendering and generation steps."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, model_validator

from .exceptions import InvalidRequestError, UnknownConnectionError


class EngineKind(Enum):
    """Database engines with a schema introspector."""
    MYSQL = "mysql"
    SQLITE = "sqlite"

    @classmethod
    def from_dialect(cls, dialect_name: str) -> "EngineKind":
        """Resolve the engine from a SQLAlchemy dialect name."""
        try:
            return cls(dialect_name)
        except ValueError:
            raise UnknownConnectionError(
                f"Unknown connection is set: no introspector for '{dialect_name}' databases."
            ) from None


class TableStatus(Enum):
    """Outcome of processing a single table."""
    CREATED = "created"
    SKIPPED = "skipped"


@dataclass(frozen=True)
class ColumnDescriptor:
    """A table column's name and raw declared type, e.g. ``varchar(255)``."""
    field: str
    type: str


@dataclass(frozen=True)
class RenderedArtifact:
    """Generated factory source and the path it is written to."""
    path: Path
    content: str


@dataclass
class TableResult:
    """Result of generating (or skipping) the factory for one table."""
    table: str
    factory_name: str
    path: Path
    status: TableStatus


class GenerationRequest(BaseModel):
    """Which connection and tables a generation run should cover."""

    connection: Optional[str] = Field(default=None, description="Named connection (None = default)")
    table: Optional[str] = Field(default=None, description="Single table to generate a factory for")
    generate_all: bool = Field(default=False, description="Generate factories for every table")

    @model_validator(mode="after")
    def check_table_selection(self):
        if not self.generate_all and not self.table:
            raise InvalidRequestError("Either a table name or --all is required.")
        return self
