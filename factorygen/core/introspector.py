"""Schema introspection: list tables and raw column types per database engine."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Type

from .database import DatabaseConnection
from .exceptions import TableNotFoundError
from .models import ColumnDescriptor, EngineKind


logger = logging.getLogger(__name__)


def _as_text(value) -> str:
    # MySQL 8 reports SHOW COLUMNS types as binary strings through some drivers
    if isinstance(value, (bytes, bytearray)):
        return value.decode("utf-8")
    return str(value)


class SchemaIntrospector(ABC):
    """Reads table names and column descriptors from a live connection."""

    def __init__(self, db_connection: DatabaseConnection):
        self.db_connection = db_connection

    @abstractmethod
    def fetch_tables(self) -> List[str]:
        """Return every user table, in the engine's catalog order."""

    def fetch_columns(self, table_name: str) -> List[ColumnDescriptor]:
        """Return the columns of ``table_name`` in ordinal position order."""
        columns = self._fetch_columns(table_name)
        if not columns:
            raise TableNotFoundError(f"Table {table_name} has no columns or does not exist.")
        logger.debug(f"Table {table_name}: {len(columns)} columns")
        return columns

    @abstractmethod
    def _fetch_columns(self, table_name: str) -> List[ColumnDescriptor]:
        ...


class MySqlIntrospector(SchemaIntrospector):
    """Introspects MySQL/MariaDB databases with SHOW statements."""

    def fetch_tables(self) -> List[str]:
        result = self.db_connection.execute_query("SHOW TABLES")
        return [_as_text(row[0]) for row in result]

    def _fetch_columns(self, table_name: str) -> List[ColumnDescriptor]:
        quoted_table = self.db_connection.quote_identifier(table_name)
        result = self.db_connection.execute_query(f"SHOW COLUMNS FROM {quoted_table}")
        # Field, Type, Null, Key, Default, Extra
        return [ColumnDescriptor(field=_as_text(row[0]), type=_as_text(row[1])) for row in result]


class SqliteIntrospector(SchemaIntrospector):
    """Introspects SQLite databases through sqlite_master and PRAGMA table_info."""

    def fetch_tables(self) -> List[str]:
        result = self.db_connection.execute_query(
            "SELECT name FROM sqlite_master WHERE type = 'table' AND name NOT LIKE 'sqlite_%'"
        )
        return [row[0] for row in result]

    def _fetch_columns(self, table_name: str) -> List[ColumnDescriptor]:
        quoted_table = self.db_connection.quote_identifier(table_name)
        result = self.db_connection.execute_query(f"PRAGMA table_info({quoted_table})")
        # cid, name, type, notnull, dflt_value, pk
        return [ColumnDescriptor(field=row[1], type=row[2]) for row in result]


INTROSPECTORS: Dict[EngineKind, Type[SchemaIntrospector]] = {
    EngineKind.MYSQL: MySqlIntrospector,
    EngineKind.SQLITE: SqliteIntrospector,
}


def create_introspector(db_connection: DatabaseConnection) -> SchemaIntrospector:
    """Build the introspector matching the connection's dialect.

    Raises :class:`UnknownConnectionError` for engines without an introspector.
    """
    engine_kind = EngineKind.from_dialect(db_connection.dialect_name)
    logger.debug(f"Using {engine_kind.value} schema introspector")
    return INTROSPECTORS[engine_kind](db_connection)
