"""Test configuration and fixtures for factorygen tests."""

import pytest
import sqlite3
from unittest.mock import Mock

from factorygen.core.database import DatabaseConnection, DatabaseConfig
from factorygen.core.models import ColumnDescriptor


@pytest.fixture
def temp_db_file(tmp_path):
    """Create a SQLite database with ``users`` and ``posts`` tables."""
    path = tmp_path / "app.sqlite"
    conn = sqlite3.connect(str(path))
    conn.executescript("""
        CREATE TABLE users (
            id int(11) NOT NULL,
            name varchar(255) NOT NULL,
            created_at datetime
        );
        CREATE TABLE posts (
            id bigint NOT NULL,
            user_id int unsigned NOT NULL,
            title varchar(100),
            body text,
            rating decimal(3,1)
        );
    """)
    conn.commit()
    conn.close()
    return path


@pytest.fixture
def sqlite_connection(temp_db_file):
    """A connected DatabaseConnection to the temporary SQLite database."""
    db_conn = DatabaseConnection(DatabaseConfig(driver="sqlite", database=str(temp_db_file)))
    db_conn.connect()
    yield db_conn
    db_conn.close()


@pytest.fixture
def mock_db_connection():
    """Create a mock MySQL database connection for testing."""
    connection = Mock(spec=DatabaseConnection)
    connection.config = DatabaseConfig(
        driver="mysql",
        host="localhost",
        port=3306,
        database="test_db",
        username="test_user",
        password="test_pass",
    )
    connection.dialect_name = "mysql"
    connection.quote_identifier.side_effect = lambda name: f"`{name}`"
    return connection


@pytest.fixture
def users_columns():
    """Columns of the ``users`` table."""
    return [
        ColumnDescriptor(field="id", type="int(11)"),
        ColumnDescriptor(field="name", type="varchar(255)"),
        ColumnDescriptor(field="created_at", type="datetime"),
    ]


@pytest.fixture
def reporter():
    """Records per-table messages."""
    return Mock(spec=["info", "error"])
