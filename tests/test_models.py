"""Tests for data models."""

import dataclasses

import pytest

from factorygen.core.exceptions import InvalidRequestError, UnknownConnectionError
from factorygen.core.models import ColumnDescriptor, EngineKind, GenerationRequest


class TestEngineKind:
    """Test engine resolution from dialect names."""

    def test_known_dialects(self):
        assert EngineKind.from_dialect("mysql") is EngineKind.MYSQL
        assert EngineKind.from_dialect("sqlite") is EngineKind.SQLITE

    def test_unknown_dialect(self):
        with pytest.raises(UnknownConnectionError, match="postgresql"):
            EngineKind.from_dialect("postgresql")


class TestGenerationRequest:
    """Test table selection validation."""

    def test_single_table(self):
        request = GenerationRequest(table="users")

        assert request.table == "users"
        assert request.generate_all is False
        assert request.connection is None

    def test_all_tables(self):
        request = GenerationRequest(generate_all=True, connection="mysql")

        assert request.generate_all is True
        assert request.connection == "mysql"

    @pytest.mark.parametrize("table", [None, ""])
    def test_requires_table_or_all(self, table):
        with pytest.raises(InvalidRequestError, match="Either a table name or --all"):
            GenerationRequest(table=table)


def test_column_descriptor_is_immutable():
    column = ColumnDescriptor(field="id", type="int(11)")

    with pytest.raises(dataclasses.FrozenInstanceError):
        column.field = "other"
