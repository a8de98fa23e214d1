"""Tests for column type to fake-value expression mapping."""

import pytest

from factorygen.core.exceptions import ConfigurationError
from factorygen.core.value_mapper import (
    INTEGER_EXPRESSION, NOW_EXPRESSION, WORD_EXPRESSION,
    ValueExpressionMapper, map_type_to_expression, normalize_type
)


class TestNormalizeType:
    """Test family token extraction."""

    @pytest.mark.parametrize("raw_type, family", [
        ("varchar(255)", "varchar"),
        ("int(10) unsigned", "int"),
        ("int(10) unsigned zerofill", "int"),
        ("decimal(8,2)", "decimal"),
        ("text", "text"),
        ("  datetime  ", "datetime"),
        ("", ""),
    ])
    def test_family_token(self, raw_type, family):
        assert normalize_type(raw_type) == family


class TestMapTypeToExpression:
    """Test the built-in type families."""

    @pytest.mark.parametrize("raw_type", ["char(2)", "text", "varchar(255)", "varchar(10)"])
    def test_string_families(self, raw_type):
        assert map_type_to_expression(raw_type) == WORD_EXPRESSION

    @pytest.mark.parametrize("raw_type", ["int(11)", "int(10) unsigned", "bigint(20)", "tinyint(1)"])
    def test_integer_families(self, raw_type):
        assert map_type_to_expression(raw_type) == INTEGER_EXPRESSION
        assert "FuzzyInteger(0, 10)" in INTEGER_EXPRESSION

    def test_datetime(self):
        assert map_type_to_expression("datetime") == NOW_EXPRESSION

    def test_modifiers_do_not_change_expression(self):
        assert map_type_to_expression("varchar(255)") == map_type_to_expression("varchar(10)")
        assert map_type_to_expression("int(11)") == map_type_to_expression("int(3) unsigned")

    @pytest.mark.parametrize("raw_type", ["decimal(8,2)", "json", "", "VARCHAR(255)", "integer"])
    def test_unmapped_families(self, raw_type):
        assert map_type_to_expression(raw_type) is None


class TestValueExpressionMapper:
    """Test configurable type overrides."""

    def test_defaults_match_builtin_mapping(self):
        mapper = ValueExpressionMapper()

        assert mapper.map_type_to_expression("varchar(64)") == WORD_EXPRESSION
        assert mapper.map_type_to_expression("decimal(8,2)") is None

    def test_override_adds_family(self):
        mapper = ValueExpressionMapper({"decimal": "pydecimal", "date": "date_object"})

        assert mapper.map_type_to_expression("decimal(8,2)") == '_factory.Faker("pydecimal")'
        assert mapper.map_type_to_expression("date") == '_factory.Faker("date_object")'

    def test_override_cannot_replace_builtin(self):
        mapper = ValueExpressionMapper({"varchar": "email"})

        assert mapper.map_type_to_expression("varchar(255)") == WORD_EXPRESSION

    def test_unknown_provider(self):
        with pytest.raises(ConfigurationError, match="Unknown Faker provider 'not_a_provider'"):
            ValueExpressionMapper({"decimal": "not_a_provider"})

    def test_provider_must_be_identifier(self):
        with pytest.raises(ConfigurationError, match="Unknown Faker provider"):
            ValueExpressionMapper({"decimal": 'word") or ("'})
