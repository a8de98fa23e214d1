"""Maps raw column types to factory_boy declarations producing fake values."""

import logging
from typing import Dict, Optional

from faker import Faker

from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)

WORD_EXPRESSION = '_factory.Faker("word")'
INTEGER_EXPRESSION = "_fuzzy.FuzzyInteger(0, 10)"
NOW_EXPRESSION = "_factory.LazyFunction(_datetime.datetime.now)"

TYPE_EXPRESSIONS: Dict[str, str] = {
    "char": WORD_EXPRESSION,
    "text": WORD_EXPRESSION,
    "varchar": WORD_EXPRESSION,
    "int": INTEGER_EXPRESSION,
    "bigint": INTEGER_EXPRESSION,
    "tinyint": INTEGER_EXPRESSION,
    "datetime": NOW_EXPRESSION,
}


def normalize_type(raw_type: str) -> str:
    """Reduce a raw column type to its family token.

    ``"int(10) unsigned"`` -> ``"int"``, ``"varchar(255)"`` -> ``"varchar"``.
    """
    tokens = raw_type.split()
    if not tokens:
        return ""
    return tokens[0].split("(", 1)[0]


class ValueExpressionMapper:
    """Turns type families into source expressions for generated factories.

    ``type_overrides`` adds families on top of the built-in ones, each mapped to
    a Faker provider name (``{"decimal": "pydecimal"}``).
    """

    def __init__(self, type_overrides: Optional[Dict[str, str]] = None):
        self.expressions = dict(TYPE_EXPRESSIONS)
        if type_overrides:
            faker = Faker()
            for family, provider in type_overrides.items():
                if family in TYPE_EXPRESSIONS:
                    logger.warning(f"Ignoring override for built-in type family '{family}'")
                    continue
                if not provider.isidentifier() or not hasattr(faker, provider):
                    raise ConfigurationError(f"Unknown Faker provider '{provider}' for type family '{family}'")
                self.expressions[family] = f'_factory.Faker("{provider}")'

    def map_type_to_expression(self, raw_type: str) -> Optional[str]:
        """Return the fake-value expression for ``raw_type``, or None if its family is unmapped."""
        return self.expressions.get(normalize_type(raw_type))


def map_type_to_expression(raw_type: str) -> Optional[str]:
    """Map ``raw_type`` using only the built-in families."""
    return TYPE_EXPRESSIONS.get(normalize_type(raw_type))
