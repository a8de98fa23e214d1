"""Exceptions raised by the factory generator."""


class FactoryGeneratorError(Exception):
    """Base exception for factory generation."""
    pass


class UnknownConnectionError(FactoryGeneratorError):
    """The connection's database engine has no schema introspector."""
    pass


class TableNotFoundError(FactoryGeneratorError):
    """The requested table has no columns in the catalog."""
    pass


class ConfigurationError(FactoryGeneratorError):
    """Configuration loading or validation errors."""
    pass


class InvalidRequestError(FactoryGeneratorError):
    """Neither a table name nor the all-tables flag was given."""
    pass
