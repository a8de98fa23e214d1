"""
factorygen - Generate factory_boy factories from live database schemas.

This package provides tools to:
- Introspect tables and column types of MySQL and SQLite databases
- Map column types to fake-value declarations
- Write one factory module per table, never overwriting existing files
"""

__version__ = "1.0.0"

from factorygen.core.database import DatabaseConnection, DatabaseConfig
from factorygen.core.introspector import create_introspector
from factorygen.core.renderer import TemplateRenderer
from factorygen.core.generator import FactoryGenerator

__all__ = [
    "DatabaseConnection",
    "DatabaseConfig",
    "create_introspector",
    "TemplateRenderer",
    "FactoryGenerator",
]
