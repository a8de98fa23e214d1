"""Factory generation: introspect tables and write one factory file per table."""

import logging
from pathlib import Path
from typing import List, Optional, Union

from .config import Settings
from .database import DatabaseConnection
from .introspector import SchemaIntrospector, create_introspector
from .models import GenerationRequest, TableResult, TableStatus
from .naming import factory_name as build_factory_name, model_name as build_model_name
from .renderer import TemplateRenderer
from .value_mapper import ValueExpressionMapper


logger = logging.getLogger(__name__)

FACTORY_DIRECTORY = Path("database") / "factories"
FACTORY_EXTENSION = ".py"


class LogReporter:
    """Reports per-table outcomes through logging."""

    def info(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.error(message)


class FactoryGenerator:
    """Generates factory files for the tables of one database connection.

    Existing factory files are never overwritten; they are reported and skipped.
    """

    def __init__(self, db_connection: DatabaseConnection, settings: Optional[Settings] = None,
                 base_path: Union[str, Path] = ".", reporter=None,
                 renderer: Optional[TemplateRenderer] = None):
        self.db_connection = db_connection
        self.settings = settings or Settings()
        self.base_path = Path(base_path)
        self.reporter = reporter or LogReporter()
        self.renderer = renderer or TemplateRenderer(ValueExpressionMapper(self.settings.type_overrides))

    def run(self, request: GenerationRequest) -> List[TableResult]:
        """Generate factories for the table (or all tables) named by ``request``."""
        introspector = create_introspector(self.db_connection)

        if request.generate_all:
            tables = introspector.fetch_tables()
            logger.info(f"Generating factories for {len(tables)} tables: {tables}")
            return [self.generate_table(introspector, table) for table in tables]

        return [self.generate_table(introspector, request.table)]

    def get_path(self, factory_name: str) -> Path:
        return self.base_path / FACTORY_DIRECTORY / f"{factory_name}{FACTORY_EXTENSION}"

    def generate_table(self, introspector: SchemaIntrospector, table: str) -> TableResult:
        """Write the factory for ``table`` unless its file already exists."""
        model_name = build_model_name(table)
        factory_name = build_factory_name(table)
        path = self.get_path(factory_name)

        if path.exists():
            self.reporter.error(f"{factory_name} already exists!")
            return TableResult(table=table, factory_name=factory_name, path=path, status=TableStatus.SKIPPED)

        columns = introspector.fetch_columns(table)
        artifact = self.renderer.build_artifact(
            path,
            self.settings.namespace_model,
            model_name,
            columns,
            set(self.settings.ignored_columns),
        )

        artifact.path.parent.mkdir(parents=True, exist_ok=True)
        artifact.path.write_text(artifact.content, encoding="utf-8")
        logger.info(f"Wrote {artifact.path}")

        self.reporter.info(f"{factory_name} created successfully.")
        return TableResult(table=table, factory_name=factory_name, path=path, status=TableStatus.CREATED)
