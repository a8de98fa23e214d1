"""Command-line interface for factorygen."""

import click
import logging
import sys
from pathlib import Path
from typing import Optional

from factorygen.core.config import (
    DEFAULT_CONFIG_NAME, ConfigRepository, Settings, resolve_connection_config
)
from factorygen.core.database import DatabaseConnection
from factorygen.core.generator import FactoryGenerator
from factorygen.core.models import EngineKind, GenerationRequest


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class ConsoleReporter:
    """Writes per-table outcomes to standard output."""

    def info(self, message: str) -> None:
        click.secho(message, fg="green")

    def error(self, message: str) -> None:
        click.secho(message, fg="red")


def load_config(config_path: Optional[str], base_path: Path) -> ConfigRepository:
    """Load the given config file, else ``factorygen.yaml`` in the project root if present."""
    if config_path:
        return ConfigRepository.from_file(config_path)

    default_path = base_path / DEFAULT_CONFIG_NAME
    if default_path.exists():
        return ConfigRepository.from_file(default_path)

    logger.debug(f"No {DEFAULT_CONFIG_NAME} found in {base_path}")
    return ConfigRepository()


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--quiet', '-q', is_flag=True, help='Suppress non-error output')
def cli(verbose: bool, quiet: bool):
    """factorygen - Generate factory_boy factories from database tables."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    elif quiet:
        logging.getLogger().setLevel(logging.ERROR)


@cli.command(name='generate:factory')
@click.argument('name', required=False)
@click.argument('connection', required=False)
@click.option('--all', 'generate_all', is_flag=True, help='Generate factories for every table')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help=f'Configuration file (JSON/YAML), default: {DEFAULT_CONFIG_NAME} in the base path')
@click.option('--base-path', default='.', type=click.Path(file_okay=False),
              help='Project root; factories are written to <base-path>/database/factories')
def generate_factory(name: Optional[str], connection: Optional[str], generate_all: bool,
                     config_path: Optional[str], base_path: str):
    """Generate a factory for table NAME (or every table with --all).

    CONNECTION names a configured database connection and defaults to
    database.default.
    """
    # `generate:factory --all mysql` names the connection, not a table
    if generate_all and name and not connection:
        name, connection = None, name

    try:
        request = GenerationRequest(connection=connection, table=name, generate_all=generate_all)
        base = Path(base_path).resolve()

        config = load_config(config_path, base)
        settings = Settings.from_repository(config)
        db_config = resolve_connection_config(config, request.connection, base)
        # unsupported engines fail before their driver is needed
        EngineKind.from_dialect(db_config.driver)

        with DatabaseConnection(db_config) as db_conn:
            generator = FactoryGenerator(db_conn, settings, base, ConsoleReporter())
            results = generator.run(request)

        logger.debug(f"Processed {len(results)} tables")

    except Exception as e:
        click.echo(f"\n❌ Error: {e}", err=True)
        sys.exit(1)


def main():
    """Main entry point for the CLI."""
    cli()


if __name__ == '__main__':
    main()
