"""Renders factory source files from the factory stub."""

import keyword
import logging
from pathlib import Path
from typing import Collection, List, Optional, Sequence, Union

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound

from .models import ColumnDescriptor, RenderedArtifact
from .naming import singular
from .value_mapper import ValueExpressionMapper


logger = logging.getLogger(__name__)

STUB_PATH = Path(__file__).resolve().parent.parent / "stubs" / "factory.py.j2"
INDENT = " " * 4
RESERVED_NAMES = frozenset({
    "Meta", "Params",
    # factory_boy classmethods
    "attributes", "build", "build_batch", "create", "create_batch", "declarations",
    "generate", "generate_batch", "reset_sequence", "simple_generate",
    "simple_generate_batch", "stub", "stub_batch",
})


class TemplateRenderer:
    """Fills the factory stub's ``namespace``, ``class_name`` and ``columns`` slots."""

    def __init__(self, mapper: Optional[ValueExpressionMapper] = None,
                 stub_path: Union[str, Path] = STUB_PATH):
        self.mapper = mapper or ValueExpressionMapper()
        self.stub_path = Path(stub_path)
        self._environment = Environment(
            loader=FileSystemLoader(str(self.stub_path.parent)),
            undefined=StrictUndefined,
            keep_trailing_newline=True,
            autoescape=False,
        )

    def render(self, namespace: str, model_name: str, columns: Sequence[ColumnDescriptor],
               ignored_fields: Collection[str] = ()) -> str:
        """Return the factory source for ``model_name``."""
        try:
            template = self._environment.get_template(self.stub_path.name)
        except TemplateNotFound:
            raise FileNotFoundError(f"Factory stub not found: {self.stub_path}") from None

        return template.render(
            namespace=namespace,
            class_name=singular(model_name),
            columns=self.build_column_lines(model_name, columns, ignored_fields),
        )

    @staticmethod
    def is_attribute_name(field: str) -> bool:
        """Whether ``field`` can be declared in the factory class body.

        ``Meta``, ``Params``, factory_boy classmethods and underscore names (used by the
        stub's imports) are reserved.
        """
        if not field.isidentifier() or keyword.iskeyword(field):
            return False
        return field not in RESERVED_NAMES and not field.startswith("_")

    def build_column_lines(self, model_name: str, columns: Sequence[ColumnDescriptor],
                           ignored_fields: Collection[str] = ()) -> str:
        """One ``<field> = <expression>`` line per usable column, in column order."""
        lines: List[str] = []

        for column in columns:
            if column.field in ignored_fields:
                continue

            if not self.is_attribute_name(column.field):
                logger.warning(f"{model_name}: skipping column '{column.field}', "
                               f"not a valid Python attribute name")
                continue

            expression = self.mapper.map_type_to_expression(column.type)
            if expression is None:
                logger.warning(f"{model_name}: skipping column '{column.field}', "
                               f"no fake value for type '{column.type}'")
                continue

            lines.append(f"{INDENT}{column.field} = {expression}")

        return "\n".join(lines)

    def build_artifact(self, path: Path, namespace: str, model_name: str,
                       columns: Sequence[ColumnDescriptor],
                       ignored_fields: Collection[str] = ()) -> RenderedArtifact:
        return RenderedArtifact(path=path, content=self.render(namespace, model_name, columns, ignored_fields))
