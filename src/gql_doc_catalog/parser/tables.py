"""Argument, field and enum-value tables."""

import logging
from collections.abc import Iterator
from typing import Any

from gql_doc_catalog.parser.base import EnumValue, GraphQLArgument, GraphQLField
from gql_doc_catalog.parser.heuristics import is_deprecated, split_field_cell
from gql_doc_catalog.parser.tree import DocumentTree

logger = logging.getLogger(__name__)


def _body_rows(tree: DocumentTree, table: Any) -> list[Any]:
    rows = tree.find(table, "tbody tr")
    if not rows:
        # html.parser does not invent a <tbody>; header rows have only <th>.
        rows = tree.find(table, "tr")
    return rows


def _iter_cells(tree: DocumentTree, table: Any, min_cells: int) -> Iterator[list[str]]:
    for row in _body_rows(tree, table):
        cells = [tree.text_of(cell) for cell in tree.find(row, "td")]
        if len(cells) >= min_cells:
            yield cells


def _iter_field_data(tree: DocumentTree, table: Any) -> Iterator[dict]:
    for cells in _iter_cells(tree, table, min_cells=2):
        parts = split_field_cell(cells[0])
        if parts is None:
            logger.debug("Skipping table row %r: not in 'name - type' form", cells[0])
            continue
        name, type_sig = parts
        description = cells[1]
        data = {"name": name, "type": type_sig, "description": description}
        if is_deprecated(description):
            data["deprecated"] = True
        yield data


def parse_field_table(tree: DocumentTree, table: Any) -> list[GraphQLField]:
    """Parse a fields table. Rows not in ``name - type`` form are dropped."""
    return [GraphQLField(**data) for data in _iter_field_data(tree, table)]


def parse_argument_table(tree: DocumentTree, table: Any) -> list[GraphQLArgument]:
    """Parse an arguments table; same row format as a fields table."""
    return [GraphQLArgument(**data) for data in _iter_field_data(tree, table)]


def parse_enum_table(tree: DocumentTree, table: Any) -> list[EnumValue]:
    """Parse an enum table. Only the first cell (the value name) is required."""
    values = []
    for cells in _iter_cells(tree, table, min_cells=1):
        name = cells[0]
        if not name:
            continue
        description = cells[1] if len(cells) > 1 else None
        values.append(
            EnumValue(
                name=name,
                description=description,
                deprecated=True if is_deprecated(description) else None,
            )
        )
    return values
