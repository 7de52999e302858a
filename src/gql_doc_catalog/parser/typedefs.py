"""Type extractor: one GraphQL type per entry heading."""

import logging
from typing import Any

from gql_doc_catalog.parser.base import GraphQLType, TypeKind
from gql_doc_catalog.parser.heuristics import is_fields_marker
from gql_doc_catalog.parser.kinds import infer_kind
from gql_doc_catalog.parser.operations import extract_description, find_marked_table
from gql_doc_catalog.parser.tables import parse_enum_table, parse_field_table
from gql_doc_catalog.parser.tree import DocumentTree

logger = logging.getLogger(__name__)


def extract_type(tree: DocumentTree, heading: Any) -> GraphQLType | None:
    """Build a type from the nodes following its entry heading.

    ENUM types get ``enum_values``; every other kind gets ``fields``.
    Either list is empty when the entry has no table.
    """
    name = tree.text_of(heading)
    if not name:
        logger.debug("Skipping type entry with an empty heading")
        return None

    kind = infer_kind(name)
    description, cursor = extract_description(tree, heading)
    table = find_marked_table(tree, cursor, is_fields_marker)

    if kind == TypeKind.ENUM:
        enum_values = parse_enum_table(tree, table) if table is not None else []
        return GraphQLType(name=name, kind=kind, description=description, enum_values=enum_values)

    fields = parse_field_table(tree, table) if table is not None else []
    return GraphQLType(name=name, kind=kind, description=description, fields=fields)
