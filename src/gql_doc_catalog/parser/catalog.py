"""Documentation parser: turn a GraphQL API reference page into a Catalog."""

import logging

from gql_doc_catalog.parser.base import Catalog, GraphQLOperation, GraphQLType, OperationKind
from gql_doc_catalog.parser.endpoints import parse_endpoints
from gql_doc_catalog.parser.operations import extract_operation
from gql_doc_catalog.parser.sections import find_section, iter_entries
from gql_doc_catalog.parser.tree import DocumentTree, load_document
from gql_doc_catalog.parser.typedefs import extract_type
from gql_doc_catalog.settings import ParserSettings

logger = logging.getLogger(__name__)


class CatalogBuilder:
    """Accumulates records by name during one pass, then freezes them into a Catalog.

    A repeated name replaces the earlier record but keeps its position.
    """

    def __init__(self):
        self.endpoints: dict[str, str] = {}
        self.queries: dict[str, GraphQLOperation] = {}
        self.mutations: dict[str, GraphQLOperation] = {}
        self.types: dict[str, GraphQLType] = {}

    def add_operation(self, operation: GraphQLOperation) -> None:
        target = self.queries if operation.kind == OperationKind.QUERY else self.mutations
        self._put(target, operation.name, operation, operation.kind)

    def add_type(self, type_def: GraphQLType) -> None:
        self._put(self.types, type_def.name, type_def, "type")

    def _put(self, target: dict, name: str, record, category: str) -> None:
        if name in target:
            logger.warning("Duplicate %s %r overwrites an earlier entry", category, name)
        target[name] = record

    def build(self) -> Catalog:
        return Catalog(
            endpoints=self.endpoints,
            queries=self.queries,
            mutations=self.mutations,
            types=self.types,
        )


class DocumentationParser:
    """Parses one reference page snapshot.

    Each call to ``parse_all`` walks the tree afresh and returns a new
    Catalog; nothing is shared between calls.
    """

    def __init__(self, html: str | bytes, settings: ParserSettings | None = None):
        self.settings = settings or ParserSettings()
        self.tree: DocumentTree = load_document(html)

    def parse_all(self) -> Catalog:
        builder = CatalogBuilder()
        builder.endpoints = parse_endpoints(self.tree, self.settings.default_endpoints)

        titles = self.settings.section_titles
        for kind, section in ((OperationKind.QUERY, "queries"), (OperationKind.MUTATION, "mutations")):
            start = find_section(self.tree, titles[section])
            for heading in iter_entries(self.tree, start):
                operation = extract_operation(self.tree, heading, kind)
                if operation is not None:
                    builder.add_operation(operation)

        start = find_section(self.tree, titles["types"])
        for heading in iter_entries(self.tree, start):
            type_def = extract_type(self.tree, heading)
            if type_def is not None:
                builder.add_type(type_def)

        catalog = builder.build()
        summary = catalog.summary
        logger.info(
            "Parsed %d queries, %d mutations, %d types",
            summary.total_queries,
            summary.total_mutations,
            summary.total_types,
        )
        return catalog


def parse_document(html: str | bytes, settings: ParserSettings | None = None) -> Catalog:
    """Parse an already-retrieved reference page into a Catalog."""
    return DocumentationParser(html, settings).parse_all()
