"""Operation extractor: one query or mutation per entry heading."""

import logging
from collections.abc import Callable, Iterator
from typing import Any

from gql_doc_catalog.parser.base import Example, GraphQLArgument, GraphQLOperation, OperationKind
from gql_doc_catalog.parser.examples import extract_example
from gql_doc_catalog.parser.heuristics import (
    CODE_TAGS,
    ENTRY_BOUNDARY_TAGS,
    PARAGRAPH_TAG,
    TABLE_TAG,
    is_arguments_marker,
    is_deprecated,
    is_description_marker,
    is_example_marker,
    is_return_hint,
    match_return_type,
)
from gql_doc_catalog.parser.tables import parse_argument_table
from gql_doc_catalog.parser.tree import DocumentTree

logger = logging.getLogger(__name__)


def iter_entry_nodes(tree: DocumentTree, start: Any | None) -> Iterator[Any]:
    """Yield *start* and its following siblings up to the next heading."""
    node = start
    while node is not None and not tree.is_tag(node, *ENTRY_BOUNDARY_TAGS):
        yield node
        node = tree.next(node)


def is_label_node(tree: DocumentTree, node: Any) -> bool:
    """Prose nodes only; tables and code blocks never act as markers."""
    return not tree.is_tag(node, TABLE_TAG, *CODE_TAGS)


def extract_description(tree: DocumentTree, heading: Any) -> tuple[str | None, Any | None]:
    """Read the optional "Description" marker paragraph and the paragraph after it.

    Returns the description (or None) and the node where scanning resumes.
    """
    node = tree.next(heading)
    if tree.is_tag(node, PARAGRAPH_TAG) and is_description_marker(tree.text_of(node)):
        node = tree.next(node)
        if tree.is_tag(node, PARAGRAPH_TAG):
            return tree.text_of(node), tree.next(node)
    return None, node


def find_marked_table(
    tree: DocumentTree, cursor: Any | None, is_marker: Callable[[str], bool]
) -> Any | None:
    """Return whichever comes first: a table, or the table right after a marker node.

    The scan runs forward from *cursor* and stops at the next heading.
    """
    for node in iter_entry_nodes(tree, cursor):
        if tree.is_tag(node, TABLE_TAG):
            return node
        if is_label_node(tree, node) and is_marker(tree.text_of(node)):
            following = tree.next(node)
            if tree.is_tag(following, TABLE_TAG):
                return following
    return None


def _scan_return_type(tree: DocumentTree, cursor: Any | None) -> tuple[str | None, Any | None]:
    for node in iter_entry_nodes(tree, cursor):
        if not is_label_node(tree, node):
            continue
        text = tree.text_of(node)
        if is_return_hint(text):
            return_type = match_return_type(text)
            if return_type:
                return return_type, tree.next(node)
    return None, cursor


def _scan_arguments(
    tree: DocumentTree, cursor: Any | None
) -> tuple[list[GraphQLArgument] | None, Any | None]:
    table = find_marked_table(tree, cursor, is_arguments_marker)
    if table is None:
        return None, cursor
    return parse_argument_table(tree, table), tree.next(table)


def _scan_example(tree: DocumentTree, cursor: Any | None) -> Example | None:
    for node in iter_entry_nodes(tree, cursor):
        if is_label_node(tree, node) and is_example_marker(tree.text_of(node)):
            return extract_example(tree, node)
    return None


def extract_operation(
    tree: DocumentTree, heading: Any, kind: OperationKind | str
) -> GraphQLOperation | None:
    """Build an operation from the nodes following its entry heading.

    The return-type, arguments and example scans share one cursor: each
    resumes where the previous one matched, and a scan that finds nothing
    leaves the cursor where it was. All scans stop at the next heading.
    """
    name = tree.text_of(heading)
    if not name:
        logger.debug("Skipping %s entry with an empty heading", kind)
        return None

    description, cursor = extract_description(tree, heading)
    return_type, cursor = _scan_return_type(tree, cursor)
    arguments, cursor = _scan_arguments(tree, cursor)
    example = _scan_example(tree, cursor)

    return GraphQLOperation(
        name=name,
        kind=kind,
        description=description,
        arguments=arguments,
        return_type=return_type,
        example=example,
        deprecated=True if is_deprecated(description) else None,
    )
