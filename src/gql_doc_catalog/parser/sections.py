"""Section scanner: locate Queries / Mutations / Types and their entries."""

import logging
from collections.abc import Iterator
from typing import Any

from gql_doc_catalog.parser.heuristics import ENTRY_TAG, SECTION_BOUNDARY_TAGS, SECTION_TAG
from gql_doc_catalog.parser.tree import DocumentTree

logger = logging.getLogger(__name__)


def find_section(tree: DocumentTree, title: str) -> Any | None:
    """Return the first section heading whose trimmed text equals *title*, ignoring case."""
    wanted = title.strip().lower()
    for heading in tree.find(tree.root, SECTION_TAG):
        if tree.text_of(heading).lower() == wanted:
            return heading
    logger.debug("Section %r not found", title)
    return None


def iter_entries(tree: DocumentTree, start: Any | None) -> Iterator[Any]:
    """Yield the entry headings that follow *start*, up to the next section heading."""
    if start is None:
        return
    node = tree.next(start)
    while node is not None and not tree.is_tag(node, *SECTION_BOUNDARY_TAGS):
        if tree.is_tag(node, ENTRY_TAG):
            yield node
        node = tree.next(node)
