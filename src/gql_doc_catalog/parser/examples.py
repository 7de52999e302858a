"""Example extractor: the query / variables / response blocks of an entry."""

import json
import logging
from typing import Any

from gql_doc_catalog.parser.base import Example
from gql_doc_catalog.parser.heuristics import CODE_TAGS, ENTRY_BOUNDARY_TAGS, example_label
from gql_doc_catalog.parser.tree import DocumentTree

logger = logging.getLogger(__name__)


def decode_json_or_text(text: str) -> Any:
    """Decode *text* as JSON, falling back to the text itself."""
    try:
        return json.loads(text)
    except (json.JSONDecodeError, ValueError):
        logger.debug("Example block is not JSON, keeping raw text")
        return text


def extract_example(tree: DocumentTree, marker: Any) -> Example:
    """Collect the labelled code blocks that follow an "Example" marker.

    A label node (any non-code node mentioning query, variables or
    response) contributes the code block immediately after it. The first
    block found for each label wins. Scanning stops at the next entry or
    section heading.
    """
    found: dict[str, Any] = {}
    node = tree.next(marker)
    while node is not None and not tree.is_tag(node, *ENTRY_BOUNDARY_TAGS):
        following = tree.next(node)
        if not tree.is_tag(node, *CODE_TAGS) and tree.is_tag(following, *CODE_TAGS):
            # Variables and response labels are matched before query; the first block per label is kept.
            label = example_label(tree.text_of(node))
            if label is not None and label not in found:
                block = tree.text_of(following)
                found[label] = block if label == "query" else decode_json_or_text(block)
                if len(found) == 3:
                    break
        node = following
    return Example(**found)
