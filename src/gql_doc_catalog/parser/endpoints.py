"""Endpoint map: region -> GraphQL endpoint URL."""

import logging

from gql_doc_catalog.parser.heuristics import find_endpoint_mentions
from gql_doc_catalog.parser.tree import DocumentTree

logger = logging.getLogger(__name__)

ENDPOINT_CONTAINER_SELECTOR = "p, div, code"


def parse_endpoints(tree: DocumentTree, defaults: dict[str, str]) -> dict[str, str]:
    """Start from *defaults* and override any region the page mentions explicitly."""
    endpoints = dict(defaults)
    for node in tree.find(tree.root, ENDPOINT_CONTAINER_SELECTOR):
        for region, url in find_endpoint_mentions(tree.text_of(node)):
            if endpoints.get(region) != url:
                logger.debug("Endpoint for %s taken from page: %s", region, url)
            endpoints[region] = url
    return endpoints
