"""Textual heuristics for recovering structure from the reference page.

The page has no formal grammar. Each marker the extractors look for is a
separate predicate here.
"""

import re

SECTION_TAG = "h2"
ENTRY_TAG = "h3"
# Headings that close a section's entry sequence.
SECTION_BOUNDARY_TAGS = ("h1", "h2")
# Headings that close a single entry.
ENTRY_BOUNDARY_TAGS = ("h1", "h2", "h3")
CODE_TAGS = ("pre", "code")
TABLE_TAG = "table"
PARAGRAPH_TAG = "p"

# "ticketId - ID!" / "tickets - [Ticket!]!"
FIELD_CELL_RE = re.compile(r"^([a-zA-Z_][a-zA-Z0-9_]*)\s*-\s*(.+)$")
RETURNS_RE = re.compile(r"returns?\s+an?\s+([A-Za-z0-9_]+)", re.IGNORECASE)
DEPRECATED_RE = re.compile(r"^deprecated\b", re.IGNORECASE)
# The gap before the URL may not run into another region's "data center".
ENDPOINT_RE = re.compile(
    r"\b(US|EU)\s+data\s+center(?:(?!data\s+center).)*?(https?://[^\s\"'<>]+)",
    re.IGNORECASE,
)


def _has(text: str, word: str) -> bool:
    return word in text.lower()


def is_description_marker(text: str) -> bool:
    return text.lower().startswith("description")


def is_return_hint(text: str) -> bool:
    return _has(text, "response") or _has(text, "returns")


def match_return_type(text: str) -> str | None:
    match = RETURNS_RE.search(text)
    return match.group(1) if match else None


def is_arguments_marker(text: str) -> bool:
    return _has(text, "arguments")


def is_fields_marker(text: str) -> bool:
    return _has(text, "fields") or _has(text, "values")


def is_example_marker(text: str) -> bool:
    return _has(text, "example")


def example_label(text: str) -> str | None:
    """Classify an example sub-label as ``query``, ``variables`` or ``response``."""
    # "Query Variables" labels the variables block, so "query" is tried last.
    for label in ("variables", "response", "query"):
        if _has(text, label):
            return label
    return None


def is_deprecated(text: str | None) -> bool:
    return bool(text) and DEPRECATED_RE.match(text.strip()) is not None


def split_field_cell(text: str) -> tuple[str, str] | None:
    """Split a ``name - type`` cell; None when the cell does not follow it."""
    match = FIELD_CELL_RE.match(text)
    if not match:
        return None
    return match.group(1), match.group(2).strip()


def find_endpoint_mentions(text: str) -> list[tuple[str, str]]:
    """Return ``(region, url)`` pairs for "US data center ... https://..." mentions."""
    return [(region.lower(), url.rstrip(".,;)")) for region, url in ENDPOINT_RE.findall(text)]
