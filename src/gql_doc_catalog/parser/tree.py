"""Tree navigation adapter.

Extractors walk the reference page only through the ``DocumentTree``
interface below; ``SoupTree`` implements it on top of BeautifulSoup.
"""

from typing import Any, Protocol

from bs4 import BeautifulSoup, ParserRejectedMarkup, Tag

from gql_doc_catalog.errors import MalformedDocument


class DocumentTree(Protocol):
    """Read-only view over a parsed document."""

    @property
    def root(self) -> Any: ...

    def tag_of(self, node: Any) -> str: ...

    def text_of(self, node: Any) -> str: ...

    def next(self, node: Any) -> Any | None: ...

    def find(self, node: Any, selector: str) -> list[Any]: ...

    def is_tag(self, node: Any, *names: str) -> bool: ...


class SoupTree:
    """``DocumentTree`` backed by a BeautifulSoup document."""

    def __init__(self, soup: BeautifulSoup):
        self._soup = soup

    @property
    def root(self) -> BeautifulSoup:
        return self._soup

    def tag_of(self, node: Tag) -> str:
        return (node.name or "").lower()

    def text_of(self, node: Tag) -> str:
        return node.get_text().strip()

    def next(self, node: Tag) -> Tag | None:
        # Element siblings only; bare text between tags is not a node here.
        return node.find_next_sibling()

    def find(self, node: Tag, selector: str) -> list[Tag]:
        return list(node.select(selector))

    def is_tag(self, node: Tag | None, *names: str) -> bool:
        return node is not None and self.tag_of(node) in names


def load_document(html: str | bytes) -> SoupTree:
    """Build a tree from already-retrieved HTML.

    Raises MalformedDocument when the input cannot become a tree at all.
    Markup that merely lacks the expected structure is not an error.
    """
    if not isinstance(html, (str, bytes)):
        raise MalformedDocument(
            f"Expected HTML text, got {type(html).__name__}"
        )
    try:
        soup = BeautifulSoup(html, "html.parser")
    except (ParserRejectedMarkup, UnicodeDecodeError) as e:
        raise MalformedDocument(f"Cannot build a document tree: {e}") from e
    return SoupTree(soup)
