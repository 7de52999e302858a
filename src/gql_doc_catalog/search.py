"""Case-insensitive substring search over a Catalog."""

from enum import Enum

from pydantic import BaseModel, ConfigDict

from gql_doc_catalog.parser.base import Catalog, GraphQLOperation, GraphQLType


class SearchScope(str, Enum):
    ALL = "all"
    QUERIES = "queries"
    MUTATIONS = "mutations"
    TYPES = "types"


class SearchMatch(BaseModel):
    """One hit: its category (query / mutation / type) and the record itself."""

    model_config = ConfigDict(frozen=True)

    category: str
    item: GraphQLOperation | GraphQLType

    @property
    def name(self) -> str:
        return self.item.name


def _contains(text: str | None, needle: str) -> bool:
    return bool(text) and needle in text.lower()


def operation_matches(operation: GraphQLOperation, needle: str) -> bool:
    """*needle* must already be lowercased."""
    if _contains(operation.name, needle) or _contains(operation.description, needle):
        return True
    for arg in operation.arguments or []:
        if _contains(arg.name, needle) or _contains(arg.type, needle) or _contains(arg.description, needle):
            return True
    return _contains(operation.return_type, needle)


def type_matches(type_def: GraphQLType, needle: str) -> bool:
    """*needle* must already be lowercased."""
    if _contains(type_def.name, needle) or _contains(type_def.description, needle):
        return True
    for field in type_def.fields or []:
        if _contains(field.name, needle) or _contains(field.type, needle) or _contains(field.description, needle):
            return True
    return any(
        _contains(value.name, needle) or _contains(value.description, needle)
        for value in type_def.enum_values or []
    )


def search_operations(query: str, operations: dict[str, GraphQLOperation]) -> list[GraphQLOperation]:
    needle = query.lower()
    return [op for op in operations.values() if operation_matches(op, needle)]


def search_types(query: str, types: dict[str, GraphQLType]) -> list[GraphQLType]:
    needle = query.lower()
    return [t for t in types.values() if type_matches(t, needle)]


def search(query: str, catalog: Catalog, scope: SearchScope | str = SearchScope.ALL) -> list[SearchMatch]:
    """Find catalog records mentioning *query*, in catalog order.

    Queries come first, then mutations, then types. Raises ValueError for
    an unknown scope.
    """
    scope = SearchScope(scope)
    matches = []
    if scope in (SearchScope.ALL, SearchScope.QUERIES):
        matches += [SearchMatch(category="query", item=op) for op in search_operations(query, catalog.queries)]
    if scope in (SearchScope.ALL, SearchScope.MUTATIONS):
        matches += [SearchMatch(category="mutation", item=op) for op in search_operations(query, catalog.mutations)]
    if scope in (SearchScope.ALL, SearchScope.TYPES):
        matches += [SearchMatch(category="type", item=t) for t in search_types(query, catalog.types)]
    return matches
