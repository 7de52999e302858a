"""Unified data models for a parsed GraphQL API reference.

The documentation parser converts the reference page into these
models. Every model is frozen, sequences are tuples and the catalog's
name-keyed collections are read-only mappings: a catalog is built once
per parse and never mutated afterwards. Example payloads keep the
decoded JSON as is.
"""

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

IDENTIFIER_PATTERN = r"^[A-Za-z_][A-Za-z0-9_]*$"


class OperationKind(str, Enum):
    QUERY = "query"
    MUTATION = "mutation"


class TypeKind(str, Enum):
    OBJECT = "OBJECT"
    INPUT_OBJECT = "INPUT_OBJECT"
    ENUM = "ENUM"
    SCALAR = "SCALAR"
    INTERFACE = "INTERFACE"
    UNION = "UNION"


class _Model(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=True,
    )


class GraphQLField(_Model):
    """A named, typed member of a type, read from one table row."""

    name: str = Field(pattern=IDENTIFIER_PATTERN)
    type: str  # raw signature, e.g. "ID!" or "[Ticket!]!"
    description: str | None = None
    deprecated: bool | None = None

    @computed_field
    @property
    def required(self) -> bool:
        return "!" in self.type


class GraphQLArgument(GraphQLField):
    """An operation argument."""

    default_value: str | None = None


class EnumValue(_Model):
    name: str = Field(min_length=1)
    description: str | None = None
    deprecated: bool | None = None


class Example(_Model):
    """A worked example: the query text plus optional variables and response.

    ``variables`` and ``response`` hold decoded JSON when the code block
    was valid JSON, otherwise the raw block text.
    """

    query: str = ""
    variables: Any = None
    response: Any = None


class GraphQLOperation(_Model):
    """A query or mutation."""

    name: str = Field(min_length=1)
    kind: OperationKind
    description: str | None = None
    arguments: tuple[GraphQLArgument, ...] | None = None
    return_type: str | None = None
    example: Example | None = None
    deprecated: bool | None = None


class GraphQLType(_Model):
    """A GraphQL type.

    ``enum_values`` is populated for ENUM types only; ``fields`` for every
    other kind. ``interfaces`` and ``possible_types`` are always empty:
    the reference page carries nothing to fill them from.
    """

    name: str = Field(min_length=1)
    kind: TypeKind
    description: str | None = None
    fields: tuple[GraphQLField, ...] | None = None
    enum_values: tuple[EnumValue, ...] | None = None
    interfaces: tuple[str, ...] = ()
    possible_types: tuple[str, ...] = ()


class CatalogSummary(_Model):
    total_queries: int = 0
    total_mutations: int = 0
    total_types: int = 0


class Catalog(_Model):
    """The complete result of one parse.

    Mappings keep first-insertion order of names. A fresh parse yields
    a fresh catalog; there is no incremental update.
    """

    model_config = ConfigDict(validate_default=True)

    endpoints: Mapping[str, str] = {}
    queries: Mapping[str, GraphQLOperation] = {}
    mutations: Mapping[str, GraphQLOperation] = {}
    types: Mapping[str, GraphQLType] = {}

    @field_validator("endpoints", "queries", "mutations", "types")
    @classmethod
    def freeze_mapping(cls, value: Mapping) -> Mapping:
        return MappingProxyType(dict(value))

    @field_serializer("endpoints", "queries", "mutations", "types", mode="wrap")
    def dump_mapping(self, value: Mapping, handler):
        return handler(dict(value))

    @computed_field
    @property
    def summary(self) -> CatalogSummary:
        return CatalogSummary(
            total_queries=len(self.queries),
            total_mutations=len(self.mutations),
            total_types=len(self.types),
        )

    def get_operation(self, name: str, kind: OperationKind | str) -> GraphQLOperation | None:
        """Look up a query or mutation by exact name."""
        if OperationKind(kind) is OperationKind.QUERY:
            return self.queries.get(name)
        return self.mutations.get(name)

    def get_type(self, name: str) -> GraphQLType | None:
        return self.types.get(name)
