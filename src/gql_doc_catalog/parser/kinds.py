"""Infer a GraphQL type kind from its name."""

from gql_doc_catalog.parser.base import TypeKind

BUILTIN_SCALARS = {"String", "Int", "Float", "Boolean", "ID", "JSON"}


def infer_kind(type_name: str) -> TypeKind:
    """Classify a type by naming convention.

    Rules apply in order: ``*Input`` is an input object; ``*Enum`` or an
    all-uppercase name is an enum; a built-in scalar name is a scalar;
    anything else is an object. INTERFACE and UNION are never inferred.
    Note that "ID" and "JSON" are all-uppercase and so come out as ENUM.
    """
    if type_name.endswith("Input"):
        return TypeKind.INPUT_OBJECT
    if type_name.endswith("Enum") or type_name.upper() == type_name:
        return TypeKind.ENUM
    if type_name in BUILTIN_SCALARS:
        return TypeKind.SCALAR
    return TypeKind.OBJECT
