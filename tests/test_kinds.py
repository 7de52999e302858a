import pytest

from gql_doc_catalog.parser.base import TypeKind
from gql_doc_catalog.parser.kinds import infer_kind


class TestInferKind:
    @pytest.mark.parametrize(
        "name, kind",
        [
            ("CreateTicketInput", TypeKind.INPUT_OBJECT),
            ("FooInput", TypeKind.INPUT_OBJECT),
            ("TicketStatusEnum", TypeKind.ENUM),
            ("STATUS", TypeKind.ENUM),
            ("String", TypeKind.SCALAR),
            ("Boolean", TypeKind.SCALAR),
            ("Ticket", TypeKind.OBJECT),
        ],
    )
    def test_naming_rules(self, name, kind):
        assert infer_kind(name) == kind

    def test_input_takes_precedence(self):
        assert infer_kind("STATUSInput") == TypeKind.INPUT_OBJECT

    def test_uppercase_scalars_read_as_enum(self):
        assert infer_kind("ID") == TypeKind.ENUM
        assert infer_kind("JSON") == TypeKind.ENUM

    def test_never_interface_or_union(self):
        for name in ("Node", "SearchResult", "ITEM", "Foo"):
            assert infer_kind(name) not in (TypeKind.INTERFACE, TypeKind.UNION)
