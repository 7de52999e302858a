from gql_doc_catalog.parser.base import OperationKind
from gql_doc_catalog.parser.operations import extract_description, extract_operation
from gql_doc_catalog.parser.tree import load_document


def _operation(html: str, kind=OperationKind.QUERY):
    tree = load_document(html)
    heading = tree.find(tree.root, "h3")[0]
    return extract_operation(tree, heading, kind)


ARGS_TABLE = "<table><tbody><tr><td>ticketId - ID!</td><td>Unique identifier</td></tr></tbody></table>"


class TestExtractDescription:
    def test_marker_then_paragraph(self):
        tree = load_document("<h3>op</h3><p>Description</p><p>Does things</p><table></table>")
        description, cursor = extract_description(tree, tree.find(tree.root, "h3")[0])
        assert description == "Does things"
        assert tree.tag_of(cursor) == "table"

    def test_paragraph_without_marker_is_not_a_description(self):
        tree = load_document("<h3>op</h3><p>Does things</p>")
        description, cursor = extract_description(tree, tree.find(tree.root, "h3")[0])
        assert description is None
        assert tree.text_of(cursor) == "Does things"


class TestExtractOperation:
    def test_scenario_single_argument(self):
        op = _operation(
            "<h2>Queries</h2><h3>getTicket</h3><p>Description</p><p>Fetch a single ticket</p>" + ARGS_TABLE
        )
        assert op.model_dump(mode="json", by_alias=True, exclude_none=True) == {
            "name": "getTicket",
            "kind": "query",
            "description": "Fetch a single ticket",
            "arguments": [
                {"name": "ticketId", "type": "ID!", "required": True, "description": "Unique identifier"}
            ],
        }

    def test_return_type(self):
        op = _operation("<h3>getAsset</h3><p>This query returns an Asset</p>")
        assert op.return_type == "Asset"

    def test_response_hint_without_sentence_keeps_cursor(self):
        op = _operation("<h3>getAsset</h3><p>Response</p>" + ARGS_TABLE)
        assert op.return_type is None
        assert [a.name for a in op.arguments] == ["ticketId"]

    def test_returns_sentence_in_table_is_not_a_return_type(self):
        op = _operation(
            "<h3>getAsset</h3>"
            "<table><tbody><tr><td>assetId - ID!</td><td>Returns a record</td></tr></tbody></table>"
        )
        assert op.return_type is None
        assert op.arguments[0].name == "assetId"

    def test_first_table_wins_and_example_still_found(self):
        op = _operation(
            "<h3>getAsset</h3>"
            "<table><tbody><tr><td>assetId - ID!</td><td>Asset identifier</td></tr></tbody></table>"
            "<p>Example</p><p>Query</p><pre>query { getAsset }</pre>"
            "<p>Arguments used above</p>"
            "<table><tbody><tr><td>other - String</td><td>x</td></tr></tbody></table>"
        )
        assert [a.name for a in op.arguments] == ["assetId"]
        assert op.example.query == "query { getAsset }"

    def test_marker_table_used_when_reached_first(self):
        op = _operation("<h3>getAsset</h3><p>Arguments</p>" + ARGS_TABLE)
        assert [a.name for a in op.arguments] == ["ticketId"]

    def test_return_sentence_after_table_moves_cursor_past_it(self):
        op = _operation("<h3>getAsset</h3>" + ARGS_TABLE + "<p>Returns an Asset</p>")
        assert op.return_type == "Asset"
        assert op.arguments is None

    def test_no_table_means_no_arguments(self):
        op = _operation("<h3>getAsset</h3><p>Nothing here</p>")
        assert op.arguments is None

    def test_scans_stop_at_next_entry(self):
        op = _operation("<h3>first</h3><h3>second</h3><p>Returns a Thing</p>" + ARGS_TABLE)
        assert op.return_type is None
        assert op.arguments is None
        assert op.example is None

    def test_example(self):
        op = _operation(
            "<h3>createTicket</h3>" + ARGS_TABLE +
            "<p>Example</p><p>Query</p><pre>mutation { createTicket }</pre>",
            OperationKind.MUTATION,
        )
        assert op.kind == "mutation"
        assert op.example.query == "mutation { createTicket }"
        assert op.example.variables is None

    def test_deprecated_description(self):
        op = _operation("<h3>old</h3><p>Description</p><p>Deprecated: use new</p>")
        assert op.deprecated is True

    def test_empty_heading_produces_nothing(self):
        assert _operation("<h3>   </h3><p>Description</p><p>x</p>") is None
