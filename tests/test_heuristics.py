from gql_doc_catalog.parser.heuristics import (
    example_label,
    find_endpoint_mentions,
    is_deprecated,
    is_description_marker,
    match_return_type,
    split_field_cell,
)


class TestHeuristics:
    def test_description_marker(self):
        assert is_description_marker("Description")
        assert is_description_marker("description:")
        assert not is_description_marker("No description")

    def test_return_type(self):
        assert match_return_type("Returns a Ticket") == "Ticket"
        assert match_return_type("This call returns an AssetList object") == "AssetList"
        assert match_return_type("Response") is None

    def test_example_label(self):
        assert example_label("Query") == "query"
        assert example_label("Query Variables") == "variables"
        assert example_label("Sample response") == "response"
        assert example_label("Notes") is None

    def test_split_field_cell(self):
        assert split_field_cell("tickets - [Ticket!]!") == ("tickets", "[Ticket!]!")
        assert split_field_cell("ticket id - ID") is None

    def test_is_deprecated(self):
        assert is_deprecated("  Deprecated: use v2")
        assert not is_deprecated("Lists non-deprecated assets")
        assert not is_deprecated(None)

    def test_endpoint_mentions(self):
        text = "For the EU data center use https://eu.example.test/msp."
        assert find_endpoint_mentions(text) == [("eu", "https://eu.example.test/msp")]

    def test_endpoint_mention_does_not_cross_regions(self):
        text = "Use the US data center or the EU data center: https://euapi.superops.ai/msp"
        assert find_endpoint_mentions(text) == [("eu", "https://euapi.superops.ai/msp")]

    def test_endpoint_mentions_for_both_regions(self):
        text = "US data center: https://us.example.test/msp, EU data center: https://eu.example.test/msp"
        assert find_endpoint_mentions(text) == [
            ("us", "https://us.example.test/msp"),
            ("eu", "https://eu.example.test/msp"),
        ]
