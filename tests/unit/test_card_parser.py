"""
Unit tests for card parsing and reduction.
"""

import pytest

from card_autonumber.core.errors import CardParseError, CardReductionError
from card_autonumber.parsing import extract_card_blocks, parse_card
from card_autonumber.parsing.card_parser import decode_string, parse_value, split_arguments


def parse_one(text: str):
    blocks = extract_card_blocks(text)
    assert len(blocks) == 1
    return parse_card(blocks[0])


class TestParseCard:
    """Tests for turning a block into a CardRecord"""

    def test_parses_all_fields(self, card_factory):
        text = "prefix\n" + card_factory("2401010800", q="What is 2+2?", a="4", deck="Math::Basics")
        record = parse_one(text)

        assert record.identifier == "2401010800"
        assert record.deck == "Math::Basics"
        assert record.question == "What is 2+2?"
        assert record.answer == "4"
        assert record.source_span == (len("prefix\n"), len(text))
        assert record.is_empty is False

    def test_empty_id(self):
        record = parse_one('#card(id: "", q: [Q], a: [A])')
        assert record.identifier == ""

    def test_deck_is_optional(self):
        record = parse_one('#card(id: "250601", q: [Q], a: [A])')
        assert record.deck == ""

    def test_string_question(self):
        record = parse_one('#card(id: "", q: "In \\"quotes\\"", a: [A])')
        assert record.question == 'In "quotes"'

    def test_expression_answer_is_kept_raw(self):
        record = parse_one('#card(id: "", q: [Q], a: [x] + [y])')
        assert record.answer == "[x] + [y]"

    def test_trailing_comma_and_comments(self):
        text = (
            "#card(\n"
            "  // the card id\n"
            '  id: "2401010800", /* deck */ target-deck: "D",\n'
            "  q: [Q], // question\n"
            "  a: [A],\n"
            ")"
        )
        record = parse_one(text)

        assert record.identifier == "2401010800"
        assert record.deck == "D"
        assert record.question == "Q"
        assert record.answer == "A"

    def test_card_without_content_is_empty(self):
        assert parse_one('#card(id: "")').is_empty
        assert parse_one('#card(id: "", q: [  ], a: [])').is_empty

    def test_missing_id_is_an_error(self):
        with pytest.raises(CardParseError, match="no 'id'"):
            parse_one("#card(q: [Q], a: [A])")

    def test_non_string_id_is_an_error(self):
        with pytest.raises(CardParseError, match="string literal"):
            parse_one("#card(id: 2401010800, q: [Q], a: [A])")

    def test_positional_argument_is_an_error(self):
        with pytest.raises(CardParseError, match="named argument"):
            parse_one('#card("x", id: "")')

    def test_duplicate_argument_is_an_error(self):
        with pytest.raises(CardParseError, match="duplicate"):
            parse_one('#card(id: "", id: "1")')

    def test_unterminated_block_is_an_error(self):
        with pytest.raises(CardParseError, match="unterminated") as exc_info:
            parse_one('#card(id: "", q: [Q]')
        assert exc_info.value.offset == 0


class TestToBarebones:
    """Tests for reducing a card to its question/answer form"""

    def test_complete_card_reduces(self):
        barebones = parse_one('#card(id: "1", target-deck: "D", q: [Q], a: [A])').to_barebones()
        assert (barebones.identifier, barebones.deck, barebones.question, barebones.answer) == ("1", "D", "Q", "A")

    def test_question_without_answer_fails(self):
        with pytest.raises(CardReductionError, match="no answer"):
            parse_one('#card(id: "", q: [Q])').to_barebones()

    def test_answer_without_question_fails(self):
        with pytest.raises(CardReductionError, match="no question"):
            parse_one('#card(id: "", a: [A])').to_barebones()


class TestHelpers:
    """Tests for argument splitting and value decoding"""

    def test_split_arguments_respects_nesting(self):
        parts = [p for p, _ in split_arguments('id: "a,b", q: [x, y], a: f(1, 2),')]
        assert [p.strip() for p in parts] == ['id: "a,b"', "q: [x, y]", "a: f(1, 2)"]

    def test_decode_string_escapes(self):
        assert decode_string(r'"a\\b\"c\nd\u{1F600}"') == 'a\\b"c\nd\U0001F600'

    def test_parse_value_kinds(self):
        assert parse_value(' "x" ') == ("string", "x")
        assert parse_value(" [x] ") == ("content", "x")
        assert parse_value(" 1 + 2 ") == ("expression", "1 + 2")
