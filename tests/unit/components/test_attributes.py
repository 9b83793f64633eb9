"""
Unit tests for the attribute sub-parser.
"""

import pytest
from bracketdom.attributes import parse_attributes
from bracketdom.errors import MarkupSyntaxError


class TestValidHeaders:
    def test_empty_header(self):
        assert parse_attributes("") == {}

    def test_single_pair(self):
        assert parse_attributes(' url="https://example.com"') == {"url": "https://example.com"}

    def test_two_pairs(self):
        assert parse_attributes(' k1="v1" k2="v2"') == {"k1": "v1", "k2": "v2"}

    def test_single_quotes(self):
        assert parse_attributes(" a='1'") == {"a": "1"}

    def test_other_quote_kept_verbatim(self):
        assert parse_attributes(""" a='say "hi"' b="it's\"""") == {"a": 'say "hi"', "b": "it's"}

    def test_keys_lowercased(self):
        assert parse_attributes(' Target="_blank"') == {"target": "_blank"}

    def test_whitespace_around_equals(self):
        assert parse_attributes(' a = "1"\t b\n=\n"2"') == {"a": "1", "b": "2"}

    def test_extra_leading_whitespace(self):
        assert parse_attributes('   a="1"') == {"a": "1"}

    def test_empty_value(self):
        assert parse_attributes(' a=""') == {"a": ""}

    def test_value_may_contain_spaces_and_brackets(self):
        assert parse_attributes(' title="a [b] c"') == {"title": "a [b] c"}

    def test_unicode_key_and_value(self):
        assert parse_attributes(' attr="значение" ключ="x"') == {"attr": "значение", "ключ": "x"}


class TestDuplicateKeys:
    def test_last_value_wins(self):
        assert parse_attributes(' a="1" a="2"') == {"a": "2"}

    def test_case_insensitive_duplicates(self):
        assert parse_attributes(' URL="one" target="_blank" url="two"') == {
            "url": "two",
            "target": "_blank",
        }


class TestMalformedHeaders:
    def test_missing_separating_whitespace(self):
        with pytest.raises(MarkupSyntaxError, match="Whitespace expected"):
            parse_attributes(' a="1"b="2"')

    def test_header_must_start_with_whitespace(self):
        with pytest.raises(MarkupSyntaxError, match="Whitespace expected"):
            parse_attributes('a="1"')

    def test_invalid_key_character(self):
        with pytest.raises(MarkupSyntaxError, match="Invalid character"):
            parse_attributes(' a!="1"')

    def test_missing_equals(self):
        with pytest.raises(MarkupSyntaxError, match="'=' expected"):
            parse_attributes(' a "1"')

    def test_bare_key(self):
        with pytest.raises(MarkupSyntaxError, match="'=' expected"):
            parse_attributes(" disabled")

    def test_missing_quote(self):
        with pytest.raises(MarkupSyntaxError, match="Quotation mark expected"):
            parse_attributes(" a=1")

    def test_nothing_after_equals(self):
        with pytest.raises(MarkupSyntaxError, match="Quotation mark expected"):
            parse_attributes(" a=")

    def test_unclosed_quote(self):
        with pytest.raises(MarkupSyntaxError, match="Unclosed quotation mark"):
            parse_attributes(' attr="value')

    def test_mismatched_quotes(self):
        with pytest.raises(MarkupSyntaxError, match="Unclosed quotation mark"):
            parse_attributes(""" a="1'""")

    def test_empty_key(self):
        with pytest.raises(MarkupSyntaxError, match="Attribute name expected"):
            parse_attributes(' ="1"')

    def test_trailing_whitespace_is_rejected(self):
        with pytest.raises(MarkupSyntaxError, match="Attribute name expected"):
            parse_attributes(' a="1" ')


class TestErrorPositions:
    def test_position_relative_to_base(self):
        with pytest.raises(MarkupSyntaxError) as info:
            parse_attributes(' a="1"b="2"', base=10)
        # 'b' sits at header index 6
        assert info.value.position == 16

    def test_unclosed_quote_points_at_opening_quote(self):
        with pytest.raises(MarkupSyntaxError) as info:
            parse_attributes(' attr="value', base=4)
        assert info.value.position == 4 + 6
