"""
Tests for kwparser.match product matching.
"""

from kwparser.classify import Parser, Prefixes, Keywords
from kwparser.match import match_products, is_match


class TestMatchProducts:
    """Tests for match_products()."""

    def test_match_products_when_negative_present_then_excluded(self):
        # Arrange
        products = ["MyProduct Adult", "MyProduct Youth"]
        keywords = Parser("+myproduct,-youth", Prefixes(positive="+", negative="-")).parse()

        # Act
        matches = match_products(products, keywords)

        # Assert
        assert matches == ["MyProduct Adult"]

    def test_match_products_keeps_candidate_order(self, sample_products):
        keywords = Parser("-youth,+hoodie,+hat").parse()

        matches = match_products(sample_products, keywords)

        assert matches == ["Blurple Hoodie", "Wumpus Hat"]

    def test_match_products_when_no_positive_then_empty(self, sample_products):
        keywords = Keywords(positive=[], negative=[], other=["hoodie"])

        assert match_products(sample_products, keywords) == []

    def test_match_products_when_only_negative_then_empty(self, sample_products):
        keywords = Parser("-youth").parse()

        assert match_products(sample_products, keywords) == []

    def test_match_products_when_no_candidates_then_empty(self):
        keywords = Parser("+foo").parse()

        assert match_products([], keywords) == []

    def test_match_products_is_case_insensitive(self):
        products = ["BLURPLE HOODIE", "blurple hoodie", "Youth HOODIE"]
        keywords = Keywords(positive=["HoOdIe"], negative=["YOUTH"])

        assert match_products(products, keywords) == ["BLURPLE HOODIE", "blurple hoodie"]

    def test_match_products_uses_substring_containment(self):
        keywords = Keywords(positive=["hat"])

        assert match_products(["Chatbot", "Hat"], keywords) == ["Chatbot", "Hat"]

    def test_match_products_keeps_duplicates(self):
        keywords = Keywords(positive=["tee"])

        assert match_products(["Tee", "Tee"], keywords) == ["Tee", "Tee"]

    def test_match_products_when_retained_prefix_then_prefix_must_appear(self):
        parser = Parser("+tee")
        parser.should_retain_prefix(True)
        keywords = parser.parse()

        assert match_products(["Blue Tee", "Size +Tee"], keywords) == ["Size +Tee"]


class TestIsMatch:
    """Tests for is_match()."""

    def test_is_match_when_positive_and_negative_then_false(self):
        keywords = Keywords(positive=["tee"], negative=["youth"])

        assert is_match("Blue Tee - Youth", keywords) is False

    def test_is_match_when_positive_only_then_true(self):
        keywords = Keywords(positive=["tee"], negative=["youth"])

        assert is_match("Blue Tee", keywords) is True


class TestParserMatchProducts:
    """Tests for Parser.match_products()."""

    def test_models_shared_between_packages(self):
        from kwparser import models
        from kwparser.classify import parser as parser_module
        from kwparser.match import products as products_module

        assert parser_module.Keywords is models.Keywords
        assert products_module.Keywords is models.Keywords
        assert parser_module.match_products is products_module.match_products

    def test_match_products_with_keywords(self):
        products = ["MyProduct Adult", "MyProduct Youth"]
        parser = Parser("+myproduct,-youth")
        keywords = parser.parse()

        assert parser.match_products(products, keywords) == ["MyProduct Adult"]

    def test_match_products_without_keywords_parses_input(self, sample_products):
        parser = Parser("-youth,+tee")

        assert parser.match_products(sample_products) == []

        parser = Parser("+tee")

        assert parser.match_products(sample_products) == ["Youth Tee", "Blue Tee - Youth"]
