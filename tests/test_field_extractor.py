"""Tests for per-field extraction and fallbacks."""

import pytest
from bs4 import BeautifulSoup

from heatpump_monitor.core import field_extractor as fx

from conftest import SAMPLE_CARD


def card(html):
    return BeautifulSoup(html, "html.parser").div


class TestFieldsFromCompleteCard:

    @pytest.fixture
    def fragment(self):
        return card(SAMPLE_CARD)

    def test_model(self, fragment):
        assert fx.extract_model(fragment) == "Model XYZ123"

    def test_product_code_strips_parentheses(self, fragment):
        assert fx.extract_product_code(fragment) == "ABC123"

    def test_price_is_cleaned_text(self, fragment):
        assert fx.extract_price(fragment) == "2999.99"

    def test_features_in_document_order(self, fragment):
        assert fx.extract_features(fragment) == ["Feature 1", "Feature 2", "10 Year Guarantee"]

    def test_rating_from_title(self, fragment):
        assert fx.extract_rating(fragment) == 4.0

    def test_review_count(self, fragment):
        assert fx.extract_review_count(fragment) == 15

    def test_energy_marker_present(self, fragment):
        assert fx.is_energy_efficient(fragment) is True


class TestFallbacks:

    @pytest.fixture
    def empty(self):
        return card("<div class='x1__pJ'></div>")

    def test_missing_text_fields_default_to_empty(self, empty):
        assert fx.extract_model(empty) == ""
        assert fx.extract_product_code(empty) == ""
        assert fx.extract_price(empty) == ""

    def test_missing_features(self, empty):
        assert fx.extract_features(empty) == []

    def test_missing_rating_node(self, empty):
        assert fx.extract_rating(empty) == 0.0

    def test_rating_without_title(self):
        assert fx.extract_rating(card("<div><div class='vQBT0O'></div></div>")) == 0.0

    def test_rating_without_number(self):
        fragment = card("<div><div class='vQBT0O' title='No rating yet'></div></div>")
        assert fx.extract_rating(fragment) == 0.0

    def test_review_count_not_a_number(self):
        fragment = card("<div><span aria-hidden='true'>(lots)</span></div>")
        assert fx.extract_review_count(fragment) == 0

    def test_missing_review_count(self, empty):
        assert fx.extract_review_count(empty) == 0

    def test_no_energy_marker(self, empty):
        assert fx.is_energy_efficient(empty) is False

    def test_blank_feature_items_dropped(self):
        fragment = card("<div><ul class='z_Eq10'><li> A </li><li>  </li><li>A</li></ul></div>")
        assert fx.extract_features(fragment) == ["A", "A"]


class TestHelpers:

    def test_strip_wrapping_removes_one_pair(self):
        assert fx.strip_wrapping("((15))") == "(15)"
        assert fx.strip_wrapping("15") == "15"

    def test_guarantee_first_match(self):
        features = ["Quiet", "5 Year Guarantee", "7 Year Guarantee"]
        assert fx.extract_guarantee(features) == "5 Year Guarantee"

    def test_guarantee_default(self):
        assert fx.extract_guarantee(["Quiet"]) == "Not specified"
        assert fx.extract_guarantee([]) == "Not specified"

    def test_guarantee_is_case_sensitive(self):
        assert fx.extract_guarantee(["10 year guarantee"]) == "Not specified"
