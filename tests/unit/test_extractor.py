import pytest
from review_parser.core.errors import MalformedField, MissingField, ParseFailure
from review_parser.fetch.extractor import extract
from review_parser.schemas import ParsingResult

class TestExtractor:
    """Unit tests for rating and review count extraction"""

    def test_extracts_both_fields(self, make_page):
        """Rating text and digits-only review count"""
        result = extract(make_page(rating="4.7", reviews="1,234 reviews"))
        assert result == ParsingResult(review_count=1234, rating=4.7)

    def test_rating_from_attribute_value(self, make_page):
        """Rating carried by the attribute itself when the element is empty"""
        html = make_page(rating=None).replace(
            "<h1>", '<div data-rating-typography="4.7"></div><h1>'
        )
        result = extract(html)
        assert result.rating == 4.7
        assert result.review_count == 1234

    def test_first_matching_element_wins(self, make_page):
        html = make_page(rating="3.9").replace(
            "</body>", '<p data-rating-typography="true">1.0</p></body>'
        )
        assert extract(html).rating == 3.9

    def test_review_count_class_order_does_not_matter(self):
        html = """
        <p data-rating-typography="true">4.1</p>
        <span class="styles_text__W4hWi extra typography_body-l__KUYFJ typography_appearance-subtle__8_H2l">
            Total 87
        </span>
        """
        assert extract(html).review_count == 87

    def test_partial_class_signature_is_not_a_match(self):
        html = """
        <p data-rating-typography="true">4.1</p>
        <span class="typography_body-l__KUYFJ">87 reviews</span>
        """
        with pytest.raises(MissingField) as exc_info:
            extract(html)
        assert exc_info.value.field == "reviewCount"

    def test_missing_rating(self, make_page):
        with pytest.raises(MissingField) as exc_info:
            extract(make_page(rating=None))
        assert exc_info.value.field == "rating"

    def test_missing_both_reports_rating_first(self, make_page):
        with pytest.raises(MissingField) as exc_info:
            extract(make_page(rating=None, reviews=None))
        assert exc_info.value.field == "rating"

    def test_missing_review_count(self, make_page):
        with pytest.raises(MissingField) as exc_info:
            extract(make_page(reviews=None))
        assert exc_info.value.field == "reviewCount"

    def test_malformed_rating(self, make_page):
        with pytest.raises(MalformedField) as exc_info:
            extract(make_page(rating="excellent"))
        assert exc_info.value.field == "rating"
        assert exc_info.value.raw_text == "excellent"

    def test_non_finite_rating_is_malformed(self, make_page):
        with pytest.raises(MalformedField):
            extract(make_page(rating="NaN"))

    @pytest.mark.parametrize("text", ["4_7", "infinity", "4,7", "4.7 stars", "1e999"])
    def test_rating_must_be_plain_decimal(self, make_page, text):
        with pytest.raises(MalformedField) as exc_info:
            extract(make_page(rating=text))
        assert exc_info.value.raw_text == text

    @pytest.mark.parametrize("text,rating", [("4", 4.0), (".5", 0.5), ("4.", 4.0), ("+3.5", 3.5), ("45e-1", 4.5)])
    def test_rating_decimal_forms(self, make_page, text, rating):
        assert extract(make_page(rating=text)).rating == rating

    def test_review_count_without_digits(self, make_page):
        with pytest.raises(MalformedField) as exc_info:
            extract(make_page(reviews="no reviews"))
        assert exc_info.value.field == "reviewCount"
        assert exc_info.value.raw_text == ""

    def test_empty_markup(self):
        with pytest.raises(MissingField):
            extract("")

    def test_failures_share_parse_failure_base(self, make_page):
        with pytest.raises(ParseFailure):
            extract(make_page(reviews="none"))

    def test_custom_targets(self):
        html = '<b data-score="true">2.5</b><i class="count big">12 opinions</i>'
        result = extract(html, rating_attribute="data-score", reviews_class="count big")
        assert result.rating == 2.5
        assert result.review_count == 12
