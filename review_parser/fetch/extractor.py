"""
Extraction of the rating and review count from a review page.

Both targets are tied to the markup of one external page template and are
read from settings, so they can follow upstream markup changes without
touching the resolver.
"""
import math
import re
from typing import Optional

from bs4 import BeautifulSoup, Tag

from review_parser.core.config import settings
from review_parser.core.errors import MalformedField, MissingField
from review_parser.schemas import ParsingResult

RATING_FIELD = "rating"
REVIEW_COUNT_FIELD = "reviewCount"

_NON_DIGITS = re.compile(r"[^0-9]")
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")

def extract(
    markup: str,
    rating_attribute: Optional[str] = None,
    reviews_class: Optional[str] = None,
) -> ParsingResult:
    """
    Parse markup into a ParsingResult.

    Rating is looked up first, so when both fields are missing the rating
    failure is the one reported.

    Raises:
        MissingField: no element matches an extraction target
        MalformedField: the element text is not a valid number
    """
    soup = BeautifulSoup(markup or "", "html.parser")
    rating = _extract_rating(soup, rating_attribute or settings.RATING_ATTRIBUTE)
    review_count = _extract_review_count(soup, reviews_class or settings.REVIEWS_COUNT_CLASS)
    return ParsingResult(review_count=review_count, rating=rating)

def _extract_rating(soup: BeautifulSoup, attribute: str) -> float:
    element = soup.find(attrs={attribute: True})
    if element is None:
        raise MissingField(RATING_FIELD)

    text = element.get_text(strip=True)
    if not text:
        # Some templates carry the score in the attribute itself
        value = element.get(attribute)
        text = value.strip() if isinstance(value, str) else ""

    # float() alone would also take "4_7", "nan" or "infinity"
    if not _DECIMAL.fullmatch(text):
        raise MalformedField(RATING_FIELD, text)
    rating = float(text)
    if not math.isfinite(rating):
        raise MalformedField(RATING_FIELD, text)
    return rating

def _extract_review_count(soup: BeautifulSoup, class_signature: str) -> int:
    wanted = set(class_signature.split())

    def matches(tag: Tag) -> bool:
        return bool(wanted) and wanted.issubset(tag.get("class") or [])

    element = soup.find(matches)
    if element is None:
        raise MissingField(REVIEW_COUNT_FIELD)

    digits = _NON_DIGITS.sub("", element.get_text())
    if not digits:
        raise MalformedField(REVIEW_COUNT_FIELD, digits)
    return int(digits)
