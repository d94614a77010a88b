import pytest
from datetime import timedelta
from unittest.mock import AsyncMock
from review_parser.cache.memory import ExpiringCache
from review_parser.core.config import settings
from review_parser.fetch.base import BaseFetcher, FetchResult
from review_parser.services.resolver import Resolver

def review_page(rating="4.7", reviews="1,234 reviews") -> str:
    """Build a minimal review page; pass None to leave a field out"""
    parts = ["<html><body>", "<h1>Example Inc.</h1>"]
    if rating is not None:
        parts.append(f'<p class="score" data-rating-typography="true">{rating}</p>')
    if reviews is not None:
        parts.append(f'<span class="{settings.REVIEWS_COUNT_CLASS}">{reviews}</span>')
    parts.append("</body></html>")
    return "\n".join(parts)

class FakeClock:
    """Manually advanced replacement for time.monotonic"""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds

def fetch_result(status_code=200, html=None, domain="example.com") -> FetchResult:
    return FetchResult(
        url=f"https://reviews.test/{domain}",
        status_code=status_code,
        html=html,
        fetched_at="2026-01-01T00:00:00+00:00",
    )

@pytest.fixture
def clock():
    return FakeClock()

@pytest.fixture
def cache(clock):
    return ExpiringCache(max_size=10, expire_after=timedelta(days=1), timer=clock)

@pytest.fixture
def fetcher():
    """Fetcher double answering 200 with a valid review page by default"""
    mock = AsyncMock(spec=BaseFetcher)
    mock.fetch.return_value = fetch_result(html=review_page())
    return mock

@pytest.fixture
def resolver(fetcher, cache):
    return Resolver(fetcher, cache)

@pytest.fixture
def make_page():
    return review_page

@pytest.fixture
def make_result():
    return fetch_result
