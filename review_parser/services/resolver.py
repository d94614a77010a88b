from typing import Callable, Optional
from review_parser.cache.memory import ExpiringCache
from review_parser.core.errors import DomainNotFound, FetchFailure, ParseFailure
from review_parser.fetch.base import BaseFetcher, StatusCategory
from review_parser.fetch.extractor import extract
from review_parser.schemas import CacheStats, ParsingResult

class Resolver:
    """
    Cache-aside lookup of review data for a domain.

    The check-miss-fetch-store sequence is not atomic: two concurrent calls
    for the same absent domain may both fetch, and the last one to finish
    wins the cache slot.
    """

    def __init__(
        self,
        fetcher: BaseFetcher,
        cache: ExpiringCache[ParsingResult],
        extractor: Callable[[str], ParsingResult] = extract,
    ):
        self.fetcher = fetcher
        self.cache = cache
        self.extractor = extractor

    async def resolve(self, domain: str, timeout: Optional[float] = None) -> ParsingResult:
        """
        Return review data for a domain, from cache when possible.

        1. Cache hit -> return it (refreshes the entry's expiry clock)
        2. Miss -> fetch page -> extract -> cache -> return

        Raises:
            DomainNotFound: the page answered with a non-success status
            FetchFailure: the request could not complete
            ParseFailure: the page lacks a field or holds a malformed one
        """
        if not domain:
            raise ValueError("domain must be a non-empty string")

        cached = self.cache.get(domain)
        if cached is not None:
            print(f"CACHE HIT for {domain}")
            return cached

        print(f"FETCHING {domain}...")
        try:
            response = await self.fetcher.fetch(domain, timeout=timeout)
        except FetchFailure as e:
            print(f"ERROR fetching {domain}: {e}")
            raise

        print(f"CHECKING RESPONSE for {domain}: status {response.status_code}")
        if response.category is not StatusCategory.SUCCESS:
            print(f"DOMAIN NOT FOUND: {domain}")
            raise DomainNotFound(domain, status=response.status_code)

        try:
            result = self.extractor(response.html or "")
        except ParseFailure as e:
            print(f"ERROR parsing {domain}: {e}")
            raise

        self.cache.put(domain, result)
        print(f"CACHED RESULT for {domain}: {result}")
        return result

    def invalidate(self, domain: str) -> bool:
        return self.cache.invalidate(domain)

    def stats(self) -> CacheStats:
        self.cache.purge_expired()
        return self.cache.stats()
