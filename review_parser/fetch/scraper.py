import httpx
from datetime import datetime, timezone
from typing import Optional
from review_parser.core.config import settings
from review_parser.core.errors import FetchFailure
from review_parser.fetch.base import BaseFetcher, FetchResult

class HttpFetcher(BaseFetcher):
    """Fetch review pages over HTTP, one client per request."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
        follow_redirects: Optional[bool] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = settings.BASE_URL if base_url is None else base_url
        self.timeout = timeout or settings.REQUEST_TIMEOUT
        self.user_agent = user_agent or settings.USER_AGENT
        self.follow_redirects = settings.FOLLOW_REDIRECTS if follow_redirects is None else follow_redirects
        self._transport = transport

    def build_url(self, domain: str) -> str:
        return f"{self.base_url}{domain}"

    async def fetch(self, domain: str, timeout: Optional[float] = None) -> FetchResult:
        """
        GET the page for a domain.

        Any response, whatever its status, comes back as a FetchResult.
        Only a request that cannot complete raises, as FetchFailure.
        """
        url = self.build_url(domain)
        headers = {
            "User-Agent": self.user_agent,
            "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
            "Accept-Language": "en-US,en;q=0.7",
        }

        try:
            async with httpx.AsyncClient(
                timeout=timeout or self.timeout,
                headers=headers,
                follow_redirects=self.follow_redirects,
                transport=self._transport,
            ) as client:
                response = await client.get(url)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise FetchFailure(url, e) from e

        return FetchResult(
            url=url,
            status_code=response.status_code,
            html=response.text if response.content else None,
            fetched_at=datetime.now(timezone.utc).isoformat(timespec="seconds"),
        )
