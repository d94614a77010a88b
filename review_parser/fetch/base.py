from dataclasses import dataclass
from enum import Enum
from typing import Optional

class StatusCategory(str, Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    FAILURE = "failure"

@dataclass(frozen=True)
class FetchResult:
    url: str
    status_code: int
    html: Optional[str]
    fetched_at: str  # ISO 8601

    @property
    def category(self) -> StatusCategory:
        if 200 <= self.status_code < 300:
            return StatusCategory.SUCCESS
        if self.status_code in (404, 410):
            return StatusCategory.NOT_FOUND
        return StatusCategory.FAILURE

class BaseFetcher:
    async def fetch(self, domain: str, timeout: Optional[float] = None) -> FetchResult:
        raise NotImplementedError
