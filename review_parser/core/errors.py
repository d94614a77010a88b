"""
Error taxonomy for the fetch/parse pipeline.

Every failure is raised as a distinct exception and never coerced into a
default value. The API layer maps each one to an HTTP status through
``status_code``.
"""
from typing import Optional

import httpx


class ReviewParserError(Exception):
    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DomainNotFound(ReviewParserError):
    """The fetch target answered with a non-success status."""

    status_code = 404
    MESSAGE = "Domain is not found"

    def __init__(self, domain: str, status: Optional[int] = None):
        super().__init__(self.MESSAGE)
        self.domain = domain
        self.status = status

    def __repr__(self) -> str:
        return f"DomainNotFound({self.domain!r})"


class FetchFailure(ReviewParserError):
    """The request could not complete: connection error, timeout, bad URL."""

    def __init__(self, url: str, cause: Exception):
        super().__init__(f"Failed to fetch {url}: {cause}")
        self.url = url
        self.cause = cause

    @property
    def is_timeout(self) -> bool:
        return isinstance(self.cause, httpx.TimeoutException)

    @property
    def status_code(self) -> int:
        return 504 if self.is_timeout else 502


class ParseFailure(ReviewParserError):
    status_code = 502

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class MissingField(ParseFailure):
    """The element holding a required field is absent from the markup."""

    def __init__(self, field: str):
        super().__init__(field, f"Required field '{field}' not found in page")

    def __repr__(self) -> str:
        return f"MissingField({self.field!r})"


class MalformedField(ParseFailure):
    """The element is present but its text is not the expected number."""

    def __init__(self, field: str, raw_text: str):
        super().__init__(field, f"Field '{field}' has unparseable value {raw_text!r}")
        self.raw_text = raw_text

    def __repr__(self) -> str:
        return f"MalformedField({self.field!r}, {self.raw_text!r})"
