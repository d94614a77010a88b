import os

class Settings:
    # Fetching
    BASE_URL: str = os.getenv("BASE_URL", "https://www.trustpilot.com/review/")
    REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))
    USER_AGENT: str = os.getenv("USER_AGENT", "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36")
    FOLLOW_REDIRECTS: bool = os.getenv("FOLLOW_REDIRECTS", "0").lower() in ("1", "true", "yes")

    # Cache
    CACHE_MAX_SIZE: int = int(os.getenv("CACHE_MAX_SIZE", "1000"))
    CACHE_EXPIRE_AFTER_DAYS: int = int(os.getenv("CACHE_EXPIRE_AFTER_DAYS", "1"))

    # Extraction targets, tied to the review page template
    RATING_ATTRIBUTE: str = os.getenv("RATING_ATTRIBUTE", "data-rating-typography")
    REVIEWS_COUNT_CLASS: str = os.getenv(
        "REVIEWS_COUNT_CLASS",
        "typography_body-l__KUYFJ typography_appearance-subtle__8_H2l styles_text__W4hWi"
    )

    def validate(self) -> None:
        """Reject cache settings the service cannot run with"""
        if self.CACHE_MAX_SIZE < 1:
            raise ValueError(f"CACHE_MAX_SIZE must be at least 1, got {self.CACHE_MAX_SIZE}")
        if self.CACHE_EXPIRE_AFTER_DAYS < 1:
            raise ValueError(f"CACHE_EXPIRE_AFTER_DAYS must be at least 1, got {self.CACHE_EXPIRE_AFTER_DAYS}")

settings = Settings()
