from pydantic import BaseModel, ConfigDict, Field

class ParsingResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    review_count: int = Field(alias="reviewCount", ge=0, description="Number of reviews shown on the page")
    rating: float = Field(description="Rating score as published by the review site")

class ErrorResponse(BaseModel):
    domain: str
    status: int = Field(description="HTTP status code of the failure")
    message: str

class CacheStats(BaseModel):
    total_entries: int
    max_size: int
    expire_after_seconds: float
    hits: int
    misses: int
