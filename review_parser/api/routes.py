from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from review_parser.core.errors import ReviewParserError
from review_parser.schemas import CacheStats, ErrorResponse, ParsingResult
from review_parser.services.resolver import Resolver

router = APIRouter()

def get_resolver(request: Request) -> Resolver:
    return request.app.state.resolver

def error_response(domain: str, error: ReviewParserError) -> JSONResponse:
    body = ErrorResponse(domain=domain, status=error.status_code, message=error.message)
    return JSONResponse(status_code=error.status_code, content=body.model_dump())

@router.get(
    "/parse/{domain:path}",
    response_model=ParsingResult,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 502: {"model": ErrorResponse}, 504: {"model": ErrorResponse}},
)
async def parse_domain(domain: str, resolver: Resolver = Depends(get_resolver)):
    """
    Rating and review count for a domain.

    Results are cached per domain until they sit unused for the configured
    expiry period.
    """
    if not domain:
        body = ErrorResponse(domain=domain, status=400, message="Domain is required")
        return JSONResponse(status_code=400, content=body.model_dump())

    try:
        return await resolver.resolve(domain)
    except ReviewParserError as e:
        return error_response(domain, e)

@router.get("/cache/stats", response_model=CacheStats)
async def cache_statistics(resolver: Resolver = Depends(get_resolver)):
    """Get cache statistics for debugging"""
    return resolver.stats()

@router.delete("/cache")
async def clear_cache(resolver: Resolver = Depends(get_resolver)):
    """Clear all cache entries"""
    resolver.cache.clear()
    return {"message": "Cache cleared successfully"}

@router.delete("/cache/{domain:path}")
async def invalidate_domain(domain: str, resolver: Resolver = Depends(get_resolver)):
    """Drop the cached result for one domain"""
    removed = resolver.invalidate(domain)
    return {"domain": domain, "removed": removed}

@router.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy", "service": "Review Parser"}
