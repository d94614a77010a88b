from datetime import timedelta
from fastapi import FastAPI
from contextlib import asynccontextmanager
from review_parser.api.routes import router
from review_parser.cache.memory import ExpiringCache
from review_parser.core.config import settings
from review_parser.fetch.scraper import HttpFetcher
from review_parser.services.resolver import Resolver

def build_resolver() -> Resolver:
    """Wire the resolver from settings"""
    settings.validate()
    cache = ExpiringCache(
        max_size=settings.CACHE_MAX_SIZE,
        expire_after=timedelta(days=settings.CACHE_EXPIRE_AFTER_DAYS),
    )
    return Resolver(HttpFetcher(), cache)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.
    The resolver and its cache live exactly as long as the application.
    """
    # Startup
    print("Initializing Review Parser...")
    app.state.resolver = build_resolver()
    print(f"Cache ready (max {settings.CACHE_MAX_SIZE} entries, expire after {settings.CACHE_EXPIRE_AFTER_DAYS} day(s))")

    yield

    # Shutdown
    print("Shutting down Review Parser...")
    app.state.resolver.cache.clear()

app = FastAPI(
    title="Review Parser",
    description="API for extracting rating and review count of a domain from its review page",
    version="1.0.0",
    lifespan=lifespan
)

# Include API routes
app.include_router(router)

@app.get("/")
async def root():
    """Root endpoint with basic info"""
    return {
        "service": "Review Parser",
        "version": "1.0.0",
        "endpoints": {
            "parse": "GET /parse/{domain}",
            "health": "GET /health",
            "cache_stats": "GET /cache/stats",
            "cache_clear": "DELETE /cache",
            "cache_invalidate": "DELETE /cache/{domain}"
        }
    }
