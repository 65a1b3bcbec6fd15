"""Common dependency functions for API routes."""

from functools import lru_cache

from fastapi import Depends, HTTPException, Request

from content_writer.core.config import Settings, get_settings
from content_writer.document_exporter import Rasterizer, weasyprint_rasterize
from content_writer.services.gemini_client import GeminiClient
from content_writer.services.history_store import HistoryStore
from content_writer.services.rate_limiter import FixedWindowRateLimiter


def get_app_settings() -> Settings:
    return get_settings()


@lru_cache
def get_rate_limiter() -> FixedWindowRateLimiter:
    settings = get_settings()
    return FixedWindowRateLimiter(limit=settings.rate_limit, window_seconds=settings.rate_limit_window)


@lru_cache
def get_history_store() -> HistoryStore:
    settings = get_settings()
    return HistoryStore(settings.history_path, max_items=settings.history_max_items)


def get_gemini_client(settings: Settings = Depends(get_app_settings)) -> GeminiClient:
    if not settings.gemini_api_key:
        raise HTTPException(status_code=503, detail="GEMINI_API_KEY is not configured")
    return GeminiClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        base_url=settings.gemini_base_url,
        timeout=settings.gemini_timeout,
    )


async def enforce_rate_limit(
    request: Request,
    limiter: FixedWindowRateLimiter = Depends(get_rate_limiter),
) -> None:
    """Reject the request with 429 once the client exhausted its window."""

    client_address = request.client.host if request.client else "unknown"
    retry_after = limiter.hit(client_address)
    if retry_after is not None:
        raise HTTPException(
            status_code=429,
            detail="Too many requests. Please try again later.",
            headers={"Retry-After": str(retry_after)},
        )


def get_pdf_rasterizer() -> Rasterizer:
    return weasyprint_rasterize
