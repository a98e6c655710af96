from __future__ import annotations

import time
import uuid
from typing import Optional

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .controller import Failure, SearchController, Success
from .logging_utils import log_event, setup_logging
from .schemas import HealthResponse, SearchResponse
from .search_providers import SearchProvider
from .search_providers.voice123 import Voice123SearchProvider
from .settings import load_settings
from .views import build_search_response

VERSION = "0.1.0"

settings = load_settings()
app = FastAPI(title="Voice Talent Search", version=VERSION)
logger = setup_logging()

app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.cors_allow_origin],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

_provider: Optional[SearchProvider] = None


def get_provider() -> SearchProvider:
    global _provider
    if _provider is None:
        _provider = Voice123SearchProvider(settings)
    return _provider


@app.on_event("shutdown")
async def shutdown_event() -> None:
    global _provider
    if _provider is not None:
        await _provider.aclose()
        _provider = None


@app.middleware("http")
async def request_id_middleware(request: Request, call_next):
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    request.state.request_id = request_id
    start = time.perf_counter()
    log_event(
        logger,
        {
            "event": "request_started",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        },
    )
    response = await call_next(request)
    duration_ms = int((time.perf_counter() - start) * 1000)
    response.headers["X-Request-ID"] = request_id
    log_event(
        logger,
        {
            "event": "request_completed",
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": duration_ms,
        },
    )
    return response


def _error_response(request: Request, status_code: int, code: str, message: str) -> JSONResponse:
    request_id = getattr(request.state, "request_id", "unknown")
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": {"request_id": request_id},
            }
        },
    )


@app.get("/v1/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(status="ok", version=VERSION)


@app.get("/v1/search", response_model=SearchResponse)
async def search(
    request: Request,
    keywords: str = Query(default=""),
    page: int = Query(default=1, ge=1),
    provider: SearchProvider = Depends(get_provider),
):
    controller = SearchController(provider, timeout=settings.request_timeout, logger=logger)
    await controller.execute_search(keywords, page)
    state = controller.state
    if isinstance(state, Failure):
        return _error_response(request, 502, "upstream_error", state.reason)
    if not isinstance(state, Success):
        return _error_response(request, 500, "internal_error", "Search did not complete")
    return build_search_response(state)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    request_id = getattr(request.state, "request_id", "unknown")
    log_event(
        logger,
        {
            "event": "unhandled_exception",
            "request_id": request_id,
            "error": str(exc),
            "path": request.url.path,
        },
    )
    return _error_response(request, 500, "internal_error", "Unexpected server error")
