from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_API_BASE = "https://api.sandbox.voice123.com/providers/search/"


@dataclass
class Settings:
    api_base: str
    service: str
    total_pages_header: str
    profile_base: str
    sample_url: Optional[str]
    fallback_image_url: str
    request_timeout: Optional[float]
    cors_allow_origin: str


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if not raw:
        return None
    value = float(raw)
    return value if value > 0 else None


def load_settings() -> Settings:
    api_base = os.environ.get("VOICE123_API_BASE", DEFAULT_API_BASE)
    service = os.environ.get("VOICE123_SERVICE", "voice_over")
    total_pages_header = os.environ.get("VOICE123_TOTAL_PAGES_HEADER", "x-list-total-pages")
    profile_base = os.environ.get("VOICE123_PROFILE_BASE", "https://voice123.com/")
    sample_url = os.environ.get("VOICE123_SAMPLE_URL") or None
    fallback_image_url = os.environ.get("FALLBACK_IMAGE_URL", "/user-fallback.webp")
    request_timeout = _optional_float(os.environ.get("SEARCH_TIMEOUT_SECONDS", "20"))
    cors_allow_origin = os.environ.get("CORS_ALLOW_ORIGIN", "http://localhost:3000")
    return Settings(
        api_base=api_base,
        service=service,
        total_pages_header=total_pages_header,
        profile_base=profile_base,
        sample_url=sample_url,
        fallback_image_url=fallback_image_url,
        request_timeout=request_timeout,
        cors_allow_origin=cors_allow_origin,
    )
