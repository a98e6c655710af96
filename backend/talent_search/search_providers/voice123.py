from __future__ import annotations

from typing import Any, Dict, List, Optional

import httpx

from ..schemas import ResultItem, SearchQuery, SearchResult
from ..settings import Settings, load_settings
from . import DEFAULT_ERROR_MESSAGE, SearchProvider, SearchProviderError


PICTURE_FIELDS = ("picture_small", "picture_medium", "picture_large")


def parse_total_pages(raw: Optional[str]) -> int:
    """Page count from the listing header; anything missing or non-numeric counts as one page."""
    if raw is None:
        return 1
    try:
        value = int(raw.strip())
    except ValueError:
        return 1
    return max(value, 1)


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


def _record(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


class Voice123SearchProvider(SearchProvider):
    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.AsyncClient] = None) -> None:
        self._settings = settings or load_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=self._settings.request_timeout)

    async def __aenter__(self) -> "Voice123SearchProvider":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def search(self, query: SearchQuery) -> SearchResult:
        params = {
            "service": self._settings.service,
            "keywords": query.keywords,
            "page": query.page,
        }
        try:
            response = await self._client.get(self._settings.api_base, params=params)
        except httpx.RequestError as exc:
            raise SearchProviderError(str(exc) or DEFAULT_ERROR_MESSAGE) from exc
        if not response.is_success:
            raise SearchProviderError("Error fetching data", status_code=response.status_code)

        try:
            payload = response.json()
        except ValueError as exc:
            raise SearchProviderError("Invalid response body", status_code=response.status_code) from exc

        total_pages = parse_total_pages(response.headers.get(self._settings.total_pages_header))
        raw_providers = payload.get("providers") if isinstance(payload, dict) else None
        items = self.parse_providers(raw_providers if isinstance(raw_providers, list) else [])
        return SearchResult(items=items, total_pages=total_pages)

    def parse_providers(self, raw_providers: List[Any]) -> List[ResultItem]:
        return [self._to_result_item(raw) for raw in raw_providers if isinstance(raw, dict)]

    def _to_result_item(self, raw: Dict[str, Any]) -> ResultItem:
        user = _record(raw.get("user"))
        username = _text(user.get("username"))
        headline = _text(raw.get("headline"))
        description = _text(raw.get("description"))
        sample = _record(raw.get("relevant_sample"))

        image_url = next(
            (_text(user.get(field)) for field in PICTURE_FIELDS if _text(user.get(field))),
            self._settings.fallback_image_url,
        )
        media_url = self._settings.sample_url or _text(sample.get("file")) or None
        identity = raw.get("id")
        if isinstance(identity, bool) or not isinstance(identity, (int, str)):
            identity = username

        return ResultItem(
            identity=identity,
            display_name=_text(user.get("name")) or username,
            username=username,
            profile_url=f"{self._settings.profile_base}{username}" if username else None,
            highlightable_text=description or headline,
            headline=headline,
            description=description,
            additional_details=_text(raw.get("additional_details")),
            location=_text(user.get("location")) or None,
            sample_name=_text(sample.get("name")) or None,
            media_url=media_url,
            image_url=image_url,
        )
