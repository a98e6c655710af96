from __future__ import annotations

from typing import Optional

from ..schemas import SearchQuery, SearchResult


DEFAULT_ERROR_MESSAGE = "An unexpected error occurred"


class SearchProviderError(Exception):
    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SearchProvider:
    async def search(self, query: SearchQuery) -> SearchResult:
        raise NotImplementedError

    async def aclose(self) -> None:
        return None
