from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Literal, Optional, Union

from .logging_utils import get_logger, log_event
from .schemas import SearchQuery, SearchResult
from .search_providers import DEFAULT_ERROR_MESSAGE, SearchProvider


TIMEOUT_MESSAGE = "Search request timed out"


@dataclass(frozen=True)
class Idle:
    status: Literal["idle"] = field(default="idle", init=False)


@dataclass(frozen=True)
class Loading:
    query: SearchQuery
    status: Literal["loading"] = field(default="loading", init=False)


@dataclass(frozen=True)
class Success:
    query: SearchQuery
    result: SearchResult
    status: Literal["success"] = field(default="success", init=False)


@dataclass(frozen=True)
class Failure:
    query: SearchQuery
    reason: str
    status: Literal["failure"] = field(default="failure", init=False)


RequestState = Union[Idle, Loading, Success, Failure]
StateListener = Callable[[RequestState], None]


class SearchController:
    """Runs searches against a provider and owns the resulting request state.

    Only the most recently issued search may update the state: every call to
    :meth:`execute_search` takes a new sequence number and an outcome whose
    number is no longer the latest is dropped, whatever order responses
    arrive in.
    """

    def __init__(
        self,
        provider: SearchProvider,
        timeout: Optional[float] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._provider = provider
        self._timeout = timeout
        self._logger = logger or get_logger()
        self._state: RequestState = Idle()
        self._sequence = 0
        self._active_keywords = ""
        self._current_page = 1
        self._listeners: List[StateListener] = []

    @property
    def state(self) -> RequestState:
        return self._state

    @property
    def active_keywords(self) -> str:
        return self._active_keywords

    @property
    def current_page(self) -> int:
        return self._current_page

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def execute_search(self, keywords: str, page: int) -> None:
        query = SearchQuery(keywords=keywords, page=page)
        self._sequence += 1
        sequence = self._sequence
        self._active_keywords = query.keywords
        self._current_page = query.page
        self._transition(Loading(query=query))
        log_event(
            self._logger,
            {"event": "search_started", "sequence": sequence, "keywords": query.keywords, "page": query.page},
        )

        try:
            result = await self._fetch(query)
        except Exception as exc:
            outcome: RequestState = Failure(query=query, reason=self._reason(exc))
        else:
            # The provider may report fewer pages than the one just served.
            if result.total_pages < query.page:
                result = SearchResult(items=result.items, total_pages=query.page)
            outcome = Success(query=query, result=result)

        if sequence != self._sequence:
            log_event(
                self._logger,
                {"event": "search_discarded", "sequence": sequence, "latest": self._sequence},
                level=logging.DEBUG,
            )
            return

        if isinstance(outcome, Failure):
            log_event(
                self._logger,
                {"event": "search_failed", "sequence": sequence, "reason": outcome.reason},
                level=logging.WARNING,
            )
        else:
            log_event(
                self._logger,
                {
                    "event": "search_completed",
                    "sequence": sequence,
                    "result_count": len(outcome.result.items),
                    "total_pages": outcome.result.total_pages,
                },
            )
        self._transition(outcome)

    async def change_page(self, page: int) -> None:
        await self.execute_search(self._active_keywords, page)

    async def submit(self, keywords: str) -> None:
        await self.execute_search(keywords, 1)

    async def _fetch(self, query: SearchQuery) -> SearchResult:
        if self._timeout is None:
            return await self._provider.search(query)
        try:
            return await asyncio.wait_for(self._provider.search(query), timeout=self._timeout)
        except asyncio.TimeoutError as exc:
            raise TimeoutError(TIMEOUT_MESSAGE) from exc

    @staticmethod
    def _reason(exc: Exception) -> str:
        message = str(exc).strip()
        return message or DEFAULT_ERROR_MESSAGE

    def _transition(self, state: RequestState) -> None:
        self._state = state
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception as exc:
                log_event(
                    self._logger,
                    {"event": "listener_error", "status": state.status, "error": str(exc)},
                    level=logging.ERROR,
                )
