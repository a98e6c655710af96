from __future__ import annotations

import asyncio
import sys
from typing import List, TextIO

from backend.talent_search.controller import Failure, Loading, RequestState, SearchController, Success
from backend.talent_search.logging_utils import setup_logging
from backend.talent_search.schemas import HighlightSegment, PageControl, ResultCard
from backend.talent_search.search_providers import SearchProvider
from backend.talent_search.search_providers.voice123 import Voice123SearchProvider
from backend.talent_search.settings import load_settings
from backend.talent_search.views import build_search_response


def render_segments(segments: List[HighlightSegment]) -> str:
    return "".join(f"[{segment.text}]" if segment.is_match else segment.text for segment in segments)


def render_card(card: ResultCard) -> List[str]:
    lines = [f"* {card.display_name}"]
    if card.headline:
        lines.append(f"  {card.headline}")
    if card.profile_url:
        lines.append(f"  {card.profile_url}")
    text = render_segments(card.text)
    if text:
        lines.append(f"  {text}")
    if card.details:
        lines.append(f"  {card.details}")
    if card.location:
        lines.append(f"  Location: {card.location}")
    if card.sample_name:
        lines.append(f"  Sample: {card.sample_name}")
    if card.media_url:
        lines.append(f"  Audio: {card.media_url}")
    return lines


def render_pagination(controls: List[PageControl]) -> str:
    labels = []
    for control in controls:
        if control.is_current:
            labels.append(f"({control.label})")
        elif control.disabled and control.label != "...":
            labels.append(f"-{control.label}-")
        else:
            labels.append(control.label)
    return " ".join(labels)


class ConsoleRenderer:
    def __init__(self, out: TextIO) -> None:
        self._out = out

    def __call__(self, state: RequestState) -> None:
        if isinstance(state, Loading):
            self._write(f"Searching for '{state.query.keywords}' (page {state.query.page})...")
        elif isinstance(state, Failure):
            self._write(f"Error: {state.reason}")
        elif isinstance(state, Success):
            response = build_search_response(state)
            if not response.results:
                self._write("No results found.")
                return
            for card in response.results:
                for line in render_card(card):
                    self._write(line)
            self._write("")
            self._write(render_pagination(response.pagination))

    def _write(self, line: str) -> None:
        self._out.write(line + "\n")


async def run_search(provider: SearchProvider, keywords: str, page: int, out: TextIO) -> RequestState:
    settings = load_settings()
    controller = SearchController(provider, timeout=settings.request_timeout)
    controller.subscribe(ConsoleRenderer(out))
    await controller.execute_search(keywords, page)
    return controller.state


async def _main_async(keywords: str, page: int) -> int:
    async with Voice123SearchProvider() as provider:
        state = await run_search(provider, keywords, page, sys.stdout)
    return 1 if isinstance(state, Failure) else 0


def main(argv: List[str]) -> int:
    args = list(argv)
    keywords = args[0] if len(args) > 0 else ""
    try:
        page = int(args[1]) if len(args) > 1 else 1
    except ValueError:
        page = 1
    if page < 1:
        page = 1

    setup_logging()
    return asyncio.run(_main_async(keywords, page))


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
