from __future__ import annotations

from typing import List

from .controller import Success
from .highlight import highlight, truncate_text
from .pagination import pagination_controls
from .schemas import ResultCard, ResultItem, SearchResponse


CARD_TEXT_LENGTH = 100


def build_result_card(item: ResultItem, keywords: str) -> ResultCard:
    # Location and sample name are only shown on cards without description text.
    has_extra_content = bool(item.description or item.additional_details)
    return ResultCard(
        identity=item.identity,
        display_name=item.display_name,
        profile_url=item.profile_url,
        headline=item.headline,
        image_url=item.image_url,
        media_url=item.media_url,
        text=highlight(truncate_text(item.description, CARD_TEXT_LENGTH), keywords),
        details=truncate_text(item.additional_details, CARD_TEXT_LENGTH),
        location=None if has_extra_content else item.location,
        sample_name=None if has_extra_content else item.sample_name,
    )


def build_result_cards(items: List[ResultItem], keywords: str) -> List[ResultCard]:
    return [build_result_card(item, keywords) for item in items]


def build_search_response(state: Success) -> SearchResponse:
    query = state.query
    total_pages = state.result.total_pages
    return SearchResponse(
        keywords=query.keywords,
        page=query.page,
        total_pages=total_pages,
        results=build_result_cards(state.result.items, query.keywords),
        pagination=pagination_controls(query.page, total_pages) if state.result.items else [],
    )
