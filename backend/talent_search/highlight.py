from __future__ import annotations

from typing import List

from .schemas import HighlightSegment


def highlight(text: str, query: str) -> List[HighlightSegment]:
    """Split ``text`` into plain and matching segments for a case-insensitive ``query``.

    Matches keep the casing of ``text``. The query is compared literally, so
    characters such as ``.`` or ``(`` have no special meaning. Empty segments
    are never produced.
    """
    if not query:
        return [HighlightSegment(text=text)] if text else []

    needle = query.lower()
    width = len(query)
    segments: List[HighlightSegment] = []
    plain_start = 0
    index = 0
    # Compare slice by slice: lower() may change the length of some characters.
    while index <= len(text) - width:
        if text[index : index + width].lower() == needle:
            if index > plain_start:
                segments.append(HighlightSegment(text=text[plain_start:index]))
            segments.append(HighlightSegment(text=text[index : index + width], is_match=True))
            index += width
            plain_start = index
        else:
            index += 1

    if plain_start < len(text):
        segments.append(HighlightSegment(text=text[plain_start:]))
    return segments


def truncate_text(text: str, max_length: int = 100) -> str:
    return text[:max_length] + "..." if len(text) > max_length else text
