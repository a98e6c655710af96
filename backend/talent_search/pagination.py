from __future__ import annotations

from types import EllipsisType
from typing import List, Union

from .schemas import PageControl


PageMarker = Union[int, EllipsisType]

PAGE_NEIGHBORS = 2


def page_window(current_page: int, total_pages: int, neighbors: int = PAGE_NEIGHBORS) -> List[PageMarker]:
    """Page numbers to show around ``current_page``, with ``...`` for skipped ranges.

    The first and last pages are always present. Callers must keep
    ``1 <= current_page <= total_pages``; other inputs are not rejected but
    the output is unspecified.
    """
    window_size = neighbors * 2 + 1

    if total_pages <= window_size + 2:
        return list(range(1, total_pages + 1))

    pages: List[PageMarker] = [1]
    start = max(2, current_page - neighbors)
    end = min(total_pages - 1, current_page + neighbors)

    if current_page <= neighbors + 1:
        start = 2
        end = window_size

    if current_page >= total_pages - neighbors:
        start = total_pages - window_size + 1
        end = total_pages - 1

    if start > 2:
        pages.append(...)

    pages.extend(range(start, end + 1))

    if end < total_pages - 1:
        pages.append(...)

    pages.append(total_pages)
    return pages


def pagination_controls(current_page: int, total_pages: int, neighbors: int = PAGE_NEIGHBORS) -> List[PageControl]:
    controls = [PageControl(label="Prev", page=current_page - 1, disabled=current_page <= 1)]
    for marker in page_window(current_page, total_pages, neighbors):
        if marker is ...:
            controls.append(PageControl(label="...", disabled=True))
        else:
            controls.append(PageControl(label=str(marker), page=marker, is_current=marker == current_page))
    controls.append(PageControl(label="Next", page=current_page + 1, disabled=current_page >= total_pages))
    return controls
