from __future__ import annotations

from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class SearchQuery(BaseModel):
    model_config = ConfigDict(frozen=True)

    keywords: str = ""
    page: int = Field(default=1, ge=1)


class ResultItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    identity: Union[int, str]
    display_name: str
    username: str = ""
    profile_url: Optional[str] = None
    highlightable_text: str = ""
    headline: str = ""
    description: str = ""
    additional_details: str = ""
    location: Optional[str] = None
    sample_name: Optional[str] = None
    media_url: Optional[str] = None
    image_url: Optional[str] = None


class SearchResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: List[ResultItem] = Field(default_factory=list)
    total_pages: int = Field(default=1, ge=1)


class HighlightSegment(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    is_match: bool = False


class PageControl(BaseModel):
    label: str
    page: Optional[int] = None
    is_current: bool = False
    disabled: bool = False


class ResultCard(BaseModel):
    identity: Union[int, str]
    display_name: str
    profile_url: Optional[str]
    headline: str
    image_url: Optional[str]
    media_url: Optional[str]
    text: List[HighlightSegment]
    details: str
    location: Optional[str]
    sample_name: Optional[str]


class SearchResponse(BaseModel):
    keywords: str
    page: int
    total_pages: int
    results: List[ResultCard]
    pagination: List[PageControl]


class HealthResponse(BaseModel):
    status: str
    version: str
