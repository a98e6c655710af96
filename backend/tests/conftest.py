import pytest

from backend.talent_search.settings import Settings


@pytest.fixture
def settings() -> Settings:
    return Settings(
        api_base="https://api.test/providers/search/",
        service="voice_over",
        total_pages_header="x-list-total-pages",
        profile_base="https://voice123.com/",
        sample_url=None,
        fallback_image_url="/user-fallback.webp",
        request_timeout=None,
        cors_allow_origin="http://localhost:3000",
    )
