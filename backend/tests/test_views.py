from backend.talent_search.views import build_result_card
from backend.talent_search.schemas import ResultItem


def test_card_highlights_description():
    item = ResultItem(
        identity=1,
        display_name="Test User",
        headline="Radio voice",
        description="Warm radio narrator",
        highlightable_text="Warm radio narrator",
        location="Bogota",
    )

    card = build_result_card(item, "radio")

    assert [(segment.text, segment.is_match) for segment in card.text] == [
        ("Warm ", False),
        ("radio", True),
        (" narrator", False),
    ]
    assert card.location is None


def test_card_without_description_does_not_repeat_headline():
    item = ResultItem(
        identity=2,
        display_name="Sam",
        headline="Trailer voice",
        highlightable_text="Trailer voice",
        location="Lima",
        sample_name="Trailer demo",
    )

    card = build_result_card(item, "voice")

    assert card.headline == "Trailer voice"
    assert card.text == []
    assert card.location == "Lima"
    assert card.sample_name == "Trailer demo"


def test_card_truncates_long_description():
    item = ResultItem(identity=3, display_name="Long", description="a" * 150)

    card = build_result_card(item, "")

    assert card.text[0].text == "a" * 100 + "..."
