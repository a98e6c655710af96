from backend.talent_search.highlight import highlight, truncate_text


def _pairs(segments):
    return [(segment.text, segment.is_match) for segment in segments]


def test_empty_query_returns_whole_text():
    assert _pairs(highlight("Warm narrator voice", "")) == [("Warm narrator voice", False)]


def test_empty_text_has_no_segments():
    assert highlight("", "") == []
    assert highlight("", "voice") == []


def test_matches_are_case_insensitive_and_keep_casing():
    segments = highlight("Voice talent with a VOICE for radio", "voice")

    assert _pairs(segments) == [
        ("Voice", True),
        (" talent with a ", False),
        ("VOICE", True),
        (" for radio", False),
    ]


def test_query_is_matched_literally():
    segments = highlight("axb and a.b", "a.b")

    assert _pairs(segments) == [("axb and ", False), ("a.b", True)]


def test_parentheses_in_query():
    assert _pairs(highlight("promo (radio) spot", "(radio)")) == [
        ("promo ", False),
        ("(radio)", True),
        (" spot", False),
    ]


def test_adjacent_matches_do_not_overlap():
    assert _pairs(highlight("aaaaa", "aa")) == [("aa", True), ("aa", True), ("a", False)]


def test_no_match_returns_plain_text():
    assert _pairs(highlight("narration", "commercial")) == [("narration", False)]


def test_query_longer_than_text():
    assert _pairs(highlight("ad", "advert")) == [("ad", False)]


def test_segments_rebuild_original_text():
    text = "Spanish and spanish-English bilingual SPANISH voice"
    assert "".join(segment.text for segment in highlight(text, "spanish")) == text


def test_truncate_text():
    assert truncate_text("short") == "short"
    assert truncate_text("x" * 100) == "x" * 100
    assert truncate_text("x" * 101) == "x" * 100 + "..."
    assert truncate_text("abcdef", max_length=3) == "abc..."
