import pytest
from hypothesis import given
from hypothesis import strategies as st

from charabia.arabic import ArabicSegmenter


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("السلام", ["ال", "سلام"]),
        ("ٱلأحوال", ["ٱل", "أحوال"]),
        ("عليكم", ["عليكم"]),
        ("كيف", ["كيف"]),
        ("حالكم", ["حالكم"]),
        ("أتمنى", ["أتمنى"]),
        ("أن", ["أن"]),
        ("تكونوا", ["تكونوا"]),
        ("بأفضل", ["بأفضل"]),
    ],
)
def test_segment_words(text, expected):
    assert list(ArabicSegmenter().segment_str(text)) == expected


@pytest.mark.parametrize("article", ["ال", "أل", "إل", "آل", "ٱل"])
def test_every_article_spelling_is_split(article):
    segments = list(ArabicSegmenter().segment_str(article + "سلام"))
    assert segments == [article, "سلام"]


@given(st.text())
def test_segments_rebuild_text(text):
    assert "".join(ArabicSegmenter().segment_str(text)) == text