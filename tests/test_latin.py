import pytest
from hypothesis import given
from hypothesis import strategies as st

from charabia.latin import LatinSegmenter, split_camel_case_bounds


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("a", ["a"]),
        ("aB", ["a", "B"]),
        ("camelCase", ["camel", "Case"]),
        ("SCREAMING", ["SCREAMING"]),
        ("resuméWriter", ["resumé", "Writer"]),
        ("KarelČapek", ["Karel", "Čapek"]),
        ("resume\u0301Writer", ["resume\u0301", "Writer"]),
        ("a\u0301B", ["a\u0301", "B"]),
    ],
)
def test_split_camel_case_bounds(text, expected):
    assert list(split_camel_case_bounds(text)) == expected


def test_empty_text_gives_no_segment():
    assert list(split_camel_case_bounds("")) == []


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("camelCase", ["camel", "Case"]),
        ("The", ["The"]),
        ("3°F", ["3°F"]),
        ("Brr", ["Brr"]),
        ("kebab", ["kebab"]),
    ],
)
def test_latin_segmenter_pieces(text, expected):
    assert list(LatinSegmenter().segment_str(text)) == expected


def test_latin_segmenter_without_camel_case():
    assert list(LatinSegmenter(camel_case=False).segment_str("camelCase")) == ["camelCase"]


@given(st.text())
def test_segments_rebuild_text(text):
    segments = list(LatinSegmenter().segment_str(text))
    assert "".join(segments) == text
    assert all(segments)