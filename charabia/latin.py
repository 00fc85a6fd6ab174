"""Segmenter for text written in the Latin script."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterator


def split_camel_case_bounds(text: str) -> Iterator[str]:
    """Split ``text`` on camelCase boundaries.

    A boundary is a lowercase letter directly followed by an uppercase letter,
    with any number of non-spacing marks allowed in between, so "camelCase"
    gives "camel" and "Case".
    """
    if not text:
        return
    last_char_was_lowercase = text[0].islower()
    start = 0
    for index, char in enumerate(text[1:], start=1):
        category = unicodedata.category(char)
        if category == "Mn":
            continue
        if last_char_was_lowercase and category == "Lu":
            yield text[start:index]
            start = index
            continue
        last_char_was_lowercase = category == "Ll"
    yield text[start:]


class LatinSegmenter:
    """Segmenter for Latin text, optionally splitting camelCase words."""

    def __init__(self, camel_case: bool = True) -> None:
        self.camel_case = camel_case

    def segment_str(self, text: str) -> Iterator[str]:
        """Yield the segments of ``text``."""
        if self.camel_case:
            return split_camel_case_bounds(text)
        return iter((text,))