"""Segmenter for Arabic text."""

from __future__ import annotations

from collections.abc import Iterator

# Spellings of the definite article "al" that are split from the word they lead.
_ARTICLES = ("ال", "أل", "إل", "آل", "ٱل")


class ArabicSegmenter:
    """Segmenter that splits the definite article from the start of a word.

    A word starting with the article, such as "الشجرة" (the tree), is split into
    the article and the rest ("ال", "شجرة"), so searching either form finds it.
    """

    def segment_str(self, text: str) -> Iterator[str]:
        """Yield the segments of ``text``."""
        if len(text.encode("utf-8")) > 2 and text.startswith(_ARTICLES):
            return iter((text[:2], text[2:]))
        return iter((text,))