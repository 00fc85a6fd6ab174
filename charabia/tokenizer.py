"""Configurable tokenizer built from separators, a words dictionary and a segmenter."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from charabia.arabic import ArabicSegmenter
from charabia.latin import LatinSegmenter
from charabia.segmenter import (
    Segmenter,
    SegmenterOption,
    SeparatorMatcher,
    segment,
    segment_str,
)
from charabia.separators import DEFAULT_SEPARATORS
from charabia.token import Token


class Tokenizer:
    """Segments text with the settings it was built with."""

    def __init__(self, option: SegmenterOption) -> None:
        self._option = option

    def segment(self, text: str) -> Iterator[Token]:
        """Yield the segments of ``text`` as tokens with their positions."""
        return segment(text, self._option)

    def segment_str(self, text: str) -> Iterator[str]:
        """Yield the segments of ``text`` as strings."""
        return segment_str(text, self._option)


class TokenizerBuilder:
    """Collects tokenizer settings and builds a Tokenizer from them.

    Setting methods return the builder so that calls can be chained.
    """

    def __init__(self) -> None:
        self._separators: tuple[str, ...] | None = None
        self._words: tuple[str, ...] | None = None
        self._segmenter: Segmenter | None = None

    def separators(self, separators: Iterable[str]) -> TokenizerBuilder:
        """Use ``separators`` instead of the default separator list."""
        self._separators = tuple(separators)
        return self

    def words_dict(self, words: Iterable[str]) -> TokenizerBuilder:
        """Cut out these words before any script based segmentation."""
        self._words = tuple(words)
        return self

    def segmenter(self, segmenter: Segmenter) -> TokenizerBuilder:
        """Use ``segmenter`` for Latin text and for scripts with no specialized segmenter."""
        self._segmenter = segmenter
        return self

    def _patterns(self) -> Sequence[str] | None:
        if self._words is None:
            return self._separators
        separators = self._separators if self._separators is not None else DEFAULT_SEPARATORS
        return (*self._words, *separators)

    def build(self) -> Tokenizer:
        """Build a Tokenizer from the current settings."""
        patterns = self._patterns()
        matcher = SeparatorMatcher(patterns) if patterns is not None else None
        fallback = self._segmenter if self._segmenter is not None else LatinSegmenter()
        option = SegmenterOption(
            matcher=matcher,
            segmenter=fallback,
            segmenters={"LATIN": fallback, "ARABIC": ArabicSegmenter()},
        )
        return Tokenizer(option)