"""Split text into segments by script, separators and script specific rules."""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from typing import Protocol, runtime_checkable

from charabia.arabic import ArabicSegmenter
from charabia.latin import LatinSegmenter
from charabia.separators import DEFAULT_SEPARATORS
from charabia.token import Token


@runtime_checkable
class Segmenter(Protocol):
    """Anything that can split a piece of text into segments."""

    def segment_str(self, text: str) -> Iterator[str]:
        """Yield the segments of ``text``."""


class MatchType(Enum):
    """Whether a piece of text is a matched pattern or the text between matches."""

    INTERLEAVE = "interleave"
    MATCH = "match"


_END = object()


class SeparatorMatcher:
    """Find non-overlapping occurrences of patterns, leftmost-longest first.

    At each position the longest pattern starting there wins; scanning then
    resumes after that match. Empty patterns are ignored.
    """

    def __init__(self, patterns: Iterable[str]) -> None:
        self._root: dict = {}
        for pattern in patterns:
            if not pattern:
                continue
            node = self._root
            for char in pattern:
                node = node.setdefault(char, {})
            node[_END] = True

    def _longest_at(self, text: str, start: int) -> int | None:
        node = self._root
        longest = None
        for index in range(start, len(text)):
            node = node.get(text[index])
            if node is None:
                break
            if _END in node:
                longest = index + 1
        return longest

    def find_iter(self, text: str) -> Iterator[tuple[int, int]]:
        """Yield ``(start, end)`` character ranges of the matches in ``text``."""
        position = 0
        while position < len(text):
            end = self._longest_at(text, position)
            if end is None:
                position += 1
                continue
            yield position, end
            position = end


@lru_cache(maxsize=1)
def _default_matcher() -> SeparatorMatcher:
    return SeparatorMatcher(DEFAULT_SEPARATORS)


def aho_segment(text: str, matcher: SeparatorMatcher) -> Iterator[tuple[str, MatchType]]:
    """Split ``text`` into matched patterns and the non-empty text between them."""
    previous = 0
    for start, end in matcher.find_iter(text):
        if previous < start:
            yield text[previous:start], MatchType.INTERLEAVE
        yield text[start:end], MatchType.MATCH
        previous = end
    if previous < len(text):
        yield text[previous:], MatchType.INTERLEAVE


def _default_segmenters() -> dict[str, Segmenter]:
    return {"LATIN": LatinSegmenter(), "ARABIC": ArabicSegmenter()}


@dataclass
class SegmenterOption:
    """Settings of a segmentation.

    ``matcher`` finds the pieces cut out before any script segmentation
    (the default separators when None). ``segmenters`` maps a script name to
    its specialized segmenter; ``segmenter`` is used for any other script.
    """

    matcher: SeparatorMatcher | None = None
    segmenter: Segmenter = field(default_factory=LatinSegmenter)
    segmenters: Mapping[str, Segmenter] = field(default_factory=_default_segmenters)

    def segmenter_for(self, script: str | None) -> Segmenter:
        """The segmenter used for text of ``script``."""
        if script is None:
            return self.segmenter
        return self.segmenters.get(script, self.segmenter)


def _script_of(char: str) -> str | None:
    """Script of a letter, taken from its Unicode name; None for other characters."""
    if not unicodedata.category(char).startswith("L"):
        return None
    name = unicodedata.name(char, "")
    if not name:
        return None
    return name.split(" ", 1)[0]


def _script_groups(text: str) -> Iterator[tuple[str, str | None]]:
    """Split ``text`` where the script of its letters changes.

    Characters without a script stay with the group before them.
    """
    current: str | None = None
    start = 0
    for index, char in enumerate(text):
        script = _script_of(char)
        if script is not None and script != current:
            if current is not None:
                yield text[start:index], current
                start = index
            current = script
    if text:
        yield text[start:], current


def _segment_groups(
    text: str, option: SegmenterOption | None
) -> Iterator[tuple[str, str | None]]:
    option = option or SegmenterOption()
    matcher = option.matcher or _default_matcher()
    for group, script in _script_groups(text):
        segmenter = option.segmenter_for(script)
        for piece, match_type in aho_segment(group, matcher):
            if match_type is MatchType.MATCH:
                yield piece, script
            else:
                for lemma in segmenter.segment_str(piece):
                    yield lemma, script


def segment_str(text: str, option: SegmenterOption | None = None) -> Iterator[str]:
    """Yield the segments of ``text`` as strings."""
    for lemma, _script in _segment_groups(text, option):
        yield lemma


def segment(text: str, option: SegmenterOption | None = None) -> Iterator[Token]:
    """Yield the segments of ``text`` as unclassified, unnormalized tokens."""
    char_index = 0
    byte_index = 0
    for lemma, script in _segment_groups(text, option):
        char_start, byte_start = char_index, byte_index
        char_index += len(lemma)
        byte_index += len(lemma.encode("utf-8"))
        yield Token(
            lemma=lemma,
            char_start=char_start,
            char_end=char_index,
            byte_start=byte_start,
            byte_end=byte_index,
            script=script,
        )