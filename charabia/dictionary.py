"""Dictionary based segmenter choosing the longest known word at each step."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

_END = object()


class DictionarySegmenter:
    """Segment text by repeatedly taking the longest dictionary word prefix.

    Where no word matches, a single character is taken instead.
    """

    def __init__(self, words: Iterable[str]) -> None:
        self._root: dict = {}
        for word in words:
            if not word:
                continue
            node = self._root
            for char in word:
                node = node.setdefault(char, {})
            node[_END] = True

    def longest_prefix(self, text: str) -> int | None:
        """Length in characters of the longest word that prefixes ``text``.

        Returns None when no word of the dictionary is a prefix of ``text``.
        """
        node = self._root
        longest = None
        for length, char in enumerate(text, start=1):
            node = node.get(char)
            if node is None:
                break
            if _END in node:
                longest = length
        return longest

    def segment_str(self, text: str) -> Iterator[str]:
        """Yield the segments of ``text``."""
        while text:
            length = self.longest_prefix(text) or 1
            yield text[:length]
            text = text[length:]