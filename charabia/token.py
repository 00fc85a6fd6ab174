"""Tokens produced by segmentation and their kinds."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SeparatorKind(Enum):
    """Whether a separator splits contexts (hard) or words of one context (soft)."""

    HARD = "hard"
    SOFT = "soft"


class TokenKind(Enum):
    """Classification of a token."""

    WORD = "word"
    STOP_WORD = "stop_word"
    HARD_SEPARATOR = "hard_separator"
    SOFT_SEPARATOR = "soft_separator"
    UNKNOWN = "unknown"

    @classmethod
    def separator(cls, kind: SeparatorKind) -> TokenKind:
        """Return the separator kind of token for a SeparatorKind."""
        if kind is SeparatorKind.HARD:
            return cls.HARD_SEPARATOR
        return cls.SOFT_SEPARATOR

    @property
    def separator_kind(self) -> SeparatorKind | None:
        """The SeparatorKind of a separator kind, None for any other kind."""
        if self is TokenKind.HARD_SEPARATOR:
            return SeparatorKind.HARD
        if self is TokenKind.SOFT_SEPARATOR:
            return SeparatorKind.SOFT
        return None


@dataclass
class Token:
    """A piece of text with its position in the input it was cut from.

    Positions are counted both in characters and in UTF-8 bytes. ``char_map``
    holds, for each character of the unnormalized lemma, the pair
    (bytes before normalization, bytes in the normalized lemma).
    """

    kind: TokenKind = TokenKind.UNKNOWN
    lemma: str = ""
    char_start: int = 0
    char_end: int = 0
    byte_start: int = 0
    byte_end: int = 0
    char_map: list[tuple[int, int]] | None = None
    script: str | None = None
    language: str | None = None

    def byte_len(self) -> int:
        """Length in UTF-8 bytes of the normalized lemma."""
        return len(self.lemma.encode("utf-8"))

    def original_byte_len(self) -> int:
        """Length in bytes of the lemma before normalization."""
        return self.byte_end - self.byte_start

    def char_count(self) -> int:
        """Number of characters of the normalized lemma."""
        return len(self.lemma)

    def original_char_count(self) -> int:
        """Number of characters of the lemma before normalization."""
        return self.char_end - self.char_start

    def is_word(self) -> bool:
        return self.kind is TokenKind.WORD

    def is_stopword(self) -> bool:
        return self.kind is TokenKind.STOP_WORD

    def is_separator(self) -> bool:
        return self.kind.separator_kind is not None

    def separator_kind(self) -> SeparatorKind | None:
        """The SeparatorKind if the token is a separator, otherwise None."""
        return self.kind.separator_kind

    def original_lengths(self, num_bytes: int) -> tuple[int, int]:
        """Return (characters, bytes) of the unnormalized text covering
        ``num_bytes`` bytes of the normalized lemma.

        Without a char_map the lemma itself is measured; a character counts
        even if ``num_bytes`` covers only part of it.
        """
        if self.char_map is None:
            char_count = 0
            byte_len = 0
            byte_index = 0
            for char in self.lemma:
                if byte_index >= num_bytes:
                    break
                width = len(char.encode("utf-8"))
                char_count += 1
                byte_len = byte_index + width
                byte_index += width
            return char_count, byte_len

        normalized_len = 0
        unnormalized_len = 0
        char_count = 0
        for unnormalized_bytes, normalized_bytes in self.char_map:
            if normalized_len >= num_bytes:
                break
            unnormalized_len += unnormalized_bytes
            normalized_len += normalized_bytes
            char_count += 1
        return char_count, unnormalized_len