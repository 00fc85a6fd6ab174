import pytest
from hypothesis import given
from hypothesis import strategies as st

from charabia.token import SeparatorKind, Token, TokenKind


def test_default_token_is_unknown():
    token = Token()
    assert token.kind is TokenKind.UNKNOWN
    assert token.lemma == ""
    assert token.char_map is None


@pytest.mark.parametrize(
    "kind, word, stopword, separator, sep_kind",
    [
        (TokenKind.WORD, True, False, False, None),
        (TokenKind.STOP_WORD, False, True, False, None),
        (TokenKind.HARD_SEPARATOR, False, False, True, SeparatorKind.HARD),
        (TokenKind.SOFT_SEPARATOR, False, False, True, SeparatorKind.SOFT),
        (TokenKind.UNKNOWN, False, False, False, None),
    ],
)
def test_kind_predicates(kind, word, stopword, separator, sep_kind):
    token = Token(kind=kind, lemma="x")
    assert token.is_word() == word
    assert token.is_stopword() == stopword
    assert token.is_separator() == separator
    assert token.separator_kind() == sep_kind


def test_separator_constructor():
    assert TokenKind.separator(SeparatorKind.HARD) is TokenKind.HARD_SEPARATOR
    assert TokenKind.separator(SeparatorKind.SOFT) is TokenKind.SOFT_SEPARATOR


def test_lengths_of_multibyte_lemma():
    token = Token(lemma="léopard", char_start=2, char_end=9, byte_start=3, byte_end=11)
    assert token.byte_len() == 8
    assert token.char_count() == 7
    assert token.original_byte_len() == 8
    assert token.original_char_count() == 7


def test_original_lengths_with_char_map():
    # "léopard" normalized to "leopard"
    char_map = [(1, 1), (2, 1), (1, 1), (1, 1), (1, 1), (1, 1), (1, 1)]
    token = Token(lemma="leopard", char_map=char_map)
    assert token.original_lengths(3) == (3, 4)
    assert token.original_lengths(0) == (0, 0)
    assert token.original_lengths(7) == (7, 8)
    assert token.original_lengths(100) == (7, 8)


def test_original_lengths_without_char_map():
    token = Token(lemma="léopard")
    assert token.original_lengths(0) == (0, 0)
    assert token.original_lengths(1) == (1, 1)
    # a partially covered character is counted whole
    assert token.original_lengths(2) == (2, 3)
    assert token.original_lengths(3) == (2, 3)
    assert token.original_lengths(4) == (3, 4)


def test_original_lengths_expanding_char_map():
    # one original char normalized to three bytes
    token = Token(lemma="abc", char_map=[(2, 3), (1, 1)])
    assert token.original_lengths(1) == (1, 2)
    assert token.original_lengths(3) == (1, 2)
    assert token.original_lengths(4) == (2, 3)


@given(st.text())
def test_full_lemma_without_char_map(lemma):
    token = Token(lemma=lemma)
    assert token.original_lengths(token.byte_len()) == (token.char_count(), token.byte_len())


@given(st.text(), st.integers(min_value=0, max_value=64))
def test_original_lengths_bounded(lemma, num_bytes):
    token = Token(lemma=lemma)
    chars, length = token.original_lengths(num_bytes)
    assert chars <= token.char_count()
    assert length <= token.byte_len()
    assert length >= min(num_bytes, token.byte_len())