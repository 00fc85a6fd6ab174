from hypothesis import given
from hypothesis import strategies as st

from charabia.latin import LatinSegmenter
from charabia.tokenizer import TokenizerBuilder

ORIGINAL = "The quick (\"brown\") fox can't jump 32.3 feet, right? Brr, it's 29.3°F!"


def test_last_token_with_default_builder():
    text = "Hello world! Pleased to see you."
    tokens = list(TokenizerBuilder().build().segment(text))
    assert tokens[-1].lemma == "."


def test_default_segmentation_start():
    segments = list(TokenizerBuilder().build().segment_str(ORIGINAL))
    assert segments[:4] == ["The", " ", "quick", " "]


def test_custom_separators():
    tokenizer = TokenizerBuilder().separators([" ", ", ", ". ", "?", "!"]).build()
    assert list(tokenizer.segment_str(ORIGINAL)) == [
        "The", " ", "quick", " ", "(\"brown\")", " ", "fox", " ", "can't", " ",
        "jump", " ", "32.3", " ", "feet", ", ", "right", "?", " ", "Brr", ", ",
        "it's", " ", "29.3°F", "!",
    ]


def test_words_dict_with_default_separators():
    tokenizer = TokenizerBuilder().words_dict(["J. R. R.", "Dr.", "J. K."]).build()
    text = "J. R. R. Tolkien. J. K. Rowling. Dr. Seuss"
    assert list(tokenizer.segment_str(text)) == [
        "J. R. R.", " ", "Tolkien", ". ", "J. K.", " ", "Rowling", ". ", "Dr.", " ", "Seuss",
    ]


def test_words_dict_with_custom_separators():
    tokenizer = TokenizerBuilder().words_dict(["Dr."]).separators([" "]).build()
    assert list(tokenizer.segment_str("Dr. Who a.b")) == ["Dr.", " ", "Who", " ", "a.b"]


def test_custom_segmenter_without_camel_case():
    tokenizer = TokenizerBuilder().segmenter(LatinSegmenter(camel_case=False)).build()
    assert list(tokenizer.segment_str("camelCase word")) == ["camelCase", " ", "word"]


def test_default_segmenter_splits_camel_case():
    tokenizer = TokenizerBuilder().build()
    assert list(tokenizer.segment_str("camelCase word")) == ["camel", "Case", " ", "word"]


def test_builder_can_be_reused():
    builder = TokenizerBuilder().separators([" "])
    first = list(builder.build().segment_str("a-b c"))
    second = list(builder.build().segment_str("a-b c"))
    assert first == second == ["a-b", " ", "c"]


def test_token_positions_point_into_original():
    text = "Brr, it's 29.3°F! café"
    encoded = text.encode("utf-8")
    for token in TokenizerBuilder().build().segment(text):
        assert text[token.char_start:token.char_end] == token.lemma
        assert encoded[token.byte_start:token.byte_end].decode("utf-8") == token.lemma


@given(st.text())
def test_shorten_after_segmented(text):
    segments = list(TokenizerBuilder().build().segment_str(text))
    assert len(segments) <= len(text)
    assert "".join(segments) == text