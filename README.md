# charabia

Script-aware text segmentation for search and indexing.

`charabia` cuts text into segments in three steps:

1. the text is split into runs of one script (the script of a letter is taken
   from the first word of its Unicode name, such as `LATIN` or `ARABIC`;
   digits, spaces and punctuation stay with the run before them);
2. each run is cut on separators: punctuation, spaces, dashes and similar
   marks from many writing systems, plus `". "` and `", "`;
3. the text between separators goes to the segmenter for that script.

Each segment can also be produced as a `Token` that records its character and
UTF-8 byte offsets in the input text.

## Installation

```
pip install charabia
```

## Segmenting text

```python
from charabia.segmenter import segment, segment_str

print(list(segment_str("camelCase fox, right?")))
# ['camel', 'Case', ' ', 'fox', ', ', 'right', '?']

for token in segment("Hello world"):
    print(token.lemma, token.char_start, token.char_end, token.byte_start, token.byte_end)
```

`segment` yields `charabia.token.Token` dataclasses with `kind`, `lemma`,
character and byte offsets, an optional `char_map` and `script`. Tokens
from `segment` have the kind `TokenKind.UNKNOWN`. A token answers
`is_word()`, `is_stopword()`, `is_separator()`, `separator_kind()`,
`byte_len()`, `char_count()` and `original_lengths(num_bytes)`.

`SegmenterOption` chooses the separator matcher (`SeparatorMatcher`), the
fallback segmenter and the segmenters per script name. `aho_segment(text,
matcher)` splits a string into matched patterns and the text between them,
tagged with `MatchType.MATCH` or `MatchType.INTERLEAVE`.

## Custom tokenizers

`TokenizerBuilder` sets custom separators, a dictionary of words that must
stay whole, and a fallback segmenter:

```python
from charabia.tokenizer import TokenizerBuilder

tokenizer = TokenizerBuilder().words_dict(["J. R. R.", "Dr.", "J. K."]).build()

print(list(tokenizer.segment_str("J. R. R. Tolkien. J. K. Rowling. Dr. Seuss")))
# ['J. R. R.', ' ', 'Tolkien', '. ', 'J. K.', ' ', 'Rowling', '. ', 'Dr.', ' ', 'Seuss']
```

```python
tokenizer = TokenizerBuilder().separators([" ", ", ", ". ", "?", "!"]).build()
```

`builder.segmenter(...)` takes any object with a `segment_str(text)` method
that yields strings; it is used for Latin text and for every script without
a segmenter of its own. `Tokenizer.segment` and `Tokenizer.segment_str`
yield tokens and strings.

## Segmenters

- `charabia.latin.LatinSegmenter(camel_case=True)` splits words on camelCase
  boundaries (`split_camel_case_bounds`), or leaves them whole.
- `charabia.arabic.ArabicSegmenter` splits the definite article `ال` (and
  `أل`, `إل`, `آل`, `ٱل`) from the start of a word.
- `charabia.dictionary.DictionarySegmenter(words)` takes the longest word of
  the list at each step, or one character where none matches; useful for
  scripts written without spaces.

The separator lists are `DEFAULT_SEPARATORS` and `CONTEXT_SEPARATORS` in
`charabia.separators`.

## Ideograph variants

`charabia.kvariants` reads kVariants tables: tab-separated rows such as
`㨲 (U+3A32)	wrong!	㩍 (U+3A4D)`.

```python
from charabia.kvariants import load_kvariants

variants = load_kvariants("kVariants.tsv")
print(variants["亚"].destination_ideograph)  # 亞
```

`parse_kvariants(lines)` builds the same mapping from any iterable of lines,
ignoring rows with an unknown relation, and `minify_rows(lines)` reduces rows
to their bare ideographs. No table is bundled with the package.

## What it does not do

- It does not normalize or classify tokens: there is no lowercasing, no
  removal of diacritics, no stop words and no hard/soft separator
  classification.
- It does not detect languages; only scripts are told apart.
- It ships no word lists for Chinese, Japanese, Korean, Thai or Khmer; text
  in those scripts is handled by the fallback segmenter unless you supply a
  `DictionarySegmenter` with a word list of your own.

## Running the tests

```
pip install charabia[test]
pytest
```