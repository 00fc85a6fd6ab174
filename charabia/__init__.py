"""Script-aware text segmentation, separator lists, tokens and kVariants tables."""

__version__ = "0.1.0"

__all__ = [
    "arabic",
    "dictionary",
    "kvariants",
    "latin",
    "segmenter",
    "separators",
    "token",
    "tokenizer",
]