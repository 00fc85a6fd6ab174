"""Ideographic variant table (kVariants) loading."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from os import PathLike


class KVariantClass(Enum):
    """Relation between a source ideograph and its variant."""

    WRONG = "wrong!"
    SEMANTIC_VARIANT = "sem"
    SIMPLIFIED = "simp"
    OLD = "old"
    EQUAL = "="


@dataclass(frozen=True)
class KVariant:
    source_ideograph: str
    classification: KVariantClass
    destination_ideograph: str


def minify_rows(lines: Iterable[str]) -> Iterator[tuple[str, str, str]]:
    """Read tab separated kVariants lines and yield (lhs, relation, rhs).

    Each side keeps only its first character, so "㨲 (U+3A32)" becomes "㨲".
    Raises ValueError on a row that does not hold three non-empty fields.
    """
    reader = csv.reader(lines, delimiter="\t")
    for row in reader:
        if not row:
            continue
        if len(row) != 3:
            raise ValueError(
                f"line {reader.line_num}: expected 3 fields, found {len(row)}"
            )
        lhs, relation, rhs = row
        if not lhs or not rhs:
            raise ValueError(f"line {reader.line_num}: empty ideograph field")
        yield lhs[0], relation, rhs[0]


def parse_kvariants(lines: Iterable[str]) -> dict[str, KVariant]:
    """Build the map from source ideograph to KVariant from kVariants lines.

    Rows with an unknown relation are ignored.
    """
    relations = {member.value: member for member in KVariantClass}
    variants: dict[str, KVariant] = {}
    for lhs, relation, rhs in minify_rows(lines):
        classification = relations.get(relation)
        if classification is None:
            continue
        variants[lhs] = KVariant(lhs, classification, rhs)
    return variants


def load_kvariants(path: str | PathLike[str]) -> dict[str, KVariant]:
    """Load a kVariants tab separated file."""
    with open(path, encoding="utf-8", newline="") as handle:
        return parse_kvariants(handle)