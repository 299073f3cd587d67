"""Sentence-ending normalization to the polite (です/ます) register."""

from __future__ import annotations

from kuchikomi.normalization.normalizer import (
    POLITE_ENDINGS,
    SentenceNormalizer,
    ensure_polite,
    is_polite,
    normalize,
    split_sentences,
)

__all__ = [
    "POLITE_ENDINGS",
    "SentenceNormalizer",
    "ensure_polite",
    "is_polite",
    "normalize",
    "split_sentences",
]
