"""Composition data models: fragment and style specifications."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from kuchikomi.core.types import RandomSource
from kuchikomi.models import DraftStyle, ReviewField


@dataclass(frozen=True)
class FragmentSpec:
    """One slot in a style's fragment sequence.

    ``source`` names the input field feeding the slot; a slot without a
    source contributes the fixed ``text``.
    """

    source: Optional[ReviewField] = None
    template: str = "{value}"
    text: str = ""
    first_sentence_only: bool = False


@dataclass(frozen=True)
class StyleSpec:
    """Fixed fragment sequence of one draft style."""

    style: DraftStyle
    fragments: tuple[FragmentSpec, ...]


@dataclass(frozen=True)
class SentenceFragment:
    """A normalized clause ready for connector planning."""

    text: str
    is_terminal: bool = False


@dataclass(frozen=True)
class GenerateOptions:
    """Per-call generation options.

    ``random_source`` drives connector placement; pass a fixed source to
    make output reproducible.
    """

    anonymize: bool = False
    random_source: Optional[RandomSource] = None
