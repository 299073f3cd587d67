"""Draft assembly: fragments, normalization, connectors, masking.

Every call builds fresh values; nothing is shared between calls except the
immutable pattern table.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping, Optional

from kuchikomi.composition.models import FragmentSpec, GenerateOptions, SentenceFragment
from kuchikomi.composition.styles import FIELD_FILLERS, STYLE_SPECS
from kuchikomi.core.types import RandomSource, ReviewInput
from kuchikomi.masking import default_patterns
from kuchikomi.masking.masker import mask
from kuchikomi.masking.models import NGPattern
from kuchikomi.models import STYLE_ORDER, Draft, DraftStyle, ReviewField, field_text
from kuchikomi.normalization.normalizer import SentenceNormalizer, split_sentences
from kuchikomi.planning.connector import (
    CONNECTOR_POOLS,
    ConnectorPlanner,
    default_random_source,
)

log = logging.getLogger(__name__)

SEPARATOR = "。"
CONNECTOR_JOINER = "、"

_TERMINAL = re.compile(r"[。．！!？?\s]+$")
_ALL_CONNECTORS = tuple(sorted({c for pool in CONNECTOR_POOLS.values() for c in pool}))
_TRUTHY = {"1", "true", "yes", "on"}


def _strip_terminal(text: str) -> str:
    return _TERMINAL.sub("", text.strip())


def _opener(text: str) -> str:
    """The connector word *text* already starts with, or ``""``."""
    return next((c for c in _ALL_CONNECTORS if text.startswith(c)), "")


def _flag(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


class DraftComposer:
    """Composes short / standard / polite drafts from review input."""

    def __init__(
        self,
        patterns: Optional[Iterable[NGPattern]] = None,
        *,
        normalizer: Optional[SentenceNormalizer] = None,
        seed: Optional[int] = None,
        anonymize_by_default: bool = False,
    ) -> None:
        self._patterns = tuple(default_patterns() if patterns is None else patterns)
        self._normalizer = normalizer or SentenceNormalizer()
        self._seed = seed
        self._anonymize_by_default = anonymize_by_default

    @property
    def patterns(self) -> tuple[NGPattern, ...]:
        return self._patterns

    def generate_all(
        self,
        review: ReviewInput,
        options: Optional[GenerateOptions] = None,
    ) -> list[Draft]:
        """Compose one draft per style, in ``STYLE_ORDER``."""
        if not isinstance(review, Mapping):
            review = {}
        if options is None:
            anonymize = review.get(ReviewField.ANONYMIZE.value, self._anonymize_by_default)
            options = GenerateOptions(anonymize=_flag(anonymize))

        random_source = options.random_source or default_random_source(self._seed)
        drafts = [
            self.compose(
                review,
                style,
                anonymize=options.anonymize,
                random_source=random_source,
            )
            for style in STYLE_ORDER
        ]
        log.debug(
            "Generated %d drafts (anonymize=%s, masked=%d)",
            len(drafts),
            options.anonymize,
            sum(1 for d in drafts if d.masked),
        )
        return drafts

    def compose(
        self,
        review: ReviewInput,
        style: DraftStyle,
        *,
        anonymize: bool = False,
        random_source: Optional[RandomSource] = None,
    ) -> Draft:
        """Compose a single draft for *style*."""
        fragments = self.fragments(review, style)
        planner = ConnectorPlanner(style, random_source or default_random_source(self._seed))

        openers = [_opener(f.text) for f in fragments]
        parts: list[str] = []
        for position, fragment in enumerate(fragments):
            text = fragment.text
            if openers[position]:
                planner.record(openers[position])
            else:
                upcoming = next((o for o in openers[position + 1:] if o), "")
                connector = planner.plan(position, avoid=(upcoming,) if upcoming else ())
                if connector:
                    text = f"{connector}{CONNECTOR_JOINER}{text}"
            parts.append(text)

        result = mask(SEPARATOR.join(parts) + SEPARATOR, self._patterns, anonymize)
        log.debug(
            "Composed %s draft (%d fragments, masked=%s)",
            style.value,
            len(fragments),
            result.masked,
        )
        return Draft(
            style=style,
            text=result.text,
            masked=result.masked,
            notices=result.messages,
        )

    def fragments(self, review: ReviewInput, style: DraftStyle) -> list[SentenceFragment]:
        """The style's normalized fragment sequence for *review*."""
        if not isinstance(review, Mapping):
            review = {}
        texts = [
            text
            for text in (self._fragment_text(review, spec) for spec in STYLE_SPECS[style].fragments)
            if text
        ]
        last = len(texts) - 1
        return [SentenceFragment(text=t, is_terminal=i == last) for i, t in enumerate(texts)]

    def _fragment_text(self, review: ReviewInput, spec: FragmentSpec) -> str:
        if spec.source is None:
            value = spec.text
        else:
            value = field_text(review, spec.source)
            if spec.first_sentence_only:
                sentences = split_sentences(value)
                value = sentences[0] if sentences else ""
            value = _strip_terminal(value)
            if not value:
                # Optional fields without a filler are dropped
                value = FIELD_FILLERS.get(spec.source, "")
                if not value:
                    return ""

        return _strip_terminal(self._normalizer.ensure_polite(spec.template.format(value=value)))


def generate_all(
    review: ReviewInput,
    options: Optional[GenerateOptions] = None,
    *,
    patterns: Optional[Iterable[NGPattern]] = None,
) -> list[Draft]:
    """Generate the three drafts using *patterns* or the packaged table."""
    return DraftComposer(patterns).generate_all(review, options)
