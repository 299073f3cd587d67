"""Draft composition: the public generation entry point.

    from kuchikomi.composition import GenerateOptions, generate_all
    drafts = generate_all(review, GenerateOptions(anonymize=True))
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kuchikomi.composition.composer import DraftComposer, generate_all
from kuchikomi.composition.models import (
    FragmentSpec,
    GenerateOptions,
    SentenceFragment,
    StyleSpec,
)
from kuchikomi.composition.styles import FIELD_FILLERS, POLITE_CLOSING, STYLE_SPECS

if TYPE_CHECKING:
    from kuchikomi.core.config import AppSettings


def create_composer(settings: AppSettings) -> DraftComposer:
    """Create a DraftComposer wired to the configured pattern table and seed."""
    from kuchikomi.masking import create_pattern_backend

    backend = create_pattern_backend(settings)
    return DraftComposer(
        backend.list_patterns(),
        seed=settings.composer.seed,
        anonymize_by_default=settings.masking.anonymize_by_default,
    )


__all__ = [
    "DraftComposer",
    "FIELD_FILLERS",
    "FragmentSpec",
    "GenerateOptions",
    "POLITE_CLOSING",
    "STYLE_SPECS",
    "SentenceFragment",
    "StyleSpec",
    "create_composer",
    "generate_all",
]
