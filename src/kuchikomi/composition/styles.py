"""Per-style fragment sequences and required-field fillers."""

from __future__ import annotations

from kuchikomi.composition.models import FragmentSpec, StyleSpec
from kuchikomi.models import DraftStyle, ReviewField

# Neutral stand-ins for required fields left empty
FIELD_FILLERS: dict[ReviewField, str] = {
    ReviewField.VISIT_PURPOSE: "お店を利用しました",
    ReviewField.IMPRESSION: "全体的に満足しています",
}

POLITE_CLOSING = "また利用させていただきたいと思います"

STYLE_SPECS: dict[DraftStyle, StyleSpec] = {
    DraftStyle.SHORT: StyleSpec(
        style=DraftStyle.SHORT,
        fragments=(
            FragmentSpec(source=ReviewField.VISIT_PURPOSE),
            FragmentSpec(source=ReviewField.IMPRESSION, first_sentence_only=True),
            FragmentSpec(source=ReviewField.NOTES, first_sentence_only=True),
        ),
    ),
    DraftStyle.STANDARD: StyleSpec(
        style=DraftStyle.STANDARD,
        fragments=(
            FragmentSpec(source=ReviewField.VISIT_PURPOSE, template="今回は{value}"),
            FragmentSpec(source=ReviewField.IMPRESSION),
            FragmentSpec(source=ReviewField.STAFF),
            FragmentSpec(source=ReviewField.NOTES),
        ),
    ),
    DraftStyle.POLITE: StyleSpec(
        style=DraftStyle.POLITE,
        fragments=(
            FragmentSpec(source=ReviewField.VISIT_PURPOSE, template="先日は{value}"),
            FragmentSpec(source=ReviewField.IMPRESSION),
            FragmentSpec(source=ReviewField.STAFF),
            FragmentSpec(source=ReviewField.NOTES),
            FragmentSpec(text=POLITE_CLOSING),
        ),
    ),
}
