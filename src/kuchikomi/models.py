"""Pydantic data models for kuchikomi.

Review input is a plain mapping owned by the caller; the engine only reads
it.  Drafts are frozen once created and superseded by the next call.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

# ── Input fields ─────────────────────────────────────────────────────


class ReviewField(str, Enum):
    """Named fields of a review input mapping."""

    VISIT_PURPOSE = "visit_purpose"
    IMPRESSION = "impression"
    STAFF = "staff"
    NOTES = "notes"
    ANONYMIZE = "anonymize"


# Declaration order is the order of ``ValidationResult.missing_fields``
REQUIRED_FIELDS: tuple[ReviewField, ...] = (
    ReviewField.VISIT_PURPOSE,
    ReviewField.IMPRESSION,
)

FREE_TEXT_FIELDS: tuple[ReviewField, ...] = (
    ReviewField.VISIT_PURPOSE,
    ReviewField.IMPRESSION,
    ReviewField.STAFF,
    ReviewField.NOTES,
)


def field_text(review: Mapping[str, Any], field: ReviewField) -> str:
    """Return the trimmed string content of *field*, or ``""``.

    Non-string values count as absent.
    """
    if not isinstance(review, Mapping):
        return ""
    value = review.get(field.value)
    if not isinstance(value, str):
        return ""
    return value.strip()


# ── Drafts ───────────────────────────────────────────────────────────


class DraftStyle(str, Enum):
    """Stylistic variant of a generated draft."""

    SHORT = "short"
    STANDARD = "standard"
    POLITE = "polite"


STYLE_ORDER: tuple[DraftStyle, ...] = (
    DraftStyle.SHORT,
    DraftStyle.STANDARD,
    DraftStyle.POLITE,
)


class Draft(BaseModel):
    """One generated candidate review text tagged with a style."""

    model_config = ConfigDict(frozen=True)

    style: DraftStyle
    text: str
    masked: bool = False
    notices: tuple[str, ...] = Field(default_factory=tuple)
