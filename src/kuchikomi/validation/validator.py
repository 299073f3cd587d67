"""Required-field checks for review input."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from kuchikomi.core.types import ReviewInput
from kuchikomi.masking.masker import find_matches
from kuchikomi.masking.models import NGPattern
from kuchikomi.models import FREE_TEXT_FIELDS, REQUIRED_FIELDS, ReviewField, field_text
from kuchikomi.validation.models import ValidationResult, ValidationWarning

log = logging.getLogger(__name__)

FIELD_LABELS: dict[ReviewField, str] = {
    ReviewField.VISIT_PURPOSE: "ご利用内容",
    ReviewField.IMPRESSION: "感想",
    ReviewField.STAFF: "スタッフについて",
    ReviewField.NOTES: "その他メモ",
}


def validate(
    review: ReviewInput,
    *,
    patterns: Optional[Iterable[NGPattern]] = None,
) -> ValidationResult:
    """Check required fields; optionally flag PII-shaped text in free-text fields."""
    missing = tuple(f.value for f in REQUIRED_FIELDS if not field_text(review, f))
    warnings = tuple(
        ValidationWarning(
            field_id=field_id,
            message=f"{FIELD_LABELS[ReviewField(field_id)]}が未入力です",
        )
        for field_id in missing
    )

    notices: list[str] = []
    if patterns is not None:
        table = tuple(patterns)
        for review_field in FREE_TEXT_FIELDS:
            for hit in find_matches(field_text(review, review_field), table):
                if hit.message and hit.message not in notices:
                    notices.append(hit.message)

    if missing:
        log.debug("Review input missing %d required field(s): %s", len(missing), ", ".join(missing))
    return ValidationResult(
        ok=not missing,
        missing_fields=missing,
        warnings=warnings,
        notices=tuple(notices),
    )
