"""Input validation: advisory required-field checks.

    from kuchikomi.validation import validate
    result = validate(review)
    if not result.ok:
        for warning in result.warnings:
            print(warning.message)
"""

from __future__ import annotations

from kuchikomi.validation.models import ValidationResult, ValidationWarning
from kuchikomi.validation.validator import FIELD_LABELS, validate

__all__ = [
    "FIELD_LABELS",
    "ValidationResult",
    "ValidationWarning",
    "validate",
]
