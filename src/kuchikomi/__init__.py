"""kuchikomi: draft customer reviews in three styles with optional PII masking.

Public API::

    from kuchikomi import GenerateOptions, generate_all, validate

    result = validate(review)            # advisory only
    drafts = generate_all(review, GenerateOptions(anonymize=True))
    for draft in drafts:                 # short, standard, polite
        print(draft.style.value, draft.text)
"""

from __future__ import annotations

from kuchikomi.composition import (
    DraftComposer,
    GenerateOptions,
    create_composer,
    generate_all,
)
from kuchikomi.core.config import AppSettings
from kuchikomi.exceptions import KuchikomiError, MalformedPatternTableError
from kuchikomi.masking import (
    FilePatternBackend,
    MaskResult,
    MemoryPatternBackend,
    NGPattern,
    PatternCategory,
    default_patterns,
    mask,
)
from kuchikomi.models import REQUIRED_FIELDS, STYLE_ORDER, Draft, DraftStyle, ReviewField
from kuchikomi.normalization import SentenceNormalizer, normalize
from kuchikomi.planning import ConnectorPlanner, plan_connectors
from kuchikomi.validation import ValidationResult, ValidationWarning, validate

__version__ = "0.1.0"

__all__ = [
    "AppSettings",
    "ConnectorPlanner",
    "Draft",
    "DraftComposer",
    "DraftStyle",
    "FilePatternBackend",
    "GenerateOptions",
    "KuchikomiError",
    "MalformedPatternTableError",
    "MaskResult",
    "MemoryPatternBackend",
    "NGPattern",
    "PatternCategory",
    "REQUIRED_FIELDS",
    "ReviewField",
    "STYLE_ORDER",
    "SentenceNormalizer",
    "ValidationResult",
    "ValidationWarning",
    "create_composer",
    "default_patterns",
    "generate_all",
    "mask",
    "normalize",
    "plan_connectors",
    "validate",
]
