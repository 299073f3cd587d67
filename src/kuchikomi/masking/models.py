"""Masking data models: NG patterns, hits, and mask results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Pattern


class PatternCategory(str, Enum):
    """Kind of personally identifying fragment a pattern detects."""

    PHONE = "phone"
    EMAIL = "email"
    POSTAL = "postal"
    ADDRESS = "address"


@dataclass(frozen=True)
class NGPattern:
    """A single structural PII pattern loaded from a backend.

    ``matcher`` keeps the regex source as written in the table so it can be
    listed and reloaded; ``regex`` is its compiled form.
    """

    pattern_id: str
    matcher: str
    category: PatternCategory
    replacement: str
    message: str
    regex: Pattern[str] = field(compare=False, repr=False)


@dataclass(frozen=True)
class MaskHit:
    """One substituted span, in original-text coordinates."""

    pattern_id: str
    category: PatternCategory
    start: int
    end: int
    message: str


@dataclass(frozen=True)
class MaskResult:
    """Outcome of a masking pass.

    ``masked`` is False both for the disabled fast path and when nothing
    matched; neither is an error.
    """

    text: str
    masked: bool = False
    # Claim order: pattern declaration order, then left to right
    hits: tuple[MaskHit, ...] = ()

    @property
    def messages(self) -> tuple[str, ...]:
        """Advisory messages of the patterns that fired, de-duplicated."""
        seen: list[str] = []
        for hit in self.hits:
            if hit.message and hit.message not in seen:
                seen.append(hit.message)
        return tuple(seen)
