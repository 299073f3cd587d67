"""In-memory pattern backend for testing."""

from __future__ import annotations

from typing import Iterable

from kuchikomi.masking.models import NGPattern, PatternCategory
from kuchikomi.masking.table import validate_table


class MemoryPatternBackend:
    """Tuple-backed pattern backend for unit tests.

    Patterns go through the same cross-pattern checks as a loaded file.
    """

    def __init__(self, patterns: Iterable[NGPattern] | None = None, *, version: int = 1) -> None:
        self._patterns = validate_table(patterns or ())
        self._version = version

    def list_patterns(
        self,
        *,
        category: PatternCategory | None = None,
    ) -> list[NGPattern]:
        """Return patterns, optionally filtered."""
        if category is None:
            return list(self._patterns)
        return [p for p in self._patterns if p.category == category]

    def get_pattern(self, pattern_id: str) -> NGPattern:
        """Get a pattern by ID."""
        for pattern in self._patterns:
            if pattern.pattern_id == pattern_id:
                return pattern
        raise KeyError(f"Pattern {pattern_id!r} not found")

    def get_version(self) -> int:
        """Return the table version."""
        return self._version
