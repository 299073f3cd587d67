"""Pattern backend protocol: defines the contract all backends implement."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from kuchikomi.masking.models import NGPattern, PatternCategory


@runtime_checkable
class IPatternBackend(Protocol):
    """Protocol for NG pattern table sources (file, memory)."""

    def list_patterns(
        self,
        *,
        category: PatternCategory | None = None,
    ) -> list[NGPattern]:
        """Return patterns in declaration order, optionally filtered by category."""
        ...

    def get_pattern(self, pattern_id: str) -> NGPattern:
        """Get a single pattern by ID. Raises KeyError if not found."""
        ...

    def get_version(self) -> int:
        """Return the table version number."""
        ...
