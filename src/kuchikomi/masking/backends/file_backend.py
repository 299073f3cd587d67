"""File-backed pattern backend: loads an NG pattern table from YAML or JSON."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import yaml

from kuchikomi.exceptions import MalformedPatternTableError
from kuchikomi.masking.models import NGPattern, PatternCategory
from kuchikomi.masking.table import parse_pattern_table

log = logging.getLogger(__name__)


class FilePatternBackend:
    """Loads an NG pattern table from a YAML or JSON file on disk.

    The file is lazy-loaded on first access.  Any malformed entry fails the
    whole load with ``MalformedPatternTableError``.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)
        self._patterns: tuple[NGPattern, ...] | None = None
        self._version: int = 1

    @property
    def path(self) -> Path:
        return self._path

    def list_patterns(
        self,
        *,
        category: PatternCategory | None = None,
    ) -> list[NGPattern]:
        """Return patterns from the file, optionally filtered."""
        patterns = self._ensure_loaded()
        if category is None:
            return list(patterns)
        return [p for p in patterns if p.category == category]

    def get_pattern(self, pattern_id: str) -> NGPattern:
        """Get a single pattern by ID."""
        for pattern in self._ensure_loaded():
            if pattern.pattern_id == pattern_id:
                return pattern
        raise KeyError(f"Pattern {pattern_id!r} not found in {self._path}")

    def get_version(self) -> int:
        """Return the table version."""
        self._ensure_loaded()
        return self._version

    def _ensure_loaded(self) -> tuple[NGPattern, ...]:
        """Lazy-load the pattern file on first access."""
        if self._patterns is not None:
            return self._patterns

        if not self._path.exists():
            raise FileNotFoundError(f"Pattern file not found: {self._path}")

        raw_text = self._path.read_text(encoding="utf-8")
        try:
            if self._path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(raw_text)
            else:
                data = json.loads(raw_text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise MalformedPatternTableError(f"Cannot parse {self._path}: {exc}") from exc

        self._version, self._patterns = parse_pattern_table(data)
        log.info(
            "Loaded %d NG patterns from %s (version %d)",
            len(self._patterns),
            self._path,
            self._version,
        )
        return self._patterns
