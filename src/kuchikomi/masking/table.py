"""Pattern table parsing and load-time checks.

A table either loads completely or raises ``MalformedPatternTableError``.
The checks here are what keep masking idempotent and free of
vocabulary-only false positives:

- every matcher compiles and never matches the empty string;
- no matcher matches a bare administrative-unit character;
- no replacement token is matched by any pattern in the table.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Mapping

from kuchikomi.exceptions import MalformedPatternTableError
from kuchikomi.masking.models import NGPattern, PatternCategory

log = logging.getLogger(__name__)

# Characters that appear in place names and addresses but also in ordinary
# prose (市場, 区別, 番組 ...).  A pattern matching one of these on its own
# would mask everyday text.
ADMINISTRATIVE_UNITS = "都道府県市区郡町村丁目番地号"

_REQUIRED_KEYS = ("pattern_id", "matcher", "category", "replacement")


def build_pattern(raw: Mapping[str, Any]) -> NGPattern:
    """Compile one raw table entry into an ``NGPattern``."""
    pattern_id = str(raw.get("pattern_id", ""))
    missing = [key for key in _REQUIRED_KEYS if not raw.get(key)]
    if missing:
        raise MalformedPatternTableError(
            f"Pattern {pattern_id or '<unnamed>'} is missing {', '.join(missing)}",
            pattern_id,
        )

    try:
        category = PatternCategory(raw["category"])
    except ValueError as exc:
        raise MalformedPatternTableError(
            f"Pattern {pattern_id} has unknown category {raw['category']!r}",
            pattern_id,
        ) from exc

    matcher = str(raw["matcher"])
    try:
        regex = re.compile(matcher)
    except re.error as exc:
        raise MalformedPatternTableError(
            f"Pattern {pattern_id} does not compile: {exc}", pattern_id
        ) from exc

    if regex.search("") is not None:
        raise MalformedPatternTableError(
            f"Pattern {pattern_id} matches the empty string", pattern_id
        )
    for char in ADMINISTRATIVE_UNITS:
        if regex.search(char) is not None:
            raise MalformedPatternTableError(
                f"Pattern {pattern_id} matches the bare character {char!r}",
                pattern_id,
            )

    return NGPattern(
        pattern_id=pattern_id,
        matcher=matcher,
        category=category,
        replacement=str(raw["replacement"]),
        message=str(raw.get("message", "")),
        regex=regex,
    )


def validate_table(patterns: Iterable[NGPattern]) -> tuple[NGPattern, ...]:
    """Check cross-pattern invariants and return the table as a tuple."""
    table = tuple(patterns)

    seen: set[str] = set()
    for pattern in table:
        if pattern.pattern_id in seen:
            raise MalformedPatternTableError(
                f"Duplicate pattern id {pattern.pattern_id}", pattern.pattern_id
            )
        seen.add(pattern.pattern_id)

    for pattern in table:
        for other in table:
            if other.regex.search(pattern.replacement) is not None:
                raise MalformedPatternTableError(
                    f"Replacement {pattern.replacement!r} of {pattern.pattern_id} "
                    f"is matched by {other.pattern_id}",
                    pattern.pattern_id,
                )
    return table


def parse_pattern_table(data: Any) -> tuple[int, tuple[NGPattern, ...]]:
    """Parse a loaded YAML/JSON document into ``(version, patterns)``."""
    if not isinstance(data, Mapping):
        raise MalformedPatternTableError("Pattern table must be a mapping")
    entries = data.get("patterns")
    if not isinstance(entries, list):
        raise MalformedPatternTableError("Pattern table has no 'patterns' list")

    version = data.get("version", 1)
    if not isinstance(version, int):
        raise MalformedPatternTableError(f"Invalid table version {version!r}")

    patterns = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise MalformedPatternTableError(f"Pattern entry must be a mapping: {entry!r}")
        patterns.append(build_pattern(entry))
    return version, validate_table(patterns)
