"""Structural PII detection and substitution.

Patterns run in declaration order.  A match that overlaps a span already
claimed (by an earlier pattern or an earlier match) is dropped, so a span is
substituted at most once and replacement tokens are never re-scanned.

A substitution can unblock a neighbouring match whose lookaround refused
the original character (``2番地3taro@...``), so scanning repeats over the
partially substituted text until a pass claims nothing new.  Hits always
refer to original-text coordinates.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from kuchikomi.masking.models import MaskHit, MaskResult, NGPattern

log = logging.getLogger(__name__)

# (view_start, view_end, original_start) of one unsubstituted run
_Run = tuple[int, int, int]


def _render(
    text: str,
    hits: Iterable[MaskHit],
    replacements: Mapping[str, str],
) -> tuple[str, list[_Run], list[tuple[int, int]]]:
    """Substitute *hits* into *text*.

    Returns the rendered text, the runs of untouched original text, and the
    token spans, both in rendered coordinates.
    """
    parts: list[str] = []
    runs: list[_Run] = []
    tokens: list[tuple[int, int]] = []
    cursor = view = 0
    for hit in sorted(hits, key=lambda h: h.start):
        chunk = text[cursor:hit.start]
        runs.append((view, view + len(chunk), cursor))
        parts.append(chunk)
        view += len(chunk)

        token = replacements[hit.pattern_id]
        tokens.append((view, view + len(token)))
        parts.append(token)
        view += len(token)
        cursor = hit.end

    chunk = text[cursor:]
    runs.append((view, view + len(chunk), cursor))
    parts.append(chunk)
    return "".join(parts), runs, tokens


def _scan(
    view: str,
    runs: list[_Run],
    claimed: list[tuple[int, int]],
    table: tuple[NGPattern, ...],
) -> list[MaskHit]:
    found: list[MaskHit] = []
    for pattern in table:
        for match in pattern.regex.finditer(view):
            start, end = match.span()
            if start == end:
                continue
            if any(start < c_end and c_start < end for c_start, c_end in claimed):
                continue
            claimed.append((start, end))
            # Not overlapping a token means the span sits inside a single run
            origin = next(o + start - vs for vs, ve, o in runs if vs <= start and end <= ve)
            found.append(
                MaskHit(
                    pattern_id=pattern.pattern_id,
                    category=pattern.category,
                    start=origin,
                    end=origin + end - start,
                    message=pattern.message,
                )
            )
    return found


def find_matches(text: str, patterns: Iterable[NGPattern]) -> tuple[MaskHit, ...]:
    """Return the spans ``mask`` would substitute, in claim order."""
    if not text:
        return ()

    table = tuple(patterns)
    replacements = {p.pattern_id: p.replacement for p in table}
    hits: list[MaskHit] = []
    while True:
        view, runs, tokens = _render(text, hits, replacements)
        found = _scan(view, runs, tokens, table)
        if not found:
            return tuple(hits)
        hits.extend(found)


def mask(text: str, patterns: Iterable[NGPattern], enabled: bool) -> MaskResult:
    """Substitute every PII-shaped span in *text* with its pattern's token.

    With ``enabled=False`` the text is returned untouched and no scan runs.
    """
    if not enabled:
        return MaskResult(text=text, masked=False)

    table = tuple(patterns)
    hits = find_matches(text, table)
    if not hits:
        return MaskResult(text=text, masked=False)

    masked_text, _, _ = _render(text, hits, {p.pattern_id: p.replacement for p in table})
    log.debug("Masked %d span(s) across %d pattern(s)", len(hits), len({h.pattern_id for h in hits}))
    return MaskResult(text=masked_text, masked=True, hits=hits)
