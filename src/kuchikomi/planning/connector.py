"""Position-based connector planning.

Policy per fragment position within one draft:

- position 0 never gets a connector;
- position 1 always gets one from the style's pool;
- position 2+ gets one when a draw falls below ``CONNECTOR_PROBABILITY``.

A chosen connector never equals the previous connector used in the same
draft, including one a fragment already opens with (``record``).  Callers
can also keep a draw away from the connector the next fragment opens with
(``avoid``).  All randomness comes from the injected ``random_source`` so a fixed
source replays the same plan.
"""

from __future__ import annotations

import random
from typing import Iterable, Mapping, Optional, Sequence

from kuchikomi.core.types import RandomSource
from kuchikomi.models import DraftStyle

CONNECTOR_PROBABILITY = 0.5

CONNECTOR_POOLS: Mapping[DraftStyle, tuple[str, ...]] = {
    DraftStyle.SHORT: ("また", "そして"),
    DraftStyle.STANDARD: ("また", "さらに", "それに"),
    DraftStyle.POLITE: ("また", "さらに", "加えて", "なお"),
}


def default_random_source(seed: Optional[int] = None) -> RandomSource:
    """A private ``random.Random`` stream; never the module-global generator."""
    return random.Random(seed).random


def _pick(candidates: Sequence[str], draw: float) -> str:
    index = min(int(draw * len(candidates)), len(candidates) - 1)
    return candidates[max(index, 0)]


class ConnectorPlanner:
    """Plans connectors for one draft.  Create one planner per draft."""

    def __init__(
        self,
        style: DraftStyle,
        random_source: RandomSource,
        *,
        pool: Optional[Sequence[str]] = None,
    ) -> None:
        self._pool = tuple(CONNECTOR_POOLS[style] if pool is None else pool)
        if len(self._pool) < 2:
            raise ValueError(
                f"Connector pool for {style.value!r} needs at least two entries, "
                f"got {len(self._pool)}"
            )
        self._style = style
        self._random = random_source
        self._last = ""

    @property
    def style(self) -> DraftStyle:
        return self._style

    @property
    def pool(self) -> tuple[str, ...]:
        return self._pool

    def plan(self, position: int, *, avoid: Iterable[str] = ()) -> str:
        """Return the connector for *position*, or ``""`` for none.

        Connectors in *avoid* are never chosen.  If that leaves nothing to
        choose from, the position gets no connector.
        """
        if position < 0:
            raise ValueError(f"position must be >= 0, got {position}")
        if position == 0:
            return ""
        if position >= 2 and self._random() >= CONNECTOR_PROBABILITY:
            return ""

        excluded = {self._last, *avoid}
        candidates = [c for c in self._pool if c not in excluded]
        if not candidates:
            return ""
        connector = _pick(candidates, self._random())
        self._last = connector
        return connector

    def record(self, connector: str) -> None:
        """Note a connector the fragment text already opens with."""
        self._last = connector


def plan_connectors(
    style: DraftStyle,
    count: int,
    random_source: RandomSource,
) -> list[str]:
    """Plan connectors for a draft of *count* fragments."""
    planner = ConnectorPlanner(style, random_source)
    return [planner.plan(position) for position in range(count)]
