"""Connector planning: which connective phrase prefixes each fragment."""

from __future__ import annotations

from kuchikomi.planning.connector import (
    CONNECTOR_POOLS,
    CONNECTOR_PROBABILITY,
    ConnectorPlanner,
    default_random_source,
    plan_connectors,
)

__all__ = [
    "CONNECTOR_POOLS",
    "CONNECTOR_PROBABILITY",
    "ConnectorPlanner",
    "default_random_source",
    "plan_connectors",
]
