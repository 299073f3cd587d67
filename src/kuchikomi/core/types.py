"""Shared type aliases for the generation pipeline."""

from __future__ import annotations

from typing import Any, Callable, Mapping

# Caller-owned review fields, keyed by ``ReviewField`` values
ReviewInput = Mapping[str, Any]

# Zero-argument callable returning successive floats in [0, 1)
RandomSource = Callable[[], float]
