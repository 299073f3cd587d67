"""Shared fixtures for kuchikomi tests."""

from __future__ import annotations

from typing import Any

import pytest

from kuchikomi.masking import default_patterns
from kuchikomi.masking.models import NGPattern
from tests.fakes.fake_random import ConstantRandom


@pytest.fixture
def patterns() -> tuple[NGPattern, ...]:
    """The packaged default NG pattern table."""
    return default_patterns()


@pytest.fixture
def full_review() -> dict[str, Any]:
    """Review input with every field filled, plain register throughout."""
    return {
        "visit_purpose": "カットとカラーをお願いした",
        "impression": "仕上がりがとても良かった",
        "staff": "担当の方が丁寧に説明してくれた",
        "notes": "駐車場が広くて便利だ",
        "anonymize": False,
    }


@pytest.fixture
def zero_random() -> ConstantRandom:
    """Random source that always returns 0.0 (connector on every slot)."""
    return ConstantRandom(0.0)


@pytest.fixture
def high_random() -> ConstantRandom:
    """Random source that always returns 0.99 (connector only at position 1)."""
    return ConstantRandom(0.99)
