"""PII masking: NG pattern tables, backends, and the masker.

Factory functions::

    from kuchikomi.masking import create_pattern_backend, mask
    backend = create_pattern_backend(settings)
    result = mask(text, backend.list_patterns(), enabled=True)
"""

from __future__ import annotations

from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

from kuchikomi.masking.backends.file_backend import FilePatternBackend
from kuchikomi.masking.backends.memory_backend import MemoryPatternBackend
from kuchikomi.masking.backends.protocol import IPatternBackend
from kuchikomi.masking.masker import find_matches, mask
from kuchikomi.masking.models import MaskHit, MaskResult, NGPattern, PatternCategory
from kuchikomi.masking.table import ADMINISTRATIVE_UNITS, build_pattern, validate_table

if TYPE_CHECKING:
    from kuchikomi.core.config import AppSettings

DEFAULT_PATTERN_FILE = "ng_patterns.yaml"


def default_pattern_path() -> Path:
    """Path of the packaged default pattern table."""
    return Path(str(resources.files("kuchikomi.masking").joinpath(DEFAULT_PATTERN_FILE)))


@lru_cache(maxsize=1)
def default_patterns() -> tuple[NGPattern, ...]:
    """The packaged default table (immutable, loaded once)."""
    return tuple(FilePatternBackend(default_pattern_path()).list_patterns())


def create_pattern_backend(settings: AppSettings) -> IPatternBackend:
    """Create the pattern backend selected by settings."""
    path = settings.masking.pattern_file or default_pattern_path()
    return FilePatternBackend(path)


__all__ = [
    "ADMINISTRATIVE_UNITS",
    "DEFAULT_PATTERN_FILE",
    "FilePatternBackend",
    "IPatternBackend",
    "MaskHit",
    "MaskResult",
    "MemoryPatternBackend",
    "NGPattern",
    "PatternCategory",
    "build_pattern",
    "create_pattern_backend",
    "default_pattern_path",
    "default_patterns",
    "find_matches",
    "mask",
    "validate_table",
]
