"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kuchikomi.core.config import AppSettings

log = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup.

    Raises ``ValueError`` on a bad log level and lets ``FileNotFoundError`` /
    ``MalformedPatternTableError`` from the pattern table propagate.
    """
    _check_log_level(settings)
    _check_pattern_table(settings)


def _check_log_level(settings: AppSettings) -> None:
    level = settings.observability.log_level.upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"KUCHIKOMI_OBSERVABILITY_LOG_LEVEL={settings.observability.log_level!r} "
            f"is not one of {', '.join(sorted(_LOG_LEVELS))}."
        )


def _check_pattern_table(settings: AppSettings) -> None:
    """Load the configured pattern table eagerly so a bad table fails now."""
    from kuchikomi.masking import create_pattern_backend

    backend = create_pattern_backend(settings)
    patterns = backend.list_patterns()
    if not patterns:
        log.warning(
            "Pattern table is empty; anonymize mode will never mask anything. "
            "Check KUCHIKOMI_MASKING_PATTERN_FILE."
        )
