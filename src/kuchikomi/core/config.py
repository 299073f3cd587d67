"""Nested pydantic-settings configuration for the application.

Each group reads its own ``KUCHIKOMI_<GROUP>_*`` env vars::

    export KUCHIKOMI_MASKING_PATTERN_FILE=./ng_patterns.yaml
    export KUCHIKOMI_COMPOSER_SEED=42
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings


class MaskingConfig(BaseSettings):
    """PII masking configuration.

    Env vars use ``KUCHIKOMI_MASKING_`` prefix.  When ``pattern_file`` is
    unset the packaged default table is used.
    """

    model_config = {"env_prefix": "KUCHIKOMI_MASKING_"}

    pattern_file: Optional[Path] = None
    anonymize_by_default: bool = False


class ComposerConfig(BaseSettings):
    """Draft composition configuration.

    Env vars use ``KUCHIKOMI_COMPOSER_`` prefix.  A fixed ``seed`` makes
    connector placement reproducible.
    """

    model_config = {"env_prefix": "KUCHIKOMI_COMPOSER_"}

    seed: Optional[int] = None


class ObservabilityConfig(BaseSettings):
    """Observability configuration.

    Env vars use ``KUCHIKOMI_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "KUCHIKOMI_OBSERVABILITY_"}

    log_level: str = "INFO"


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    masking: MaskingConfig = MaskingConfig()
    composer: ComposerConfig = ComposerConfig()
    observability: ObservabilityConfig = ObservabilityConfig()
