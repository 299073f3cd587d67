"""Validation data models: advisory warnings and results."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ValidationWarning:
    """A missing required field.  Advisory only; never raised."""

    field_id: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of input validation.

    ``ok`` only reflects required fields.  Generation proceeds either way.
    """

    ok: bool
    missing_fields: tuple[str, ...] = ()
    warnings: tuple[ValidationWarning, ...] = ()
    # PII advisories for free-text fields, when a pattern table was supplied
    notices: tuple[str, ...] = field(default_factory=tuple)
