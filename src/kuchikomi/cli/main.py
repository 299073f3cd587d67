"""CLI for kuchikomi: generate / mask / patterns commands."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from rich.console import Console
from rich.table import Table

from kuchikomi.composition import GenerateOptions, create_composer
from kuchikomi.core.config import AppSettings, ComposerConfig, MaskingConfig, ObservabilityConfig
from kuchikomi.core.logging_config import setup_logging
from kuchikomi.core.startup_checks import validate_settings
from kuchikomi.exceptions import MalformedPatternTableError
from kuchikomi.masking import create_pattern_backend, mask
from kuchikomi.models import ReviewField
from kuchikomi.planning import default_random_source
from kuchikomi.validation import validate

app = typer.Typer(name="kuchikomi", help="Draft customer reviews in three styles")
console = Console()

log = logging.getLogger(__name__)


def _build_settings(patterns: Optional[Path], seed: Optional[int], verbose: bool) -> AppSettings:
    """Build settings, overriding env defaults with CLI flags."""
    settings = AppSettings()
    if patterns is not None:
        settings.masking = MaskingConfig(pattern_file=patterns)
    if seed is not None:
        settings.composer = ComposerConfig(seed=seed)
    if verbose:
        settings.observability = ObservabilityConfig(log_level="DEBUG")
    setup_logging(settings.observability)

    try:
        validate_settings(settings)
    except (MalformedPatternTableError, FileNotFoundError, ValueError) as exc:
        console.print(f"[red]Configuration error:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    return settings


def _load_input(input_file: Path) -> dict[str, Any]:
    """Load review fields from a JSON or YAML file."""
    raw_text = input_file.read_text(encoding="utf-8")
    if input_file.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(raw_text)
    else:
        data = json.loads(raw_text)
    if not isinstance(data, dict):
        raise typer.BadParameter(f"Expected a mapping in {input_file}")
    return data


@app.command()
def generate(
    purpose: Optional[str] = typer.Option(None, "--purpose", help="Visit purpose"),
    impression: Optional[str] = typer.Option(None, "--impression", help="Overall impression"),
    staff: Optional[str] = typer.Option(None, "--staff", help="Staff mention"),
    notes: Optional[str] = typer.Option(None, "--notes", help="Free-text notes"),
    input_file: Optional[Path] = typer.Option(None, "--input", help="JSON/YAML file with review fields"),
    anonymize: bool = typer.Option(False, "--anonymize/--no-anonymize", help="Mask PII-like text"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for connector placement"),
    patterns: Optional[Path] = typer.Option(None, "--patterns", help="NG pattern table (YAML/JSON)"),
    as_json: bool = typer.Option(False, "--json", help="Print drafts as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Generate short / standard / polite drafts."""
    settings = _build_settings(patterns, seed, verbose)
    composer = create_composer(settings)

    review: dict[str, Any] = _load_input(input_file) if input_file else {}
    for review_field, value in (
        (ReviewField.VISIT_PURPOSE, purpose),
        (ReviewField.IMPRESSION, impression),
        (ReviewField.STAFF, staff),
        (ReviewField.NOTES, notes),
    ):
        if value is not None:
            review[review_field.value] = value

    result = validate(review, patterns=composer.patterns)
    drafts = composer.generate_all(
        review,
        GenerateOptions(
            anonymize=anonymize or settings.masking.anonymize_by_default,
            random_source=default_random_source(settings.composer.seed),
        ),
    )

    if as_json:
        payload = {
            "validation": {"ok": result.ok, "missing_fields": list(result.missing_fields)},
            "drafts": [d.model_dump(mode="json") for d in drafts],
        }
        typer.echo(json.dumps(payload, ensure_ascii=False, indent=2))
        return

    for warning in result.warnings:
        console.print(f"[yellow]{warning.message}[/yellow]")
    if not anonymize:
        for notice in result.notices:
            console.print(f"[yellow]個人情報の可能性: {notice}[/yellow]")

    table = Table(title="Drafts")
    table.add_column("Style", style="cyan")
    table.add_column("Masked")
    table.add_column("Text", max_width=80)
    for draft in drafts:
        table.add_row(draft.style.value, "yes" if draft.masked else "no", draft.text)
    console.print(table)

    for notice in dict.fromkeys(n for d in drafts for n in d.notices):
        console.print(f"[dim]{notice}[/dim]")


@app.command("mask")
def mask_text(
    text: str = typer.Argument(..., help="Text to mask"),
    patterns: Optional[Path] = typer.Option(None, "--patterns", help="NG pattern table (YAML/JSON)"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Mask PII-like spans in a single text."""
    settings = _build_settings(patterns, None, verbose)
    backend = create_pattern_backend(settings)
    result = mask(text, backend.list_patterns(), enabled=True)

    typer.echo(result.text)
    for hit in result.hits:
        console.print(f"[dim]{hit.pattern_id} ({hit.category.value}) {hit.start}-{hit.end}[/dim]")


@app.command("patterns")
def list_patterns(
    patterns: Optional[Path] = typer.Option(None, "--patterns", help="NG pattern table (YAML/JSON)"),
) -> None:
    """List the active NG pattern table."""
    settings = _build_settings(patterns, None, False)
    backend = create_pattern_backend(settings)

    table = Table(title=f"NG patterns (version {backend.get_version()})")
    table.add_column("ID", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Replacement")
    table.add_column("Matcher", max_width=60)
    for pattern in backend.list_patterns():
        table.add_row(pattern.pattern_id, pattern.category.value, pattern.replacement, pattern.matcher)
    console.print(table)


if __name__ == "__main__":
    app()
