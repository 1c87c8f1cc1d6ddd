#!/usr/bin/env python3
"""
Inspect how a raw click log is segmented, for troubleshooting a paste.

Shows line and block counts, every skipped line, and every field that came
out empty (with the reason).

Usage:
    python scripts/inspect_clicks.py raw_events.txt
    python scripts/inspect_clicks.py raw_events.txt --normalize
    python scripts/inspect_clicks.py raw_events.txt --config configs/eu_export.yaml
"""

from dataclasses import replace
from pathlib import Path
from typing import Optional

import typer

from democlick.contexts.intake.click_parser import parse_click_log
from democlick.contexts.intake.exceptions import ParseConfigError
from democlick.contexts.intake.parse_config import load_parse_config
from democlick.utils.text_processing import truncate_display

app = typer.Typer(help="Inspect raw click log segmentation.")


@app.command()
def main(
    input_file: Path = typer.Argument(..., help="Raw event log text file"),
    normalize: bool = typer.Option(
        False, "--normalize", help="Strip non-breaking and zero-width characters first"
    ),
    limit: int = typer.Option(20, "--limit", "-n", help="Max events and skipped lines to list"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Parse config YAML overrides", dir_okay=False
    ),
):
    """Show segmentation diagnostics for a raw click log."""
    if not input_file.is_file():
        typer.echo(f"ERROR: File not found: {input_file}", err=True)
        raise typer.Exit(1)

    text = input_file.read_text(encoding="utf-8")
    try:
        config = load_parse_config(config_path)
    except ParseConfigError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    if normalize:
        config = replace(config, normalize_unicode=True)

    parsed = parse_click_log(text, config)

    typer.echo(f"Loading {input_file}")
    if config.normalize_unicode:
        typer.echo("(Unicode normalization enabled)")

    typer.echo("\n=== Summary ===")
    typer.echo(f"  Non-empty lines: {parsed.line_count}")
    typer.echo(f"  Events: {len(parsed.events)}")
    typer.echo(f"  Skipped lines: {len(parsed.skipped_lines)}")
    typer.echo(f"  Truncated blocks: {parsed.truncated_blocks}")

    if parsed.events:
        typer.echo(f"\n=== Events ({len(parsed.events)}) ===")
        for i, event in enumerate(parsed.events[:limit], 1):
            ae_name = event.ae_name or "(empty)"
            workspace_id = event.workspace_id or "(empty)"
            typer.echo(f"  {i:>3}. {event.timestamp} | {workspace_id} | {ae_name}")
        if len(parsed.events) > limit:
            typer.echo(f"  ... and {len(parsed.events) - limit} more")

    if parsed.skipped_lines:
        typer.echo(f"\n=== Skipped Lines ({len(parsed.skipped_lines)}) ===")
        for position, line in parsed.skipped_lines[:limit]:
            typer.echo(f"  line {position}: {truncate_display(line, 70)}")
        if len(parsed.skipped_lines) > limit:
            typer.echo(f"  ... and {len(parsed.skipped_lines) - limit} more")

    if parsed.warnings:
        typer.echo("\n=== Warnings ===")
        for w in parsed.warnings:
            typer.echo(f"  ! {w}")

    if parsed.needs_plaintext_recopy:
        typer.secho(
            "\n✗ No timestamp lines found. Re-copy the log through a plain-text editor "
            "or retry with --normalize.",
            fg=typer.colors.RED,
        )
        raise typer.Exit(1)

    typer.secho("\n✓ Parsing successful", fg=typer.colors.GREEN)


if __name__ == "__main__":
    app()
