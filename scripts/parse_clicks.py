#!/usr/bin/env python3
"""
Parse raw click event logs into spreadsheet columns or a CSV export.

Paste the raw event log into a file (or pipe it in), then either print the
per-column lists for copying into a spreadsheet or write a CSV export.

Usage:
    python scripts/parse_clicks.py raw_events.txt
    python scripts/parse_clicks.py raw_events.txt --column ae | pbcopy
    python scripts/parse_clicks.py raw_events.txt --csv
    python scripts/parse_clicks.py raw_events.txt --csv -o ~/Downloads/demo-clicks.csv
    python scripts/parse_clicks.py raw_events.txt --json
    pbpaste | python scripts/parse_clicks.py - --column workspace
"""

import json
import os
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from democlick.contexts.export.csv_export import write_csv_export
from democlick.contexts.export.logger import log_column_copied, log_csv_written
from democlick.contexts.export.serializer import Column, grouped_lists
from democlick.contexts.intake.click_parser import parse_click_log
from democlick.contexts.intake.exceptions import ParseConfigError
from democlick.contexts.intake.logger import log_parse_result, setup_intake_logger
from democlick.contexts.intake.parse_config import load_parse_config
from democlick.utils.logger import setup_console_logger
from democlick.utils.text_processing import count_label
from democlick.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

RECOPY_HINT = (
    "No events found. Paste the raw event data into a plain-text editor "
    "(e.g. TextEdit in plain-text mode) first, then copy it from there and try again."
)

app = typer.Typer(
    help="Parse raw click event logs into spreadsheet columns or CSV.",
    add_completion=False,
)


def read_raw_input(input_file: str) -> tuple[str, str]:
    """
    Read raw log text from a file path or stdin ("-").

    Returns:
        (text, source description)
    """
    if input_file == "-":
        return sys.stdin.read(), "stdin"

    path = Path(input_file)
    if not path.is_file():
        typer.echo(f"Error: File not found: {path}", err=True)
        raise typer.Exit(1)
    return path.read_text(encoding="utf-8"), str(path)


@app.command()
def main(
    input_file: Annotated[
        str, typer.Argument(help="Raw event log text file, or - to read stdin")
    ] = "-",
    column: Annotated[
        Optional[Column],
        typer.Option("--column", "-c", help="Print only this column (one value per line)"),
    ] = None,
    csv_export: Annotated[
        bool, typer.Option("--csv", help="Write a CSV export instead of printing all columns")
    ] = False,
    json_output: Annotated[
        bool, typer.Option("--json", help="Print events as a JSON array instead of columns")
    ] = False,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output", "-o", help="CSV export path (default: outs/exports/demo-clicks.csv)",
            dir_okay=False,
        ),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option("--config", help="Parse config YAML overrides", dir_okay=False),
    ] = None,
    log: Annotated[
        bool, typer.Option("--log/--no-log", help="Write a session log under LOGS_PATH")
    ] = False,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log every empty field")] = False,
):
    """Parse a raw click log and print or export the results."""
    text, source = read_raw_input(input_file)

    if log:
        log_file = setup_intake_logger(LOGS_PATH / f"parse_{now()}", source)
        typer.echo(f"Log file: {log_file}", err=True)
    else:
        setup_console_logger("DEBUG" if verbose else "WARNING")

    try:
        config = load_parse_config(config_path)
    except ParseConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if not text.strip():
        typer.echo("Error: Input is empty", err=True)
        raise typer.Exit(1)

    parsed = parse_click_log(text, config)
    log_parse_result(parsed, verbose=verbose)

    if parsed.needs_plaintext_recopy:
        typer.secho(RECOPY_HINT, fg=typer.colors.RED, err=True)
        raise typer.Exit(1)

    lists = grouped_lists(parsed.events)

    if json_output:
        typer.echo(json.dumps([event.to_dict() for event in parsed.events], indent=2))
    elif column is not None:
        typer.echo(lists.as_text(column))
        log_column_copied(column.label, len(lists.items(column)))
    elif not csv_export:
        for col in Column:
            typer.echo(f"=== {col.label} ===")
            typer.echo(lists.as_text(col))
            typer.echo()

    if csv_export:
        output_path = write_csv_export(parsed.events, output)
        log_csv_written(output_path, len(parsed.events))
        typer.secho(
            f"✓ Saved {count_label(len(parsed.events), 'event')}: {output_path}",
            fg=typer.colors.GREEN,
            err=True,
        )


if __name__ == "__main__":
    app()
