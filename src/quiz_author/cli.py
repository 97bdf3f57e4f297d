from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from quiz_author.errors import DecodeError, RecordValidationError
from quiz_author.ingestion import Mode
from quiz_author.system import BulkImportResult, QuizAuthoringSystem

app = typer.Typer(help="Turn bulk question text or JSON into quiz records.")
console = Console(stderr=True)

EXIT_INVALID_INPUT = 1
EXIT_NOTHING_RECOGNIZED = 2

_MODE_CHOICES = {"json": Mode.JSON, "text": Mode.PLAIN_TEXT}

load_dotenv(override=False)


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    path = Path(source)
    if not path.is_file():
        raise typer.BadParameter(f"File not found: {source}", param_hint="SOURCE")
    return path.read_text(encoding="utf-8-sig")


def _parse_mode(mode: str) -> Optional[Mode]:
    """Map the --mode option to a Mode; `auto` defers to config and sniffing."""
    if mode == "auto":
        return None
    if mode not in _MODE_CHOICES:
        raise typer.BadParameter("mode must be one of: auto, json, text", param_hint="--mode")
    return _MODE_CHOICES[mode]


def _run_import(
    source: str,
    subject: Optional[str],
    mode: str,
    config: Optional[Path],
) -> BulkImportResult:
    selected = _parse_mode(mode)
    text = _read_source(source)
    system = QuizAuthoringSystem.from_config(config)
    try:
        result = system.bulk_import(text, subject=subject, mode=selected)
    except DecodeError as exc:
        console.print(f"[red]Invalid JSON input:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_INVALID_INPUT) from exc
    except RecordValidationError as exc:
        console.print(f"[red]Invalid question record:[/red] {escape(str(exc))}")
        raise typer.Exit(code=EXIT_INVALID_INPUT) from exc
    if result.is_empty:
        console.print("[yellow]No questions recognized.[/yellow]")
        raise typer.Exit(code=EXIT_NOTHING_RECOGNIZED)
    return result


@app.command()
def ingest(
    source: str = typer.Argument(..., help="Input file, or - for stdin."),
    subject: Optional[str] = typer.Option(None, help="Subject for parsed questions."),
    mode: str = typer.Option("auto", help="auto, json or text."),
    output: Optional[Path] = typer.Option(None, help="Write the JSON array here instead of stdout."),
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
):
    """
    Parse a bulk file and emit the recognized questions as a JSON array.

    Exits with 1 on malformed JSON or invalid JSON records and with 2 when the
    input was readable but no question could be recognized.
    """
    result = _run_import(source, subject, mode, config)
    payload = json.dumps(
        [record.to_payload() for record in result.records], ensure_ascii=False, indent=2
    )
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(payload + "\n", encoding="utf-8")
    else:
        typer.echo(payload)
    console.print(f"Imported {result.count} question(s) as {result.mode.value}.")


@app.command()
def preview(
    source: str = typer.Argument(..., help="Input file, or - for stdin."),
    subject: Optional[str] = typer.Option(None, help="Subject for parsed questions."),
    mode: str = typer.Option("auto", help="auto, json or text."),
    config: Optional[Path] = typer.Option(None, help="Path to configuration YAML."),
):
    """Show the recognized questions as a table without writing anything."""
    result = _run_import(source, subject, mode, config)
    table = Table(title=f"{result.count} question(s)")
    table.add_column("#", justify="right")
    table.add_column("Subject")
    table.add_column("Question")
    table.add_column("Answer")
    for idx, record in enumerate(result.records, start=1):
        table.add_row(str(idx), record.subject, record.prompt, record.options[record.correct_index])
    Console().print(table)


if __name__ == "__main__":
    app()
