"""Command-line interface for Diecast Scanner - parse box text and look it up."""

import json
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.table import Table

from .core.types import MatchResult, ParsedInfo
from .match.search import CollectionMatcher
from .ocr.extract import parse_ocr_text
from .store.collection import load_collection
from .utils.config import settings
from .utils.error_handler import (
    CollectionError,
    ConfigurationError,
    ErrorContext,
    handle_error,
)
from .utils.log import get_logger

logger = get_logger(__name__)

# Rich console
console = Console()

app = typer.Typer(
    name="diecast-scanner",
    help="Diecast Scanner - Extract model details from box text and find them in a collection",
    add_completion=False
)


def _read_text(file: Optional[Path], text: Optional[str]) -> str:
    """OCR text from --text, a file, or stdin, in that order."""
    if text is not None:
        return text
    if file is not None:
        try:
            return file.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[red]❌ Could not read {file}: {e}[/red]")
            raise typer.Exit(1)
    return sys.stdin.read()


def _collection_path(collection: Optional[Path]) -> Path:
    if collection is not None:
        return collection
    if settings.COLLECTION_PATH:
        return Path(settings.COLLECTION_PATH)
    console.print("[red]❌ No collection given. Use --collection or set COLLECTION_PATH[/red]")
    raise typer.Exit(1)


def _parsed_table(info: ParsedInfo) -> Table:
    low = set(info.low_confidence_fields())

    table = Table(title="Parsed Box Text")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="white")
    table.add_column("Confidence")

    rows = [
        ("Manufacturer", "manufacturer", info.manufacturer),
        ("Make", "brand", info.brand),
        ("Model", "model", info.model),
        ("Model ID", "model_id", info.model_id or "None"),
        ("Scale", "scale", info.scale),
    ]
    for label, field_name, value in rows:
        confidence = "[yellow]low - please confirm[/yellow]" if field_name in low else "[green]ok[/green]"
        table.add_row(label, value, confidence)
    return table


def _results_table(title: str, results: List[MatchResult]) -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim")
    table.add_column("Brand", style="cyan")
    table.add_column("Model", style="white")
    table.add_column("Scale")
    table.add_column("Score", justify="right")
    table.add_column("Best Field")
    for result in results:
        table.add_row(
            result.car.id,
            result.car.brand,
            result.car.model,
            result.car.scale,
            f"{result.score:.2f}",
            result.matched_key,
        )
    return table


def _load_matcher(collection: Optional[Path], threshold: Optional[float]) -> CollectionMatcher:
    path = _collection_path(collection)
    context = ErrorContext(operation="load collection", module="cli", function="_load_matcher",
                           input_data={"path": str(path)})
    try:
        cars = load_collection(path).cars
        return CollectionMatcher(cars, threshold=threshold)
    except (CollectionError, ConfigurationError) as e:
        handle_error(e, context, logger, reraise=False)
        console.print(f"[red]❌ {e.message}[/red]")
        raise typer.Exit(1)


@app.command()
def parse(
    file: Optional[Path] = typer.Argument(None, help="File with OCR text (stdin if omitted)"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="OCR text given inline"),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON"),
):
    """Extract manufacturer, make, model, model ID and scale from OCR text."""
    info = parse_ocr_text(_read_text(file, text))

    if as_json:
        typer.echo(json.dumps(info.to_dict(), indent=2))
        return

    console.print(_parsed_table(info))
    if info.low_confidence_fields():
        console.print("[yellow]⚠ Some fields could not be detected - review before saving[/yellow]")


@app.command()
def match(
    file: Optional[Path] = typer.Argument(None, help="File with OCR text (stdin if omitted)"),
    collection: Optional[Path] = typer.Option(None, "--collection", "-c", help="Exported collection JSON"),
    text: Optional[str] = typer.Option(None, "--text", "-t", help="OCR text given inline"),
    threshold: Optional[float] = typer.Option(None, "--threshold", help="Search threshold (0-1, lower is stricter)"),
):
    """Check whether a scanned box is already in the collection."""
    matcher = _load_matcher(collection, threshold)
    info = parse_ocr_text(_read_text(file, text))
    console.print(_parsed_table(info))

    best = matcher.find_match(info)
    if best is None:
        console.print("\n[yellow]No match in collection - this one looks new[/yellow]")
        return

    console.print(
        f"\n[green]✓ Already in collection: {best.car.brand} {best.car.model} "
        f"(score {best.score:.2f})[/green]"
    )
    others = [r for r in matcher.search(info.search_key()) if r.car is not best.car]
    if others:
        console.print(_results_table("Other Candidates", others))


@app.command()
def search(
    query: str = typer.Argument(..., help="Free-text search, e.g. 'porsche 911'"),
    collection: Optional[Path] = typer.Option(None, "--collection", "-c", help="Exported collection JSON"),
    threshold: Optional[float] = typer.Option(None, "--threshold", help="Search threshold (0-1, lower is stricter)"),
):
    """Fuzzy search the collection by brand, model and notes."""
    matcher = _load_matcher(collection, threshold)
    results = matcher.search(query)
    if not results:
        console.print(f"[yellow]No cars match '{query}'[/yellow]")
        return
    console.print(_results_table(f"Results for '{query}'", results))


if __name__ == "__main__":
    app()
