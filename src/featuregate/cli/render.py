"""Console rendering of supplied features."""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.table import Table

from featuregate.gherkin.models import Feature

# Output consoles; files are looked up lazily so redirection is respected
_console = Console()
_err_console = Console(stderr=True)

_STYLES = {
    "info": "[cyan]→[/cyan] ",
    "success": "[green]✓[/green] ",
    "warning": "[yellow]![/yellow] ",
    "error": "[red]✗[/red] ",
}


def get_console() -> Console:
    return _console


def status(message: str, *, style: str = "info") -> None:
    """Print a styled status message to stderr."""
    _err_console.print(f"{_STYLES.get(style, '')}{message}", highlight=False)


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return ``"1 feature"`` / ``"3 features"`` style counts."""
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def feature_summary(feature: Feature) -> dict[str, Any]:
    scenarios = feature.all_scenarios()
    return {
        "uri": feature.uri,
        "name": feature.name,
        "tags": list(feature.tags),
        "scenarios": [s.name for s in scenarios],
        "steps": sum(len(s.steps) for s in scenarios),
    }


def print_batch(features: list[Feature], *, as_json: bool = False) -> None:
    """Print one batch of features as a table or a single JSON line."""
    if as_json:
        click.echo(json.dumps({"features": [feature_summary(f) for f in features]}))
        return

    table = Table(title=pluralize(len(features), "feature"), title_justify="left")
    table.add_column("Feature", style="bold")
    table.add_column("Scenarios", justify="right")
    table.add_column("Steps", justify="right")
    table.add_column("Location", style="dim", overflow="fold")
    for feature in features:
        summary = feature_summary(feature)
        table.add_row(
            summary["name"],
            str(len(summary["scenarios"])),
            str(summary["steps"]),
            summary["uri"],
        )
    _console.print(table)
