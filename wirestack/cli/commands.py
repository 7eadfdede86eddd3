"""CLI commands for wirestack."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from rich.table import Table

from wirestack.builder.loader import load
from wirestack.cli.core import app, configure_logging, console
from wirestack.config.schema import LoaderSettings
from wirestack.core.models import describe


@dataclass(frozen=True, slots=True)
class InspectionServer:
    """Stand-in server handed to scripts evaluated by ``wirestack check``."""

    name: str = "wirestack-check"


@app.command()
def check(
    script: Path | None = typer.Argument(None, help="Pipeline script (default: WIRESTACK_SCRIPT_PATH or config.ws)"),
    post_hooks: bool = typer.Option(
        False, "--post-hooks", help="Record run_after() hooks as post-request hooks"
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logs"),
) -> None:
    """Evaluate a pipeline script and show the assembled pipeline."""
    configure_logging(verbose)
    settings = LoaderSettings()
    if post_hooks:
        settings = settings.model_copy(update={"post_hooks": True})
    path = script or settings.script_path

    try:
        pipeline = load(InspectionServer(), path, settings=settings)
    except Exception as e:
        console.print(f"[red]Error loading {path}:[/red] {type(e).__name__}: {e}")
        raise typer.Exit(1)

    if pipeline is None:
        console.print(f"[red]Error: couldn't read pipeline script {path}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"Pipeline: {path}")
    table.add_column("Stage", style="cyan")
    table.add_column("#", justify="right")
    table.add_column("Callable")

    for i, hook in enumerate(pipeline.pre_hooks, start=1):
        table.add_row("pre-hook", str(i), describe(hook))
    *middleware, application = pipeline.layers
    for i, name in enumerate(middleware, start=1):
        table.add_row("middleware", str(i), name)
    table.add_row("application", "", application)
    for i, hook in enumerate(pipeline.post_hooks, start=1):
        table.add_row("post-hook", str(i), describe(hook))

    console.print(table)
    console.print(f"[green]✓[/green] {pipeline!r}")
