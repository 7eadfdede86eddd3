"""Shared CLI application context and setup helpers."""

from __future__ import annotations

import sys

import typer
from loguru import logger
from rich.console import Console

from wirestack import __logo__, __version__

app = typer.Typer(
    name="wirestack",
    help=f"{__logo__} wirestack - declarative request pipeline loader",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"{__logo__} wirestack v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(None, "--version", "-v", callback=version_callback, is_eager=True),
) -> None:
    """wirestack - declarative request pipeline loader."""


def configure_logging(verbose: bool) -> None:
    """Route loguru to stderr, at DEBUG when verbose and WARNING otherwise."""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")
