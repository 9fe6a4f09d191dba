"""lighthouse-graph CLI: thin Typer wrapper over library calls."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from lighthousegraph import __version__
from lighthousegraph.config import GraphSettings, load_settings
from lighthousegraph.errors import GraphError

app = typer.Typer(
    name="lighthouse-graph",
    help="Build and lay out model dependency graphs from the assets store.",
    no_args_is_help=True,
)
console = Console()

# Loading failures reported as a one-line message and exit code 1
LOAD_ERRORS = (GraphError, OSError, yaml.YAMLError, ValidationError)


def _load_records(source: str, config: Optional[Path]) -> tuple[Any, GraphSettings]:
    from lighthousegraph.datastore.fetcher import DependencyFetcher

    settings = load_settings(config)
    fetcher = DependencyFetcher(timeout=settings.data_store.timeout_seconds)
    records = asyncio.run(fetcher.load(source or settings.data_store.url))
    return records, settings


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Model dependency graph tools."""
    from lighthousegraph.utils.logging import configure_logging

    if verbose:
        configure_logging(logging.DEBUG)


@app.command()
def version() -> None:
    """Show lighthouse-graph version."""
    console.print(f"lighthouse-graph {__version__}")


@app.command()
def validate(
    records_file: Path = typer.Argument(..., help="Path to a JSON array of dependency records"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings YAML"),
) -> None:
    """Validate a dependency records file."""
    from lighthousegraph.datastore.fetcher import DependencyFetcher
    from lighthousegraph.graph.builder import GraphBuilder

    try:
        settings = load_settings(config)
        records = DependencyFetcher().load_file(records_file)
        graph = GraphBuilder(settings.data_store.detail_base_path).build(records)
    except LOAD_ERRORS as e:
        console.print(f"[red]Validation failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    console.print(f"[green]Valid dependency records:[/green] {records_file}")
    console.print(f"  Nodes: {len(graph.nodes)}")
    console.print(f"  Edges: {len(graph.edges)}")


@app.command()
def summary(
    source: str = typer.Argument("", help="Records URL or file (configured data store if empty)"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings YAML"),
) -> None:
    """Summarize the dependency graph built from a source."""
    from lighthousegraph.graph.builder import GraphBuilder

    try:
        records, settings = _load_records(source, config)
        graph = GraphBuilder(settings.data_store.detail_base_path).build(records)
    except LOAD_ERRORS as e:
        console.print(f"[red]Failed to build graph:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    tracked = [n for n in graph.nodes if n.detail_url is not None]
    console.print("\n[bold]Dependency Graph[/bold]")
    console.print(f"Nodes: {len(graph.nodes)}  Edges: {len(graph.edges)}  Tracked: {len(tracked)}\n")
    for node in graph.nodes:
        deps = [e.target_name for e in graph.edges if e.source_name == node.name]
        marker = "[#EC5800]dependency[/]" if node.is_dependency_target else "[cyan]model[/cyan]"
        console.print(f"  {node.name}  ({marker})")
        if deps:
            console.print(f"    depends on: {', '.join(deps)}")
        if node.detail_url:
            console.print(f"    [dim]{node.detail_url}[/dim]")


@app.command()
def render(
    source: str = typer.Argument("", help="Records URL or file (configured data store if empty)"),
    output: Path = typer.Option(..., "--output", "-o", help="Write HTML snapshot to file"),
    ticks: int = typer.Option(300, "--ticks", "-t", help="Max simulation ticks before snapshot"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed for the layout"),
    title: str = typer.Option("Model Dependency Graph", "--title", help="Page title"),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Settings YAML"),
) -> None:
    """Settle the force layout and write a static HTML snapshot."""
    from lighthousegraph.graph.builder import GraphBuilder
    from lighthousegraph.layout.engine import ForceLayoutEngine
    from lighthousegraph.layout.scheduler import TickLoop
    from lighthousegraph.render.html_renderer import HtmlGraphRenderer

    try:
        records, settings = _load_records(source, config)
        graph = GraphBuilder(settings.data_store.detail_base_path).build(records)
    except LOAD_ERRORS as e:
        console.print(f"[red]Failed to build graph:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    engine = ForceLayoutEngine(graph, settings.layout, seed=seed)
    renderer = HtmlGraphRenderer(settings.render, title=title)
    ran = TickLoop(engine).run_until_idle(max_ticks=ticks)

    renderer.write(output, engine.frame())
    state = "settled" if not engine.running else "still moving"
    console.print(f"[green]Graph written to {output}[/green]")
    console.print(f"  {len(graph.nodes)} nodes, {len(graph.edges)} edges, {ran} ticks ({state})")


if __name__ == "__main__":
    app()
