"""
CostGraph CLI

Command-line interface for cycle detection and cost reporting.

Commands:
    costgraph cycle <file>      Check an undirected graph for a cycle
    costgraph dicycle <file>    Check a digraph for a directed cycle
    costgraph random            Generate a random digraph and check it
    costgraph costs <file>      Build a symbol cost digraph and report costs

Usage:
    $ costgraph cycle tinyG.txt
    $ costgraph random --vertices 30 --edges 30 --seed 0
    $ costgraph costs project.txt --add-cost 3 --add-cost 4
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import box
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from costgraph import CostGraphError, __version__
from costgraph.config import (
    DEFAULT_RANDOM_EDGES,
    DEFAULT_RANDOM_VERTICES,
    DEFAULT_SEED,
    SEED_ENVVAR,
)
from costgraph.cycle import DirectedCycle, UndirectedCycle
from costgraph.graph import dag, read_digraph, read_graph, simple_digraph
from costgraph.symbol import SymbolCostDigraph

# Initialize Typer app and Rich console
app = typer.Typer(
    name="costgraph",
    help="CostGraph: cycle detection and cost bookkeeping for graphs",
    add_completion=False,
)
console = Console()


def _input_file(help_text: str):
    return typer.Argument(
        ...,
        help=help_text,
        exists=True,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
    )


@app.command()
def cycle(
    path: Path = _input_file("Plain undirected graph file (V, E, then E vertex pairs)"),
    all_components: bool = typer.Option(
        False,
        "--all-components",
        help="Search every component, not just the one containing vertex 0",
    ),
    dot: bool = typer.Option(False, "--dot", help="Print the graph as DOT first"),
) -> None:
    """
    Check an undirected graph for a cycle.
    """
    try:
        graph = read_graph(path)
    except (CostGraphError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if dot:
        console.print(graph.to_dot(), markup=False, highlight=False)
        console.print()

    detector = UndirectedCycle(graph, all_components=all_components)
    _print_verdict(
        detector.has_cycle(),
        f"{path.name} ({graph.vertex_count} vertices, {graph.edge_count} edges)",
    )


@app.command()
def dicycle(
    path: Path = _input_file("Plain digraph file (V, E, then E vertex pairs)"),
    dot: bool = typer.Option(False, "--dot", help="Print the digraph as DOT first"),
) -> None:
    """
    Check a digraph for a directed cycle.
    """
    try:
        digraph = read_digraph(path)
    except (CostGraphError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if dot:
        console.print(digraph.to_dot(), markup=False, highlight=False)
        console.print()

    detector = DirectedCycle(digraph)
    _print_verdict(
        detector.has_cycle(),
        f"{path.name} ({digraph.vertex_count} vertices, {digraph.edge_count} edges)",
        detector.cycle(),
    )


@app.command()
def random(
    vertices: int = typer.Option(
        DEFAULT_RANDOM_VERTICES, "--vertices", "-V", min=0, help="Number of vertices"
    ),
    edges: int = typer.Option(DEFAULT_RANDOM_EDGES, "--edges", "-E", min=0, help="Number of edges"),
    seed: int = typer.Option(
        DEFAULT_SEED, "--seed", "-s", envvar=SEED_ENVVAR, help="Random seed"
    ),
    acyclic: bool = typer.Option(False, "--dag", help="Generate a DAG instead"),
    dot: bool = typer.Option(False, "--dot", help="Print the digraph as DOT first"),
) -> None:
    """
    Generate a random simple digraph and check it for a directed cycle.

    The same seed always produces the same digraph.
    """
    generate = dag if acyclic else simple_digraph
    try:
        digraph = generate(vertices, edges, seed=seed)
    except ValueError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if dot:
        console.print(digraph.to_dot(), markup=False, highlight=False)
        console.print()

    detector = DirectedCycle(digraph)
    kind = "DAG" if acyclic else "digraph"
    _print_verdict(
        detector.has_cycle(),
        f"random {kind} ({vertices} vertices, {edges} edges, seed {seed})",
        detector.cycle(),
    )


@app.command()
def costs(
    path: Path = _input_file("Symbol cost digraph file (named vertices and weighted edges)"),
    add_cost: Optional[List[int]] = typer.Option(
        None,
        "--add-cost",
        "-c",
        help="Amount to add to the total project cost (repeatable)",
    ),
) -> None:
    """
    Build a symbol cost digraph and report its vertex costs.

    Shows:
    - Index, base cost, out-occurrences and outgoing weight per vertex
    - The initial (most frequent source) vertex
    - Whether the digraph is acyclic
    - The total project cost after every --add-cost amount
    """
    try:
        sg = SymbolCostDigraph(path)
    except (CostGraphError, OSError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    for amount in add_cost or []:
        sg.add_to_total_project_cost(amount)

    console.print()
    _print_cost_table(sg)

    detector = DirectedCycle(sg.digraph)
    named_cycle = None
    if detector.has_cycle():
        named_cycle = [sg.name_of(v) for v in detector.cycle()]
    _print_verdict(detector.has_cycle(), path.name, named_cycle)

    initial = sg.initial_vertex
    if initial is not None:
        console.print(f"[bold]Initial vertex:[/bold] {initial.name} (cost {initial.cost})")
    else:
        console.print("[dim]No initial vertex (no edges).[/dim]")
    console.print(f"[bold]Total project cost:[/bold] {sg.total_project_cost}")


# Helper functions for output formatting

def _print_verdict(cyclic: bool, label: str, found=None) -> None:
    """Print a panel saying whether a cycle was found."""
    if cyclic:
        body = "[bold yellow]⚠ Has cycle[/bold yellow]"
        if found:
            body += "\n" + " -> ".join(str(v) for v in found)
        console.print(Panel(body, title=label, border_style="yellow"))
    else:
        console.print(Panel("[bold green]✓ No cycle[/bold green]", title=label, border_style="green"))


def _print_cost_table(sg: SymbolCostDigraph) -> None:
    """Print the per-vertex cost table."""
    table = Table(title="Vertex Costs", box=box.ROUNDED)
    table.add_column("Index", justify="right", style="dim")
    table.add_column("Vertex", style="cyan")
    table.add_column("Base cost", justify="right")
    table.add_column("Out edges", justify="right")
    table.add_column("Outgoing weight", justify="right")
    table.add_column("Total", justify="right", style="bold")

    for row in sg.summary():
        table.add_row(
            str(row.index),
            row.name,
            str(row.base_cost),
            str(row.out_occurrences) if row.out_occurrences else "-",
            str(row.outgoing_weight),
            str(row.total_cost),
        )

    console.print(table)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"[bold]CostGraph[/bold] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        help="Show version and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """
    CostGraph: cycle detection and cost bookkeeping for graphs.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
