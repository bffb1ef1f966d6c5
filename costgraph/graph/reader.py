"""
Plain graph readers.

Reads graphs whose vertices are already integers::

    <V>
    <E>
    <v> <w>
    ...
"""

from pathlib import Path
from typing import Union

from costgraph.errors import GraphFormatError
from costgraph.graph.containers import Digraph, Graph, _BaseGraph


def _parse_int(token: str, what: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"{what} is not a number: {token!r}", line_number) from None


def _fill(graph_cls: type, text: str) -> _BaseGraph:
    lines = text.splitlines()
    if len(lines) < 2:
        raise GraphFormatError("missing vertex or edge count header")

    vertex_count = _parse_int(lines[0].strip(), "vertex count", 1)
    edge_count = _parse_int(lines[1].strip(), "edge count", 2)
    if vertex_count < 0:
        raise GraphFormatError(f"number of vertices must be non-negative: {vertex_count}", 1)
    if edge_count < 0:
        raise GraphFormatError(f"number of edges must be non-negative: {edge_count}", 2)

    graph = graph_cls(vertex_count)
    edge_lines = [(n, line.split()) for n, line in enumerate(lines[2:], start=3) if line.strip()]
    if len(edge_lines) < edge_count:
        raise GraphFormatError(f"expected {edge_count} edges, found {len(edge_lines)}")

    for line_number, fields in edge_lines[:edge_count]:
        if len(fields) < 2:
            raise GraphFormatError("edge line needs two vertices", line_number)
        v = _parse_int(fields[0], "vertex", line_number)
        w = _parse_int(fields[1], "vertex", line_number)
        graph.add_edge(v, w)

    return graph


def parse_graph(text: str) -> Graph:
    """
    Build an undirected Graph from text.

    Raises:
        GraphFormatError: If a header or edge line is malformed
        VertexOutOfRangeError: If an edge names a vertex outside [0, V)
    """
    return _fill(Graph, text)


def parse_digraph(text: str) -> Digraph:
    """Build a Digraph from text; errors as for :func:`parse_graph`."""
    return _fill(Digraph, text)


def _read_text(path: Union[Path, str]) -> str:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise GraphFormatError(f"{path} is not valid UTF-8 text") from e


def read_graph(path: Union[Path, str]) -> Graph:
    """Read an undirected Graph from a file."""
    return parse_graph(_read_text(path))


def read_digraph(path: Union[Path, str]) -> Digraph:
    """Read a Digraph from a file."""
    return parse_digraph(_read_text(path))
