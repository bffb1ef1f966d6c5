"""
Symbol Cost Digraph for CostGraph

This module builds a weighted directed graph whose vertices are addressed
by string names, from a two-section text format::

    <V>
    <name> <cost>          -- V lines
    <E>
    <source> <destination> <weight>
    ...

Design Decisions:
    - Names map to dense indices ``0..n-1`` in first-insertion order, and
      the underlying Digraph is sized by the number of distinct names
    - The "initial vertex" (the name used most often as an edge source) is
      found by a separate scan of the source and seeds the cost table
    - That scan is best-effort: any I/O or format failure is logged and
      the build continues without a seed
    - After construction everything is read-only except the total
      project cost accumulator

Vertex Section Rule:
    The first name stored (the initial vertex, or else the first vertex
    line) is never stored twice; later lines repeating it are skipped.
"""

import logging
from collections import Counter
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Iterator, Mapping, Optional, Union

from costgraph.errors import GraphFormatError, UnknownVertexError, VertexOutOfRangeError
from costgraph.graph.containers import Digraph
from costgraph.models import VertexCost, VertexSummary, edge_key

logger = logging.getLogger(__name__)

LineLoader = Callable[[], list[str]]


def _parse_int(token: str, what: str, line_number: int) -> int:
    try:
        return int(token)
    except ValueError:
        raise GraphFormatError(f"{what} is not a number: {token!r}", line_number) from None


def _header(lines: list[str], index: int, what: str) -> int:
    if index >= len(lines):
        raise GraphFormatError(f"missing {what} header", index + 1)
    return _parse_int(lines[index].strip(), what, index + 1)


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except UnicodeDecodeError as e:
        raise GraphFormatError(f"{path} is not valid UTF-8 text") from e


def _fields(line: str, minimum: int, what: str, line_number: int) -> list[str]:
    fields = line.split()
    if len(fields) < minimum:
        raise GraphFormatError(f"{what} line needs {minimum} fields: {line!r}", line_number)
    return fields


class SymbolCostDigraph:
    """
    A digraph with named vertices, vertex base costs and edge weights.

    Wraps a :class:`Digraph` whose vertices are integers, and keeps the
    side tables filled in while parsing:

    - name <-> index bijection
    - edge weights keyed by ``"source-destination"``
    - base cost per vertex name
    - out-occurrence count per vertex name
    - a total project cost accumulator, changed only by the caller

    Attributes:
        digraph: The underlying Digraph (callers must not mutate it)
        initial_vertex: The most frequent edge source and its cost, or None
        total_project_cost: Sum of every amount added so far

    Usage:
        sg = SymbolCostDigraph("project.txt")
        sg.index_of("A")
        sg.edge_weights()["A-B"]
        sg.add_to_total_project_cost(3)
    """

    def __init__(self, path: Union[Path, str]) -> None:
        """
        Build the digraph from a file.

        Args:
            path: File in the two-section format; it is read twice

        Raises:
            FileNotFoundError: If the file does not exist
            GraphFormatError: If a count header or a line is malformed
            UnknownVertexError: If an edge names an undeclared vertex
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        self._build(lambda: _read_lines(path), str(path))

    @classmethod
    def from_text(cls, text: str) -> "SymbolCostDigraph":
        """
        Build the digraph from in-memory text.

        Example:
            >>> sg = SymbolCostDigraph.from_text("1\\nA 10\\n0\\n")
            >>> sg.vertex_base_costs()["A"]
            10
        """
        instance = cls.__new__(cls)
        instance._build(text.splitlines, "<text>")
        return instance

    def _build(self, load: LineLoader, source_name: str) -> None:
        self._source_name = source_name
        self._total_project_cost = 0

        lines = load()
        declared_vertices = _header(lines, 0, "vertex count")
        if declared_vertices < 0:
            raise GraphFormatError(f"vertex count must be non-negative: {declared_vertices}", 1)
        if len(lines) < declared_vertices + 1:
            raise GraphFormatError(
                f"expected {declared_vertices} vertex lines, found {len(lines) - 1}"
            )

        self._initial_vertex = self._find_initial_vertex(load)

        names: list[str] = []
        self._cost_by_vertex: dict[str, int] = {}
        if self._initial_vertex is not None:
            names.append(self._initial_vertex.name)
            self._cost_by_vertex[self._initial_vertex.name] = self._initial_vertex.cost

        for line_number in range(2, declared_vertices + 2):
            fields = _fields(lines[line_number - 1], 2, "vertex", line_number)
            name = fields[0]
            if names and name == names[0]:
                continue
            names.append(name)
            self._cost_by_vertex[name] = _parse_int(fields[1], "vertex cost", line_number)

        self._index_by_name: dict[str, int] = {}
        for name in names:
            if name not in self._index_by_name:
                self._index_by_name[name] = len(self._index_by_name)
        self._keys = list(self._index_by_name)

        if len(self._keys) != declared_vertices:
            logger.warning(
                "%s declares %d vertices but names %d distinct ones",
                source_name,
                declared_vertices,
                len(self._keys),
            )

        self._graph = Digraph(len(self._keys))

        edge_header = declared_vertices + 1
        declared_edges = _header(lines, edge_header, "edge count")
        if declared_edges < 0:
            raise GraphFormatError(
                f"edge count must be non-negative: {declared_edges}", edge_header + 1
            )

        self._out_occurrences: Counter[str] = Counter()
        self._outgoing_weight: Counter[str] = Counter()
        self._edge_weights: dict[str, int] = {}
        edges_read = 0

        for line_number, line in enumerate(lines[edge_header + 1:], start=edge_header + 2):
            if not line.strip():
                continue
            source, destination, weight = _fields(line, 3, "edge", line_number)[:3]
            self._graph.add_edge(self.index_of(source), self.index_of(destination))
            self._out_occurrences[source] += 1
            weight_value = _parse_int(weight, "edge weight", line_number)
            self._outgoing_weight[source] += weight_value
            self._edge_weights[edge_key(source, destination)] = weight_value
            edges_read += 1

        if edges_read != declared_edges:
            logger.warning(
                "%s declares %d edges but lists %d", source_name, declared_edges, edges_read
            )

        logger.debug(
            "Built %s: %d vertices, %d edges, initial vertex %s",
            source_name,
            self.vertex_count,
            self.edge_count,
            self._initial_vertex,
        )

    def _find_initial_vertex(self, load: LineLoader) -> Optional[VertexCost]:
        """
        Find the vertex that appears most often as an edge source.

        Re-reads the source, counts the first token of every edge line,
        and looks up the winner's declared cost. Ties go to the name that
        appears first in the edge section.

        Returns:
            The winner and its cost, or None if there are no edges, the
            winner is not declared, or the source cannot be read
        """
        try:
            lines = load()
            declared_vertices = _header(lines, 0, "vertex count")
            counts = Counter(
                line.split()[0] for line in lines[declared_vertices + 2:] if line.strip()
            )
            if not counts:
                return None
            name, _ = counts.most_common(1)[0]

            for line_number in range(2, min(declared_vertices, len(lines) - 1) + 2):
                fields = lines[line_number - 1].split()
                if fields and fields[0] == name:
                    fields = _fields(lines[line_number - 1], 2, "vertex", line_number)
                    return VertexCost(name, _parse_int(fields[1], "vertex cost", line_number))
        except (OSError, GraphFormatError) as e:
            logger.warning("Could not determine initial vertex of %s: %s", self._source_name, e)
            return None

        logger.debug("Initial vertex %r of %s is not declared", name, self._source_name)
        return None

    # Name <-> index queries

    def contains(self, name: str) -> bool:
        """Return True if ``name`` is a vertex name."""
        return name in self._index_by_name

    def __contains__(self, name: object) -> bool:
        return name in self._index_by_name

    def index_of(self, name: str) -> int:
        """
        Return the index associated with a vertex name.

        Raises:
            UnknownVertexError: If ``name`` is not a vertex
        """
        try:
            return self._index_by_name[name]
        except KeyError:
            raise UnknownVertexError(name) from None

    def name_of(self, v: int) -> str:
        """
        Return the name of the vertex with index ``v``.

        Raises:
            VertexOutOfRangeError: Unless ``0 <= v < V``
        """
        if not 0 <= v < self.vertex_count:
            raise VertexOutOfRangeError(v, self.vertex_count)
        return self._keys[v]

    def names(self) -> list[str]:
        """Return every vertex name in index order."""
        return list(self._keys)

    def __iter__(self) -> Iterator[str]:
        return iter(self._keys)

    # Graph and tables

    @property
    def digraph(self) -> Digraph:
        return self._graph

    @property
    def vertex_count(self) -> int:
        return self._graph.vertex_count

    @property
    def edge_count(self) -> int:
        return self._graph.edge_count

    @property
    def initial_vertex(self) -> Optional[VertexCost]:
        return self._initial_vertex

    def edge_weights(self) -> Mapping[str, int]:
        """Return the read-only ``"source-destination" -> weight`` table."""
        return MappingProxyType(self._edge_weights)

    def vertex_base_costs(self) -> Mapping[str, int]:
        """Return the read-only ``name -> base cost`` table."""
        return MappingProxyType(self._cost_by_vertex)

    def out_occurrences(self) -> Mapping[str, int]:
        """Return how many edge lines name each vertex as their source."""
        return MappingProxyType(dict(self._out_occurrences))

    def outgoing_weight(self, name: str) -> int:
        """
        Return the summed weight of the edge lines leaving ``name``.

        A repeated edge line adds its weight again, matching the parallel
        edge it adds to the digraph and its out-occurrence count, while
        ``edge_weights()`` keeps only the last weight per key.
        """
        self.index_of(name)
        return self._outgoing_weight[name]

    def summary(self) -> list[VertexSummary]:
        """Return one VertexSummary per vertex, in index order."""
        return [
            VertexSummary(
                index=index,
                name=name,
                base_cost=self._cost_by_vertex.get(name, 0),
                out_occurrences=self._out_occurrences[name],
                outgoing_weight=self.outgoing_weight(name),
            )
            for index, name in enumerate(self._keys)
        ]

    # Project cost accumulator

    def add_to_total_project_cost(self, amount: int) -> None:
        """
        Add ``amount`` to the total project cost.

        Raises:
            TypeError: If ``amount`` is not an int
        """
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise TypeError(f"Cost must be an int, got {type(amount).__name__}")
        self._total_project_cost += amount

    @property
    def total_project_cost(self) -> int:
        return self._total_project_cost

    def __repr__(self) -> str:
        return (
            f"SymbolCostDigraph(source={self._source_name!r}, "
            f"V={self.vertex_count}, E={self.edge_count})"
        )
