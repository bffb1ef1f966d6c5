"""
Graph Containers for CostGraph

This module provides the adjacency-list structures the cycle detectors
traverse. Both wrap a NetworkX multigraph whose nodes are the dense
integers ``0..V-1``.

Design Decisions:
    - Uses NetworkX MultiGraph / MultiDiGraph so parallel edges and
      self-loops are kept, as in a plain adjacency list
    - The vertex set is fixed at construction; only edges are added
    - ``adj(v)`` returns each neighbor once, in first-insertion order

Graph Properties:
    - Graph: undirected, an edge {v, w} is visible from both endpoints
    - Digraph: directed, ``adj(v)`` lists successors only
"""

import networkx as nx

from costgraph.errors import VertexOutOfRangeError

_DOT_NODE_STYLE = 'node[shape=circle, style=filled, fixedsize=true, width=0.3, fontsize="10pt"]'


class _BaseGraph:
    """Shared vertex bookkeeping for Graph and Digraph."""

    _edge_op = "--"
    _dot_keyword = "graph"

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError(f"Number of vertices must be non-negative, got {vertex_count}")
        self._graph = self._new_nx_graph()
        self._graph.add_nodes_from(range(vertex_count))

    def _new_nx_graph(self) -> nx.MultiGraph:
        raise NotImplementedError

    @property
    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return self._graph.number_of_nodes()

    @property
    def edge_count(self) -> int:
        """Return the number of edges, parallel edges included."""
        return self._graph.number_of_edges()

    def validate_vertex(self, v: int) -> None:
        """Raise VertexOutOfRangeError unless ``0 <= v < V``."""
        if not 0 <= v < self.vertex_count:
            raise VertexOutOfRangeError(v, self.vertex_count)

    def add_edge(self, v: int, w: int) -> None:
        """
        Add the edge v-w (or v->w for a digraph).

        Args:
            v: One endpoint (the source for a digraph)
            w: The other endpoint (the destination for a digraph)

        Raises:
            VertexOutOfRangeError: If either endpoint is outside [0, V)
        """
        self.validate_vertex(v)
        self.validate_vertex(w)
        self._graph.add_edge(v, w)

    def adj(self, v: int) -> list[int]:
        """Return the vertices adjacent to ``v``."""
        self.validate_vertex(v)
        return list(self._graph.adj[v])

    def edges(self) -> list[tuple[int, int]]:
        """Return every edge as a (v, w) pair, parallel edges repeated."""
        return [(v, w) for v, w in self._graph.edges()]

    def to_dot(self) -> str:
        """
        Render the graph as Graphviz DOT text.

        Returns:
            DOT source with one vertex declaration per vertex and one
            line per edge
        """
        lines = [f"{self._dot_keyword} {{", _DOT_NODE_STYLE]
        lines.extend(str(v) for v in self._graph.nodes)
        lines.extend(f"{v} {self._edge_op} {w}" for v, w in self.edges())
        lines.append("}")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(V={self.vertex_count}, E={self.edge_count})"


class Graph(_BaseGraph):
    """
    An undirected graph over vertices ``0..V-1``.

    Usage:
        g = Graph(3)
        g.add_edge(0, 1)
        g.adj(1)  # [0]
    """

    def _new_nx_graph(self) -> nx.MultiGraph:
        return nx.MultiGraph()

    def degree(self, v: int) -> int:
        """Return the degree of ``v`` (a self-loop counts twice)."""
        self.validate_vertex(v)
        return self._graph.degree(v)


class Digraph(_BaseGraph):
    """
    A directed graph over vertices ``0..V-1``.

    Usage:
        g = Digraph(3)
        g.add_edge(0, 1)
        g.adj(0)  # [1]
    """

    _edge_op = "->"
    _dot_keyword = "digraph"

    def _new_nx_graph(self) -> nx.MultiDiGraph:
        return nx.MultiDiGraph()

    def adj(self, v: int) -> list[int]:
        """Return the successors of ``v``."""
        self.validate_vertex(v)
        return list(self._graph.successors(v))

    def outdegree(self, v: int) -> int:
        """Return the number of edges leaving ``v``."""
        self.validate_vertex(v)
        return self._graph.out_degree(v)

    def indegree(self, v: int) -> int:
        """Return the number of edges entering ``v``."""
        self.validate_vertex(v)
        return self._graph.in_degree(v)

    def reverse(self) -> "Digraph":
        """Return a new digraph with every edge reversed."""
        reversed_graph = Digraph(self.vertex_count)
        for v, w in self.edges():
            reversed_graph.add_edge(w, v)
        return reversed_graph
