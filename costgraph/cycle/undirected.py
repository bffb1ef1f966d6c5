"""
Cycle detection for undirected graphs.

In an adjacency list every undirected edge is seen twice, once from each
endpoint, so "neighbor already visited" alone would flag the edge the
search just arrived on. The detector records the canonical identity of
every tree edge it walks (``"min-max"``); a visited neighbor reached over
an edge that is not recorded closes a cycle.

Limitation:
    By default only the component containing vertex 0 is searched.
    Pass ``all_components=True`` to search every component.
"""

import logging

from costgraph.graph.containers import Graph

logger = logging.getLogger(__name__)


def canonical_edge(v: int, w: int) -> str:
    """Return the direction-independent identity of edge {v, w}."""
    if v > w:
        v, w = w, v
    return f"{v}-{w}"


class UndirectedCycle:
    """
    Determines whether an undirected graph has a cycle.

    The answer is computed once, on construction.

    Usage:
        detector = UndirectedCycle(graph)
        if detector.has_cycle():
            ...
    """

    def __init__(self, graph: Graph, *, all_components: bool = False) -> None:
        self._marked = [False] * graph.vertex_count
        self._edge_set: set[str] = set()

        if all_components:
            starts = range(graph.vertex_count)
        else:
            starts = range(min(1, graph.vertex_count))

        self._cyclic = False
        for s in starts:
            if not self._marked[s] and self._dfs(graph, s):
                self._cyclic = True
                break

        logger.debug(
            "Undirected cycle search over %d vertices: cyclic=%s", graph.vertex_count, self._cyclic
        )

    def _dfs(self, graph: Graph, s: int) -> bool:
        self._marked[s] = True
        stack = [iter(graph.adj(s))]
        path = [s]

        while stack:
            v = path[-1]
            for w in stack[-1]:
                edge = canonical_edge(v, w)
                if not self._marked[w]:
                    self._edge_set.add(edge)
                    self._marked[w] = True
                    path.append(w)
                    stack.append(iter(graph.adj(w)))
                    break
                if edge not in self._edge_set:
                    return True
            else:
                stack.pop()
                path.pop()

        return False

    def has_cycle(self) -> bool:
        """Return True if the searched part of the graph has a cycle."""
        return self._cyclic

    def marked(self, v: int) -> bool:
        """Return True if ``v`` was reached by the search."""
        return self._marked[v]
