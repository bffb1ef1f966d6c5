"""
Cycle detection for directed graphs.

Classic three-coloring depth-first search: a vertex is GRAY while it is
on the active path and BLACK once fully explored. An edge into a GRAY
vertex is a back edge and closes a directed cycle. Every vertex is used
as a start in index order, so all components are covered.
"""

import logging
from typing import Optional

from costgraph.graph.containers import Digraph
from costgraph.models import Mark

logger = logging.getLogger(__name__)


class DirectedCycle:
    """
    Determines whether a digraph has a directed cycle.

    The search uses an explicit stack, so long chains are safe.

    Attributes:
        marks: Final color of every vertex (read-only copy)

    Usage:
        detector = DirectedCycle(digraph)
        detector.has_cycle()
        detector.cycle()  # e.g. [0, 1, 2, 0] or None
    """

    def __init__(self, digraph: Digraph) -> None:
        self._marked = [Mark.WHITE] * digraph.vertex_count
        self._cycle: Optional[list[int]] = None

        for v in range(digraph.vertex_count):
            if self._marked[v] is Mark.WHITE:
                self._cycle = self._dfs(digraph, v)
            if self._cycle is not None:
                break

        logger.debug(
            "Directed cycle search over %d vertices: cycle=%s", digraph.vertex_count, self._cycle
        )

    def _dfs(self, digraph: Digraph, s: int) -> Optional[list[int]]:
        self._marked[s] = Mark.GRAY
        path = [s]
        stack = [iter(digraph.adj(s))]

        while stack:
            for u in stack[-1]:
                if self._marked[u] is Mark.GRAY:
                    return path[path.index(u):] + [u]
                if self._marked[u] is Mark.WHITE:
                    self._marked[u] = Mark.GRAY
                    path.append(u)
                    stack.append(iter(digraph.adj(u)))
                    break
            else:
                self._marked[path.pop()] = Mark.BLACK
                stack.pop()

        return None

    def has_cycle(self) -> bool:
        """Return True if the digraph has a directed cycle."""
        return self._cycle is not None

    def cycle(self) -> Optional[list[int]]:
        """
        Return the first directed cycle found.

        Returns:
            The cycle's vertices with the first vertex repeated at the
            end (a self-loop on 3 is ``[3, 3]``), or None if acyclic
        """
        return list(self._cycle) if self._cycle is not None else None

    @property
    def marks(self) -> list[Mark]:
        return list(self._marked)
