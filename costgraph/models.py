"""
Core Data Models for CostGraph

This module defines the small value types shared across the engine:
- Mark: Vertex coloring used by the directed cycle search
- VertexCost: A named vertex together with its declared base cost
- VertexSummary: One reporting row of a symbol cost digraph

These models are designed to be:
- Immutable (frozen dataclasses)
- Clear in their semantic meaning
"""

from dataclasses import dataclass
from enum import Enum

from costgraph.config import EDGE_KEY_SEPARATOR


class Mark(Enum):
    """
    Three-coloring state of a vertex during depth-first search.

    States:
        WHITE: Not visited yet.
        GRAY: On the active search path.
        BLACK: Fully explored; no cycle passes through it.
    """

    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"


@dataclass(frozen=True)
class VertexCost:
    """
    A vertex name and its intrinsic base cost.

    Attributes:
        name: Vertex name as written in the vertex section
        cost: Non-negative base cost declared for the vertex
    """

    name: str
    cost: int


@dataclass(frozen=True)
class VertexSummary:
    """
    Per-vertex figures of a symbol cost digraph, for reporting.

    Attributes:
        index: Dense integer index of the vertex
        name: Vertex name
        base_cost: Cost declared in the vertex section
        out_occurrences: Number of edge lines naming the vertex as source
        outgoing_weight: Sum of the weights of edges leaving the vertex
    """

    index: int
    name: str
    base_cost: int
    out_occurrences: int
    outgoing_weight: int

    @property
    def total_cost(self) -> int:
        """Base cost plus the weight of every outgoing edge."""
        return self.base_cost + self.outgoing_weight


def edge_key(source: str, destination: str) -> str:
    """Return the weight-table key for a directed edge, e.g. ``"A-B"``."""
    return f"{source}{EDGE_KEY_SEPARATOR}{destination}"
