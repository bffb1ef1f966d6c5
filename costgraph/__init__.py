"""
CostGraph Engine

Core engine for cycle detection over undirected and directed graphs,
and for building weighted, named-vertex digraphs with cost bookkeeping.
"""

from costgraph.errors import (
    CostGraphError,
    GraphFormatError,
    UnknownVertexError,
    VertexOutOfRangeError,
)
from costgraph.models import Mark, VertexCost, VertexSummary

__all__ = [
    "CostGraphError",
    "GraphFormatError",
    "UnknownVertexError",
    "VertexOutOfRangeError",
    "Mark",
    "VertexCost",
    "VertexSummary",
]
__version__ = "0.1.0"
