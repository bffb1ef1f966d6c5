"""
Symbol module for CostGraph.

Builds weighted digraphs with named vertices and cost tables from the
two-section text format.
"""

from costgraph.symbol.builder import SymbolCostDigraph

__all__ = ["SymbolCostDigraph"]
