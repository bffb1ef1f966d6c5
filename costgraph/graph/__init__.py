"""
Graph module for CostGraph.

This module provides the NetworkX-backed Graph and Digraph containers,
plus readers for plain integer graph files and random generators.
"""

from costgraph.graph.containers import Digraph, Graph
from costgraph.graph.generator import cycle_digraph, dag, simple_digraph
from costgraph.graph.reader import parse_digraph, parse_graph, read_digraph, read_graph

__all__ = [
    "Graph",
    "Digraph",
    "parse_graph",
    "parse_digraph",
    "read_graph",
    "read_digraph",
    "simple_digraph",
    "dag",
    "cycle_digraph",
]
