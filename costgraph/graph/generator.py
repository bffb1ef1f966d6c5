"""
Random digraph generators.

Thin wrappers over NetworkX's G(n, m) generator that return the
project's own Digraph type. A fixed seed always yields the same digraph.
"""

import random
from typing import Optional

import networkx as nx

from costgraph.graph.containers import Digraph


def _check_counts(vertex_count: int, edge_count: int, max_edges: int) -> None:
    if vertex_count < 0 or edge_count < 0:
        raise ValueError("Number of vertices and edges must be non-negative")
    if edge_count > max_edges:
        raise ValueError(f"Too many edges: {edge_count} > {max_edges}")


def _to_digraph(vertex_count: int, edges) -> Digraph:
    digraph = Digraph(vertex_count)
    for v, w in edges:
        digraph.add_edge(v, w)
    return digraph


def simple_digraph(vertex_count: int, edge_count: int, seed: Optional[int] = None) -> Digraph:
    """
    Return a random simple digraph with V vertices and E edges.

    A simple digraph has no self-loops and no parallel edges.

    Raises:
        ValueError: If E exceeds V*(V-1)
    """
    _check_counts(vertex_count, edge_count, vertex_count * (vertex_count - 1))
    generated = nx.gnm_random_graph(vertex_count, edge_count, seed=seed, directed=True)
    return _to_digraph(vertex_count, generated.edges())


def dag(vertex_count: int, edge_count: int, seed: Optional[int] = None) -> Digraph:
    """
    Return a random simple DAG with V vertices and E edges.

    The vertices are shuffled and every edge points from the earlier to
    the later vertex of that order.

    Raises:
        ValueError: If E exceeds V*(V-1)/2
    """
    _check_counts(vertex_count, edge_count, vertex_count * (vertex_count - 1) // 2)
    generated = nx.gnm_random_graph(vertex_count, edge_count, seed=seed)
    order = list(range(vertex_count))
    random.Random(seed).shuffle(order)
    position = {v: i for i, v in enumerate(order)}
    edges = [(v, w) if position[v] < position[w] else (w, v) for v, w in generated.edges()]
    return _to_digraph(vertex_count, edges)


def cycle_digraph(vertex_count: int) -> Digraph:
    """Return the directed cycle 0->1->...->V-1->0."""
    if vertex_count < 1:
        raise ValueError("A cycle needs at least one vertex")
    return _to_digraph(vertex_count, [(v, (v + 1) % vertex_count) for v in range(vertex_count)])
