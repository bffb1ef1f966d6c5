"""
Cycle detection module for CostGraph.

Provides the undirected (edge-identity) and directed (three-coloring)
cycle detectors.
"""

from costgraph.cycle.directed import DirectedCycle
from costgraph.cycle.undirected import UndirectedCycle, canonical_edge

__all__ = ["UndirectedCycle", "DirectedCycle", "canonical_edge"]
