"""
Default settings for CostGraph.

There is no configuration file; the CLI exposes each of these as an
option and falls back to the values below.
"""

# Random digraph generation
DEFAULT_SEED = 0
DEFAULT_RANDOM_VERTICES = 30
DEFAULT_RANDOM_EDGES = 30
SEED_ENVVAR = "COSTGRAPH_SEED"

# Joins the two endpoint names of a weighted edge key ("A-B")
EDGE_KEY_SEPARATOR = "-"
