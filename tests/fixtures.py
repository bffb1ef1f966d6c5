"""
Test fixtures for CostGraph.

This module provides sample graph files in both text formats.
"""

# Plain integer graphs: V, E, then E pairs
EMPTY_GRAPH = """\
4
0
"""

TRIANGLE = """\
3
3
0 1
1 2
2 0
"""

TREE = """\
5
4
0 1
0 2
1 3
1 4
"""

# Cycle lives only in the component {3, 4, 5}
DISCONNECTED_CYCLE = """\
6
4
0 1
3 4
4 5
5 3
"""

CHAIN = """\
4
3
0 1
1 2
2 3
"""

CHAIN_WITH_BACK_EDGE = CHAIN.replace("4\n3\n", "4\n4\n") + "3 0\n"

SELF_LOOP = """\
2
2
0 1
1 1
"""

# Symbol cost digraphs: V, name cost lines, E, source destination weight lines
SAMPLE_PROJECT = """\
3
A 10
B 5
C 7
2
A B 3
B C 4
"""

# B is the most frequent edge source
DOMINANT_B = """\
4
A 1
B 2
C 3
D 4
4
A B 10
B C 20
B D 30
C D 40
"""

CYCLIC_PROJECT = """\
3
A 1
B 2
C 3
3
A B 1
B C 1
C A 1
"""

NO_EDGES = """\
2
X 4
Y 6
0
"""

# A is declared twice; B is the only edge source
DUPLICATE_NAMES = """\
3
A 1
B 2
A 9
1
B A 5
"""

BAD_VERTEX_COUNT = """\
three
A 1
0
"""

BAD_EDGE_COUNT = """\
1
A 1
many
"""

UNKNOWN_VERTEX = """\
2
A 1
B 2
1
A Z 3
"""

# First vertex line repeated, no edges
REPEATED_FIRST_NAME = """\
2
A 1
A 5
0
"""
