"""
Error types for CostGraph.

Each error also derives from the builtin it specializes, so callers that
only know about ValueError, KeyError or IndexError keep working.
"""

from typing import Optional


class CostGraphError(Exception):
    """Base class for all CostGraph errors."""


class GraphFormatError(CostGraphError, ValueError):
    """
    Raised when a graph text source cannot be parsed.

    Attributes:
        line_number: 1-indexed line where parsing failed, if known
    """

    def __init__(self, message: str, line_number: Optional[int] = None) -> None:
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class UnknownVertexError(CostGraphError, KeyError):
    """Raised when a vertex name is not in the symbol table."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"unknown vertex: {self.name!r}"


class VertexOutOfRangeError(CostGraphError, IndexError):
    """Raised when a vertex index is outside [0, V)."""

    def __init__(self, vertex: int, vertex_count: int) -> None:
        self.vertex = vertex
        self.vertex_count = vertex_count
        super().__init__(f"vertex {vertex} is not between 0 and {vertex_count - 1}")
