"""
CLI module for CostGraph.

The command-line interface providing cycle, dicycle, random and costs
commands.
"""

from cli.main import app

__all__ = ["app"]
