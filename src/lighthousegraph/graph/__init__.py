"""Graph construction from dependency records."""

from lighthousegraph.graph.builder import GraphBuilder

__all__ = ["GraphBuilder"]
