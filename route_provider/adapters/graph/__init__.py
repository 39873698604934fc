"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- InMemoryRouteGraph: Route graph built from edge triples
"""

from .in_memory_graph import InMemoryRouteGraph

__all__ = ["InMemoryRouteGraph"]
