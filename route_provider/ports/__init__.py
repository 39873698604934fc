"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the query engine, the graph store
and the transport layer. They enable dependency injection and make the
system testable.
"""

from .graph import RouteGraphPort, RouteQueryPort

__all__ = ["RouteGraphPort", "RouteQueryPort"]
