"""
Vertex model.

This module defines the Vertex class, an identity-bearing node that wraps
one opaque payload value supplied by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from dagstore.graph.base import BaseDAG


@dataclass(frozen=True, eq=False)
class Vertex:
    """A graph vertex carrying one opaque payload.

    Vertices are compared and hashed by identity only: two vertices holding
    equal values are distinct unless they are the same instance. A vertex
    keeps no reference to the graphs it belongs to; membership is a lookup
    held by each graph.

    Attributes:
        value: Caller-supplied payload. Never inspected or mutated by the
            graph.

    Example:
        >>> a = Vertex(1)
        >>> b = Vertex(1)
        >>> a == b
        False
        >>> a == a
        True
    """

    value: Any = None

    def children(self, dag: BaseDAG) -> list[Vertex]:
        """Return this vertex's children in ``dag``.

        Raises:
            UnknownVertexError: If this vertex is not in ``dag``.
        """
        return dag.get_children(self)

    def parents(self, dag: BaseDAG) -> list[Vertex]:
        """Return this vertex's parents in ``dag``.

        Raises:
            UnknownVertexError: If this vertex is not in ``dag``.
        """
        return dag.get_parents(self)
