"""
Abstract DAG interface.

This module defines the BaseDAG abstract base class, the contract shared by
the plain graph store and its lock-wrapped counterpart. Callers that only
build and walk graphs can depend on BaseDAG and stay agnostic of whether the
instance they hold is thread-safe.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable

from dagstore.models.vertex import Vertex

Operation = Callable[[Vertex], Any]


class BaseDAG(ABC):
    """Abstract interface for directed acyclic graph containers.

    Implementations own a vertex set and a directed edge relation between
    those vertices, and keep the set of sources (no incoming edge) and sinks
    (no outgoing edge) up to date as edges are added. Acyclicity is the
    caller's responsibility unless a cycle check is configured.

    Example:
        >>> from dagstore import Vertex, new_dag
        >>> dag = new_dag()
        >>> a, b = Vertex("a"), Vertex("b")
        >>> dag.add_vertex(a)
        >>> dag.add_vertex(b)
        >>> dag.set_children(a, b)
        >>> dag.get_children(a) == [b]
        True
    """

    @abstractmethod
    def add_vertex(self, v: Vertex) -> None:
        """Insert a vertex that is not yet in the graph.

        The new vertex is both a source and a sink until edges are added.

        Raises:
            DuplicateVertexError: If ``v`` is already a member.
        """

    @abstractmethod
    def contains(self, v: Vertex) -> bool:
        """Return True if ``v`` (by identity) is a member of the graph."""

    @abstractmethod
    def get_children(self, v: Vertex) -> list[Vertex]:
        """Return the vertices one forward edge away from ``v``.

        The result is ordered by insertion index.

        Raises:
            UnknownVertexError: If ``v`` is not a member.
        """

    @abstractmethod
    def get_parents(self, v: Vertex) -> list[Vertex]:
        """Return the vertices one backward edge away from ``v``.

        The result is ordered by insertion index.

        Raises:
            UnknownVertexError: If ``v`` is not a member.
        """

    @abstractmethod
    def set_children(self, parent: Vertex, *children: Vertex) -> None:
        """Add an edge from ``parent`` to each of ``children``.

        Raises:
            UnknownVertexError: If ``parent`` or any child is not a member.
                Edges applied before the failing child are kept unless the
                graph is configured with ``atomic_edges``.
        """

    @abstractmethod
    def set_parents(self, child: Vertex, *parents: Vertex) -> None:
        """Add an edge from each of ``parents`` to ``child``.

        Raises:
            UnknownVertexError: If ``child`` or any parent is not a member.
                Edges applied before the failing parent are kept unless the
                graph is configured with ``atomic_edges``.
        """

    @abstractmethod
    def sources(self) -> list[Vertex]:
        """Return the vertices with no incoming edge, in no particular order."""

    @abstractmethod
    def sinks(self) -> list[Vertex]:
        """Return the vertices with no outgoing edge, in no particular order."""

    @abstractmethod
    def bfs(self, operation: Operation) -> None:
        """Call ``operation`` on every reachable vertex in breadth-first order."""

    @abstractmethod
    def preorder_dfs(self, operation: Operation) -> None:
        """Call ``operation`` on every reachable vertex before its descendants."""

    @abstractmethod
    def postorder_dfs(self, operation: Operation) -> None:
        """Call ``operation`` on every reachable vertex after its descendants."""

    def __contains__(self, v: object) -> bool:
        return isinstance(v, Vertex) and self.contains(v)
