"""
In-memory graph store.

This module defines the DAG class, the plain (not thread-safe) graph store.
It owns the vertex set, a forward and a backward adjacency view kept
symmetric on every mutation, and the source and sink sets, which are
maintained incrementally as edges are added rather than recomputed.
"""

from __future__ import annotations

import logging
import warnings
from typing import Any, Iterator, Optional

import networkx as nx

from dagstore.exceptions import (
    CycleError,
    CycleWarning,
    DuplicateVertexError,
    UnknownVertexError,
)
from dagstore.graph import analysis, traversal
from dagstore.graph.base import BaseDAG, Operation
from dagstore.models.config import CycleMode, DAGConfig
from dagstore.models.vertex import Vertex
from dagstore.utils.formatting import format_adjacency

logger = logging.getLogger(__name__)


class DAG(BaseDAG):
    """Directed acyclic graph store.

    Each vertex is given a stable integer index when it is inserted. Edges
    live in a networkx DiGraph whose nodes are those indices: its successor
    view is the forward adjacency and its predecessor view the backward
    adjacency, so the two always agree. Sources and sinks are kept in
    insertion ordered sets and updated edge by edge.

    This class has no internal synchronization. Share it between threads
    only through ThreadSafeDAG or an external lock.

    Attributes:
        config: Configuration controlling cycle checks and atomic edge
            insertion.

    Example:
        >>> dag = DAG()
        >>> v1, v2, v3, v4 = (Vertex(i) for i in range(1, 5))
        >>> for v in (v1, v2, v3, v4):
        ...     dag.add_vertex(v)
        >>> dag.set_children(v1, v2, v3)
        >>> dag.set_parents(v4, v2, v3)
        >>> dag.sources() == [v1], dag.sinks() == [v4]
        (True, True)
    """

    def __init__(self, config: Optional[DAGConfig] = None) -> None:
        """Initialize an empty DAG.

        Args:
            config: Optional configuration. Defaults to DAGConfig().
        """
        self.config = config or DAGConfig()
        self._vertices: list[Vertex] = []
        self._index: dict[Vertex, int] = {}
        self._graph = nx.DiGraph()
        # dicts used as insertion ordered sets
        self._sources: dict[Vertex, None] = {}
        self._sinks: dict[Vertex, None] = {}

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_vertex(self, v: Vertex) -> None:
        """Insert ``v`` and give it the next index.

        Args:
            v: Vertex to insert.

        Raises:
            DuplicateVertexError: If ``v`` is already in the graph. The graph
                is not modified.
        """
        if v in self._index:
            raise DuplicateVertexError(v)

        self._index[v] = len(self._vertices)
        self._vertices.append(v)
        self._graph.add_node(self._index[v])
        self._sources[v] = None
        self._sinks[v] = None
        logger.debug("Added vertex %r at index %d", v, self._index[v])

    def set_children(self, parent: Vertex, *children: Vertex) -> None:
        """Add an edge from ``parent`` to each vertex in ``children``.

        ``parent`` leaves the sink set and every child leaves the source set.

        Args:
            parent: Tail of every new edge.
            *children: Heads of the new edges.

        Raises:
            UnknownVertexError: If ``parent`` (role "parent") or a child
                (role "child") is not in the graph. Without ``atomic_edges``
                the edges to children listed before the unknown one remain.
            CycleError: If cycle checking is set to FAIL and an edge would
                close a cycle.
        """
        p_idx = self._require(parent, "parent")
        if self.config.atomic_edges:
            pending = [self._require(child, "child") for child in children]
            self._check_edges([(p_idx, c_idx) for c_idx in pending])

        for child in children:
            c_idx = self._require(child, "child")
            self._add_edge(p_idx, c_idx)

    def set_parents(self, child: Vertex, *parents: Vertex) -> None:
        """Add an edge from each vertex in ``parents`` to ``child``.

        ``child`` leaves the source set and every parent leaves the sink set.

        Args:
            child: Head of every new edge.
            *parents: Tails of the new edges.

        Raises:
            UnknownVertexError: If ``child`` (role "child") or a parent
                (role "parent") is not in the graph. Without ``atomic_edges``
                the edges from parents listed before the unknown one remain.
            CycleError: If cycle checking is set to FAIL and an edge would
                close a cycle.
        """
        c_idx = self._require(child, "child")
        if self.config.atomic_edges:
            pending = [self._require(parent, "parent") for parent in parents]
            self._check_edges([(p_idx, c_idx) for p_idx in pending])

        for parent in parents:
            p_idx = self._require(parent, "parent")
            self._add_edge(p_idx, c_idx)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def contains(self, v: Vertex) -> bool:
        return isinstance(v, Vertex) and v in self._index

    def get_children(self, v: Vertex) -> list[Vertex]:
        idx = self._require(v)
        return [self._vertices[i] for i in sorted(self._graph.successors(idx))]

    def get_parents(self, v: Vertex) -> list[Vertex]:
        idx = self._require(v)
        return [self._vertices[i] for i in sorted(self._graph.predecessors(idx))]

    def get_descendants(self, v: Vertex) -> list[Vertex]:
        """Return every vertex reachable from ``v`` through forward edges.

        ``v`` itself is always excluded. The result is ordered by insertion
        index.

        Raises:
            UnknownVertexError: If ``v`` is not in the graph.
        """
        idx = self._require(v)
        return [self._vertices[i] for i in sorted(nx.descendants(self._graph, idx))]

    def get_ancestors(self, v: Vertex) -> list[Vertex]:
        """Return every vertex that reaches ``v`` through forward edges.

        ``v`` itself is always excluded. The result is ordered by insertion
        index.

        Raises:
            UnknownVertexError: If ``v`` is not in the graph.
        """
        idx = self._require(v)
        return [self._vertices[i] for i in sorted(nx.ancestors(self._graph, idx))]

    def has_edge(self, parent: Vertex, child: Vertex) -> bool:
        """Return True if the edge ``parent -> child`` exists.

        Raises:
            UnknownVertexError: If either endpoint is not in the graph.
        """
        p_idx = self._require(parent, "parent")
        c_idx = self._require(child, "child")
        return self._graph.has_edge(p_idx, c_idx)

    def index_of(self, v: Vertex) -> int:
        """Return the stable index assigned to ``v`` at insertion."""
        return self._require(v)

    def sources(self) -> list[Vertex]:
        return list(self._sources)

    def sinks(self) -> list[Vertex]:
        return list(self._sinks)

    def vertices(self) -> list[Vertex]:
        """Return all vertices in insertion order."""
        return list(self._vertices)

    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return self._graph.number_of_edges()

    def edges(self) -> list[tuple[Vertex, Vertex]]:
        """Return every ``(parent, child)`` pair, ordered by parent then child index."""
        return [
            (self._vertices[p_idx], self._vertices[c_idx])
            for p_idx in range(len(self._vertices))
            for c_idx in sorted(self._graph.successors(p_idx))
        ]

    def copy(self) -> DAG:
        """Return an independent store with the same vertices and edges.

        Vertices are shared by identity; adjacency and source/sink
        bookkeeping are copied, so mutating either graph leaves the other
        untouched. The configuration is frozen and therefore safe to share.
        """
        other = DAG(self.config)
        other._vertices = list(self._vertices)
        other._index = dict(self._index)
        other._graph = self._graph.copy()
        other._sources = dict(self._sources)
        other._sinks = dict(self._sinks)
        return other

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(list(self._vertices))

    def __repr__(self) -> str:
        return f"DAG(vertices={len(self)}, edges={self.edge_count()})"

    # ------------------------------------------------------------------
    # Traversals
    # ------------------------------------------------------------------

    def bfs(self, operation: Operation) -> None:
        traversal.bfs(self, operation)

    def preorder_dfs(self, operation: Operation) -> None:
        traversal.preorder_dfs(self, operation)

    def postorder_dfs(self, operation: Operation) -> None:
        traversal.postorder_dfs(self, operation)

    # ------------------------------------------------------------------
    # Analysis
    # ------------------------------------------------------------------

    def to_networkx(self) -> nx.DiGraph:
        """Export the graph to a networkx DiGraph (see analysis.to_networkx)."""
        return analysis.to_networkx(self)

    def is_acyclic(self) -> bool:
        """Return True if the edge set contains no directed cycle."""
        return analysis.is_acyclic(self)

    def find_cycle(self) -> list[tuple[Vertex, Vertex]]:
        """Return the edges of one directed cycle, or an empty list."""
        return analysis.find_cycle(self)

    def get_statistics(self) -> dict[str, int]:
        """Return vertex, edge, source, sink and depth counts."""
        return analysis.get_statistics(self)

    def describe(self, tablefmt: str = "simple") -> str:
        """Render the adjacency of every vertex as a text table."""
        return format_adjacency(self, tablefmt=tablefmt)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require(self, v: Any, role: str = "vertex") -> int:
        """Return the index of ``v`` or raise UnknownVertexError."""
        try:
            return self._index[v]
        except (KeyError, TypeError):
            raise UnknownVertexError(v, role) from None

    def _add_edge(self, p_idx: int, c_idx: int) -> None:
        """Record ``p_idx -> c_idx`` and update sources/sinks."""
        if not self.config.atomic_edges:
            self._check_edges([(p_idx, c_idx)])

        self._graph.add_edge(p_idx, c_idx)

        parent = self._vertices[p_idx]
        child = self._vertices[c_idx]
        self._sinks.pop(parent, None)
        self._sources.pop(child, None)
        logger.debug("Added edge %r -> %r", parent, child)

    def _check_edges(self, pending: list[tuple[int, int]]) -> None:
        """Apply the configured cycle policy to edges about to be added."""
        mode = self.config.on_cycle
        if mode is CycleMode.IGNORE:
            return

        for p_idx, c_idx in pending:
            if not self._closes_cycle(p_idx, c_idx):
                continue
            parent = self._vertices[p_idx]
            child = self._vertices[c_idx]
            if mode is CycleMode.FAIL:
                raise CycleError(parent, child)
            warnings.warn(
                f"Edge {parent!r} -> {child!r} creates a cycle; "
                f"traversal order is no longer meaningful.",
                CycleWarning,
            )

    def _closes_cycle(self, p_idx: int, c_idx: int) -> bool:
        """Return True if adding ``p_idx -> c_idx`` would close a cycle."""
        return nx.has_path(self._graph, c_idx, p_idx)
