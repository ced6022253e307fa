"""
Lock-wrapped graph store.

This module defines ThreadSafeDAG, a thin facade that serializes every
operation of a DAG on one exclusive lock.

The lock is held for the whole duration of each call, traversals included.
A traversal therefore sees a consistent graph and no other thread can query
or mutate it mid-walk, but the per-vertex callback runs with the lock held:
calling back into the same ThreadSafeDAG from a callback deadlocks, because
the lock is not reentrant. Callbacks that need to query the graph should walk
``snapshot()`` instead.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING, Iterator, Optional

from dagstore.graph.base import BaseDAG, Operation
from dagstore.graph.dag import DAG
from dagstore.models.config import DAGConfig
from dagstore.models.vertex import Vertex

if TYPE_CHECKING:
    import networkx as nx


class ThreadSafeDAG(BaseDAG):
    """DAG whose operations are serialized on a single non-reentrant lock.

    Attributes:
        config: Configuration of the wrapped store.

    Example:
        >>> dag = ThreadSafeDAG()
        >>> v = Vertex("a")
        >>> dag.add_vertex(v)
        >>> v in dag
        True
    """

    def __init__(
        self, dag: Optional[DAG] = None, config: Optional[DAGConfig] = None
    ) -> None:
        """Initialize a ThreadSafeDAG.

        Args:
            dag: Store to wrap. A new empty DAG is created when omitted. The
                caller must stop using the wrapped store directly.
            config: Configuration for the new store when ``dag`` is omitted.

        Raises:
            ValueError: If both ``dag`` and ``config`` are given. A wrapped
                store keeps its own configuration.
        """
        if dag is not None and config is not None:
            raise ValueError(
                "Pass either an existing DAG or a config for a new one, not both"
            )
        self._dag = dag if dag is not None else DAG(config)
        self._lock = threading.Lock()

    @property
    def config(self) -> DAGConfig:
        return self._dag.config

    def add_vertex(self, v: Vertex) -> None:
        with self._lock:
            self._dag.add_vertex(v)

    def contains(self, v: Vertex) -> bool:
        with self._lock:
            return self._dag.contains(v)

    def get_children(self, v: Vertex) -> list[Vertex]:
        with self._lock:
            return self._dag.get_children(v)

    def get_parents(self, v: Vertex) -> list[Vertex]:
        with self._lock:
            return self._dag.get_parents(v)

    def get_descendants(self, v: Vertex) -> list[Vertex]:
        with self._lock:
            return self._dag.get_descendants(v)

    def get_ancestors(self, v: Vertex) -> list[Vertex]:
        with self._lock:
            return self._dag.get_ancestors(v)

    def has_edge(self, parent: Vertex, child: Vertex) -> bool:
        with self._lock:
            return self._dag.has_edge(parent, child)

    def index_of(self, v: Vertex) -> int:
        with self._lock:
            return self._dag.index_of(v)

    def set_children(self, parent: Vertex, *children: Vertex) -> None:
        with self._lock:
            self._dag.set_children(parent, *children)

    def set_parents(self, child: Vertex, *parents: Vertex) -> None:
        with self._lock:
            self._dag.set_parents(child, *parents)

    def sources(self) -> list[Vertex]:
        with self._lock:
            return self._dag.sources()

    def sinks(self) -> list[Vertex]:
        with self._lock:
            return self._dag.sinks()

    def vertices(self) -> list[Vertex]:
        with self._lock:
            return self._dag.vertices()

    def edges(self) -> list[tuple[Vertex, Vertex]]:
        with self._lock:
            return self._dag.edges()

    def edge_count(self) -> int:
        with self._lock:
            return self._dag.edge_count()

    def bfs(self, operation: Operation) -> None:
        with self._lock:
            self._dag.bfs(operation)

    def preorder_dfs(self, operation: Operation) -> None:
        with self._lock:
            self._dag.preorder_dfs(operation)

    def postorder_dfs(self, operation: Operation) -> None:
        with self._lock:
            self._dag.postorder_dfs(operation)

    def snapshot(self) -> DAG:
        """Return an unlocked copy of the current graph.

        The copy is taken under the lock, then released. Walking the copy
        lets callbacks query the graph freely; later changes to this
        ThreadSafeDAG are not visible in it.
        """
        with self._lock:
            return self._dag.copy()

    def to_networkx(self) -> nx.DiGraph:
        with self._lock:
            return self._dag.to_networkx()

    def is_acyclic(self) -> bool:
        with self._lock:
            return self._dag.is_acyclic()

    def find_cycle(self) -> list[tuple[Vertex, Vertex]]:
        with self._lock:
            return self._dag.find_cycle()

    def get_statistics(self) -> dict[str, int]:
        with self._lock:
            return self._dag.get_statistics()

    def describe(self, tablefmt: str = "simple") -> str:
        with self._lock:
            return self._dag.describe(tablefmt=tablefmt)

    def __len__(self) -> int:
        with self._lock:
            return len(self._dag)

    def __iter__(self) -> Iterator[Vertex]:
        with self._lock:
            return iter(self._dag.vertices())

    def __repr__(self) -> str:
        with self._lock:
            return f"ThreadSafeDAG({self._dag!r})"
