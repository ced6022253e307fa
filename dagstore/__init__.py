"""
dagstore v1.0

An in-memory directed acyclic graph container with vertex/edge management,
ancestor/descendant queries, breadth-first and depth-first traversals, and a
lock-wrapped variant for concurrent use.

Example:
    >>> from dagstore import Vertex, new_dag
    >>> dag = new_dag()
    >>> v1, v2 = Vertex(1), Vertex(2)
    >>> dag.add_vertex(v1)
    >>> dag.add_vertex(v2)
    >>> dag.set_children(v1, v2)
    >>> dag.bfs(lambda v: print(v.value))
    1
    2
"""

from dagstore.version import __version__, __version_info__

__author__ = "dagstore Contributors"

from dagstore.exceptions import (
    CycleError,
    CycleWarning,
    DAGError,
    DuplicateVertexError,
    UnknownVertexError,
)
from dagstore.graph import (
    DAG,
    BaseDAG,
    ThreadSafeDAG,
    new_dag,
    new_thread_unsafe_dag,
)
from dagstore.graph.analysis import find_cycle, get_statistics, is_acyclic, to_networkx
from dagstore.graph.traversal import bfs, postorder_dfs, preorder_dfs
from dagstore.models.config import CycleMode, DAGConfig
from dagstore.models.vertex import Vertex
from dagstore.utils.formatting import format_adjacency

__all__ = [
    # Version info
    "__version__",
    "__version_info__",
    # Graphs
    "BaseDAG",
    "DAG",
    "ThreadSafeDAG",
    "new_dag",
    "new_thread_unsafe_dag",
    # Data models
    "Vertex",
    # Configuration
    "DAGConfig",
    "CycleMode",
    # Traversals
    "bfs",
    "preorder_dfs",
    "postorder_dfs",
    # Analysis
    "to_networkx",
    "is_acyclic",
    "find_cycle",
    "get_statistics",
    "format_adjacency",
    # Exceptions
    "DAGError",
    "DuplicateVertexError",
    "UnknownVertexError",
    "CycleError",
    "CycleWarning",
]
