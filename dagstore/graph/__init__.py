"""
Graph module.

This package contains the graph store, its lock-wrapped counterpart, the
traversal algorithms and the networkx-backed analysis helpers, plus the
factory functions used to construct graphs.
"""

from typing import Optional

from dagstore.graph.base import BaseDAG
from dagstore.graph.dag import DAG
from dagstore.graph.thread_safe import ThreadSafeDAG
from dagstore.models.config import DAGConfig


def new_dag(config: Optional[DAGConfig] = None) -> BaseDAG:
    """Create an empty graph.

    Args:
        config: Optional configuration. With the default configuration, or
            any configuration where ``thread_safe`` is True, the graph is
            lock-wrapped; otherwise a plain store is returned.

    Returns:
        A ThreadSafeDAG or a DAG.

    Example:
        >>> isinstance(new_dag(), ThreadSafeDAG)
        True
        >>> isinstance(new_dag(DAGConfig(thread_safe=False)), DAG)
        True
    """
    config = config or DAGConfig()
    if config.thread_safe:
        return ThreadSafeDAG(config=config)
    return DAG(config)


def new_thread_unsafe_dag(config: Optional[DAGConfig] = None) -> DAG:
    """Create an empty plain store, ignoring ``config.thread_safe``."""
    return DAG(config)


__all__ = [
    "BaseDAG",
    "DAG",
    "ThreadSafeDAG",
    "new_dag",
    "new_thread_unsafe_dag",
]
