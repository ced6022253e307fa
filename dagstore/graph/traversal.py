"""
Graph traversal algorithms.

This module implements the three walk orders offered by every graph:
breadth-first, preorder depth-first and postorder depth-first. The functions
are stateless and rely only on the ``sources()`` and ``get_children()``
queries of the graph they walk.

All three walks share the same rules:

- they start from every current source, since a DAG may have several roots;
- a vertex is marked visited the moment it is queued or pushed, so a vertex
  reachable through several parents is expanded exactly once;
- the order among siblings, and among sources, is unspecified.

None of them looks for cycles. On a cyclic edge set the visited set still
guarantees termination, but the ancestor/descendant ordering no longer means
anything.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import TYPE_CHECKING

from dagstore.models.vertex import Vertex

if TYPE_CHECKING:
    from dagstore.graph.base import BaseDAG, Operation

logger = logging.getLogger(__name__)


def bfs(dag: BaseDAG, operation: Operation) -> None:
    """Walk ``dag`` breadth-first, calling ``operation`` on each vertex.

    The queue is seeded with every source. A vertex is operated on when it is
    dequeued, and its unvisited children are enqueued right after, so levels
    come out in non-decreasing distance from the nearest source.

    Args:
        dag: Graph to walk.
        operation: Callback invoked once per visited vertex. Its return value
            is ignored; exceptions propagate and abort the walk.

    Example:
        >>> from dagstore import DAG, Vertex
        >>> dag = DAG()
        >>> a, b = Vertex("a"), Vertex("b")
        >>> dag.add_vertex(a)
        >>> dag.add_vertex(b)
        >>> dag.set_children(a, b)
        >>> seen = []
        >>> bfs(dag, lambda v: seen.append(v.value))
        >>> seen
        ['a', 'b']
    """
    sources = dag.sources()
    logger.debug("BFS from %d source(s)", len(sources))

    visited: set[Vertex] = set(sources)
    queue: deque[Vertex] = deque(sources)

    while queue:
        v = queue.popleft()
        operation(v)
        for child in dag.get_children(v):
            if child in visited:
                continue
            queue.append(child)
            visited.add(child)


def preorder_dfs(dag: BaseDAG, operation: Operation) -> None:
    """Walk ``dag`` depth-first, operating on a vertex before its children.

    Stack based: a vertex is operated on as soon as it is popped, then its
    unvisited children are pushed. The operation on a vertex therefore runs
    before the operation on any vertex reachable only through it.

    Args:
        dag: Graph to walk.
        operation: Callback invoked once per visited vertex.
    """
    sources = dag.sources()
    logger.debug("Preorder DFS from %d source(s)", len(sources))

    visited: set[Vertex] = set(sources)
    stack: list[Vertex] = list(sources)

    while stack:
        v = stack.pop()
        operation(v)
        for child in dag.get_children(v):
            if child in visited:
                continue
            stack.append(child)
            visited.add(child)


def postorder_dfs(dag: BaseDAG, operation: Operation) -> None:
    """Walk ``dag`` depth-first, operating on a vertex after its children.

    Stack based. The first time a vertex reaches the top of the stack its
    unvisited children are pushed above it and it is marked as waiting. When
    it surfaces again every child pushed for it has completed, so it is
    operated on and popped. A vertex with no unvisited children is operated
    on immediately.

    Args:
        dag: Graph to walk.
        operation: Callback invoked once per visited vertex.
    """
    sources = dag.sources()
    logger.debug("Postorder DFS from %d source(s)", len(sources))

    visited: set[Vertex] = set(sources)
    waiting: set[Vertex] = set()
    stack: list[Vertex] = list(sources)

    while stack:
        v = stack[-1]
        if v in waiting:
            operation(v)
            stack.pop()
            continue

        depth = len(stack)
        for child in dag.get_children(v):
            if child in visited:
                continue
            stack.append(child)
            visited.add(child)

        if len(stack) > depth:
            waiting.add(v)
            continue

        operation(v)
        stack.pop()
