"""
Graph analysis helpers.

This module uses networkx to export a graph store into a networkx DiGraph
and to answer whole-graph questions the store itself does not track: whether
the edge set is acyclic, where a cycle is, and how deep the graph is.
"""

from __future__ import annotations

import warnings
from typing import TYPE_CHECKING

import networkx as nx

from dagstore.models.vertex import Vertex

if TYPE_CHECKING:
    from dagstore.graph.dag import DAG


def to_networkx(dag: DAG) -> nx.DiGraph:
    """Export a graph store to a networkx DiGraph.

    Nodes are the Vertex objects themselves, with ``index`` and ``value``
    attributes. Edges are the forward edges of the store.

    Args:
        dag: Graph store to export.

    Returns:
        A new networkx DiGraph. Later mutations of ``dag`` are not reflected.

    Example:
        >>> from dagstore import DAG, Vertex
        >>> dag = DAG()
        >>> dag.add_vertex(Vertex("a"))
        >>> g = to_networkx(dag)
        >>> g.number_of_nodes() == len(dag)
        True
    """
    graph = nx.DiGraph()
    for v in dag.vertices():
        graph.add_node(v, index=dag.index_of(v), value=v.value)
    graph.add_edges_from(dag.edges())
    return graph


def is_acyclic(dag: DAG) -> bool:
    """Return True if the edge set of ``dag`` contains no directed cycle."""
    return nx.is_directed_acyclic_graph(to_networkx(dag))


def find_cycle(dag: DAG) -> list[tuple[Vertex, Vertex]]:
    """Return the edges of one directed cycle in ``dag``.

    Returns:
        List of ``(parent, child)`` edges forming a cycle, or an empty list
        if the graph is acyclic.
    """
    try:
        return [(u, v) for u, v in nx.find_cycle(to_networkx(dag))]
    except nx.NetworkXNoCycle:
        return []


def get_statistics(dag: DAG) -> dict[str, int]:
    """Get graph statistics.

    Returns:
        Dictionary with ``total_vertices``, ``total_edges``, ``sources``,
        ``sinks`` and ``max_depth``. ``max_depth`` is the number of edges on
        the longest path, or -1 if the graph contains a cycle.

    Example:
        >>> from dagstore import DAG, Vertex
        >>> dag = DAG()
        >>> a, b = Vertex("a"), Vertex("b")
        >>> dag.add_vertex(a)
        >>> dag.add_vertex(b)
        >>> dag.set_children(a, b)
        >>> get_statistics(dag)["max_depth"]
        1
    """
    graph = to_networkx(dag)

    if nx.is_directed_acyclic_graph(graph):
        max_depth = nx.dag_longest_path_length(graph)
    else:
        warnings.warn(
            "Graph contains a cycle; max_depth is undefined and reported as -1.",
            UserWarning,
        )
        max_depth = -1

    return {
        "total_vertices": graph.number_of_nodes(),
        "total_edges": graph.number_of_edges(),
        "sources": len(dag.sources()),
        "sinks": len(dag.sinks()),
        "max_depth": max_depth,
    }
