"""
Text rendering utilities.

This module renders a graph store as a human-readable table for debugging
and logging. It is not a serialization format: the output cannot be read
back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tabulate import tabulate

if TYPE_CHECKING:
    from dagstore.graph.dag import DAG

HEADERS = ["index", "value", "parents", "children", "source", "sink"]


def format_adjacency(dag: DAG, tablefmt: str = "simple") -> str:
    """Render one row per vertex with its neighbours and flags.

    Parents and children are listed by index.

    Args:
        dag: Graph store to render.
        tablefmt: Any table format understood by tabulate.

    Returns:
        The rendered table.

    Example:
        >>> from dagstore import DAG, Vertex
        >>> dag = DAG()
        >>> a, b = Vertex(1), Vertex(2)
        >>> dag.add_vertex(a)
        >>> dag.add_vertex(b)
        >>> dag.set_children(a, b)
        >>> print(format_adjacency(dag, tablefmt="plain"))
          index    value  parents    children    source    sink
              0        1             1           yes       no
              1        2  0                      no        yes
    """
    sources = set(dag.sources())
    sinks = set(dag.sinks())

    rows = []
    for v in dag.vertices():
        rows.append(
            [
                dag.index_of(v),
                repr(v.value),
                _join_indices(dag, dag.get_parents(v)),
                _join_indices(dag, dag.get_children(v)),
                "yes" if v in sources else "no",
                "yes" if v in sinks else "no",
            ]
        )

    return tabulate(rows, headers=HEADERS, tablefmt=tablefmt)


def _join_indices(dag: DAG, vertices: list) -> str:
    return ", ".join(str(dag.index_of(v)) for v in vertices)
