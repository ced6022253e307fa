"""
Custom exception classes for the DAG store.

This module defines all custom exceptions used throughout the dagstore
package. Every error is a caller/precondition error: nothing here is
transient, and nothing is retried internally.
"""

from typing import Any, Optional


class DAGError(Exception):
    """Base exception class for all DAG store errors.

    This exception serves as the base class for all custom exceptions in the
    dagstore package. It can be used to catch any graph-related error.

    Attributes:
        message: Human-readable error message describing the error.
    """

    def __init__(self, message: str) -> None:
        """Initialize a DAGError with a message.

        Args:
            message: Error message describing what went wrong.
        """
        self.message = message
        super().__init__(self.message)


class DuplicateVertexError(DAGError):
    """Exception raised when a vertex is added to a graph twice.

    Membership is decided by identity, so this is raised only when the very
    same Vertex instance is already in the graph. The graph is left exactly
    as it was before the failing call.

    Attributes:
        message: Error message describing the duplicate.
        vertex: The vertex that was already a member.
    """

    def __init__(self, vertex: Any, message: Optional[str] = None) -> None:
        """Initialize a DuplicateVertexError.

        Args:
            vertex: The vertex that was already a member.
            message: Optional override for the default message.
        """
        self.vertex = vertex
        if message is None:
            message = f"Vertex {vertex!r} is already in the graph"
        super().__init__(message)


class UnknownVertexError(DAGError):
    """Exception raised when an argument vertex is not a member of the graph.

    The role tells which endpoint of the call was unrecognized: "vertex" for
    single-vertex queries, "parent" or "child" for edge operations.

    Attributes:
        message: Error message describing the missing vertex.
        vertex: The vertex that is not in the graph.
        role: Which argument was unrecognized.
    """

    def __init__(
        self, vertex: Any, role: str = "vertex", message: Optional[str] = None
    ) -> None:
        """Initialize an UnknownVertexError.

        Args:
            vertex: The vertex that is not in the graph.
            role: "vertex", "parent" or "child".
            message: Optional override for the default message.
        """
        self.vertex = vertex
        self.role = role
        if message is None:
            message = f"{role.capitalize()} {vertex!r} is not in the graph"
        super().__init__(message)


class CycleError(DAGError):
    """Exception raised when an edge would close a directed cycle.

    Only raised when cycle checking is enabled with ``CycleMode.FAIL``; by
    default the store trusts the caller to keep the edge set acyclic.

    Attributes:
        message: Error message describing the rejected edge.
        parent: Tail of the rejected edge.
        child: Head of the rejected edge.
    """

    def __init__(self, parent: Any, child: Any) -> None:
        self.parent = parent
        self.child = child
        super().__init__(
            f"Edge {parent!r} -> {child!r} would create a cycle: "
            f"{parent!r} is reachable from {child!r}"
        )


class CycleWarning(UserWarning):
    """Warning emitted when an edge closes a cycle under ``CycleMode.WARN``."""
