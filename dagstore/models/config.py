"""
Configuration model for the DAG store.

This module defines the DAGConfig class and CycleMode enum, which control
whether a graph is lock-wrapped, whether edge insertion checks for cycles,
and whether multi-edge calls are applied atomically.
"""

from dataclasses import dataclass
from enum import Enum


class CycleMode(str, Enum):
    """Enumeration of cycle handling modes for edge insertion.

    Attributes:
        IGNORE: Do not look for cycles at all. The caller is trusted to keep
            the edge set acyclic. This is the default.
        WARN: Emit a CycleWarning when an edge closes a cycle, then add the
            edge anyway.
        FAIL: Raise CycleError instead of adding an edge that closes a cycle.

    Example:
        >>> CycleMode.WARN.value
        'warn'
        >>> CycleMode.values()
        ['ignore', 'warn', 'fail']
    """

    IGNORE = "ignore"
    WARN = "warn"
    FAIL = "fail"

    @classmethod
    def values(cls) -> list[str]:
        """Return a list of all possible cycle mode values."""
        return [member.value for member in cls]


@dataclass(frozen=True)
class DAGConfig:
    """Configuration settings for a DAG store.

    Attributes:
        thread_safe: If True, ``new_dag`` returns a lock-wrapped store whose
            operations are serialized on one exclusive lock. If False, it
            returns a plain store that must not be shared between threads
            without external synchronization. Defaults to True.
        on_cycle: What edge insertion does when a new edge would close a
            directed cycle. Defaults to CycleMode.IGNORE (no check).
        atomic_edges: If True, ``set_children``/``set_parents`` validate
            every endpoint before applying any edge, so a failing call leaves
            the graph untouched. If False, edges applied before the failing
            endpoint stay in place. Defaults to False.

    Instances are frozen, so graphs and their copies can share one config.

    Example:
        >>> config = DAGConfig(thread_safe=False, on_cycle=CycleMode.FAIL)
        >>> config.atomic_edges
        False
        >>> config.thread_safe = True
        Traceback (most recent call last):
        ...
        dataclasses.FrozenInstanceError: cannot assign to field 'thread_safe'
    """

    thread_safe: bool = True
    on_cycle: CycleMode = CycleMode.IGNORE
    atomic_edges: bool = False

    def __post_init__(self) -> None:
        """Validate configuration settings."""
        if not isinstance(self.thread_safe, bool):
            raise TypeError("thread_safe must be a boolean")
        if not isinstance(self.on_cycle, CycleMode):
            raise TypeError("on_cycle must be a CycleMode instance")
        if not isinstance(self.atomic_edges, bool):
            raise TypeError("atomic_edges must be a boolean")
