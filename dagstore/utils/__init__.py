"""
Utility helpers for the DAG store.
"""

from dagstore.utils.formatting import format_adjacency

__all__ = [
    "format_adjacency",
]
