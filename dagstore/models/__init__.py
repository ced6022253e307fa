"""
Data models for the DAG store.

This package contains the Vertex type and the configuration model.
"""

from dagstore.models.config import CycleMode, DAGConfig
from dagstore.models.vertex import Vertex

__all__ = [
    "CycleMode",
    "DAGConfig",
    "Vertex",
]
