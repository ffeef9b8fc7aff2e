"""
Resolution package: type reference linking, back-edges and hierarchies.
"""

from .facade import (
    resolve_project,
    get_resolution_stats,
    iter_dangling_references,
    iter_reflection_types,
)
from .resolver import ReferenceResolver
from .back_edges import BackEdgeBuilder, PendingReflections
from .hierarchy import HierarchyLinearizer, build_hierarchy, sort_implemented_by
from .config import RESOLUTION_CONFIG

__all__ = [
    "resolve_project",
    "get_resolution_stats",
    "iter_dangling_references",
    "iter_reflection_types",
    "ReferenceResolver",
    "BackEdgeBuilder",
    "PendingReflections",
    "HierarchyLinearizer",
    "build_hierarchy",
    "sort_implemented_by",
    "RESOLUTION_CONFIG",
]
