"""
docgraph - type reference resolution for documentation generators

Links symbolic type references between declarations, derives the
implemented-by / extended-by back-edges and builds per-declaration
inheritance hierarchies for renderers.
"""

__version__ = "0.4.0"

# Core exports
from docgraph.models import (
    Project,
    Declaration,
    ReflectionKind,
    ReferenceType,
    TupleType,
    UnionType,
    HierarchyLevel,
)
from docgraph.converter import Converter, Context, TypePlugin
from docgraph.resolution import resolve_project, get_resolution_stats, iter_dangling_references
from docgraph.loader import load_project, parse_project

__all__ = [
    "__version__",
    "Project",
    "Declaration",
    "ReflectionKind",
    "ReferenceType",
    "TupleType",
    "UnionType",
    "HierarchyLevel",
    "Converter",
    "Context",
    "TypePlugin",
    "resolve_project",
    "get_resolution_stats",
    "iter_dangling_references",
    "load_project",
    "parse_project",
]
