"""
Declaration graph model: type nodes, declarations and the owning project.
"""

from .types import (
    Type,
    ReferenceType,
    TupleType,
    UnionType,
    IntrinsicType,
    StringLiteralType,
    UnknownType,
)
from .reflections import ReflectionKind, Declaration, Decorator, HierarchyLevel
from .project import Project

__all__ = [
    "Type",
    "ReferenceType",
    "TupleType",
    "UnionType",
    "IntrinsicType",
    "StringLiteralType",
    "UnknownType",
    "ReflectionKind",
    "Declaration",
    "Decorator",
    "HierarchyLevel",
    "Project",
]
