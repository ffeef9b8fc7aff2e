"""
Declaration nodes of the documentation graph.

A Declaration is one named program entity. Its lexical ``parent`` is either
another Declaration or the owning Project; name lookups walk that chain
outward.
"""

from dataclasses import dataclass, field
from enum import IntFlag
from typing import Any, Dict, Iterator, List, Optional, Sequence, Union, TYPE_CHECKING

from .types import Type

if TYPE_CHECKING:
    from .project import Project


class ReflectionKind(IntFlag):
    """Kinds of declarations. Composite kinds are unions of the base flags."""
    GLOBAL = 0
    EXTERNAL_MODULE = 1
    MODULE = 2
    NAMESPACE = MODULE
    ENUM = 4
    ENUM_MEMBER = 16
    VARIABLE = 32
    FUNCTION = 64
    CLASS = 128
    INTERFACE = 256
    CONSTRUCTOR = 512
    PROPERTY = 1024
    METHOD = 2048
    CALL_SIGNATURE = 4096
    INDEX_SIGNATURE = 8192
    CONSTRUCTOR_SIGNATURE = 16384
    PARAMETER = 32768
    TYPE_LITERAL = 65536
    TYPE_PARAMETER = 131072
    ACCESSOR = 262144
    GET_SIGNATURE = 524288
    SET_SIGNATURE = 1048576
    OBJECT_LITERAL = 2097152
    TYPE_ALIAS = 4194304
    EVENT = 8388608

    CLASS_OR_INTERFACE = CLASS | INTERFACE
    CLASS_OR_MODULE = CLASS | MODULE | EXTERNAL_MODULE

    @classmethod
    def from_name(cls, name: str) -> "ReflectionKind":
        """Parse ``"interface"`` / ``"type-alias"`` / ``"TYPE_ALIAS"`` style names."""
        key = name.strip().upper().replace("-", "_").replace(" ", "_")
        return cls[key]


@dataclass(eq=False)
class Decorator:
    """An annotation attached to a declaration, e.g. ``@sealed``."""
    name: str
    type: Optional[Type] = None
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass(eq=False)
class HierarchyLevel:
    """
    One level of a declaration's extends chain.

    Chains have at most three levels: ancestors, the declaration itself
    (``is_target``) and its direct descendants.
    """
    types: List[Type]
    is_target: bool = False
    next: Optional["HierarchyLevel"] = None

    def levels(self) -> Iterator["HierarchyLevel"]:
        level: Optional[HierarchyLevel] = self
        while level is not None:
            yield level
            level = level.next

    def to_dict(self) -> Dict[str, Any]:
        return {
            "levels": [
                {"types": [str(t) for t in level.types], "is_target": level.is_target}
                for level in self.levels()
            ]
        }


class Declaration:
    """
    A documented program entity (class, interface, function, ...).

    Link fields (``type``, ``extended_types`` ...) hold type nodes produced
    by the front-end; the resolution pass links them in place and fills
    ``extended_by``, ``implemented_by`` and ``type_hierarchy``.
    """

    def __init__(
        self,
        name: str,
        kind: ReflectionKind,
        parent: Optional[Union["Declaration", "Project"]] = None,
        id: int = -1,
    ):
        self.id = id
        self.name = name
        self.kind = kind
        self.parent = parent
        self.children: List["Declaration"] = []

        self.type: Optional[Type] = None
        self.inherited_from: Optional[Type] = None
        self.overwrites: Optional[Type] = None
        self.extended_types: Optional[List[Type]] = None
        self.extended_by: Optional[List[Type]] = None
        self.implemented_types: Optional[List[Type]] = None
        self.implemented_by: Optional[List[Type]] = None
        self.decorators: Optional[List[Decorator]] = None
        self.type_hierarchy: Optional[HierarchyLevel] = None

    def kind_of(self, kind: ReflectionKind) -> bool:
        """Test whether this declaration matches any flag of ``kind``."""
        return bool(self.kind & kind)

    @property
    def full_name(self) -> str:
        if isinstance(self.parent, Declaration):
            return f"{self.parent.full_name}.{self.name}"
        return self.name

    def get_child_by_name(self, names: Union[str, Sequence[str]]) -> Optional["Declaration"]:
        """
        Look up a descendant by dotted path, e.g. ``"Outer.Inner"``.

        Only the first child with a matching name is followed.
        """
        if isinstance(names, str):
            names = names.split(".")
        if not names:
            return None

        head = names[0]
        for child in self.children:
            if child.name == head:
                if len(names) <= 1:
                    return child
                return child.get_child_by_name(names[1:])
        return None

    def find_reflection_by_name(self, names: Union[str, Sequence[str]]) -> Optional["Declaration"]:
        """
        Resolve a name starting at this scope and walking outward through
        the enclosing declarations up to the project.
        """
        if isinstance(names, str):
            names = names.split(".")

        found = self.get_child_by_name(names)
        if found is not None:
            return found
        if self.parent is None:
            return None
        return self.parent.find_reflection_by_name(names)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "kind": self.kind.name.lower() if self.kind.name else int(self.kind),
        }
        for attr in ("extended_types", "extended_by", "implemented_types", "implemented_by"):
            types = getattr(self, attr)
            if types:
                data[attr] = [t.to_dict() for t in types]
        if self.type_hierarchy is not None:
            data["type_hierarchy"] = self.type_hierarchy.to_dict()["levels"]
        return data

    def __repr__(self) -> str:
        return f"Declaration(id={self.id}, name={self.name!r}, kind={self.kind!r})"
