"""
Type nodes attached to declarations.

The set of variants is closed: references, tuples and unions are walked by
the resolution pass, every other shape is an opaque leaf.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union, TYPE_CHECKING

if TYPE_CHECKING:
    from .reflections import Declaration


@dataclass(eq=False)
class ReferenceType:
    """
    A type that names another declaration.

    The resolution state is encoded in ``symbol_id``:

    - ``SYMBOL_ID_RESOLVE_BY_NAME``: look the target up by ``name``
    - ``SYMBOL_ID_RESOLVED``: ``reflection`` already points at the target
    - any other value: a compiler symbol id, looked up in the project's
      symbol mapping
    """

    SYMBOL_ID_RESOLVED = -1
    SYMBOL_ID_RESOLVE_BY_NAME = -2

    name: str
    symbol_id: int = SYMBOL_ID_RESOLVE_BY_NAME
    reflection: Optional["Declaration"] = field(default=None, repr=False)
    type_arguments: Optional[List["Type"]] = None

    @classmethod
    def resolved(cls, reflection: "Declaration") -> "ReferenceType":
        """Create a reference that already points at ``reflection``."""
        return cls(reflection.name, cls.SYMBOL_ID_RESOLVED, reflection)

    @property
    def is_resolved(self) -> bool:
        return self.reflection is not None

    @property
    def resolves_by_name(self) -> bool:
        return self.symbol_id == self.SYMBOL_ID_RESOLVE_BY_NAME and self.reflection is None

    @property
    def resolves_by_id(self) -> bool:
        return (
            self.reflection is None
            and self.symbol_id not in (self.SYMBOL_ID_RESOLVED, self.SYMBOL_ID_RESOLVE_BY_NAME)
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": "reference", "name": self.name}
        if self.reflection is not None:
            data["id"] = self.reflection.id
        if self.type_arguments:
            data["type_arguments"] = [t.to_dict() for t in self.type_arguments]
        return data

    def __str__(self) -> str:
        if self.type_arguments:
            args = ", ".join(str(t) for t in self.type_arguments)
            return f"{self.name}<{args}>"
        return self.name


@dataclass(eq=False)
class TupleType:
    """An ordered tuple of element types, e.g. ``[string, Foo]``."""

    elements: List["Type"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "tuple", "elements": [t.to_dict() for t in self.elements]}

    def __str__(self) -> str:
        return "[" + ", ".join(str(t) for t in self.elements) + "]"


@dataclass(eq=False)
class UnionType:
    """A union of member types. Member order is kept but carries no meaning."""

    types: List["Type"] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "union", "types": [t.to_dict() for t in self.types]}

    def __str__(self) -> str:
        return " | ".join(str(t) for t in self.types)


@dataclass(eq=False)
class IntrinsicType:
    """A built-in type such as ``string`` or ``number``."""

    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "intrinsic", "name": self.name}

    def __str__(self) -> str:
        return self.name


@dataclass(eq=False)
class StringLiteralType:
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "stringLiteral", "value": self.value}

    def __str__(self) -> str:
        return f'"{self.value}"'


@dataclass(eq=False)
class UnknownType:
    """Any type the front-end could not classify; kept verbatim."""

    name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"type": "unknown", "name": self.name}

    def __str__(self) -> str:
        return self.name


Type = Union[ReferenceType, TupleType, UnionType, IntrinsicType, StringLiteralType, UnknownType]
