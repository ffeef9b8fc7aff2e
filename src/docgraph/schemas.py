from pydantic import BaseModel, Field
from typing import Annotated, Any, Dict, List, Literal, Optional, Union


class ReferenceTypeSpec(BaseModel):
    """
    A reference to another declaration.

    Without ``symbol_id`` the reference is resolved by name.
    """
    type: Literal["reference"]
    name: str
    symbol_id: Optional[int] = None
    type_arguments: Optional[List["TypeSpec"]] = None

class TupleTypeSpec(BaseModel):
    type: Literal["tuple"]
    elements: List["TypeSpec"] = Field(default_factory=list)

class UnionTypeSpec(BaseModel):
    type: Literal["union"]
    types: List["TypeSpec"] = Field(default_factory=list)

class IntrinsicTypeSpec(BaseModel):
    type: Literal["intrinsic"]
    name: str

class StringLiteralTypeSpec(BaseModel):
    type: Literal["stringLiteral"]
    value: str

class UnknownTypeSpec(BaseModel):
    type: Literal["unknown"]
    name: str


TypeSpec = Annotated[
    Union[
        ReferenceTypeSpec,
        TupleTypeSpec,
        UnionTypeSpec,
        IntrinsicTypeSpec,
        StringLiteralTypeSpec,
        UnknownTypeSpec,
    ],
    Field(discriminator="type"),
]


class DecoratorSpec(BaseModel):
    """
    An annotation attached to a declaration.
    """
    name: str
    type: Optional[TypeSpec] = None
    arguments: Dict[str, Any] = Field(default_factory=dict)


class DeclarationSpec(BaseModel):
    """
    One declaration as emitted by the front-end.
    """
    id: int
    name: str
    kind: str  # ReflectionKind name, e.g. "class", "interface", "type_alias"
    symbol_id: Optional[int] = None
    parent: Optional[int] = None  # Id of the lexically enclosing declaration
    type: Optional[TypeSpec] = None
    inherited_from: Optional[TypeSpec] = None
    overwrites: Optional[TypeSpec] = None
    extended_types: List[TypeSpec] = Field(default_factory=list)
    implemented_types: List[TypeSpec] = Field(default_factory=list)
    decorators: List[DecoratorSpec] = Field(default_factory=list)


class ProjectSpec(BaseModel):
    """
    A whole project description: every declaration, parents before children.
    """
    name: str = "project"
    declarations: List[DeclarationSpec] = Field(default_factory=list)


ReferenceTypeSpec.model_rebuild()
TupleTypeSpec.model_rebuild()
UnionTypeSpec.model_rebuild()
