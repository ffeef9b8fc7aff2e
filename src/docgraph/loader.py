"""
Build a Project from a JSON project description.

Stands in for the source front-end: the description already carries every
declaration and its symbolic type references.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import ValidationError

from docgraph.logging_config import logger
from docgraph.exceptions import ProjectLoadError
from docgraph.models import (
    Declaration,
    Decorator,
    IntrinsicType,
    Project,
    ReferenceType,
    ReflectionKind,
    StringLiteralType,
    TupleType,
    Type,
    UnionType,
    UnknownType,
)
from docgraph.schemas import (
    DeclarationSpec,
    IntrinsicTypeSpec,
    ProjectSpec,
    ReferenceTypeSpec,
    StringLiteralTypeSpec,
    TupleTypeSpec,
    UnionTypeSpec,
    UnknownTypeSpec,
)


def build_type(spec) -> Optional[Type]:
    """Convert a validated type description into a type node."""
    if spec is None:
        return None
    if isinstance(spec, ReferenceTypeSpec):
        symbol_id = spec.symbol_id if spec.symbol_id is not None else ReferenceType.SYMBOL_ID_RESOLVE_BY_NAME
        arguments = [build_type(t) for t in spec.type_arguments] if spec.type_arguments else None
        return ReferenceType(spec.name, symbol_id, type_arguments=arguments)
    if isinstance(spec, TupleTypeSpec):
        return TupleType([build_type(t) for t in spec.elements])
    if isinstance(spec, UnionTypeSpec):
        return UnionType([build_type(t) for t in spec.types])
    if isinstance(spec, IntrinsicTypeSpec):
        return IntrinsicType(spec.name)
    if isinstance(spec, StringLiteralTypeSpec):
        return StringLiteralType(spec.value)
    if isinstance(spec, UnknownTypeSpec):
        return UnknownType(spec.name)
    raise TypeError(f"Unsupported type description: {spec!r}")


def _build_declaration(spec: DeclarationSpec, source: str) -> Declaration:
    try:
        kind = ReflectionKind.from_name(spec.kind)
    except KeyError:
        raise ProjectLoadError(source, f"unknown kind '{spec.kind}' for declaration '{spec.name}'")

    reflection = Declaration(spec.name, kind, id=spec.id)
    reflection.type = build_type(spec.type)
    reflection.inherited_from = build_type(spec.inherited_from)
    reflection.overwrites = build_type(spec.overwrites)
    if spec.extended_types:
        reflection.extended_types = [build_type(t) for t in spec.extended_types]
    if spec.implemented_types:
        reflection.implemented_types = [build_type(t) for t in spec.implemented_types]
    if spec.decorators:
        reflection.decorators = [
            Decorator(d.name, build_type(d.type), dict(d.arguments)) for d in spec.decorators
        ]
    return reflection


def _check_parent_chain(reflection: Declaration, source: str) -> None:
    """Reject a declaration whose parent chain loops back on itself."""
    seen = {id(reflection)}
    parent = reflection.parent
    while isinstance(parent, Declaration):
        if id(parent) in seen:
            raise ProjectLoadError(
                source, f"parent cycle through declaration '{reflection.name}' (id {reflection.id})"
            )
        seen.add(id(parent))
        parent = parent.parent


def build_project(spec: ProjectSpec, source: str = "<memory>") -> Project:
    """
    Create and populate a Project from a validated description.

    Raises:
        ProjectLoadError: On duplicate ids, unknown parents, parent cycles
            or unknown kinds
    """
    project = Project(spec.name)
    reflections: Dict[int, Declaration] = {}

    for decl_spec in spec.declarations:
        if decl_spec.id < 0:
            raise ProjectLoadError(source, f"declaration '{decl_spec.name}' has a negative id")
        if decl_spec.id in reflections:
            raise ProjectLoadError(source, f"duplicate declaration id {decl_spec.id}")
        reflections[decl_spec.id] = _build_declaration(decl_spec, source)

    for decl_spec in spec.declarations:
        reflection = reflections[decl_spec.id]
        if decl_spec.parent is not None:
            if decl_spec.parent == decl_spec.id:
                raise ProjectLoadError(source, f"declaration '{decl_spec.name}' is its own parent")
            parent = reflections.get(decl_spec.parent)
            if parent is None:
                raise ProjectLoadError(
                    source, f"unknown parent id {decl_spec.parent} for declaration '{decl_spec.name}'"
                )
            reflection.parent = parent

    for decl_spec in spec.declarations:
        _check_parent_chain(reflections[decl_spec.id], source)

    for decl_spec in spec.declarations:
        project.register(reflections[decl_spec.id], symbol_id=decl_spec.symbol_id)

    logger.info(f"Loaded {len(project)} declarations into project '{project.name}'")
    return project


def parse_project(data: Union[str, dict], source: str = "<memory>") -> Project:
    """
    Validate a raw description (JSON text or decoded dict) and build it.

    Raises:
        ProjectLoadError: If the description is malformed
    """
    try:
        if isinstance(data, str):
            data = json.loads(data)
        if not isinstance(data, dict):
            raise ProjectLoadError(source, "top-level value is not a JSON object")
        spec = ProjectSpec.model_validate(data)
    except json.JSONDecodeError as e:
        raise ProjectLoadError(source, f"invalid JSON: {e}")
    except ValidationError as e:
        raise ProjectLoadError(source, f"invalid project description: {e.error_count()} error(s)\n{e}")

    return build_project(spec, source)


def load_project(path: Union[str, Path]) -> Project:
    """
    Load a project description from disk.

    Raises:
        ProjectLoadError: If the file is missing, unreadable or malformed
    """
    path = Path(path)
    if not path.exists():
        raise ProjectLoadError(str(path), "file not found")

    logger.info(f"Loading project description from {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ProjectLoadError(str(path), f"not valid UTF-8: {e}")
    except OSError as e:
        raise ProjectLoadError(str(path), f"cannot read file: {e}")
    return parse_project(text, source=str(path))
