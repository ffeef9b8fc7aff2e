"""
Public API for the type resolution pass.

Provides high-level functions for running the resolve phase over a project
and inspecting its outcome.
"""

from typing import Dict, Iterator, List, Optional, Tuple, TYPE_CHECKING

from docgraph.logging_config import logger
from docgraph.models import Declaration, Project, ReferenceType, ReflectionKind, TupleType, UnionType, Type

if TYPE_CHECKING:
    from docgraph.converter import Context, Converter


def resolve_project(project: Project, converter: Optional["Converter"] = None) -> "Context":
    """
    Resolve all type references of a project and build its hierarchies.

    This is the main entry point for the pass. It:
    1. Creates a Converter with the built-in plugins (unless one is given)
    2. Fires the resolve event once per declaration
    3. Fires the resolve-end event that linearizes the hierarchies

    Args:
        project: Project whose declarations should be resolved
        converter: Optional preconfigured converter

    Returns:
        Context of the run, including its ResolutionStats
    """
    if converter is None:
        from docgraph.converter import Converter
        converter = Converter()

    return converter.resolve(project)


def _iter_references(type: Optional[Type]) -> Iterator[ReferenceType]:
    match type:
        case ReferenceType():
            yield type
            for argument in type.type_arguments or ():
                yield from _iter_references(argument)
        case TupleType(elements=elements):
            for element in elements:
                yield from _iter_references(element)
        case UnionType(types=types):
            for member in types:
                yield from _iter_references(member)
        case _:
            return


def iter_reflection_types(reflection: Declaration) -> Iterator[Type]:
    """Yield every top-level type node the resolution pass visits."""
    for type in (reflection.type, reflection.inherited_from, reflection.overwrites):
        if type is not None:
            yield type
    for types in (reflection.extended_types, reflection.extended_by, reflection.implemented_types):
        yield from types or ()
    for decorator in reflection.decorators or ():
        if decorator.type is not None:
            yield decorator.type


def iter_dangling_references(project: Project) -> Iterator[Tuple[Declaration, ReferenceType]]:
    """
    Yield ``(declaration, reference)`` for every reference left unlinked.

    Dangling references are not errors; they usually name external types.
    """
    for reflection in project.iter_declarations():
        for type in iter_reflection_types(reflection):
            for reference in _iter_references(type):
                if not reference.is_resolved:
                    yield reflection, reference


def get_resolution_stats(project: Project) -> Dict[str, object]:
    """
    Get statistics about resolution coverage.

    Args:
        project: A project, resolved or not

    Returns:
        Dict with resolution statistics
    """
    linked = 0
    dangling = 0
    for reflection in project.iter_declarations():
        for type in iter_reflection_types(reflection):
            for reference in _iter_references(type):
                if reference.is_resolved:
                    linked += 1
                else:
                    dangling += 1

    classes: List[Declaration] = project.get_reflections_by_kind(ReflectionKind.CLASS_OR_INTERFACE)
    total = linked + dangling

    stats = {
        "total_declarations": len(project),
        "class_or_interface_declarations": len(classes),
        "total_references": total,
        "linked_references": linked,
        "dangling_references": dangling,
        "resolution_rate": linked / total if total > 0 else 0.0,
        "hierarchies": sum(1 for r in classes if r.type_hierarchy is not None),
    }
    logger.debug(f"Resolution stats for '{project.name}': {stats}")
    return stats
