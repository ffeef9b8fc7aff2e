"""
Hierarchy linearization.

Runs once after every declaration has been resolved and turns the collected
extends edges into a three-level chain (ancestors, self, descendants).
"""

from typing import Iterable, List, Optional

from docgraph.logging_config import logger
from docgraph.models import Declaration, HierarchyLevel, ReferenceType, Type


def sort_implemented_by(reflection: Declaration) -> None:
    """
    Sort ``implemented_by`` by name, ascending.

    The sort is stable, so implementers sharing a name keep the order in
    which they were added. Every entry must expose ``name``.
    """
    if reflection.implemented_by:
        reflection.implemented_by.sort(key=lambda type: type.name)


def build_hierarchy(reflection: Declaration) -> HierarchyLevel:
    """
    Build the extends chain of a declaration.

    ``extended_by`` is used as accumulated, without sorting.
    """
    root: Optional[HierarchyLevel] = None
    hierarchy: Optional[HierarchyLevel] = None

    def push(types: List[Type]) -> HierarchyLevel:
        nonlocal root, hierarchy
        level = HierarchyLevel(types=types)
        if hierarchy is not None:
            hierarchy.next = level
        else:
            root = level
        hierarchy = level
        return level

    if reflection.extended_types:
        push(reflection.extended_types)

    push([ReferenceType.resolved(reflection)]).is_target = True

    if reflection.extended_by:
        push(reflection.extended_by)

    return root


class HierarchyLinearizer:
    """Deferred final step of the resolve phase."""

    def linearize(self, reflections: Iterable[Declaration]) -> int:
        """
        Sort and build hierarchies for every queued declaration.

        Returns:
            Number of hierarchies built
        """
        count = 0
        for reflection in reflections:
            sort_implemented_by(reflection)
            reflection.type_hierarchy = build_hierarchy(reflection)
            count += 1

        logger.debug(f"Built {count} type hierarchies")
        return count
