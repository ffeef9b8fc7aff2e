"""
Reference resolution.

Links symbolic type references (by name or by compiler symbol id) to the
declarations they name. Unresolvable references are left unlinked; they are
rendered as external types later on.
"""

from typing import List, Optional, TYPE_CHECKING

from docgraph.logging_config import logger
from docgraph.models import Declaration, ReferenceType, TupleType, UnionType, Type
from .config import RESOLUTION_CONFIG

if TYPE_CHECKING:
    from docgraph.converter.context import Context


class ReferenceResolver:
    """
    Resolves the type nodes attached to a declaration, in place.

    Nothing here raises: a reference that cannot be linked simply stays
    unlinked and the walk continues with its siblings.
    """

    def __init__(self, context: "Context"):
        """
        Args:
            context: Converter context of the current run
        """
        self.context = context
        self.project = context.project
        self.config = RESOLUTION_CONFIG

    def resolve_reflection(self, reflection: Declaration) -> None:
        """Resolve every type node a declaration carries."""
        self.resolve_type(reflection, reflection.type)
        self.resolve_type(reflection, reflection.inherited_from)
        self.resolve_type(reflection, reflection.overwrites)
        self.resolve_types(reflection, reflection.extended_types)
        self.resolve_types(reflection, reflection.extended_by)
        self.resolve_types(reflection, reflection.implemented_types)

        if reflection.decorators:
            for decorator in reflection.decorators:
                if decorator.type is not None:
                    self.resolve_type(reflection, decorator.type)

    def resolve_types(self, reflection: Declaration, types: Optional[List[Type]]) -> None:
        if not types:
            return
        for type in types:
            self.resolve_type(reflection, type)

    def resolve_type(self, reflection: Declaration, type: Optional[Type]) -> None:
        """
        Resolve a single type node and everything nested in it.

        Args:
            reflection: Declaration whose scope is used for name lookups
            type: Type node to resolve (``None`` is accepted and ignored)
        """
        match type:
            case ReferenceType():
                self._resolve_reference(reflection, type)
                self.resolve_types(reflection, type.type_arguments)
            case TupleType(elements=elements):
                self.resolve_types(reflection, elements)
            case UnionType(types=types):
                self.resolve_types(reflection, types)
            case _:
                pass

    def _resolve_reference(self, reflection: Declaration, reference: ReferenceType) -> None:
        if reference.is_resolved:
            return

        stats = self.context.stats
        stats.references_seen += 1

        if reference.resolves_by_name:
            target = reflection.find_reflection_by_name(reference.name)
        elif reference.resolves_by_id:
            target = self.project.get_reflection_by_symbol(reference.symbol_id)
        else:
            target = None

        if isinstance(target, Declaration):
            reference.reflection = target
            stats.references_linked += 1
            return

        stats.references_dangling += 1
        if self.config["log_dangling"]:
            logger.debug(f"Unresolved reference '{reference.name}' in {reflection.full_name}")
