"""
Back-edge construction.

Derives ``implemented_by`` / ``extended_by`` from the forward
``implemented_types`` / ``extended_types`` links and records every
declaration that will need a hierarchy once resolution is over.
"""

from typing import Callable, Dict, Iterator, List, Optional

from docgraph.logging_config import logger
from docgraph.models import Declaration, ReferenceType, ReflectionKind, Type


class PendingReflections:
    """
    Insertion-ordered set of declarations awaiting linearization.

    Keyed by object identity: unregistered declarations all carry id -1.
    """

    def __init__(self):
        self._items: Dict[int, Declaration] = {}

    def add(self, reflection: Declaration) -> bool:
        """Enqueue ``reflection``; returns False if it was already queued."""
        if id(reflection) in self._items:
            return False
        self._items[id(reflection)] = reflection
        return True

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, reflection: Declaration) -> bool:
        return id(reflection) in self._items

    def __iter__(self) -> Iterator[Declaration]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)


def _walk(types: Optional[List[Type]], callback: Callable[[Declaration], None]) -> None:
    """Call ``callback`` for every linked declaration in ``types``."""
    if not types:
        return
    for type in types:
        if not isinstance(type, ReferenceType):
            continue
        if not isinstance(type.reflection, Declaration):
            continue
        callback(type.reflection)


class BackEdgeBuilder:
    """
    Appends inverse edges to the targets of a class or interface.

    Must run exactly once per declaration: appended edges are not
    deduplicated.
    """

    def __init__(self, pending: PendingReflections):
        self.pending = pending
        self.edges_added = 0

    def build(self, reflection: Declaration) -> int:
        """
        Record the back-edges contributed by ``reflection``.

        Returns:
            Number of back-edges appended
        """
        if not reflection.kind_of(ReflectionKind.CLASS_OR_INTERFACE):
            return 0

        self.pending.add(reflection)
        added = 0

        def implemented(target: Declaration) -> None:
            nonlocal added
            self.pending.add(target)
            if target.implemented_by is None:
                target.implemented_by = []
            target.implemented_by.append(ReferenceType.resolved(reflection))
            added += 1

        def extended(target: Declaration) -> None:
            nonlocal added
            self.pending.add(target)
            if target.extended_by is None:
                target.extended_by = []
            target.extended_by.append(ReferenceType.resolved(reflection))
            added += 1

        _walk(reflection.implemented_types, implemented)
        _walk(reflection.extended_types, extended)

        if added:
            logger.debug(f"{reflection.full_name}: added {added} back-edge(s)")
        self.edges_added += added
        return added
