"""
Project: the single owner of every declaration in a documentation run.
"""

from typing import Dict, Iterator, List, Optional, Sequence, Union

from docgraph.logging_config import logger
from .reflections import Declaration, ReflectionKind


class Project:
    """
    Arena of declarations addressed by stable integer id.

    ``symbol_mapping`` translates compiler symbol ids (as carried by
    unresolved references) into declaration ids.
    """

    def __init__(self, name: str = "project"):
        self.name = name
        self.children: List[Declaration] = []
        self.reflections: Dict[int, Declaration] = {}
        self.symbol_mapping: Dict[int, int] = {}
        self._next_id = 1

    def register(self, reflection: Declaration, symbol_id: Optional[int] = None) -> Declaration:
        """
        Add a declaration to the project.

        A declaration without an id (``id < 0``) receives the next free one.
        Declarations without a parent become top-level children.
        """
        if reflection.id < 0:
            reflection.id = self._next_id
        if reflection.id in self.reflections:
            raise ValueError(f"Declaration id {reflection.id} is already registered")
        self._next_id = max(self._next_id, reflection.id + 1)

        self.reflections[reflection.id] = reflection
        if reflection.parent is None or reflection.parent is self:
            reflection.parent = self
            self.children.append(reflection)
        else:
            reflection.parent.children.append(reflection)

        if symbol_id is not None:
            self.symbol_mapping[symbol_id] = reflection.id

        logger.debug(f"Registered declaration {reflection.full_name} (id={reflection.id})")
        return reflection

    def create_declaration(
        self,
        name: str,
        kind: ReflectionKind,
        parent: Optional[Declaration] = None,
        symbol_id: Optional[int] = None,
    ) -> Declaration:
        """Shortcut for constructing and registering a declaration."""
        return self.register(Declaration(name, kind, parent), symbol_id=symbol_id)

    def get_reflection(self, id: int) -> Optional[Declaration]:
        return self.reflections.get(id)

    def get_reflection_by_symbol(self, symbol_id: int) -> Optional[Declaration]:
        """Look up the declaration a compiler symbol id maps to, if any."""
        reflection_id = self.symbol_mapping.get(symbol_id)
        if reflection_id is None:
            return None
        return self.reflections.get(reflection_id)

    def get_child_by_name(self, names: Union[str, Sequence[str]]) -> Optional[Declaration]:
        if isinstance(names, str):
            names = names.split(".")
        if not names:
            return None

        for child in self.children:
            if child.name == names[0]:
                if len(names) <= 1:
                    return child
                return child.get_child_by_name(names[1:])
        return None

    def find_reflection_by_name(self, names: Union[str, Sequence[str]]) -> Optional[Declaration]:
        """Project scope is the outermost one: nothing is found beyond it."""
        return self.get_child_by_name(names)

    def iter_declarations(self) -> Iterator[Declaration]:
        """Yield every declaration in id order."""
        for id in sorted(self.reflections):
            yield self.reflections[id]

    def get_reflections_by_kind(self, kind: ReflectionKind) -> List[Declaration]:
        return [r for r in self.iter_declarations() if r.kind_of(kind)]

    def __len__(self) -> int:
        return len(self.reflections)
