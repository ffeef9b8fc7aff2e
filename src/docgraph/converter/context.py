"""
State shared by every event of one converter run.
"""

from dataclasses import dataclass, asdict
from typing import Dict, TYPE_CHECKING

from docgraph.models import Project

if TYPE_CHECKING:
    from .converter import Converter


@dataclass
class ResolutionStats:
    """Counters collected while the resolve phase runs."""
    declarations_resolved: int = 0
    references_seen: int = 0
    references_linked: int = 0
    references_dangling: int = 0
    back_edges_added: int = 0
    hierarchies_built: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


class Context:
    """
    Describes the current state the converter is in.

    Handed to every event listener of a run together with the event's own
    arguments.
    """

    def __init__(self, converter: "Converter", project: Project):
        self.converter = converter
        self.project = project
        self.stats = ResolutionStats()
