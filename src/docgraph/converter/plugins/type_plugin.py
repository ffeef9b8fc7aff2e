"""
Type plugin: links type references and builds inheritance hierarchies.
"""

from docgraph.logging_config import logger
from docgraph.models import Declaration
from docgraph.resolution.back_edges import BackEdgeBuilder, PendingReflections
from docgraph.resolution.config import RESOLUTION_CONFIG, get_config_value
from docgraph.resolution.hierarchy import HierarchyLinearizer
from docgraph.resolution.resolver import ReferenceResolver
from ..context import Context
from ..converter import Converter
from ..plugin import ConverterPlugin


class TypePlugin(ConverterPlugin):
    """
    Resolves the references of each declaration as it is visited, collects
    back-edges on the way and linearizes the hierarchies once the whole
    project has been visited.
    """

    def __init__(self, converter: Converter):
        super().__init__(converter)
        self.reflections = PendingReflections()
        self.linearizer = HierarchyLinearizer()

        priority = get_config_value(RESOLUTION_CONFIG, "priority")
        converter.on(Converter.EVENT_RESOLVE, self.on_resolve, priority)
        converter.on(Converter.EVENT_RESOLVE_END, self.on_resolve_end, priority)

    def remove(self) -> None:
        self.converter.off(Converter.EVENT_RESOLVE, self.on_resolve)
        self.converter.off(Converter.EVENT_RESOLVE_END, self.on_resolve_end)
        super().remove()

    def on_resolve(self, context: Context, reflection: Declaration) -> None:
        """
        Triggered when the converter resolves a declaration.

        Args:
            context: The context object describing the current state the converter is in
            reflection: The declaration that is currently resolved
        """
        ReferenceResolver(context).resolve_reflection(reflection)
        context.stats.back_edges_added += BackEdgeBuilder(self.reflections).build(reflection)

    def on_resolve_end(self, context: Context) -> None:
        """Triggered when the converter has finished resolving a project."""
        logger.debug(f"Linearizing {len(self.reflections)} pending declarations")
        context.stats.hierarchies_built += self.linearizer.linearize(self.reflections)
        self.reflections.clear()


Converter.register_plugin(get_config_value(RESOLUTION_CONFIG, "plugin_name"), TypePlugin)
